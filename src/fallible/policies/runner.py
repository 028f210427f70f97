"""
Error Policy Runner - Named Strategies for Fallible Operations.

Provides:
    - Silent, print, log, file and exit policies for zero-argument operations
    - Fallback variants that run a recovery action after a failure
    - Optional variants returning a PolicyResult instead of raising
    - Deferred variants returning a callable to run later
    - An interruptible sleep

Design Notes:
    - The primary operation's failure never propagates to the caller
    - A failing recovery action is raised as RecoveryFailedError
    - Every side effect goes through an injected port (sink, file writer,
      terminator) so the runner holds no mutable state
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Optional, Tuple, Type, TypeVar, Union

from fallible.adapters.file_writer import TimestampedFileWriter
from fallible.adapters.stream_sink import StreamDiagnosticSink
from fallible.adapters.terminator import SystemExitTerminator
from fallible.config.models import PolicyConfig
from fallible.domain.outcome import (
    DeferredAction,
    Failure,
    FallibleOperation,
    RecoveryAction,
    ValueProducer,
    attempt,
)
from fallible.domain.policy_result import PolicyResult
from fallible.errors import RecoveryFailedError, SleepInterruptedError
from fallible.interfaces.diagnostic_sink import DiagnosticSink
from fallible.interfaces.failure_file_writer import FailureFileWriter
from fallible.interfaces.process_terminator import ProcessTerminator
from fallible.interfaces.severe_logger import SevereLogger

logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorKind = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


class ErrorPolicyRunner:
    """
    Executes fallible operations under a named error-handling policy.

    Example:
        >>> runner = ErrorPolicyRunner()
        >>> runner.print_on_failure(lambda: 1 / 0)   # traceback on stderr
        >>> runner.silently_optional(lambda: int("42")).get()
        42
    """

    def __init__(
        self,
        config: Optional[PolicyConfig] = None,
        sink: Optional[DiagnosticSink] = None,
        file_writer: Optional[FailureFileWriter] = None,
        terminator: Optional[ProcessTerminator] = None,
    ) -> None:
        """
        Initialize policy runner.

        Args:
            config: Policy configuration (defaults if None)
            sink: Target of "print" policies (stderr if None)
            file_writer: Target of file-on-failure (working directory if None)
            terminator: Target of exit-on-failure (sys.exit if None)
        """
        self.config = config or PolicyConfig()
        self.sink = sink or StreamDiagnosticSink.from_config(self.config.diagnostics)
        self.file_writer = file_writer or TimestampedFileWriter.from_config(
            self.config.file_log
        )
        self.terminator = terminator or SystemExitTerminator.from_config(
            self.config.exit
        )

    @classmethod
    def from_config(cls, config: PolicyConfig) -> "ErrorPolicyRunner":
        return cls(config=config)

    # -------------------------------------------------------------------------
    # Silent policies
    # -------------------------------------------------------------------------

    def silently(self, operation: FallibleOperation) -> None:
        """Run operation; discard any error."""
        outcome = attempt(operation)
        if isinstance(outcome, Failure):
            self._absorbed(outcome, "silent")

    def silently_and(
        self,
        operation: FallibleOperation,
        on_error: RecoveryAction,
    ) -> None:
        """
        Run operation; on failure discard the error and run on_error.

        Raises:
            RecoveryFailedError: If on_error itself raises
        """
        outcome = attempt(operation)
        if isinstance(outcome, Failure):
            self._absorbed(outcome, "silent-with-fallback")
            self._recover(on_error, "silent-with-fallback")

    def silently_optional(
        self,
        producer: ValueProducer[T],
        on_error: Optional[RecoveryAction] = None,
    ) -> PolicyResult[T]:
        """
        Run producer; return its value as a present result, or absent on failure.

        Args:
            producer: Value-producing operation
            on_error: Optional recovery run before returning absent

        Raises:
            RecoveryFailedError: If on_error itself raises
        """
        outcome = attempt(producer)
        if not isinstance(outcome, Failure):
            return PolicyResult.present(outcome.value)

        self._absorbed(outcome, "optional-silent")
        if on_error is not None:
            self._recover(on_error, "optional-silent-with-fallback")
        return PolicyResult.absent()

    def silently_deferred(self, operation: FallibleOperation) -> DeferredAction:
        """Wrap operation in a callable that runs it under the silent policy."""

        def deferred() -> None:
            self.silently(operation)

        return deferred

    # -------------------------------------------------------------------------
    # Print policies
    # -------------------------------------------------------------------------

    def print_on_failure(self, operation: FallibleOperation) -> None:
        """Run operation; print any error to the diagnostic sink."""
        outcome = attempt(operation)
        if isinstance(outcome, Failure):
            self._print(outcome)

    def print_if_type(
        self,
        operation: FallibleOperation,
        error_kind: ErrorKind,
    ) -> None:
        """
        Run operation; print the error only if it is an instance of error_kind.

        Subclasses match. error_kind may be a tuple of classes, as with
        isinstance().
        """
        outcome = attempt(operation)
        if not isinstance(outcome, Failure):
            return
        if isinstance(outcome.error, error_kind):
            self._print(outcome)
        else:
            self._absorbed(outcome, "print-if-type")

    def print_if(self, operation: FallibleOperation, condition: bool) -> None:
        """Run operation; print the error only if condition is true."""
        outcome = attempt(operation)
        if not isinstance(outcome, Failure):
            return
        if condition:
            self._print(outcome)
        else:
            self._absorbed(outcome, "print-if-condition")

    def print_and(
        self,
        operation: FallibleOperation,
        on_error: RecoveryAction,
    ) -> None:
        """
        Run operation; on failure print the error, then run on_error.

        Raises:
            RecoveryFailedError: If on_error itself raises
        """
        outcome = attempt(operation)
        if isinstance(outcome, Failure):
            self._print(outcome)
            self._recover(on_error, "print-and-fallback")

    def print_optional(self, producer: ValueProducer[T]) -> PolicyResult[T]:
        """Run producer; on failure print the error and return absent."""
        outcome = attempt(producer)
        if isinstance(outcome, Failure):
            self._print(outcome)
            return PolicyResult.absent()
        return PolicyResult.present(outcome.value)

    def print_deferred(self, operation: FallibleOperation) -> DeferredAction:
        """Wrap operation in a callable that runs it under the print policy."""

        def deferred() -> None:
            self.print_on_failure(operation)

        return deferred

    # -------------------------------------------------------------------------
    # Logger, file and exit policies
    # -------------------------------------------------------------------------

    def log_on_failure(self, operation: FallibleOperation, target: SevereLogger) -> None:
        """Run operation; log the error message on target at the severe level."""
        outcome = attempt(operation)
        if isinstance(outcome, Failure):
            logged = attempt(
                lambda: target.log(self.config.severe_level, outcome.message)
            )
            if isinstance(logged, Failure):
                self._absorbed(logged, "log-on-failure logger")

    def file_on_failure(self, operation: FallibleOperation) -> None:
        """
        Run operation; on failure write the error to a new log file.

        Nothing is printed. A failure while writing the file is discarded.
        """
        outcome = attempt(operation)
        if not isinstance(outcome, Failure):
            return
        written = attempt(lambda: self.file_writer.write(outcome.error))
        if isinstance(written, Failure):
            self._absorbed(written, "file-on-failure writer")
        else:
            logger.debug(f"Wrote {outcome.kind.__name__} to {written.value}")

    def exit_on_failure(self, operation: FallibleOperation, code: int) -> None:
        """Run operation; on failure terminate the process with status code."""
        outcome = attempt(operation)
        if isinstance(outcome, Failure):
            logger.debug(
                f"{outcome.kind.__name__} under exit-on-failure, exiting with {code}"
            )
            self.terminator.terminate(code)

    # -------------------------------------------------------------------------
    # Sleep
    # -------------------------------------------------------------------------

    def sleep(
        self,
        millis: int,
        interrupt: Optional[threading.Event] = None,
    ) -> None:
        """
        Block the calling thread for millis milliseconds.

        Args:
            millis: Duration; a negative value is printed as an error
            interrupt: Optional event; setting it ends the sleep early and
                prints a SleepInterruptedError
        """
        outcome = attempt(lambda: self._sleep(millis, interrupt))
        if isinstance(outcome, Failure):
            self._print(outcome)

    def _sleep(self, millis: int, interrupt: Optional[threading.Event]) -> None:
        if millis < 0:
            raise ValueError(f"sleep duration must be non-negative, got {millis}")
        seconds = millis / 1000
        if interrupt is None:
            time.sleep(seconds)
            return

        started = time.monotonic()
        if interrupt.wait(seconds):
            elapsed = int((time.monotonic() - started) * 1000)
            raise SleepInterruptedError(millis, elapsed)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _recover(self, on_error: RecoveryAction, policy: str) -> None:
        """Run a recovery action; its failure is the one error we raise."""
        outcome = attempt(on_error)
        if isinstance(outcome, Failure):
            raise RecoveryFailedError(outcome.error, policy) from outcome.error

    def _print(self, outcome: Failure) -> None:
        """Report a failure; a sink that cannot write is not an error for the caller."""
        reported = attempt(lambda: self.sink.report(outcome.error))
        if isinstance(reported, Failure):
            self._absorbed(reported, "diagnostic sink")

    def _absorbed(self, outcome: Failure, policy: str) -> None:
        logger.debug(f"{policy} policy absorbed {outcome.kind.__name__}: {outcome.message}")
