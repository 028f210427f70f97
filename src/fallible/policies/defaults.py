"""
Module-Level Policy Functions.

Each function delegates to a process-wide default ErrorPolicyRunner so
callers can apply a policy without building a runner:

    >>> from fallible import silently, print_optional
    >>> silently(lambda: os.remove("stale.lock"))
    >>> port = print_optional(lambda: int(os.environ["PORT"])).or_else(8080)
"""

from __future__ import annotations

import threading
from typing import Optional, TypeVar

from fallible.config.models import PolicyConfig
from fallible.domain.outcome import (
    DeferredAction,
    FallibleOperation,
    RecoveryAction,
    ValueProducer,
)
from fallible.domain.policy_result import PolicyResult
from fallible.interfaces.severe_logger import SevereLogger
from fallible.policies.runner import ErrorKind, ErrorPolicyRunner

T = TypeVar("T")

_default_runner = ErrorPolicyRunner()


def get_default_runner() -> ErrorPolicyRunner:
    return _default_runner


def set_default_runner(runner: ErrorPolicyRunner) -> ErrorPolicyRunner:
    """Replace the default runner; returns the previous one."""
    global _default_runner
    previous, _default_runner = _default_runner, runner
    return previous


def configure(config: PolicyConfig) -> ErrorPolicyRunner:
    """Install a default runner built from config and return it."""
    runner = ErrorPolicyRunner.from_config(config)
    set_default_runner(runner)
    return runner


def silently(operation: FallibleOperation) -> None:
    _default_runner.silently(operation)


def silently_and(operation: FallibleOperation, on_error: RecoveryAction) -> None:
    _default_runner.silently_and(operation, on_error)


def silently_optional(
    producer: ValueProducer[T],
    on_error: Optional[RecoveryAction] = None,
) -> PolicyResult[T]:
    return _default_runner.silently_optional(producer, on_error)


def silently_deferred(operation: FallibleOperation) -> DeferredAction:
    return _default_runner.silently_deferred(operation)


def print_on_failure(operation: FallibleOperation) -> None:
    _default_runner.print_on_failure(operation)


def print_if_type(operation: FallibleOperation, error_kind: ErrorKind) -> None:
    _default_runner.print_if_type(operation, error_kind)


def print_if(operation: FallibleOperation, condition: bool) -> None:
    _default_runner.print_if(operation, condition)


def print_and(operation: FallibleOperation, on_error: RecoveryAction) -> None:
    _default_runner.print_and(operation, on_error)


def print_optional(producer: ValueProducer[T]) -> PolicyResult[T]:
    return _default_runner.print_optional(producer)


def print_deferred(operation: FallibleOperation) -> DeferredAction:
    return _default_runner.print_deferred(operation)


def log_on_failure(operation: FallibleOperation, target: SevereLogger) -> None:
    _default_runner.log_on_failure(operation, target)


def file_on_failure(operation: FallibleOperation) -> None:
    _default_runner.file_on_failure(operation)


def exit_on_failure(operation: FallibleOperation, code: int) -> None:
    _default_runner.exit_on_failure(operation, code)


def sleep(millis: int, interrupt: Optional[threading.Event] = None) -> None:
    _default_runner.sleep(millis, interrupt)
