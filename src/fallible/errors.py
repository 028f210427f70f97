"""
Library Exceptions.

The policies absorb the wrapped operation's failure, so callers only ever
see the errors defined here:

    - RecoveryFailedError: a recovery action raised after the primary failed
    - AbsentResultError: value requested from an absent PolicyResult
    - SleepInterruptedError: reported (not raised) when a sleep is cut short
    - ConfigError: a configuration file does not hold a mapping
"""

from __future__ import annotations

from typing import Optional


class FallibleError(Exception):
    """Base class for all library errors."""
    pass


class RecoveryFailedError(FallibleError, RuntimeError):
    """Raised when a recovery action fails; no further fallback exists."""

    def __init__(self, original: BaseException, policy: str = "recovery") -> None:
        super().__init__(f"{policy} action failed: {original!r}")
        self.original = original
        self.policy = policy


class AbsentResultError(FallibleError, LookupError):
    """Raised when reading the value of an absent PolicyResult."""
    pass


class SleepInterruptedError(FallibleError):
    """Signals that a sleep ended before its full duration."""

    def __init__(self, requested_millis: int, elapsed_millis: Optional[int] = None) -> None:
        message = f"sleep of {requested_millis}ms interrupted"
        if elapsed_millis is not None:
            message += f" after {elapsed_millis}ms"
        super().__init__(message)
        self.requested_millis = requested_millis
        self.elapsed_millis = elapsed_millis


class ConfigError(FallibleError, ValueError):
    """Raised when a configuration file is not a YAML mapping."""
    pass
