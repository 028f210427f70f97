"""
Outcome of Running a Fallible Operation.

`attempt()` runs a zero-argument callable and converts "returned" or
"raised" into a value. Policies branch on the outcome instead of nesting
try/except around every side effect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")

# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Work that may raise; its return value is ignored
FallibleOperation = Callable[[], Any]

# Work that may raise and produces a value
ValueProducer = Callable[[], T]

# Run only after the primary operation failed
RecoveryAction = Callable[[], Any]

# Returned by the deferred policies; runs the wrapped operation when called
DeferredAction = Callable[[], None]


@dataclass(frozen=True)
class Success(Generic[T]):
    """The operation returned normally."""
    value: T


@dataclass(frozen=True)
class Failure:
    """The operation raised."""
    error: Exception

    @property
    def kind(self) -> type:
        """Concrete class of the raised error."""
        return type(self.error)

    @property
    def message(self) -> str:
        return str(self.error)


Outcome = Union[Success[T], Failure]


def attempt(operation: Callable[[], T]) -> Outcome[T]:
    """
    Run operation once and capture how it finished.

    Only Exception subclasses are captured; KeyboardInterrupt,
    SystemExit and other BaseExceptions propagate.
    """
    try:
        return Success(operation())
    except Exception as e:
        return Failure(e)
