"""
Policy Result - Present or Absent Value.

Returned by the optional policies instead of raising. A present result may
carry None; presence is tracked separately from the value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from fallible.errors import AbsentResultError

T = TypeVar("T")
U = TypeVar("U")

_MISSING: Any = object()


@dataclass(frozen=True)
class PolicyResult(Generic[T]):
    """Either a produced value or an explicit absent marker."""

    _value: Any = _MISSING

    @classmethod
    def present(cls, value: T) -> "PolicyResult[T]":
        """Wrap a produced value."""
        return cls(value)

    @classmethod
    def absent(cls) -> "PolicyResult[T]":
        """Result for an operation that produced nothing."""
        return _ABSENT

    @property
    def is_present(self) -> bool:
        return self._value is not _MISSING

    @property
    def is_absent(self) -> bool:
        return self._value is _MISSING

    def __bool__(self) -> bool:
        return self.is_present

    def get(self) -> T:
        """
        Return the value.

        Raises:
            AbsentResultError: If the result is absent
        """
        if self.is_absent:
            raise AbsentResultError("no value present")
        return self._value

    def or_else(self, default: U) -> T | U:
        return self._value if self.is_present else default

    def or_else_get(self, factory: Callable[[], U]) -> T | U:
        return self._value if self.is_present else factory()

    def map(self, fn: Callable[[T], U]) -> "PolicyResult[U]":
        """Apply fn to a present value; absent stays absent."""
        if self.is_absent:
            return _ABSENT
        return PolicyResult(fn(self._value))

    def to_optional(self) -> Optional[T]:
        """Collapse to a plain Optional; a present None is indistinguishable."""
        return self._value if self.is_present else None

    def __repr__(self) -> str:
        if self.is_absent:
            return "PolicyResult.absent()"
        return f"PolicyResult.present({self._value!r})"


_ABSENT: PolicyResult[Any] = PolicyResult()
