"""
Diagnostic Sink Protocol.

Defines where "print" policies report an error. One call per failure;
implementations must emit the message and a full description in a single
write so concurrent reports do not interleave.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Abstract interface for human-readable error output."""

    def report(self, error: BaseException) -> None:
        """
        Write a description of error.

        Args:
            error: The exception raised by the wrapped operation
        """
        ...
