"""
Process Terminator Protocol.

Defines how exit-on-failure ends the process. Implementations are not
expected to return.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProcessTerminator(Protocol):
    """Abstract interface for terminating the running process."""

    def terminate(self, code: int) -> None:
        """End the process with the given exit status."""
        ...
