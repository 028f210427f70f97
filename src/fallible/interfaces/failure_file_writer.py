"""
Failure File Writer Protocol.

Defines the target of the file-on-failure policy. The writer may raise;
the policy discards anything it raises.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FailureFileWriter(Protocol):
    """Abstract interface for persisting one failure per file."""

    def write(self, error: BaseException) -> Path:
        """
        Persist error to a new file.

        Args:
            error: The exception raised by the wrapped operation

        Returns:
            Path of the file written
        """
        ...
