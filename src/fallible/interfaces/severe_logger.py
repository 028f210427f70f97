"""
Severe Logger Protocol.

Structural type for the log-on-failure target. `logging.Logger` and
`logging.LoggerAdapter` both satisfy it.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SevereLogger(Protocol):
    """Anything that can log a message at a numeric level."""

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        ...
