"""
System Exit Terminator.

Ends the process for the exit-on-failure policy.
"""

from __future__ import annotations

import logging
import os
import sys
import threading

from fallible.config.models import ExitConfig

logger = logging.getLogger(__name__)


class SystemExitTerminator:
    """
    Terminates via sys.exit, or os._exit when hard.

    sys.exit unwinds through finally blocks and runs atexit handlers, but
    only ends the process from the main thread. Off the main thread, and
    in hard mode, stdio is flushed and os._exit stops the process at once.
    """

    def __init__(self, hard: bool = False) -> None:
        self._hard = hard

    @classmethod
    def from_config(cls, config: ExitConfig) -> "SystemExitTerminator":
        return cls(hard=config.hard_exit)

    def terminate(self, code: int) -> None:
        on_main_thread = threading.current_thread() is threading.main_thread()
        logger.debug(
            f"Terminating process with status {code} "
            f"(hard={self._hard}, main_thread={on_main_thread})"
        )
        if self._hard or not on_main_thread:
            _flush_stdio()
            os._exit(code)
        else:
            sys.exit(code)


def _flush_stdio() -> None:
    for stream in (sys.stdout, sys.stderr):
        flush = getattr(stream, "flush", None)
        if flush is None:
            continue
        try:
            flush()
        except (OSError, ValueError):
            logger.debug("Could not flush stdio before exit")
