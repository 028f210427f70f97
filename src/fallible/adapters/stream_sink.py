"""
Stream Diagnostic Sink.

Writes an error's message and full traceback to a text stream, standard
error by default.
"""

from __future__ import annotations

import sys
import traceback
from typing import Optional, TextIO

from fallible.config.models import DiagnosticConfig


def describe_error(error: BaseException) -> str:
    """Render error as printed by the interpreter for an uncaught exception."""
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


class StreamDiagnosticSink:
    """Diagnostic sink backed by a text stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        stream_name: str = "stderr",
    ) -> None:
        """
        Initialize stream sink.

        Args:
            stream: Explicit stream; if None, sys.<stream_name> is looked up
                on every report so redirection and test capture apply
            stream_name: "stderr" or "stdout"
        """
        self._stream = stream
        self._stream_name = stream_name

    @classmethod
    def from_config(cls, config: DiagnosticConfig) -> "StreamDiagnosticSink":
        return cls(stream_name=config.stream)

    @property
    def stream(self) -> TextIO:
        if self._stream is not None:
            return self._stream
        return getattr(sys, self._stream_name)

    def report(self, error: BaseException) -> None:
        """
        Write error in a single call.

        Raises:
            AttributeError: If the stream is None (no console attached)
            ValueError: If the stream is closed
        """
        stream = self.stream
        stream.write(describe_error(error))
        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()
