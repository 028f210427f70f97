"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the ports in fallible.interfaces.

Adapters:
    - StreamDiagnosticSink: writes tracebacks to stderr/stdout
    - TimestampedFileWriter: one throw-<Kind>-<millis>.log file per failure
    - SystemExitTerminator: sys.exit / os._exit
"""

from fallible.adapters.file_writer import TimestampedFileWriter, error_kind_name
from fallible.adapters.stream_sink import StreamDiagnosticSink, describe_error
from fallible.adapters.terminator import SystemExitTerminator

__all__ = [
    "StreamDiagnosticSink",
    "SystemExitTerminator",
    "TimestampedFileWriter",
    "describe_error",
    "error_kind_name",
]
