"""
Interfaces Layer - Protocols for Side-Effect Collaborators.

The policy runner never writes to a stream, a file or the process directly;
it goes through these ports so each side effect can be swapped or observed.

Protocols:
    - DiagnosticSink: "print" target
    - FailureFileWriter: file-on-failure target
    - ProcessTerminator: exit-on-failure target
    - SevereLogger: anything accepting log(level, message)

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: one method per port
"""

from fallible.interfaces.diagnostic_sink import DiagnosticSink
from fallible.interfaces.failure_file_writer import FailureFileWriter
from fallible.interfaces.process_terminator import ProcessTerminator
from fallible.interfaces.severe_logger import SevereLogger

__all__ = [
    "DiagnosticSink",
    "FailureFileWriter",
    "ProcessTerminator",
    "SevereLogger",
]
