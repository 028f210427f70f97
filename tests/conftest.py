"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import Mock

import pytest

from fallible.adapters.file_writer import TimestampedFileWriter
from fallible.adapters.stream_sink import StreamDiagnosticSink
from fallible.config.models import PolicyConfig
from fallible.policies import defaults
from fallible.policies.runner import ErrorPolicyRunner


@pytest.fixture(autouse=True)
def restore_default_runner():
    """Keep module-level policy functions isolated between tests."""
    original = defaults.get_default_runner()
    yield
    defaults.set_default_runner(original)


@pytest.fixture
def diagnostic_stream() -> io.StringIO:
    """In-memory diagnostic stream."""
    return io.StringIO()


@pytest.fixture
def sink(diagnostic_stream: io.StringIO) -> StreamDiagnosticSink:
    """Sink writing to the in-memory stream."""
    return StreamDiagnosticSink(stream=diagnostic_stream)


@pytest.fixture
def file_writer(tmp_path: Path) -> TimestampedFileWriter:
    """File writer targeting a temporary directory."""
    return TimestampedFileWriter(directory=tmp_path)


@pytest.fixture
def terminator() -> Mock:
    """Process terminator that records calls instead of exiting."""
    return Mock()


@pytest.fixture
def runner(
    sink: StreamDiagnosticSink,
    file_writer: TimestampedFileWriter,
    terminator: Mock,
) -> ErrorPolicyRunner:
    """Runner with all side effects captured."""
    return ErrorPolicyRunner(
        config=PolicyConfig(),
        sink=sink,
        file_writer=file_writer,
        terminator=terminator,
    )


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"
