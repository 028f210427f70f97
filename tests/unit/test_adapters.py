"""
Unit Tests for the Default Adapters.

Test Aspects Covered:
    ✅ Business Logic: Stream sink output, file naming and content
    ✅ Edge Cases: Same-millisecond collisions, non-builtin error names
"""

from __future__ import annotations

import io
import os
import subprocess
import sys
import threading
from pathlib import Path
from unittest.mock import patch

import pytest

import fallible
from fallible.adapters.file_writer import TimestampedFileWriter, error_kind_name
from fallible.adapters.stream_sink import StreamDiagnosticSink, describe_error
from fallible.adapters.terminator import SystemExitTerminator
from fallible.config.models import DiagnosticConfig, FileLogConfig
from tests.fixtures.errors import DailyQuotaError


def raised(error: Exception) -> Exception:
    """Return error with a populated traceback."""
    try:
        raise error
    except Exception as e:
        return e


class TestStreamDiagnosticSink:
    """Test cases for StreamDiagnosticSink."""

    def test_writes_traceback(self) -> None:
        stream = io.StringIO()
        sink = StreamDiagnosticSink(stream=stream)

        sink.report(raised(ValueError("bad value")))

        text = stream.getvalue()
        assert text.startswith("Traceback (most recent call last):")
        assert text.endswith("ValueError: bad value\n")

    def test_resolves_stderr_at_write_time(self, capsys: pytest.CaptureFixture) -> None:
        """
        SCENARIO: No explicit stream
        EXPECTED: Output goes to the current sys.stderr
        """
        sink = StreamDiagnosticSink()

        sink.report(raised(KeyError("k")))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "KeyError: 'k'" in captured.err

    def test_from_config_stdout(self, capsys: pytest.CaptureFixture) -> None:
        sink = StreamDiagnosticSink.from_config(DiagnosticConfig(stream="stdout"))

        sink.report(raised(KeyError("k")))

        assert "KeyError" in capsys.readouterr().out

    def test_describe_error_without_traceback_object(self) -> None:
        assert describe_error(ValueError("never raised")) == "ValueError: never raised\n"


class TestErrorKindName:
    """Test cases for error_kind_name."""

    def test_builtin_uses_bare_name(self) -> None:
        assert error_kind_name(ZeroDivisionError()) == "ZeroDivisionError"

    def test_other_module_qualified(self) -> None:
        name = error_kind_name(DailyQuotaError())

        assert name.endswith("errors.DailyQuotaError")

    def test_local_class_sanitized(self) -> None:
        class LocalError(Exception):
            pass

        name = error_kind_name(LocalError())

        assert "<" not in name and ">" not in name
        assert name.endswith("LocalError")


class TestTimestampedFileWriter:
    """Test cases for TimestampedFileWriter."""

    def test_file_name_and_content(self, tmp_path: Path) -> None:
        """
        SCENARIO: Write a ZeroDivisionError at a fixed clock
        EXPECTED: throw-ZeroDivisionError-<millis>.log with message then traceback
        """
        # Arrange
        writer = TimestampedFileWriter(directory=tmp_path, clock=lambda: 1700000000123)
        error = raised(ZeroDivisionError("division by zero"))

        # Act
        path = writer.write(error)

        # Assert
        assert path == tmp_path / "throw-ZeroDivisionError-1700000000123.log"
        content = path.read_text(encoding="utf-8")
        message, description = content.split("\n", 1)
        assert message == "division by zero"
        assert description.startswith("Traceback (most recent call last):")
        assert description.rstrip().endswith("ZeroDivisionError: division by zero")

    def test_collision_advances_timestamp(self, tmp_path: Path) -> None:
        """
        SCENARIO: Two failures of the same kind in the same millisecond
        EXPECTED: Second file uses the next millisecond, first is kept
        """
        writer = TimestampedFileWriter(directory=tmp_path, clock=lambda: 1000)

        first = writer.write(raised(ValueError("first")))
        second = writer.write(raised(ValueError("second")))

        assert first.name == "throw-ValueError-1000.log"
        assert second.name == "throw-ValueError-1001.log"
        assert first.read_text(encoding="utf-8").startswith("first\n")

    def test_collision_overwrites_when_disabled(self, tmp_path: Path) -> None:
        writer = TimestampedFileWriter(
            directory=tmp_path, avoid_collisions=False, clock=lambda: 1000
        )

        writer.write(raised(ValueError("first")))
        path = writer.write(raised(ValueError("second")))

        assert len(list(tmp_path.iterdir())) == 1
        assert path.read_text(encoding="utf-8").startswith("second\n")

    def test_gives_up_after_retries(self, tmp_path: Path) -> None:
        writer = TimestampedFileWriter(
            directory=tmp_path, max_collision_retries=1, clock=lambda: 5
        )
        writer.write(raised(ValueError("a")))
        writer.write(raised(ValueError("b")))

        with pytest.raises(FileExistsError):
            writer.write(raised(ValueError("c")))

    def test_from_config(self, tmp_path: Path) -> None:
        config = FileLogConfig(directory=str(tmp_path), prefix="failure", extension=".txt")
        writer = TimestampedFileWriter.from_config(config)

        path = writer.write(raised(KeyError("k")))

        assert path.parent == tmp_path
        assert path.name.startswith("failure-KeyError-")
        assert path.suffix == ".txt"

    def test_relative_directory_uses_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        writer = TimestampedFileWriter()

        writer.write(raised(OSError("io")))

        assert len(list(tmp_path.glob("throw-OSError-*.log"))) == 1


class TestSystemExitTerminator:
    """Test cases for SystemExitTerminator."""

    def test_soft_exit_raises_system_exit(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            SystemExitTerminator().terminate(4)

        assert exc_info.value.code == 4

    def test_hard_exit_uses_os_exit(self) -> None:
        with patch("fallible.adapters.terminator.os._exit") as os_exit:
            with patch.object(sys, "exit") as sys_exit:
                SystemExitTerminator(hard=True).terminate(9)

        os_exit.assert_called_once_with(9)
        sys_exit.assert_not_called()

    def test_worker_thread_uses_os_exit(self) -> None:
        """
        SCENARIO: Soft terminator called off the main thread
        EXPECTED: os._exit, since sys.exit would only end that thread
        """
        # Arrange
        terminator = SystemExitTerminator()

        # Act
        with patch("fallible.adapters.terminator.os._exit") as os_exit:
            worker = threading.Thread(target=terminator.terminate, args=(6,))
            worker.start()
            worker.join()

        # Assert
        os_exit.assert_called_once_with(6)

    def test_worker_thread_ends_process(self, tmp_path: Path) -> None:
        """
        SCENARIO: exit_on_failure runs in a worker thread of a real interpreter
        EXPECTED: Process exits with the code; the main thread never continues
        """
        # Arrange
        script = tmp_path / "exit_from_worker.py"
        script.write_text(
            "import threading\n"
            "import fallible\n"
            "worker = threading.Thread(\n"
            "    target=fallible.exit_on_failure, args=(lambda: 1 / 0, 3)\n"
            ")\n"
            "worker.start()\n"
            "worker.join()\n"
            "print('main thread continued')\n"
        )
        env = dict(os.environ)
        src_dir = str(Path(fallible.__file__).resolve().parents[1])
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (src_dir, env.get("PYTHONPATH")) if p
        )

        # Act
        completed = subprocess.run(
            [sys.executable, str(script)],
            capture_output=True,
            text=True,
            env=env,
            timeout=60,
        )

        # Assert
        assert completed.returncode == 3
        assert "main thread continued" not in completed.stdout
