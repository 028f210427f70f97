"""
Timestamped Failure File Writer.

Persists one failure per file, named after the error class and the
current time in epoch milliseconds:

    throw-<ErrorKind>-<epochMillis>.log

The file holds the error message, a newline, then the full traceback.
"""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path
from typing import Callable, Optional, Union

from fallible.adapters.stream_sink import describe_error
from fallible.config.models import FileLogConfig

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def current_millis() -> int:
    return time.time_ns() // 1_000_000


def error_kind_name(error: BaseException) -> str:
    """
    Class name used in the file name.

    Builtin classes use their bare name (ZeroDivisionError); others are
    module-qualified (myapp.errors.QuotaError).
    """
    cls = type(error)
    name = cls.__qualname__
    if cls.__module__ != "builtins":
        name = f"{cls.__module__}.{name}"
    return _UNSAFE_CHARS.sub("_", name)


class TimestampedFileWriter:
    """Writes each failure to a new file in a directory."""

    def __init__(
        self,
        directory: Union[str, Path] = ".",
        prefix: str = "throw",
        extension: str = ".log",
        encoding: str = "utf-8",
        avoid_collisions: bool = True,
        max_collision_retries: int = 1000,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        """
        Initialize file writer.

        Args:
            directory: Target directory, relative to the working directory
                at write time
            prefix: File name prefix
            extension: File name suffix including the dot
            encoding: Text encoding of the file
            avoid_collisions: If True, never overwrite; a taken name is
                retried with the timestamp advanced by one millisecond
            max_collision_retries: Upper bound on those retries
            clock: Source of epoch milliseconds
        """
        self._directory = Path(directory)
        self._prefix = prefix
        self._extension = extension
        self._encoding = encoding
        self._avoid_collisions = avoid_collisions
        self._max_collision_retries = max_collision_retries
        self._clock = clock or current_millis

    @classmethod
    def from_config(cls, config: FileLogConfig) -> "TimestampedFileWriter":
        return cls(
            directory=config.directory,
            prefix=config.prefix,
            extension=config.extension,
            encoding=config.encoding,
            avoid_collisions=config.avoid_collisions,
            max_collision_retries=config.max_collision_retries,
        )

    def file_name(self, error: BaseException, millis: int) -> str:
        return f"{self._prefix}-{error_kind_name(error)}-{millis}{self._extension}"

    def write(self, error: BaseException) -> Path:
        """
        Write error to a new file.

        Returns:
            Path of the written file

        Raises:
            FileExistsError: If no free name was found within the retry limit
            OSError: If the file cannot be written
        """
        content = f"{error}\n{describe_error(error)}"
        millis = self._clock()

        if not self._avoid_collisions:
            path = self._directory / self.file_name(error, millis)
            path.write_text(content, encoding=self._encoding)
            return path

        for _ in range(self._max_collision_retries + 1):
            path = self._directory / self.file_name(error, millis)
            try:
                with open(path, "x", encoding=self._encoding) as f:
                    f.write(content)
                return path
            except FileExistsError:
                logger.debug(f"{path.name} exists, advancing timestamp")
                millis += 1

        raise FileExistsError(
            f"No free log file name for {error_kind_name(error)} after "
            f"{self._max_collision_retries} retries"
        )
