"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class DiagnosticConfig(BaseModel):
    """Where and how "print" policies write."""

    stream: Literal["stderr", "stdout"] = "stderr"

    model_config = {"frozen": True, "extra": "forbid"}


class FileLogConfig(BaseModel):
    """Settings for the file-on-failure policy."""

    directory: str = Field(default=".", min_length=1)
    prefix: str = Field(default="throw", min_length=1)
    extension: str = Field(default=".log")
    encoding: str = Field(default="utf-8")
    # Advance the timestamp instead of overwriting a same-millisecond file
    avoid_collisions: bool = True
    max_collision_retries: int = Field(default=1000, ge=0)

    model_config = {"frozen": True, "extra": "forbid"}


class ExitConfig(BaseModel):
    """Settings for the exit-on-failure policy."""

    # os._exit skips atexit handlers and finally blocks
    hard_exit: bool = False

    model_config = {"frozen": True, "extra": "forbid"}


class PolicyConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    severe_level: int = Field(default=logging.ERROR)
    diagnostics: DiagnosticConfig = Field(default_factory=DiagnosticConfig)
    file_log: FileLogConfig = Field(default_factory=FileLogConfig)
    exit: ExitConfig = Field(default_factory=ExitConfig)

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("severe_level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> object:
        """Accept level names such as "ERROR" or "critical"."""
        if isinstance(value, str):
            level = logging.getLevelName(value.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown logging level: {value}")
            return level
        return value
