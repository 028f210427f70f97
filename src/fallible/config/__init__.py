"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - PolicyConfig: Root configuration object
    - DiagnosticConfig: Target stream for "print" policies
    - FileLogConfig: Location and naming of failure log files
    - ExitConfig: How exit-on-failure terminates the process

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Profiles in profiles/<name>.yaml beside the config file
    - Unknown keys rejected (extra="forbid")
"""

from fallible.config.loader import ConfigLoader, load_config
from fallible.config.models import (
    DiagnosticConfig,
    ExitConfig,
    FileLogConfig,
    PolicyConfig,
)

__all__ = [
    "ConfigLoader",
    "DiagnosticConfig",
    "ExitConfig",
    "FileLogConfig",
    "PolicyConfig",
    "load_config",
]
