"""
Configuration Loader - YAML Loading with Validation.

A policy config is one YAML mapping validated into PolicyConfig. A profile
is a partial mapping stored beside it and laid over the base before
validation:

    config/
        default.yaml
        profiles/
            overwrite.yaml      # load_config("config/default.yaml", "overwrite")

Unknown keys are rejected by the models, so a misspelled option fails at
load time instead of silently falling back to its default.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from fallible.config.models import PolicyConfig
from fallible.errors import ConfigError

logger = logging.getLogger(__name__)

PROFILE_DIRECTORY = "profiles"


def merge_overlay(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Return base with overlay applied; nested sections merge key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_overlay(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Reads policy configuration files and their profiles."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Args:
            base_path: Directory that relative config paths start from
        """
        self._base_path = Path(base_path) if base_path is not None else Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> PolicyConfig:
        """
        Load and validate a config file, optionally with a profile.

        Args:
            config_path: YAML file, absolute or relative to base_path
            profile: Name of profiles/<profile>.yaml next to config_path

        Raises:
            FileNotFoundError: If the config or profile file doesn't exist
            ConfigError: If a file does not hold a YAML mapping
            ValidationError: If the merged values are invalid
        """
        path = self._base_path / Path(config_path)
        values = self._read_mapping(path)

        if profile:
            profile_path = self.profile_path(path, profile)
            if not profile_path.is_file():
                raise FileNotFoundError(f"Profile {profile!r} not found at {profile_path}")
            values = merge_overlay(values, self._read_mapping(profile_path))
            logger.debug(f"Applied profile {profile!r} to {path}")

        return self.load_from_dict(values)

    def load_from_dict(self, values: Mapping[str, Any]) -> PolicyConfig:
        """Validate an in-memory mapping."""
        return PolicyConfig.model_validate(dict(values))

    @staticmethod
    def profile_path(config_path: Path, profile: str) -> Path:
        return config_path.parent / PROFILE_DIRECTORY / f"{profile}.yaml"

    @staticmethod
    def _read_mapping(path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigError(
                f"{path} must contain a mapping, got {type(document).__name__}"
            )
        return document


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> PolicyConfig:
    """Load a policy config file; see ConfigLoader.load."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
