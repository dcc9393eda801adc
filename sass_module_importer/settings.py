"""Settings manager for sass-importer settings.yaml files.

Manages two-scope settings:
- User global (~/.sass-importer/settings.yaml)
- Project (.sass-importer/settings.yaml)

Project settings override user settings (deep merge).
"""

import logging
from pathlib import Path
from typing import Any
from typing import TypeVar

import yaml
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError

from .extension import DEFAULT_EXTENSION

logger = logging.getLogger(__name__)

SETTINGS_DIR_NAME = ".sass-importer"

SectionT = TypeVar("SectionT", bound=BaseModel)


class ImporterSettings(BaseModel):
    """Importer values read from settings files."""

    root: str | None = Field(None, description="Base directory of last resort")
    extension: str = Field(default=DEFAULT_EXTENSION, description="Stylesheet extension")
    include_paths: list[str] = Field(default_factory=list, description="Extra base directories, in order")


class LoggingSettings(BaseModel):
    """JSONL logging sink settings."""

    level: str | None = Field(None, description="Log level name (DEBUG, INFO, ...)")
    path: str | None = Field(None, description="JSONL log file path")


class SettingsManager:
    """Manages settings across user/project scopes."""

    def __init__(self, project_dir: Path | None = None, user_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            project_dir: Directory holding .sass-importer/ (default: current directory)
            user_dir: Home directory override (for testing)
        """
        project_dir = project_dir if project_dir is not None else Path.cwd()
        user_dir = user_dir if user_dir is not None else Path.home()

        self.user_settings_file = user_dir / SETTINGS_DIR_NAME / "settings.yaml"
        self.project_settings_file = project_dir / SETTINGS_DIR_NAME / "settings.yaml"

    def get_importer_settings(self) -> ImporterSettings:
        """Get merged importer settings (project overrides user)."""
        return self._load_section("importer", ImporterSettings)

    def get_logging_settings(self) -> LoggingSettings:
        """Get merged logging settings (project overrides user)."""
        return self._load_section("logging", LoggingSettings)

    def _load_section(self, name: str, model: type[SectionT]) -> SectionT:
        """Validate one top-level section, falling back to defaults when malformed.

        Args:
            name: Top-level settings key (e.g. "importer")
            model: Pydantic model for the section

        Returns:
            Model instance built from the section, or the model's defaults
        """
        section = self.get_merged_settings().get(name)
        if section is None:
            return model()

        if not isinstance(section, dict):
            logger.warning(f"Ignoring '{name}' settings: expected a mapping, got {type(section).__name__}")
            return model()

        try:
            return model.model_validate(section)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid '{name}' settings: {e}")
            return model()

    def get_merged_settings(self) -> dict[str, Any]:
        """Get merged settings from all scopes.

        Merge order (later overrides earlier):
        1. User settings
        2. Project settings

        Returns:
            Merged settings dictionary
        """
        merged: dict[str, Any] = {}

        user = self._read_settings(self.user_settings_file)
        if user:
            merged = self._deep_merge(merged, user)

        project = self._read_settings(self.project_settings_file)
        if project:
            merged = self._deep_merge(merged, project)

        return merged

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Read settings from YAML file.

        Args:
            path: Path to settings file

        Returns:
            Settings dict, or None if the file is missing or unreadable
        """
        if not path.exists():
            return None

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to read settings from {path}: {e}")
            return None

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring settings in {path}: expected a mapping")
            return None
        return data

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries (overlay takes precedence)."""
        result = base.copy()

        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
