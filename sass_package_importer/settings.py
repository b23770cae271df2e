"""Settings manager for importer settings.yaml files.

Manages three-scope settings:
- User global (~/.sass-importer/settings.yaml)
- Project (.sass-importer/settings.yaml)
- Local (.sass-importer/settings.local.yaml)

Importer options live under the ``importer`` key of each file.
"""

import logging
import os
from pathlib import Path
from typing import Any
from typing import Literal

import yaml

from .options import ImporterOptions
from .options import canonical_option_name

logger = logging.getLogger(__name__)

SETTINGS_DIR = ".sass-importer"
SECTION = "importer"

ScopeType = Literal["project", "local"]

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


class SettingsManager:
    """Reads and writes importer settings across user/project/local scopes."""

    def __init__(self, project_dir: Path | None = None, user_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            project_dir: Project root holding .sass-importer/ (default: current directory)
            user_dir: Directory holding user settings (for testing, default: ~/.sass-importer)
        """
        self.project_dir = Path(project_dir) if project_dir is not None else Path.cwd()
        user_dir = Path(user_dir) if user_dir is not None else Path.home() / SETTINGS_DIR

        self.user_settings_file = user_dir / "settings.yaml"
        self.project_settings_file = self.project_dir / SETTINGS_DIR / "settings.yaml"
        self.local_settings_file = self.project_dir / SETTINGS_DIR / "settings.local.yaml"

    def get_options(self) -> ImporterOptions:
        """Effective importer options.

        Merge order (later overrides earlier):
        1. User settings
        2. Project settings
        3. Local settings
        4. Environment (SASS_IMPORTER_STRICT, SASS_IMPORTER_PREFIX)

        Raises:
            pydantic.ValidationError: Merged settings are not valid options
        """
        section = self.get_importer_settings()
        section.update(self._env_overrides())

        # Relative working directories are relative to the project, not the process
        working_directory = section.get("working_directory")
        if working_directory is not None and not Path(working_directory).is_absolute():
            section["working_directory"] = self.project_dir / working_directory

        return ImporterOptions.model_validate(section)

    def get_importer_settings(self) -> dict[str, Any]:
        """Merged ``importer`` section with option names normalized."""
        section = self.get_merged_settings().get(SECTION) or {}
        if not isinstance(section, dict):
            logger.warning(f"Ignoring '{SECTION}' settings: expected a mapping, got {type(section).__name__}")
            return {}
        return dict(section)

    def get_merged_settings(self) -> dict[str, Any]:
        """Get merged settings from all scopes.

        Returns:
            Merged settings dictionary
        """
        merged: dict[str, Any] = {}

        for path in (self.user_settings_file, self.project_settings_file, self.local_settings_file):
            settings = self._read_settings(path)
            if settings:
                merged = self._deep_merge(merged, self._normalize(settings))

        return merged

    def set_option(self, key: str, value: Any, scope: ScopeType = "project") -> None:
        """Write one importer option to project or local settings.

        Args:
            key: Option name or alias (e.g. ``strict``, ``paths``)
            value: Option value
            scope: Target settings file
        """
        name = canonical_option_name(key)
        if name not in ImporterOptions.model_fields:
            raise ValueError(f"Unknown importer option: {key}")

        path = self.local_settings_file if scope == "local" else self.project_settings_file
        self._update_settings(path, {SECTION: {name: value}})
        logger.info(f"Set importer option {name} in {scope} settings")

    def _env_overrides(self) -> dict[str, Any]:
        overrides: dict[str, Any] = {}

        strict = os.environ.get("SASS_IMPORTER_STRICT")
        if strict is not None:
            value = strict.strip().lower()
            if value in TRUE_VALUES:
                overrides["strict"] = True
            elif value in FALSE_VALUES:
                overrides["strict"] = False
            else:
                logger.warning(f"Ignoring SASS_IMPORTER_STRICT={strict!r}: expected a boolean")

        prefix = os.environ.get("SASS_IMPORTER_PREFIX")
        if prefix:
            overrides["prefix"] = prefix

        return overrides

    def _normalize(self, settings: dict[str, Any]) -> dict[str, Any]:
        """Rename option aliases in the importer section so scopes merge key by key."""
        section = settings.get(SECTION)
        if not isinstance(section, dict):
            return settings
        return {**settings, SECTION: {canonical_option_name(str(k)): v for k, v in section.items()}}

    def _read_settings(self, path: Path) -> dict[str, Any] | None:
        """Read settings from YAML file.

        Args:
            path: Path to settings file

        Returns:
            Settings dict or None if file doesn't exist or can't be read
        """
        if not path.exists():
            return None

        try:
            with open(path, encoding="utf-8") as f:
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

    def _write_settings(self, path: Path, settings: dict[str, Any]) -> None:
        """Write settings to YAML file.

        Args:
            path: Path to settings file
            settings: Settings dictionary
        """
        # Ensure directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(path, "w", encoding="utf-8") as f:
                yaml.safe_dump(settings, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            logger.error(f"Failed to write settings to {path}: {e}")
            raise

    def _update_settings(self, path: Path, updates: dict[str, Any]) -> None:
        """Update settings file with new values (deep merge)."""
        existing = self._read_settings(path) or {}
        merged = self._deep_merge(self._normalize(existing), updates)
        self._write_settings(path, merged)

    def _deep_merge(self, base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries.

        Args:
            base: Base dictionary
            overlay: Overlay dictionary (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
