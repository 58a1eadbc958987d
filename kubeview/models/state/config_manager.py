"""Settings file loading.

Settings are read from a YAML file and never written back; the dashboard
keeps no state between runs.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubeview.constants.defaults import (
    CONFIG_DIR_NAME,
    CONFIG_ENV_VAR,
    CONFIG_FILE_NAME,
)
from kubeview.models.state.app_settings import AppSettings, ConfigLoadError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Locates and parses the settings file."""

    @staticmethod
    def default_path() -> Path:
        """Return the per-user settings file location."""
        return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @classmethod
    def resolve_path(
        cls,
        path: str | Path | None = None,
        environ: dict[str, str] | None = None,
    ) -> Path:
        """Pick the settings file: explicit path, then env var, then default."""
        if path:
            return Path(path).expanduser()
        env = os.environ if environ is None else environ
        env_path = env.get(CONFIG_ENV_VAR, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        return cls.default_path()

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        environ: dict[str, str] | None = None,
    ) -> AppSettings:
        """Load settings, returning defaults when no settings file exists.

        Raises:
            ConfigLoadError: The file exists but cannot be read, is not valid
                YAML, or does not validate against AppSettings.
        """
        settings_path = cls.resolve_path(path, environ)
        if not settings_path.is_file():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()

        try:
            raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read settings file {settings_path}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(
                f"Settings file {settings_path} must contain a mapping, got {type(raw).__name__}"
            )

        try:
            settings = AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc

        logger.debug("Loaded settings from %s", settings_path)
        return settings
