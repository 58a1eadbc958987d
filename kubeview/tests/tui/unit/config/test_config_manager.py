"""Tests for AppSettings and ConfigManager."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from kubeview.models.state import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigManager,
    DashboardStyles,
)


class TestAppSettings:
    """Tests for AppSettings defaults and validation."""

    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.namespace == "default"
        assert settings.request_timeout == "30s"
        assert settings.command_timeout_seconds == 45
        assert settings.fetch_timeout_seconds is None
        assert settings.log_level == "WARNING"
        assert isinstance(settings.styles, DashboardStyles)

    def test_fetch_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(fetch_timeout_seconds=0)

    def test_styles_are_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DashboardStyles().title = "red"  # type: ignore[misc]

    def test_config_load_error_is_config_error(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)


class TestConfigManager:
    """Tests for ConfigManager path resolution and loading."""

    def test_resolve_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "s.yaml"
        assert ConfigManager.resolve_path(path, {"KUBEVIEW_CONFIG": "/tmp/other"}) == path

    def test_resolve_env_path(self) -> None:
        assert ConfigManager.resolve_path(None, {"KUBEVIEW_CONFIG": "/tmp/env.yaml"}) == Path(
            "/tmp/env.yaml"
        )

    def test_resolve_default_path(self) -> None:
        assert ConfigManager.resolve_path(None, {}) == ConfigManager.default_path()

    def test_missing_file_yields_defaults(self, tmp_path: Path) -> None:
        assert ConfigManager.load(tmp_path / "absent.yaml") == AppSettings()

    def test_empty_file_yields_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert ConfigManager.load(path) == AppSettings()

    def test_load_values(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            "namespace: payments\n"
            "fetch_timeout_seconds: 12.5\n"
            "styles:\n"
            "  selected_item: bold magenta\n",
            encoding="utf-8",
        )
        settings = ConfigManager.load(path)
        assert settings.namespace == "payments"
        assert settings.fetch_timeout_seconds == 12.5
        assert settings.styles.selected_item == "bold magenta"
        assert settings.styles.title == DashboardStyles().title

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("namespace: [oops", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Cannot read settings file"):
            ConfigManager.load(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- one\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="must contain a mapping"):
            ConfigManager.load(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("command_timeout_seconds: 0\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            ConfigManager.load(path)
