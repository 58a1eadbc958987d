"""Unit tests for KubeViewApp - class attributes, instantiation, settings loading.

Note: Tests avoid running the full Textual event loop (no app.run_test())
to keep them fast and deterministic.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from textual.app import App
from textual.binding import Binding

from kubeview.app import KubeViewApp
from kubeview.constants import APP_TITLE
from kubeview.keyboard import APP_BINDINGS, DASHBOARD_SCREEN_BINDINGS
from kubeview.models.state import AppSettings

# =============================================================================
# Class Attributes
# =============================================================================


class TestAppClassAttributes:
    """Test KubeViewApp class-level attributes."""

    def test_app_is_textual_app(self) -> None:
        assert issubclass(KubeViewApp, App)

    def test_app_title_set(self) -> None:
        assert KubeViewApp.TITLE == APP_TITLE

    def test_app_bindings(self) -> None:
        assert KubeViewApp.BINDINGS == APP_BINDINGS
        for binding in KubeViewApp.BINDINGS:
            assert isinstance(binding, Binding)


class TestDashboardBindings:
    """Test the dashboard key map."""

    def test_every_key_is_bound(self) -> None:
        keys = {binding.key: binding.action for binding in DASHBOARD_SCREEN_BINDINGS}
        assert keys == {
            "q": "quit_dashboard",
            "ctrl+c": "quit_dashboard",
            "p": "show_pods",
            "s": "show_services",
            "escape": "back",
            "up,k": "move_up",
            "down,j": "move_down",
            "enter": "activate",
            "r": "refresh",
            "n": "open_namespaces",
        }


# =============================================================================
# Construction
# =============================================================================


class TestAppConstruction:
    """Test KubeViewApp constructor handling."""

    def test_explicit_settings_are_used(self) -> None:
        settings = AppSettings(namespace="payments")
        app = KubeViewApp(settings)
        assert app.settings is settings

    def test_custom_connect(self) -> None:
        async def connect():
            return None

        app = KubeViewApp(AppSettings(), connect=connect)
        assert app.connect is connect

    def test_default_connect_uses_settings(self) -> None:
        settings = AppSettings(context="prod")
        app = KubeViewApp(settings)
        assert app.connect.args == (settings,)

    def test_settings_loaded_from_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("namespace: from-file\n", encoding="utf-8")
        monkeypatch.setenv("KUBEVIEW_CONFIG", str(path))
        assert KubeViewApp().settings.namespace == "from-file"

    def test_broken_settings_fall_back_to_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- not a mapping\n", encoding="utf-8")
        monkeypatch.setenv("KUBEVIEW_CONFIG", str(path))
        assert KubeViewApp().settings == AppSettings()
