"""Main application class for the KubeView TUI."""

from __future__ import annotations

import logging
from functools import partial

from textual.app import App
from textual.binding import Binding

from kubeview.constants import APP_TITLE
from kubeview.controllers.cluster import ClusterController
from kubeview.engine import GatewayFactory
from kubeview.keyboard.app import APP_BINDINGS
from kubeview.models.state import AppSettings, ConfigLoadError, ConfigManager

logger = logging.getLogger(__name__)


class KubeViewApp(App[None]):
    """Main TUI application for KubeView."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        connect: GatewayFactory | None = None,
        **kwargs,
    ) -> None:
        """Initialize the app.

        Args:
            settings: Resolved settings; loaded from the settings file when omitted.
            connect: Async gateway factory; defaults to a kubectl-backed
                ClusterController built from ``settings``.
        """
        super().__init__(**kwargs)
        if settings is None:
            self._load_settings()
        else:
            self.settings = settings
        self.connect: GatewayFactory = connect or partial(
            ClusterController.connect, self.settings
        )

    def _load_settings(self) -> None:
        """Load application settings from the settings file."""
        try:
            self.settings = ConfigManager.load()
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("%s; using default settings", exc)
            self.settings = AppSettings()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from kubeview.screens import DashboardScreen

        self.push_screen(DashboardScreen(self.settings, self.connect))


__all__ = ["KubeViewApp"]
