"""Application settings and their loader."""

from kubeview.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    DashboardStyles,
)
from kubeview.models.state.config_manager import ConfigManager

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "DashboardStyles",
]
