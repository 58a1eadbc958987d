"""Screens for the KubeView TUI."""

from kubeview.screens.dashboard import DashboardScreen

__all__ = ["DashboardScreen"]
