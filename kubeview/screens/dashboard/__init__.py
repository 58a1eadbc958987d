"""Dashboard screen and presenter."""

from kubeview.screens.dashboard.dashboard_screen import DashboardScreen, FetchCompleted
from kubeview.screens.dashboard.presenter import DashboardPresenter

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
    "FetchCompleted",
]
