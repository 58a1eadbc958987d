"""Data models for KubeView TUI."""

from kubeview.models.core import (
    ContainerInfo,
    PodInfo,
    ResourceData,
    ServiceInfo,
    ServicePort,
)
from kubeview.models.state import AppSettings, DashboardStyles

__all__ = [
    "AppSettings",
    "ContainerInfo",
    "DashboardStyles",
    "PodInfo",
    "ResourceData",
    "ServiceInfo",
    "ServicePort",
]
