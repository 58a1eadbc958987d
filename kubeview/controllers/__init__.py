"""Controllers module for KubeView TUI.

This module provides the read-only cluster gateway used by the dashboard.
"""

from __future__ import annotations

# Base classes
from kubeview.controllers.base import (
    BaseController,
    ClusterConnectionError,
    ClusterError,
    KubeconfigError,
    KubectlError,
)

# Cluster domain
from kubeview.controllers.cluster.controller import ClusterController

__all__ = [
    # Base
    "BaseController",
    "ClusterConnectionError",
    "ClusterError",
    "KubeconfigError",
    "KubectlError",
    # Domain Controllers
    "ClusterController",
]
