"""Base controller contract and errors."""

from kubeview.controllers.base.base_controller import BaseController
from kubeview.controllers.base.errors import (
    ClusterConnectionError,
    ClusterError,
    KubeconfigError,
    KubectlError,
)

__all__ = [
    "BaseController",
    "ClusterConnectionError",
    "ClusterError",
    "KubeconfigError",
    "KubectlError",
]
