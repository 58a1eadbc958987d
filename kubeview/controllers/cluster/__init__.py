"""Init file for cluster module."""

from kubeview.controllers.cluster.controller import ClusterController
from kubeview.controllers.cluster.fetchers import (
    NamespaceFetcher,
    PodFetcher,
    ServiceFetcher,
)
from kubeview.controllers.cluster.parsers import PodParser, ServiceParser

__all__ = [
    "ClusterController",
    "NamespaceFetcher",
    "PodFetcher",
    "PodParser",
    "ServiceFetcher",
    "ServiceParser",
]
