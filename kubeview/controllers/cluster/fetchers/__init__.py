"""Fetchers for cluster controller."""

from kubeview.controllers.cluster.fetchers.namespace_fetcher import NamespaceFetcher
from kubeview.controllers.cluster.fetchers.pod_fetcher import PodFetcher
from kubeview.controllers.cluster.fetchers.service_fetcher import ServiceFetcher

__all__ = ["NamespaceFetcher", "PodFetcher", "ServiceFetcher"]
