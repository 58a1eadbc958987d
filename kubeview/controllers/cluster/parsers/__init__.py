"""Parsers for cluster controller."""

from kubeview.controllers.cluster.parsers.pod_parser import PodParser
from kubeview.controllers.cluster.parsers.service_parser import ServiceParser

__all__ = ["PodParser", "ServiceParser"]
