"""Core Kubernetes resource models."""

from kubeview.models.core.pod_info import ContainerInfo, PodInfo
from kubeview.models.core.resource_data import ResourceData
from kubeview.models.core.service_info import ServiceInfo, ServicePort

__all__ = [
    "ContainerInfo",
    "PodInfo",
    "ResourceData",
    "ServiceInfo",
    "ServicePort",
]
