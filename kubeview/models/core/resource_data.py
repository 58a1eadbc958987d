"""Resource snapshot model."""

from pydantic import BaseModel, Field

from kubeview.models.core.pod_info import PodInfo
from kubeview.models.core.service_info import ServiceInfo


class ResourceData(BaseModel):
    """Pods and services of one namespace, fetched together."""

    pods: list[PodInfo] = Field(default_factory=list)
    services: list[ServiceInfo] = Field(default_factory=list)
