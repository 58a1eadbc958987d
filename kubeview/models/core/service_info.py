"""Service models for the services view."""

from pydantic import BaseModel, Field


class ServicePort(BaseModel):
    """A port mapping in a service."""

    name: str = ""
    protocol: str = "TCP"
    port: int = 0
    target_port: int = 0
    node_port: int = 0


class ServiceInfo(BaseModel):
    """Essential service information for one services table row."""

    name: str
    namespace: str
    type: str = ""
    cluster_ip: str = ""
    external_ip: str = ""
    ports: str = ""
    age: str = ""
    selector: dict[str, str] = Field(default_factory=dict)
