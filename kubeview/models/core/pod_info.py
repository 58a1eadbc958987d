"""Pod models for the pods view."""

from datetime import datetime

from pydantic import BaseModel, Field


class ContainerInfo(BaseModel):
    """Container details for one pod container."""

    name: str
    image: str = ""
    ready: bool = False
    restart_count: int = 0
    state: str = ""
    cpu_request: str = ""
    memory_request: str = ""
    cpu_limit: str = ""
    memory_limit: str = ""
    environment_vars: dict[str, str] = Field(default_factory=dict)


class PodInfo(BaseModel):
    """Essential pod information for one pods table row."""

    name: str
    namespace: str
    status: str = ""
    age: str = ""
    ip: str = ""
    node: str = ""
    created: datetime | None = None
    labels: dict[str, str] = Field(default_factory=dict)
    containers: list[ContainerInfo] = Field(default_factory=list)

    @property
    def ready_count(self) -> int:
        """Number of containers reporting ready."""
        return sum(1 for container in self.containers if container.ready)

    @property
    def restart_count(self) -> int:
        """Total restarts across all containers."""
        return sum(container.restart_count for container in self.containers)
