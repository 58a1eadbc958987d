"""Base controller defining the read-only cluster gateway contract.

Every method is a single awaitable unit of work: it either returns the full
result or raises. Callers run them as Textual workers so the UI remains
responsive during kubectl operations.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from kubeview.models.core import PodInfo, ResourceData, ServiceInfo

logger = logging.getLogger(__name__)


class BaseController(ABC):
    """Read operations the dashboard needs from a cluster."""

    @abstractmethod
    async def get_current_context(self) -> str:
        """Return the name of the active kubeconfig context."""
        ...

    @abstractmethod
    async def get_namespaces(self) -> list[str]:
        """Return namespace names."""
        ...

    @abstractmethod
    async def get_pods(self, namespace: str) -> list[PodInfo]:
        """Return pods in ``namespace``."""
        ...

    @abstractmethod
    async def get_services(self, namespace: str) -> list[ServiceInfo]:
        """Return services in ``namespace``."""
        ...

    @abstractmethod
    async def get_pod_detail(self, namespace: str, name: str) -> str:
        """Return descriptive text for one pod."""
        ...

    @abstractmethod
    async def get_service_detail(self, namespace: str, name: str) -> str:
        """Return descriptive text for one service."""
        ...

    async def fetch_all(self, namespace: str) -> ResourceData:
        """Fetch the pods and services snapshot for ``namespace``.

        Pods are fetched before services; a failure of either fails the
        whole snapshot so callers never see a partial result.
        """
        pods = await self.get_pods(namespace)
        services = await self.get_services(namespace)
        logger.debug(
            "Snapshot for %s: %d pods, %d services", namespace, len(pods), len(services)
        )
        return ResourceData(pods=pods, services=services)
