"""Commands scheduled by the navigation engine.

Each fetch command is one opaque unit of gateway work. ``run()`` never
raises: whatever the gateway does is converted here into either a success
payload or an error string, so the engine only ever branches on which of
the two it received.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from kubeview.constants.values import (
    ERROR_CONNECTING,
    ERROR_CONTEXT,
    ERROR_NAMESPACES,
    ERROR_POD_DETAIL,
    ERROR_RESOURCES,
    ERROR_SERVICE_DETAIL,
)
from kubeview.controllers.base import BaseController
from kubeview.engine.events import (
    CompletionEvent,
    ConnectionResult,
    ContextResult,
    DetailResult,
    NamespacesResult,
    ResourcesResult,
)

logger = logging.getLogger(__name__)

GatewayFactory = Callable[[], Awaitable[BaseController]]


def describe_error(error: BaseException) -> str:
    """Return a one-line message for an exception raised by the gateway."""
    message = " ".join(str(error).split())
    return message or type(error).__name__


@dataclass(frozen=True)
class QuitCommand:
    """Ask the host to terminate the dashboard."""


@dataclass(frozen=True)
class FetchCommand(ABC):
    """Base class for commands that call the gateway."""

    generation: int

    ERROR_PREFIX: ClassVar[str] = "Error"

    async def run(self) -> CompletionEvent:
        """Execute against the gateway and return the completion event."""
        try:
            payload = await self._execute()
        except Exception as exc:
            message = f"{self.ERROR_PREFIX}: {describe_error(exc)}"
            logger.warning("%s (generation %d) failed: %s", self.name, self.generation, message)
            return self.failure(message)
        logger.debug("%s (generation %d) succeeded", self.name, self.generation)
        return self._succeed(payload)

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def _execute(self) -> Any:
        ...

    @abstractmethod
    def _succeed(self, payload: Any) -> CompletionEvent:
        ...

    @abstractmethod
    def failure(self, message: str) -> CompletionEvent:
        """Build a failed completion carrying ``message``."""
        ...


@dataclass(frozen=True)
class ConnectCommand(FetchCommand):
    """Establish the cluster gateway."""

    connect: GatewayFactory

    ERROR_PREFIX: ClassVar[str] = ERROR_CONNECTING

    async def _execute(self) -> BaseController:
        return await self.connect()

    def _succeed(self, payload: BaseController) -> ConnectionResult:
        return ConnectionResult(self.generation, gateway=payload)

    def failure(self, message: str) -> ConnectionResult:
        return ConnectionResult(self.generation, error=message)


@dataclass(frozen=True)
class ResolveContextCommand(FetchCommand):
    """Resolve the current context name."""

    gateway: BaseController

    ERROR_PREFIX: ClassVar[str] = ERROR_CONTEXT

    async def _execute(self) -> str:
        return await self.gateway.get_current_context()

    def _succeed(self, payload: str) -> ContextResult:
        return ContextResult(self.generation, context=payload)

    def failure(self, message: str) -> ContextResult:
        return ContextResult(self.generation, error=message)


@dataclass(frozen=True)
class FetchNamespacesCommand(FetchCommand):
    """List namespace names."""

    gateway: BaseController

    ERROR_PREFIX: ClassVar[str] = ERROR_NAMESPACES

    async def _execute(self) -> list[str]:
        return await self.gateway.get_namespaces()

    def _succeed(self, payload: list[str]) -> NamespacesResult:
        return NamespacesResult(self.generation, namespaces=list(payload))

    def failure(self, message: str) -> NamespacesResult:
        return NamespacesResult(self.generation, error=message)


@dataclass(frozen=True)
class FetchResourcesCommand(FetchCommand):
    """Fetch the pods and services snapshot of one namespace."""

    gateway: BaseController
    namespace: str

    ERROR_PREFIX: ClassVar[str] = ERROR_RESOURCES

    async def _execute(self) -> Any:
        return await self.gateway.fetch_all(self.namespace)

    def _succeed(self, payload: Any) -> ResourcesResult:
        return ResourcesResult(self.generation, data=payload)

    def failure(self, message: str) -> ResourcesResult:
        return ResourcesResult(self.generation, error=message)


@dataclass(frozen=True)
class FetchPodDetailCommand(FetchCommand):
    """Fetch the detail text of one pod."""

    gateway: BaseController
    namespace: str
    pod_name: str

    ERROR_PREFIX: ClassVar[str] = ERROR_POD_DETAIL

    async def _execute(self) -> str:
        return await self.gateway.get_pod_detail(self.namespace, self.pod_name)

    def _succeed(self, payload: str) -> DetailResult:
        return DetailResult(self.generation, detail=payload)

    def failure(self, message: str) -> DetailResult:
        return DetailResult(self.generation, error=message)


@dataclass(frozen=True)
class FetchServiceDetailCommand(FetchCommand):
    """Fetch the detail text of one service."""

    gateway: BaseController
    namespace: str
    service_name: str

    ERROR_PREFIX: ClassVar[str] = ERROR_SERVICE_DETAIL

    async def _execute(self) -> str:
        return await self.gateway.get_service_detail(self.namespace, self.service_name)

    def _succeed(self, payload: str) -> DetailResult:
        return DetailResult(self.generation, detail=payload)

    def failure(self, message: str) -> DetailResult:
        return DetailResult(self.generation, error=message)


Command = QuitCommand | FetchCommand

__all__ = [
    "Command",
    "ConnectCommand",
    "FetchCommand",
    "FetchNamespacesCommand",
    "FetchPodDetailCommand",
    "FetchResourcesCommand",
    "FetchServiceDetailCommand",
    "GatewayFactory",
    "QuitCommand",
    "ResolveContextCommand",
    "describe_error",
]
