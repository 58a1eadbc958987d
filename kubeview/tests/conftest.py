"""Shared fixtures for KubeView tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from kubeview.controllers.base import BaseController, KubectlError
from kubeview.models.core import ContainerInfo, PodInfo, ResourceData, ServiceInfo


class FakeGateway(BaseController):
    """In-memory gateway; ``failures`` maps an operation name to its error text."""

    def __init__(
        self,
        *,
        context: str = "kind-test",
        namespaces: list[str] | None = None,
        pods: dict[str, list[PodInfo]] | None = None,
        services: dict[str, list[ServiceInfo]] | None = None,
        failures: dict[str, str] | None = None,
    ) -> None:
        self.context = context
        self.namespaces = namespaces if namespaces is not None else ["default", "kube-system"]
        self.pods = pods or {}
        self.services = services or {}
        self.failures = failures or {}
        self.calls: list[tuple[Any, ...]] = []

    def _check(self, operation: str) -> None:
        if operation in self.failures:
            raise KubectlError(self.failures[operation])

    async def get_current_context(self) -> str:
        self.calls.append(("context",))
        self._check("context")
        return self.context

    async def get_namespaces(self) -> list[str]:
        self.calls.append(("namespaces",))
        self._check("namespaces")
        return list(self.namespaces)

    async def get_pods(self, namespace: str) -> list[PodInfo]:
        self.calls.append(("pods", namespace))
        self._check("pods")
        return list(self.pods.get(namespace, []))

    async def get_services(self, namespace: str) -> list[ServiceInfo]:
        self.calls.append(("services", namespace))
        self._check("services")
        return list(self.services.get(namespace, []))

    async def get_pod_detail(self, namespace: str, name: str) -> str:
        self.calls.append(("pod_detail", namespace, name))
        self._check("pod_detail")
        return f"Pod: {name}\nNamespace: {namespace}\n"

    async def get_service_detail(self, namespace: str, name: str) -> str:
        self.calls.append(("service_detail", namespace, name))
        self._check("service_detail")
        return f"Service: {name}\nNamespace: {namespace}\n"


def build_pod(name: str, namespace: str = "default", status: str = "Running") -> PodInfo:
    return PodInfo(
        name=name,
        namespace=namespace,
        status=status,
        age="5m",
        ip="10.0.0.1",
        node="node-1",
        containers=[ContainerInfo(name="app", image="nginx", ready=True, restart_count=1)],
    )


def build_service(name: str, namespace: str = "default") -> ServiceInfo:
    return ServiceInfo(
        name=name,
        namespace=namespace,
        type="ClusterIP",
        cluster_ip="10.96.0.10",
        external_ip="<none>",
        ports="80/TCP",
        age="1d2h",
    )


@pytest.fixture
def make_pod() -> Callable[..., PodInfo]:
    """Factory for PodInfo rows."""
    return build_pod


@pytest.fixture
def make_service() -> Callable[..., ServiceInfo]:
    """Factory for ServiceInfo rows."""
    return build_service


@pytest.fixture
def make_gateway() -> Callable[..., FakeGateway]:
    """Factory for in-memory gateways."""
    return FakeGateway


@pytest.fixture
def snapshot() -> ResourceData:
    """Three pods and two services in ``default``."""
    return ResourceData(
        pods=[build_pod("web-1"), build_pod("web-2"), build_pod("db-0", status="Pending")],
        services=[build_service("web"), build_service("db")],
    )


@pytest.fixture
def gateway() -> FakeGateway:
    """Gateway serving two pods and one service in ``default`` and one pod in ``kube-system``."""
    return FakeGateway(
        pods={
            "default": [build_pod("web-1"), build_pod("web-2")],
            "kube-system": [build_pod("coredns-1", namespace="kube-system")],
        },
        services={"default": [build_service("web")]},
    )
