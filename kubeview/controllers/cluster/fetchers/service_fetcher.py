"""Service fetcher for cluster controller - fetches raw service objects from Kubernetes cluster."""

from __future__ import annotations

from typing import Any

from kubeview.controllers.cluster.fetchers._json import decode_items, decode_object


class ServiceFetcher:
    """Fetches raw service JSON from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    async def fetch_services(self, namespace: str) -> list[dict[str, Any]]:
        """Return raw service items in ``namespace``."""
        output = await self._run_kubectl(("get", "services", "-n", namespace, "-o", "json"))
        return decode_items(output, f"services in {namespace}")

    async def fetch_service(self, namespace: str, name: str) -> dict[str, Any]:
        """Return one raw service object."""
        output = await self._run_kubectl(
            ("get", "service", name, "-n", namespace, "-o", "json")
        )
        return decode_object(output, f"service {namespace}/{name}")
