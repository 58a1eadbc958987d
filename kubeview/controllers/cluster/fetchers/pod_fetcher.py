"""Pod fetcher for cluster controller - fetches raw pod objects from Kubernetes cluster."""

from __future__ import annotations

from typing import Any

from kubeview.controllers.cluster.fetchers._json import decode_items, decode_object


class PodFetcher:
    """Fetches raw pod JSON from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    async def fetch_pods(self, namespace: str) -> list[dict[str, Any]]:
        """Return raw pod items in ``namespace``."""
        output = await self._run_kubectl(("get", "pods", "-n", namespace, "-o", "json"))
        return decode_items(output, f"pods in {namespace}")

    async def fetch_pod(self, namespace: str, name: str) -> dict[str, Any]:
        """Return one raw pod object."""
        output = await self._run_kubectl(("get", "pod", name, "-n", namespace, "-o", "json"))
        return decode_object(output, f"pod {namespace}/{name}")
