"""Namespace fetcher for cluster controller - lists namespaces from Kubernetes cluster."""

from __future__ import annotations

from typing import Any

from kubeview.controllers.cluster.fetchers._json import decode_items


class NamespaceFetcher:
    """Fetches namespace names from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    async def fetch_namespaces(self) -> list[str]:
        """Return namespace names in the order the API lists them."""
        output = await self._run_kubectl(("get", "namespaces", "-o", "json"))
        names = [
            str(item.get("metadata", {}).get("name", "")).strip()
            for item in decode_items(output, "namespaces")
        ]
        return [name for name in names if name]
