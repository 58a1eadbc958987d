"""Cluster controller for read-only kubectl operations.

This module serves as the gateway between the dashboard and the cluster,
delegating to specialized fetchers, parsers and formatters for namespace,
pod and service operations.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from kubeview.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubeview.controllers.base import (
    BaseController,
    ClusterConnectionError,
    KubeconfigError,
    KubectlError,
)
from kubeview.controllers.cluster.fetchers import (
    NamespaceFetcher,
    PodFetcher,
    ServiceFetcher,
)
from kubeview.controllers.cluster.formatters import (
    PodDetailFormatter,
    ServiceDetailFormatter,
)
from kubeview.controllers.cluster.kubeconfig import (
    context_names,
    current_context,
    load_kubeconfig,
    resolve_kubeconfig_path,
)
from kubeview.controllers.cluster.parsers import PodParser, ServiceParser
from kubeview.models.core import PodInfo, ServiceInfo

if TYPE_CHECKING:
    from kubeview.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class ClusterController(BaseController):
    """Kubernetes read operations backed by kubectl.

    This class serves as an orchestrator that delegates to:
    - NamespaceFetcher: namespace listing
    - PodFetcher / PodParser / PodDetailFormatter: pod rows and detail text
    - ServiceFetcher / ServiceParser / ServiceDetailFormatter: service rows and detail text
    """

    _MAX_ERROR_LENGTH = 160
    _PREFERRED_ERROR_TOKENS = (
        "unable to connect to the server",
        "you must be logged in",
        "context deadline exceeded",
        "timed out",
        "certificate",
        "no such host",
        "forbidden",
        "unauthorized",
        "not found",
    )

    def __init__(
        self,
        kubeconfig: Path,
        context: str | None = None,
        *,
        kubectl_path: str = "kubectl",
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
        command_timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> None:
        """Initialize the cluster controller.

        Args:
            kubeconfig: Path of the kubeconfig file kubectl should use.
            context: Optional Kubernetes context name overriding current-context.
            kubectl_path: kubectl executable.
            request_timeout: kubectl --request-timeout value.
            command_timeout: Process-level timeout in seconds for one kubectl call.
        """
        super().__init__()
        self.kubeconfig = kubeconfig
        self.context = context
        self.kubectl_path = kubectl_path
        self.request_timeout = request_timeout
        self.command_timeout = command_timeout

        # Initialize fetchers
        self._namespace_fetcher = NamespaceFetcher(self._run_kubectl)
        self._pod_fetcher = PodFetcher(self._run_kubectl)
        self._service_fetcher = ServiceFetcher(self._run_kubectl)

        # Initialize parsers
        self._pod_parser = PodParser()
        self._service_parser = ServiceParser()

        # Initialize formatters
        self._pod_formatter = PodDetailFormatter()
        self._service_formatter = ServiceDetailFormatter()

    @classmethod
    async def connect(cls, settings: AppSettings) -> ClusterController:
        """Build a controller from settings after validating local cluster access.

        Mirrors client construction: the kubeconfig must load and kubectl must
        be installed. The API server itself is not contacted here.

        Raises:
            ClusterConnectionError: kubeconfig or kubectl is unusable.
        """
        path = resolve_kubeconfig_path(settings.kubeconfig or None)
        try:
            config = await asyncio.to_thread(load_kubeconfig, path)
        except KubeconfigError as exc:
            raise ClusterConnectionError(f"error building kubeconfig: {exc}") from exc

        if settings.context and settings.context not in context_names(config):
            raise ClusterConnectionError(
                f'context "{settings.context}" does not exist in {path}'
            )

        kubectl_path = shutil.which("kubectl")
        if kubectl_path is None:
            raise ClusterConnectionError("kubectl executable not found on PATH")

        logger.info("Using kubeconfig %s (context override: %s)", path, settings.context or "-")
        return cls(
            path,
            settings.context or None,
            kubectl_path=kubectl_path,
            request_timeout=settings.request_timeout,
            command_timeout=settings.command_timeout_seconds,
        )

    @classmethod
    def _summarize_error(cls, raw_message: str) -> str:
        """Extract a concise, user-facing error line from kubectl stderr."""
        lines = [line.strip() for line in raw_message.splitlines() if line.strip()]
        if not lines:
            return "kubectl command failed"

        selected_line = lines[-1]
        for line in reversed(lines):
            lower_line = line.lower()
            if line.startswith("error:") or any(
                token in lower_line for token in cls._PREFERRED_ERROR_TOKENS
            ):
                selected_line = line
                break

        cleaned = selected_line.removeprefix("error:").strip()
        if len(cleaned) > cls._MAX_ERROR_LENGTH:
            return f"{cleaned[: cls._MAX_ERROR_LENGTH - 3].rstrip()}..."
        return cleaned or "kubectl command failed"

    def _build_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = [self.kubectl_path, "--kubeconfig", str(self.kubeconfig)]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        cmd.append(f"--request-timeout={self.request_timeout}")
        return cmd

    def _run_kubectl_sync(self, args: tuple[str, ...]) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._build_command(args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self.command_timeout
            )
        except subprocess.TimeoutExpired as exc:
            raise KubectlError(f"kubectl timed out after {self.command_timeout}s") from exc
        except OSError as exc:
            raise KubectlError(f"cannot run kubectl: {exc}") from exc

        if result.returncode != 0:
            message = self._summarize_error(result.stderr or "")
            logger.warning("kubectl %s failed: %s", " ".join(args), message)
            raise KubectlError(message)
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    async def get_current_context(self) -> str:
        """Return the context override, else the kubeconfig's current-context."""
        if self.context:
            return self.context
        config = await asyncio.to_thread(load_kubeconfig, self.kubeconfig)
        return current_context(config)

    async def get_namespaces(self) -> list[str]:
        return await self._namespace_fetcher.fetch_namespaces()

    async def get_pods(self, namespace: str) -> list[PodInfo]:
        items = await self._pod_fetcher.fetch_pods(namespace)
        return self._pod_parser.parse_pods(items)

    async def get_services(self, namespace: str) -> list[ServiceInfo]:
        items = await self._service_fetcher.fetch_services(namespace)
        return self._service_parser.parse_services(items)

    async def get_pod_detail(self, namespace: str, name: str) -> str:
        pod = await self._pod_fetcher.fetch_pod(namespace, name)
        return self._pod_formatter.format(pod)

    async def get_service_detail(self, namespace: str, name: str) -> str:
        service = await self._service_fetcher.fetch_service(namespace, name)
        return self._service_formatter.format(service)
