"""Pod parser for cluster controller - parses pod data into structured formats."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from kubeview.constants.enums import ContainerState
from kubeview.constants.values import ENV_FROM_SOURCE
from kubeview.models.core.pod_info import ContainerInfo, PodInfo
from kubeview.utils.resource_parser import format_age, parse_timestamp


class PodParser:
    """Parses pod data into structured formats."""

    @staticmethod
    def _container_state(status: dict[str, Any]) -> str:
        """Return the state name of a container status entry."""
        state = status.get("state") or {}
        for key, value in (
            ("running", ContainerState.RUNNING),
            ("waiting", ContainerState.WAITING),
            ("terminated", ContainerState.TERMINATED),
        ):
            if state.get(key) is not None:
                return value.value
        return ""

    @staticmethod
    def _environment(container: dict[str, Any]) -> dict[str, str]:
        env_vars: dict[str, str] = {}
        for env in container.get("env") or []:
            name = env.get("name")
            if not name:
                continue
            if env.get("value"):
                env_vars[name] = str(env["value"])
            elif env.get("valueFrom") is not None:
                env_vars[name] = ENV_FROM_SOURCE
        return env_vars

    def parse_container(
        self, container: dict[str, Any], statuses: list[dict[str, Any]]
    ) -> ContainerInfo:
        """Parse one container spec, merged with its status entry when present."""
        name = str(container.get("name", ""))
        status = next((s for s in statuses if s.get("name") == name), {})
        resources = container.get("resources") or {}
        requests = resources.get("requests") or {}
        limits = resources.get("limits") or {}

        return ContainerInfo(
            name=name,
            image=str(container.get("image", "")),
            ready=bool(status.get("ready", False)),
            restart_count=int(status.get("restartCount", 0) or 0),
            state=self._container_state(status) if status else "",
            cpu_request=str(requests.get("cpu", "")),
            memory_request=str(requests.get("memory", "")),
            cpu_limit=str(limits.get("cpu", "")),
            memory_limit=str(limits.get("memory", "")),
            environment_vars=self._environment(container),
        )

    def parse_pod(self, pod: dict[str, Any], now: datetime | None = None) -> PodInfo:
        """Parse a single raw pod into PodInfo.

        Args:
            pod: Raw pod dictionary from API
            now: Reference time for the age column (defaults to current UTC time)
        """
        metadata = pod.get("metadata") or {}
        spec = pod.get("spec") or {}
        status = pod.get("status") or {}
        statuses = status.get("containerStatuses") or []
        created = parse_timestamp(metadata.get("creationTimestamp"))

        return PodInfo(
            name=str(metadata.get("name", "")),
            namespace=str(metadata.get("namespace", "")),
            status=str(status.get("phase", "")),
            age=format_age(created, now),
            ip=str(status.get("podIP", "")),
            node=str(spec.get("nodeName", "")),
            created=created,
            labels={str(k): str(v) for k, v in (metadata.get("labels") or {}).items()},
            containers=[
                self.parse_container(container, statuses)
                for container in spec.get("containers") or []
            ],
        )

    def parse_pods(
        self, items: list[dict[str, Any]], now: datetime | None = None
    ) -> list[PodInfo]:
        """Parse a list of raw pods."""
        return [self.parse_pod(item, now) for item in items]
