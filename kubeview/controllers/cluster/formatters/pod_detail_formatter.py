"""Pod detail formatter - renders a raw pod object as descriptive text."""

from __future__ import annotations

from typing import Any

from kubeview.utils.resource_parser import parse_timestamp


def _timestamp(value: Any) -> str:
    parsed = parse_timestamp(value)
    return parsed.isoformat().replace("+00:00", "Z") if parsed else str(value or "")


class PodDetailFormatter:
    """Builds the detail view text for one pod."""

    def format(self, pod: dict[str, Any]) -> str:
        metadata = pod.get("metadata") or {}
        spec = pod.get("spec") or {}
        status = pod.get("status") or {}
        containers = spec.get("containers") or []

        lines = [
            f"Pod: {metadata.get('name', '')}",
            f"Namespace: {metadata.get('namespace', '')}",
            f"Status: {status.get('phase', '')}",
            f"IP: {status.get('podIP', '')}",
            f"Node: {spec.get('nodeName', '')}",
            f"Created: {_timestamp(metadata.get('creationTimestamp'))}",
        ]

        labels = metadata.get("labels") or {}
        if labels:
            lines += ["", "Labels:"]
            lines += [f"  {key}: {labels[key]}" for key in sorted(labels)]

        lines += ["", "Containers:"]
        statuses = status.get("containerStatuses") or []
        for container in containers:
            lines += self._container_lines(container, statuses)

        lines += ["", "Environment Variables:"]
        for container in containers:
            lines += self._environment_lines(container)

        volumes = spec.get("volumes") or []
        if volumes:
            lines += ["", "Volumes:"]
            for volume in volumes:
                lines += self._volume_lines(volume)

        lines += ["", "Use 'kubectl describe pod' for events and additional information"]
        return "\n".join(lines) + "\n"

    def _container_lines(
        self, container: dict[str, Any], statuses: list[dict[str, Any]]
    ) -> list[str]:
        name = container.get("name", "")
        lines = [f"  - {name} (Image: {container.get('image', '')})"]

        resources = container.get("resources") or {}
        requests = resources.get("requests") or {}
        limits = resources.get("limits") or {}
        if requests or limits:
            lines.append("    Resources:")
            for label, source, key in (
                ("CPU Request", requests, "cpu"),
                ("Memory Request", requests, "memory"),
                ("CPU Limit", limits, "cpu"),
                ("Memory Limit", limits, "memory"),
            ):
                if key in source:
                    lines.append(f"      {label}: {source[key]}")

        status = next((s for s in statuses if s.get("name") == name), None)
        if status is not None:
            lines += [
                "    Status:",
                f"      Ready: {str(bool(status.get('ready'))).lower()}",
                f"      Restart Count: {status.get('restartCount', 0)}",
            ]
            lines += self._state_lines(status.get("state") or {})
        return lines

    @staticmethod
    def _state_lines(state: dict[str, Any]) -> list[str]:
        if state.get("running") is not None:
            started = _timestamp(state["running"].get("startedAt"))
            return [f"      State: Running (started at {started})"]
        for key, label in (("waiting", "Waiting"), ("terminated", "Terminated")):
            detail = state.get(key)
            if detail is not None:
                lines = [f"      State: {label} (reason: {detail.get('reason', '')})"]
                if detail.get("message"):
                    lines.append(f"      Message: {detail['message']}")
                return lines
        return []

    @staticmethod
    def _env_source(value_from: dict[str, Any]) -> str:
        if value_from.get("configMapKeyRef"):
            ref = value_from["configMapKeyRef"]
            return f"ConfigMap {ref.get('name', '')} (key: {ref.get('key', '')})"
        if value_from.get("secretKeyRef"):
            ref = value_from["secretKeyRef"]
            return f"Secret {ref.get('name', '')} (key: {ref.get('key', '')})"
        if value_from.get("fieldRef"):
            return f"Field {value_from['fieldRef'].get('fieldPath', '')}"
        return "Unknown source"

    def _environment_lines(self, container: dict[str, Any]) -> list[str]:
        lines = [f"  {container.get('name', '')}:"]
        env = container.get("env") or []
        if not env:
            lines.append("    No environment variables defined")
            return lines
        for entry in env:
            if entry.get("value"):
                lines.append(f"    - {entry.get('name', '')}: {entry['value']}")
            elif entry.get("valueFrom") is not None:
                source = self._env_source(entry["valueFrom"])
                lines.append(f"    - {entry.get('name', '')}: [from {source}]")
        return lines

    @staticmethod
    def _volume_lines(volume: dict[str, Any]) -> list[str]:
        lines = [f"  - {volume.get('name', '')}:"]
        if volume.get("persistentVolumeClaim") is not None:
            lines += [
                "    Type: PersistentVolumeClaim",
                f"    Claim Name: {volume['persistentVolumeClaim'].get('claimName', '')}",
            ]
        elif volume.get("configMap") is not None:
            lines += ["    Type: ConfigMap", f"    Name: {volume['configMap'].get('name', '')}"]
        elif volume.get("secret") is not None:
            lines += [
                "    Type: Secret",
                f"    Secret Name: {volume['secret'].get('secretName', '')}",
            ]
        elif volume.get("emptyDir") is not None:
            lines.append("    Type: EmptyDir")
        elif volume.get("hostPath") is not None:
            lines += ["    Type: HostPath", f"    Path: {volume['hostPath'].get('path', '')}"]
        else:
            lines.append("    Type: Other")
        return lines
