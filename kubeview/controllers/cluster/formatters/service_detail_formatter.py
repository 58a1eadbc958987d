"""Service detail formatter - renders a raw service object as descriptive text."""

from __future__ import annotations

from typing import Any

from kubeview.controllers.cluster.parsers.service_parser import ServiceParser
from kubeview.utils.resource_parser import format_port, parse_timestamp


class ServiceDetailFormatter:
    """Builds the detail view text for one service."""

    def format(self, service: dict[str, Any]) -> str:
        metadata = service.get("metadata") or {}
        spec = service.get("spec") or {}

        lines = [
            f"Service: {metadata.get('name', '')}",
            f"Namespace: {metadata.get('namespace', '')}",
            f"Type: {spec.get('type', '')}",
            f"Cluster IP: {spec.get('clusterIP', '')}",
            f"External IP: {ServiceParser.external_ip(service)}",
            "",
            "Ports:",
        ]

        ports = ServiceParser.parse_ports(service)
        if not ports:
            lines.append("  No ports defined")
        for port in ports:
            suffix = f" (name: {port.name})" if port.name else ""
            lines.append(f"  - {format_port(port)}{suffix}")

        lines += ["", "Selector:"]
        selector = spec.get("selector") or {}
        if not selector:
            lines.append("  No selector defined")
        lines += [f"  {key}: {selector[key]}" for key in sorted(selector)]

        lines += ["", f"Session Affinity: {spec.get('sessionAffinity', '')}"]

        for title, mapping in (
            ("Labels", metadata.get("labels") or {}),
            ("Annotations", metadata.get("annotations") or {}),
        ):
            if mapping:
                lines += ["", f"{title}:"]
                lines += [f"  {key}: {mapping[key]}" for key in sorted(mapping)]

        created = parse_timestamp(metadata.get("creationTimestamp"))
        created_text = created.isoformat().replace("+00:00", "Z") if created else ""
        lines += ["", f"Created: {created_text}"]
        return "\n".join(lines) + "\n"
