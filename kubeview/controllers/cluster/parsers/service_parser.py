"""Service parser for cluster controller - parses service data into structured formats."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from kubeview.constants.values import PLACEHOLDER_NONE, PLACEHOLDER_PENDING
from kubeview.models.core.service_info import ServiceInfo, ServicePort
from kubeview.utils.resource_parser import format_age, format_ports, parse_timestamp

_EXTERNALLY_EXPOSED_TYPES = ("NodePort", "LoadBalancer")


class ServiceParser:
    """Parses service data into structured formats."""

    @staticmethod
    def external_ip(service: dict[str, Any]) -> str:
        """Return the first load-balancer address, or a placeholder."""
        ingress = ((service.get("status") or {}).get("loadBalancer") or {}).get("ingress") or []
        if ingress:
            first = ingress[0] or {}
            address = first.get("ip") or first.get("hostname")
            return str(address) if address else PLACEHOLDER_NONE
        if (service.get("spec") or {}).get("type") in _EXTERNALLY_EXPOSED_TYPES:
            return PLACEHOLDER_PENDING
        return PLACEHOLDER_NONE

    @staticmethod
    def parse_ports(service: dict[str, Any]) -> list[ServicePort]:
        """Parse the spec ports of a raw service.

        Named target ports have no numeric value and are reported as 0.
        """
        ports: list[ServicePort] = []
        for port in (service.get("spec") or {}).get("ports") or []:
            target = port.get("targetPort")
            ports.append(
                ServicePort(
                    name=str(port.get("name", "")),
                    protocol=str(port.get("protocol", "TCP")),
                    port=int(port.get("port", 0) or 0),
                    target_port=target if isinstance(target, int) else 0,
                    node_port=int(port.get("nodePort", 0) or 0),
                )
            )
        return ports

    def parse_service(
        self, service: dict[str, Any], now: datetime | None = None
    ) -> ServiceInfo:
        """Parse a single raw service into ServiceInfo."""
        metadata = service.get("metadata") or {}
        spec = service.get("spec") or {}
        created = parse_timestamp(metadata.get("creationTimestamp"))

        return ServiceInfo(
            name=str(metadata.get("name", "")),
            namespace=str(metadata.get("namespace", "")),
            type=str(spec.get("type", "")),
            cluster_ip=str(spec.get("clusterIP", "")),
            external_ip=self.external_ip(service),
            ports=format_ports(self.parse_ports(service)),
            age=format_age(created, now),
            selector={str(k): str(v) for k, v in (spec.get("selector") or {}).items()},
        )

    def parse_services(
        self, items: list[dict[str, Any]], now: datetime | None = None
    ) -> list[ServiceInfo]:
        """Parse a list of raw services."""
        return [self.parse_service(item, now) for item in items]
