"""Resource formatting utilities for table cells.

Provides helpers that turn raw Kubernetes values into display strings:
- Ages: creation timestamps to compact durations ("5d12h", "3h4m", "7m")
- Ports: service port mappings to "port[:nodePort]/PROTO" lists
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import suppress
from datetime import datetime, timezone

from kubeview.models.core.service_info import ServicePort


def parse_timestamp(timestamp: object) -> datetime | None:
    """Parse a Kubernetes RFC3339 timestamp into an aware datetime."""
    if not isinstance(timestamp, str) or not timestamp:
        return None
    with suppress(ValueError, TypeError):
        return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    return None


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as a compact human-readable string.

    Days and hours above one day, hours and minutes above one hour,
    minutes otherwise.
    """
    total_minutes = max(0, int(seconds // 60))
    days, remainder = divmod(total_minutes, 24 * 60)
    hours, minutes = divmod(remainder, 60)

    if days > 0:
        return f"{days}d{hours}h"
    if hours > 0:
        return f"{hours}h{minutes}m"
    return f"{minutes}m"


def format_age(created: datetime | None, now: datetime | None = None) -> str:
    """Format the time elapsed since ``created``."""
    if created is None:
        return ""
    reference = now or datetime.now(timezone.utc)
    return format_duration((reference - created).total_seconds())


def format_port(port: ServicePort) -> str:
    """Format a single port as ``port[:nodePort]/PROTO``."""
    if port.node_port > 0:
        return f"{port.port}:{port.node_port}/{port.protocol}"
    return f"{port.port}/{port.protocol}"


def format_ports(ports: Iterable[ServicePort]) -> str:
    """Join formatted ports with commas; empty string for no ports."""
    return ", ".join(format_port(port) for port in ports)
