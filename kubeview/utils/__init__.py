"""Utility functions for KubeView TUI."""

from kubeview.utils.logging_setup import resolve_log_level, setup_logging
from kubeview.utils.resource_parser import (
    format_age,
    format_duration,
    format_port,
    format_ports,
    parse_timestamp,
)

__all__ = [
    "format_age",
    "format_duration",
    "format_port",
    "format_ports",
    "parse_timestamp",
    "resolve_log_level",
    "setup_logging",
]
