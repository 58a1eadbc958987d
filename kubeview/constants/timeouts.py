"""Timeout constants for the TUI.

All timeout and interval values for API requests, async operations, and refresh cycles.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45

# ============================================================================
# UI intervals (float, in seconds)
# ============================================================================

SPINNER_INTERVAL: Final = 0.1

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "SPINNER_INTERVAL",
]
