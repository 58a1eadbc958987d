"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeView"

# ============================================================================
# Cluster
# ============================================================================

DEFAULT_NAMESPACE: Final = "default"
UNKNOWN_CONTEXT: Final = "unknown-context"
KUBECONFIG_ENV_VAR: Final = "KUBECONFIG"

# ============================================================================
# Status messages shown while loading
# ============================================================================

STATUS_CONNECTING: Final = "Connecting to Kubernetes cluster..."
STATUS_RESOLVING_CONTEXT: Final = "Getting context information..."
STATUS_FETCHING_NAMESPACES: Final = "Fetching namespaces..."
STATUS_FETCHING_RESOURCES: Final = "Fetching resources..."
STATUS_REFRESHING: Final = "Refreshing resources..."
STATUS_SWITCHING_NAMESPACE: Final = "Switching to namespace: {namespace}"
STATUS_FETCHING_DETAIL: Final = "Fetching {kind} details: {name}"

# ============================================================================
# Error prefixes added at the gateway boundary
# ============================================================================

ERROR_CONNECTING: Final = "Error connecting to Kubernetes"
ERROR_CONTEXT: Final = "Error resolving current context"
ERROR_NAMESPACES: Final = "Error fetching namespaces"
ERROR_RESOURCES: Final = "Error fetching resources"
ERROR_POD_DETAIL: Final = "Error fetching pod details"
ERROR_SERVICE_DETAIL: Final = "Error fetching service details"
ERROR_TIMED_OUT: Final = "Timed out after {seconds:g}s"

# ============================================================================
# Display placeholders
# ============================================================================

PLACEHOLDER_NONE: Final = "<none>"
PLACEHOLDER_PENDING: Final = "<pending>"
ENV_FROM_SOURCE: Final = "[from source]"

__all__ = [
    "APP_TITLE",
    "DEFAULT_NAMESPACE",
    "ENV_FROM_SOURCE",
    "ERROR_CONNECTING",
    "ERROR_CONTEXT",
    "ERROR_NAMESPACES",
    "ERROR_POD_DETAIL",
    "ERROR_RESOURCES",
    "ERROR_SERVICE_DETAIL",
    "ERROR_TIMED_OUT",
    "KUBECONFIG_ENV_VAR",
    "PLACEHOLDER_NONE",
    "PLACEHOLDER_PENDING",
    "STATUS_CONNECTING",
    "STATUS_FETCHING_DETAIL",
    "STATUS_FETCHING_NAMESPACES",
    "STATUS_FETCHING_RESOURCES",
    "STATUS_REFRESHING",
    "STATUS_RESOLVING_CONTEXT",
    "STATUS_SWITCHING_NAMESPACE",
    "UNKNOWN_CONTEXT",
]
