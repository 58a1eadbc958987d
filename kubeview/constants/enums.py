"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# View Enums
# =============================================================================

class ViewType(Enum):
    """Views the dashboard can show."""

    PODS = "pods"
    SERVICES = "services"
    DETAIL = "detail"
    NAMESPACES = "namespaces"


# =============================================================================
# Input Enums
# =============================================================================

class InputKind(Enum):
    """Semantic operator inputs understood by the navigation engine."""

    QUIT = "quit"
    SHOW_PODS = "show_pods"
    SHOW_SERVICES = "show_services"
    BACK = "back"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ACTIVATE = "activate"
    REFRESH = "refresh"
    OPEN_NAMESPACES = "open_namespaces"


# =============================================================================
# Status Enums
# =============================================================================

class ContainerState(Enum):
    """Container state values reported by the Kubernetes API."""

    RUNNING = "Running"
    WAITING = "Waiting"
    TERMINATED = "Terminated"


class PodPhase(Enum):
    """Pod phase values from Kubernetes API."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


__all__ = [
    "ContainerState",
    "InputKind",
    "PodPhase",
    "ViewType",
]
