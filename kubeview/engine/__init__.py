"""Navigation engine: session state, events, commands and the state machine."""

from kubeview.engine.commands import (
    Command,
    ConnectCommand,
    FetchCommand,
    FetchNamespacesCommand,
    FetchPodDetailCommand,
    FetchResourcesCommand,
    FetchServiceDetailCommand,
    GatewayFactory,
    QuitCommand,
    ResolveContextCommand,
)
from kubeview.engine.events import (
    CompletionEvent,
    ConnectionResult,
    ContextResult,
    DetailResult,
    Event,
    InputEvent,
    NamespacesResult,
    ResizeEvent,
    ResourcesResult,
)
from kubeview.engine.navigation import NavigationEngine
from kubeview.engine.session import Session

__all__ = [
    "Command",
    "CompletionEvent",
    "ConnectCommand",
    "ConnectionResult",
    "ContextResult",
    "DetailResult",
    "Event",
    "FetchCommand",
    "FetchNamespacesCommand",
    "FetchPodDetailCommand",
    "FetchResourcesCommand",
    "FetchServiceDetailCommand",
    "GatewayFactory",
    "InputEvent",
    "NamespacesResult",
    "NavigationEngine",
    "QuitCommand",
    "ResizeEvent",
    "ResolveContextCommand",
    "ResourcesResult",
    "Session",
]
