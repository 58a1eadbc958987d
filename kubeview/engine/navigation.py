"""Navigation engine: the dashboard's state machine.

The engine owns the Session. Every event goes through ``handle()``, which
mutates the session and returns the commands the host must run. Commands
complete asynchronously and come back as completion events.

Startup runs four chained steps, each scheduled by the previous completion:
connect -> resolve context -> list namespaces -> fetch the snapshot.

While ``loading`` is set only quit is accepted, so at most one fetch whose
result matters is pending. Every scheduled command is also tagged with a
fresh generation, and completions from any older generation are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from kubeview.constants.enums import InputKind, ViewType
from kubeview.constants.values import (
    DEFAULT_NAMESPACE,
    STATUS_CONNECTING,
    STATUS_FETCHING_DETAIL,
    STATUS_FETCHING_NAMESPACES,
    STATUS_FETCHING_RESOURCES,
    STATUS_REFRESHING,
    STATUS_RESOLVING_CONTEXT,
    STATUS_SWITCHING_NAMESPACE,
    UNKNOWN_CONTEXT,
)
from kubeview.controllers.base import BaseController
from kubeview.engine.commands import (
    Command,
    ConnectCommand,
    FetchNamespacesCommand,
    FetchPodDetailCommand,
    FetchResourcesCommand,
    FetchServiceDetailCommand,
    GatewayFactory,
    QuitCommand,
    ResolveContextCommand,
)
from kubeview.engine.events import (
    COMPLETION_TYPES,
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
from kubeview.engine.session import Session

logger = logging.getLogger(__name__)

NOT_CONNECTED = "Not connected to a cluster"


class NavigationEngine:
    """Interprets inputs and completions and decides what to fetch next."""

    def __init__(self, connect: GatewayFactory, *, namespace: str = DEFAULT_NAMESPACE) -> None:
        """Initialize the engine.

        Args:
            connect: Async factory returning the cluster gateway.
            namespace: Namespace shown after startup.
        """
        self._connect = connect
        self.session = Session(namespace=namespace or DEFAULT_NAMESPACE)
        self.gateway: BaseController | None = None
        self.quit_requested = False
        self._input_handlers: dict[InputKind, Callable[[], list[Command]]] = {
            InputKind.SHOW_PODS: self._show_pods,
            InputKind.SHOW_SERVICES: self._show_services,
            InputKind.BACK: self._back,
            InputKind.MOVE_UP: self._move_up,
            InputKind.MOVE_DOWN: self._move_down,
            InputKind.ACTIVATE: self._activate,
            InputKind.REFRESH: self._refresh,
            InputKind.OPEN_NAMESPACES: self._open_namespaces,
        }

    # =========================================================================
    # Public API
    # =========================================================================

    def start(self) -> list[Command]:
        """Begin the startup protocol."""
        self.session.loading = True
        self.session.status_message = STATUS_CONNECTING
        return [ConnectCommand(self._next_generation(), self._connect)]

    def handle(self, event: Event) -> list[Command]:
        """Apply one event to the session and return the commands to run."""
        if isinstance(event, COMPLETION_TYPES) and self._is_stale(event):
            return []

        match event:
            case InputEvent(kind=kind):
                return self._handle_input(kind)
            case ResizeEvent(width=width, height=height):
                self.session.width = width
                self.session.height = height
                return []
            case ConnectionResult():
                return self._on_connection(event)
            case ContextResult():
                return self._on_context(event)
            case NamespacesResult():
                return self._on_namespaces(event)
            case ResourcesResult():
                return self._on_resources(event)
            case DetailResult():
                return self._on_detail(event)
            case _:
                raise TypeError(f"Unsupported event: {event!r}")

    # =========================================================================
    # Scheduling helpers
    # =========================================================================

    def _next_generation(self) -> int:
        self.session.generation += 1
        return self.session.generation

    def _is_stale(self, event: CompletionEvent) -> bool:
        if event.generation == self.session.generation:
            return False
        logger.debug(
            "Dropping %s from generation %d (current %d)",
            type(event).__name__,
            event.generation,
            self.session.generation,
        )
        return True

    def _fetch_resources(self, gateway: BaseController, status: str) -> list[Command]:
        self.session.loading = True
        self.session.status_message = status
        return [FetchResourcesCommand(self._next_generation(), gateway, self.session.namespace)]

    def _fail(self, message: str) -> list[Command]:
        self.session.loading = False
        self.session.error_message = message
        return []

    # =========================================================================
    # Inputs
    # =========================================================================

    def _handle_input(self, kind: InputKind) -> list[Command]:
        if kind is InputKind.QUIT:
            self.quit_requested = True
            return [QuitCommand()]
        if self.session.loading:
            logger.debug("Ignoring %s while loading", kind.value)
            return []

        commands = self._input_handlers[kind]()
        logger.debug(
            "%s -> view=%s index=%d",
            kind.value,
            self.session.current_view.value,
            self.session.selected_index,
        )
        return commands

    def _show_pods(self) -> list[Command]:
        self.session.current_view = ViewType.PODS
        self.session.selected_index = 0
        return []

    def _show_services(self) -> list[Command]:
        self.session.current_view = ViewType.SERVICES
        self.session.selected_index = 0
        return []

    def _back(self) -> list[Command]:
        if self.session.current_view in (ViewType.DETAIL, ViewType.NAMESPACES):
            self.session.current_view = ViewType.PODS
            self.session.clamp_selection()
        return []

    def _move_up(self) -> list[Command]:
        self.session.selected_index = max(0, self.session.selected_index - 1)
        return []

    def _move_down(self) -> list[Command]:
        if self.session.selected_index < len(self.session.current_items) - 1:
            self.session.selected_index += 1
        return []

    def _activate(self) -> list[Command]:
        session = self.session
        items = session.current_items
        if not items or self.gateway is None:
            return []
        selected = items[session.selected_index]

        if session.current_view is ViewType.NAMESPACES:
            session.namespace = selected
            session.current_view = ViewType.PODS
            session.selected_index = 0
            return self._fetch_resources(
                self.gateway, STATUS_SWITCHING_NAMESPACE.format(namespace=selected)
            )

        namespace = selected.namespace or session.namespace
        command: Command
        if session.current_view is ViewType.PODS:
            command = FetchPodDetailCommand(
                self._next_generation(), self.gateway, namespace, selected.name
            )
            kind = "pod"
        else:
            command = FetchServiceDetailCommand(
                self._next_generation(), self.gateway, namespace, selected.name
            )
            kind = "service"
        session.current_view = ViewType.DETAIL
        session.loading = True
        session.status_message = STATUS_FETCHING_DETAIL.format(kind=kind, name=selected.name)
        return [command]

    def _refresh(self) -> list[Command]:
        if self.gateway is None:
            return []
        return self._fetch_resources(self.gateway, STATUS_REFRESHING)

    def _open_namespaces(self) -> list[Command]:
        session = self.session
        session.current_view = ViewType.NAMESPACES
        if session.namespace in session.namespaces:
            session.selected_index = session.namespaces.index(session.namespace)
        else:
            session.selected_index = 0
        return []

    # =========================================================================
    # Completions
    # =========================================================================

    def _on_connection(self, event: ConnectionResult) -> list[Command]:
        if event.error is not None or event.gateway is None:
            return self._fail(event.error or NOT_CONNECTED)
        self.gateway = event.gateway
        self.session.status_message = STATUS_RESOLVING_CONTEXT
        return [ResolveContextCommand(self._next_generation(), self.gateway)]

    def _on_context(self, event: ContextResult) -> list[Command]:
        if event.error is not None:
            logger.info("Context resolution failed, using %s: %s", UNKNOWN_CONTEXT, event.error)
            self.session.context_name = UNKNOWN_CONTEXT
        else:
            self.session.context_name = event.context
        self.session.status_message = STATUS_FETCHING_NAMESPACES
        if self.gateway is None:
            return self._fail(NOT_CONNECTED)
        return [FetchNamespacesCommand(self._next_generation(), self.gateway)]

    def _on_namespaces(self, event: NamespacesResult) -> list[Command]:
        if event.error is not None:
            return self._fail(event.error)
        self.session.namespaces = list(event.namespaces)
        if self.gateway is None:
            return self._fail(NOT_CONNECTED)
        return self._fetch_resources(self.gateway, STATUS_FETCHING_RESOURCES)

    def _on_resources(self, event: ResourcesResult) -> list[Command]:
        if event.error is not None or event.data is None:
            return self._fail(event.error or "No resources returned")
        self.session.loading = False
        self.session.resources = event.data
        self.session.error_message = ""
        self.session.clamp_selection()
        return []

    def _on_detail(self, event: DetailResult) -> list[Command]:
        if event.error is not None:
            return self._fail(event.error)
        self.session.loading = False
        self.session.detail_content = event.detail
        self.session.error_message = ""
        return []
