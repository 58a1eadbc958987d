"""Dashboard screen - hosts the navigation engine.

The screen is the only place that touches Textual: key bindings become
input events, terminal resizes become resize events, and commands returned
by the engine run as workers whose completions are posted back as
``FetchCompleted`` messages. Every event is applied on the event loop, one
at a time, and the frame is re-rendered afterwards.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from textual.app import ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.events import Resize
from textual.message import Message
from textual.screen import Screen

from kubeview.constants.enums import InputKind
from kubeview.constants.ui import SPINNER_FRAMES
from kubeview.constants.values import ERROR_TIMED_OUT
from kubeview.engine import (
    Command,
    CompletionEvent,
    Event,
    FetchCommand,
    GatewayFactory,
    InputEvent,
    NavigationEngine,
    QuitCommand,
    ResizeEvent,
)
from kubeview.keyboard.navigation import DASHBOARD_SCREEN_BINDINGS
from kubeview.models.state.app_settings import AppSettings
from kubeview.screens.dashboard.presenter import DashboardPresenter
from kubeview.screens.mixins.worker_mixin import WorkerMixin
from kubeview.widgets import FrameView

logger = logging.getLogger(__name__)


class FetchCompleted(Message):
    """A fetch command finished; carries its completion event."""

    def __init__(self, event: CompletionEvent) -> None:
        super().__init__()
        self.event = event


class DashboardScreen(WorkerMixin, Screen[None]):
    """Single screen showing pods, services, namespaces and detail views."""

    BINDINGS: list[Binding] = DASHBOARD_SCREEN_BINDINGS

    def __init__(self, settings: AppSettings, connect: GatewayFactory) -> None:
        super().__init__()
        self.settings = settings
        self.engine = NavigationEngine(connect, namespace=settings.namespace)
        self.presenter = DashboardPresenter(settings.styles)
        self._spinner_index = 0

    def compose(self) -> ComposeResult:
        yield FrameView(id="frame")

    def on_mount(self) -> None:
        self.set_interval(self.settings.spinner_interval, self._advance_spinner)
        self.engine.handle(ResizeEvent(self.app.size.width, self.app.size.height))
        self._schedule(self.engine.start())
        self.refresh_frame()

    # =========================================================================
    # Event plumbing
    # =========================================================================

    def apply_event(self, event: Event) -> None:
        """Apply one event to the engine, run its commands and redraw."""
        self._schedule(self.engine.handle(event))
        self.refresh_frame()

    def _schedule(self, commands: list[Command]) -> None:
        for command in commands:
            if isinstance(command, QuitCommand):
                self.cancel_workers()
                self.app.exit()
                return
            self.start_worker(
                self._run_command(command),
                name=f"{command.name}-{command.generation}",
                group="fetch",
            )

    async def _run_command(self, command: FetchCommand) -> None:
        timeout = self.settings.fetch_timeout_seconds
        if timeout is None:
            event = await command.run()
        else:
            try:
                event = await asyncio.wait_for(command.run(), timeout)
            except asyncio.TimeoutError:
                logger.warning("%s timed out after %ss", command.name, timeout)
                event = command.failure(ERROR_TIMED_OUT.format(seconds=timeout))
        self.post_message(FetchCompleted(event))

    def on_fetch_completed(self, message: FetchCompleted) -> None:
        self.apply_event(message.event)

    def on_resize(self, event: Resize) -> None:
        self.apply_event(ResizeEvent(event.size.width, event.size.height))

    # =========================================================================
    # Rendering
    # =========================================================================

    @property
    def spinner_frame(self) -> str:
        return SPINNER_FRAMES[self._spinner_index % len(SPINNER_FRAMES)]

    def _advance_spinner(self) -> None:
        if not self.engine.session.loading:
            return
        self._spinner_index += 1
        self.refresh_frame()

    def refresh_frame(self) -> None:
        """Re-render the session into the frame widget."""
        frame = self.presenter.render(self.engine.session, self.spinner_frame)
        with suppress(NoMatches):
            self.query_one("#frame", FrameView).show(frame)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_quit_dashboard(self) -> None:
        self.apply_event(InputEvent(InputKind.QUIT))

    def action_show_pods(self) -> None:
        self.apply_event(InputEvent(InputKind.SHOW_PODS))

    def action_show_services(self) -> None:
        self.apply_event(InputEvent(InputKind.SHOW_SERVICES))

    def action_back(self) -> None:
        self.apply_event(InputEvent(InputKind.BACK))

    def action_move_up(self) -> None:
        self.apply_event(InputEvent(InputKind.MOVE_UP))

    def action_move_down(self) -> None:
        self.apply_event(InputEvent(InputKind.MOVE_DOWN))

    def action_activate(self) -> None:
        self.apply_event(InputEvent(InputKind.ACTIVATE))

    def action_refresh(self) -> None:
        self.apply_event(InputEvent(InputKind.REFRESH))

    def action_open_namespaces(self) -> None:
        self.apply_event(InputEvent(InputKind.OPEN_NAMESPACES))


__all__ = [
    "DashboardScreen",
    "FetchCompleted",
]
