"""Worker bookkeeping shared by screens that talk to the cluster.

Gateway commands run as Textual workers on the event loop. A worker never
hands its result back through ``Worker.result``: the coroutine posts a
message to the screen itself, so the state-change handler here only times
the worker and logs how it ended.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)

_FINISHED_STATES = (WorkerState.SUCCESS, WorkerState.CANCELLED, WorkerState.ERROR)


class WorkerMixin:
    """Starts, times and cancels the background fetches of a screen.

    Mix in ahead of ``Screen`` so ``run_worker`` and ``workers`` resolve to
    the screen's own:

        class DashboardScreen(WorkerMixin, Screen[None]):
            ...
            self.start_worker(command.run(), name="pods-3", group="fetch")
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._worker_started_at: dict[str, float] = {}

    def start_worker(
        self,
        work: Awaitable[Any],
        *,
        name: str = "",
        group: str = "default",
        exclusive: bool = False,
    ) -> Worker[Any]:
        """Run ``work`` as an async worker and remember when it started.

        Errors are logged by ``on_worker_state_changed`` and never exit the app.
        """
        self._worker_started_at[name] = time.monotonic()
        return self.run_worker(  # type: ignore[attr-defined]
            work,
            name=name,
            group=group,
            exclusive=exclusive,
            exit_on_error=False,
        )

    def cancel_workers(self) -> None:
        """Cancel every worker still running on this screen."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.state not in _FINISHED_STATES:
            return

        name = event.worker.name
        started_at = self._worker_started_at.pop(name, None)
        elapsed_ms = 0.0 if started_at is None else (time.monotonic() - started_at) * 1000

        match event.state:
            case WorkerState.ERROR:
                logger.error("Worker %r failed after %.2fms: %s", name, elapsed_ms, event.worker.error)
            case WorkerState.CANCELLED:
                logger.debug("Worker %r cancelled after %.2fms", name, elapsed_ms)
            case _:
                logger.debug("Worker %r finished in %.2fms", name, elapsed_ms)


__all__ = [
    "WorkerMixin",
]
