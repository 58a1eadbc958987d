"""Tests for WorkerMixin.

This module tests:
- Worker creation with name and group
- Duration bookkeeping cleared on completion, error and cancellation
- Error logging without crashing the app
"""

from __future__ import annotations

import asyncio
import logging

import pytest
from textual.app import App, ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.worker import WorkerState

from kubeview.screens.mixins.worker_mixin import WorkerMixin

# =============================================================================
# Test Fixtures
# =============================================================================


class MockScreenWithWorkerMixin(WorkerMixin, Screen):
    """Mock screen that uses WorkerMixin."""

    def __init__(self) -> None:
        super().__init__()
        self.results: list[str] = []

    def compose(self) -> ComposeResult:
        yield Static("worker test")

    async def succeed(self) -> None:
        await asyncio.sleep(0)
        self.results.append("done")

    async def fail(self) -> None:
        raise RuntimeError("gateway exploded")

    async def hang(self) -> None:
        await asyncio.sleep(30)


class WorkerTestApp(App[None]):
    def on_mount(self) -> None:
        self.push_screen(MockScreenWithWorkerMixin())


async def wait_for_state(pilot, worker, state: WorkerState) -> None:
    for _ in range(50):
        if worker.state == state:
            return
        await pilot.pause(0.01)
    raise AssertionError(f"worker never reached {state}")


# =============================================================================
# Tests
# =============================================================================


class TestWorkerMixin:
    """Tests for WorkerMixin lifecycle helpers."""

    def test_init_sets_tracking(self) -> None:
        screen = MockScreenWithWorkerMixin()
        assert screen._worker_started_at == {}

    @pytest.mark.asyncio
    async def test_start_worker_runs_and_clears_timing(self) -> None:
        app = WorkerTestApp()
        async with app.run_test() as pilot:
            screen = app.screen
            assert isinstance(screen, MockScreenWithWorkerMixin)
            worker = screen.start_worker(screen.succeed(), name="ok-1", group="fetch")
            assert worker.name == "ok-1"
            assert worker.group == "fetch"
            await wait_for_state(pilot, worker, WorkerState.SUCCESS)
            await pilot.pause()
            assert screen.results == ["done"]
            assert "ok-1" not in screen._worker_started_at

    @pytest.mark.asyncio
    async def test_worker_error_is_logged_not_raised(self, caplog) -> None:
        app = WorkerTestApp()
        with caplog.at_level(logging.ERROR, logger="kubeview.screens.mixins.worker_mixin"):
            async with app.run_test() as pilot:
                screen = app.screen
                worker = screen.start_worker(screen.fail(), name="bad-1")
                await wait_for_state(pilot, worker, WorkerState.ERROR)
                await pilot.pause()
                assert app.is_running
        assert "gateway exploded" in caplog.text

    @pytest.mark.asyncio
    async def test_cancel_workers(self) -> None:
        app = WorkerTestApp()
        async with app.run_test() as pilot:
            screen = app.screen
            worker = screen.start_worker(screen.hang(), name="slow-1")
            await pilot.pause()
            screen.cancel_workers()
            await wait_for_state(pilot, worker, WorkerState.CANCELLED)
            await pilot.pause()
            assert "slow-1" not in screen._worker_started_at
