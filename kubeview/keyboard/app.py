"""Bindings owned by the application rather than a screen."""

from textual.binding import Binding

# ctrl+q still exits if the dashboard screen never mounted
APP_BINDINGS: list[Binding] = [
    Binding("ctrl+q", "quit", "Quit", show=False),
]

__all__ = [
    "APP_BINDINGS",
]
