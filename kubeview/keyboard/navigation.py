"""Screen-specific keyboard bindings.

Each binding maps a key to one dashboard action; the screen turns the
action into an input event for the navigation engine.
"""

from textual.binding import Binding

# ============================================================================
# Dashboard Screen Bindings
# ============================================================================

DASHBOARD_SCREEN_BINDINGS: list[Binding] = [
    Binding("q", "quit_dashboard", "Quit"),
    Binding("ctrl+c", "quit_dashboard", "Quit", show=False, priority=True),
    Binding("p", "show_pods", "Pods"),
    Binding("s", "show_services", "Services"),
    Binding("escape", "back", "Back"),
    Binding("up,k", "move_up", "Up", show=False),
    Binding("down,j", "move_down", "Down", show=False),
    Binding("enter", "activate", "Select"),
    Binding("r", "refresh", "Refresh"),
    Binding("n", "open_namespaces", "Namespaces"),
]

__all__ = [
    "DASHBOARD_SCREEN_BINDINGS",
]
