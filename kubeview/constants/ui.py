"""UI layout constants for the dashboard frame."""

from typing import Final

# Braille dot spinner frames
SPINNER_FRAMES: Final = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")

# Used when the terminal size has not been reported yet
DEFAULT_FRAME_WIDTH: Final = 120

# Title, blank line, table header, blank line, help line
FRAME_CHROME_LINES: Final = 5
MIN_NAME_COLUMN_WIDTH: Final = 16
SELECTION_MARKER: Final = "> "
ELLIPSIS: Final = "..."

# (header, width) pairs; NAME takes whatever width is left
POD_COLUMNS: Final = (
    ("STATUS", 12),
    ("READY", 7),
    ("RESTARTS", 9),
    ("AGE", 8),
    ("IP", 16),
    ("NODE", 24),
)
SERVICE_COLUMNS: Final = (
    ("TYPE", 13),
    ("CLUSTER-IP", 16),
    ("EXTERNAL-IP", 18),
    ("PORTS", 24),
    ("AGE", 8),
)

HELP_LIST_VIEW: Final = (
    "↑/k: up • ↓/j: down • enter: details • p: pods • s: services • "
    "n: namespaces • r: refresh • q: quit"
)
HELP_NAMESPACE_VIEW: Final = "↑/k: up • ↓/j: down • enter: select • esc: back • q: quit"
HELP_DETAIL_VIEW: Final = "esc: back • r: refresh • q: quit"
HELP_ERROR_VIEW: Final = "r: retry • q: quit"

__all__ = [
    "DEFAULT_FRAME_WIDTH",
    "ELLIPSIS",
    "FRAME_CHROME_LINES",
    "HELP_DETAIL_VIEW",
    "HELP_ERROR_VIEW",
    "HELP_LIST_VIEW",
    "HELP_NAMESPACE_VIEW",
    "MIN_NAME_COLUMN_WIDTH",
    "POD_COLUMNS",
    "SELECTION_MARKER",
    "SERVICE_COLUMNS",
    "SPINNER_FRAMES",
]
