"""FrameView widget for the TUI application.

Standard Wrapper Pattern:
- Wraps Textual's Static to show one pre-rendered dashboard frame
- The whole frame is replaced on every update

CSS Classes: widget-frame-view
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class FrameView(Static):
    """Full-screen display of the current dashboard frame.

    Example:
        >>> frame = FrameView(id="frame")
        >>> frame.show(Text("Loading..."))
    """

    DEFAULT_CSS = """
    FrameView {
        width: 1fr;
        height: 1fr;
        padding: 0 1;
    }
    """

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__("", id=id, classes=f"widget-frame-view {classes or ''}".strip())
        self.frame = Text()

    def show(self, frame: Text) -> None:
        """Replace the displayed frame."""
        self.frame = frame
        self.update(frame)


__all__ = ["FrameView"]
