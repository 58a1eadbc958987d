"""Display widgets."""

from kubeview.widgets.display.frame_view import FrameView

__all__ = ["FrameView"]
