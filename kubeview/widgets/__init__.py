"""Widgets module for the KubeView TUI.

- display: Display widgets (FrameView)
"""

from kubeview.widgets.display import FrameView

__all__ = ["FrameView"]
