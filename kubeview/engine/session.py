"""Dashboard session state owned by the navigation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kubeview.constants.enums import ViewType
from kubeview.constants.values import DEFAULT_NAMESPACE, STATUS_CONNECTING
from kubeview.models.core import ResourceData


@dataclass
class Session:
    """All UI state of one dashboard run.

    Only the engine mutates a session; presenters read it.
    """

    current_view: ViewType = ViewType.PODS
    loading: bool = True
    selected_index: int = 0
    namespace: str = DEFAULT_NAMESPACE
    context_name: str = ""
    status_message: str = STATUS_CONNECTING
    error_message: str = ""
    width: int = 0
    height: int = 0
    namespaces: list[str] = field(default_factory=list)
    resources: ResourceData = field(default_factory=ResourceData)
    detail_content: str = ""
    generation: int = 0

    def items_for(self, view: ViewType) -> list[Any]:
        """Return the list a view navigates over (empty for the detail view)."""
        if view is ViewType.PODS:
            return self.resources.pods
        if view is ViewType.SERVICES:
            return self.resources.services
        if view is ViewType.NAMESPACES:
            return self.namespaces
        return []

    @property
    def current_items(self) -> list[Any]:
        return self.items_for(self.current_view)

    def clamp_selection(self) -> None:
        """Pull selected_index back inside the current view's list."""
        count = len(self.current_items)
        self.selected_index = min(max(0, self.selected_index), max(0, count - 1))
