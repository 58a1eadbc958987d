"""Events consumed by the navigation engine.

Operator inputs, terminal resizes and fetch completions form one closed
union. Completions carry the generation of the command that produced them
so the engine can drop results that are no longer wanted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kubeview.constants.enums import InputKind
from kubeview.models.core import ResourceData

if TYPE_CHECKING:
    from kubeview.controllers.base import BaseController


@dataclass(frozen=True)
class InputEvent:
    """A semantic operator input."""

    kind: InputKind


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal was resized."""

    width: int
    height: int


@dataclass(frozen=True)
class ConnectionResult:
    """Outcome of establishing the cluster gateway."""

    generation: int
    gateway: BaseController | None = None
    error: str | None = None


@dataclass(frozen=True)
class ContextResult:
    """Outcome of resolving the current context name."""

    generation: int
    context: str = ""
    error: str | None = None


@dataclass(frozen=True)
class NamespacesResult:
    """Outcome of listing namespaces."""

    generation: int
    namespaces: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass(frozen=True)
class ResourcesResult:
    """Outcome of fetching the pods and services snapshot."""

    generation: int
    data: ResourceData | None = None
    error: str | None = None


@dataclass(frozen=True)
class DetailResult:
    """Outcome of fetching a pod or service detail text."""

    generation: int
    detail: str = ""
    error: str | None = None


CompletionEvent = (
    ConnectionResult | ContextResult | NamespacesResult | ResourcesResult | DetailResult
)
Event = InputEvent | ResizeEvent | CompletionEvent

COMPLETION_TYPES = (
    ConnectionResult,
    ContextResult,
    NamespacesResult,
    ResourcesResult,
    DetailResult,
)

__all__ = [
    "COMPLETION_TYPES",
    "CompletionEvent",
    "ConnectionResult",
    "ContextResult",
    "DetailResult",
    "Event",
    "InputEvent",
    "NamespacesResult",
    "ResizeEvent",
    "ResourcesResult",
]
