"""Dashboard presenter - renders the session into a Rich text frame.

The presenter is a pure view of the session: it reads, never writes, and
the same session always yields the same frame. Styles come in as
configuration so nothing about presentation lives in global state.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text

from kubeview.constants.enums import PodPhase, ViewType
from kubeview.constants.ui import (
    DEFAULT_FRAME_WIDTH,
    ELLIPSIS,
    FRAME_CHROME_LINES,
    HELP_DETAIL_VIEW,
    HELP_ERROR_VIEW,
    HELP_LIST_VIEW,
    HELP_NAMESPACE_VIEW,
    MIN_NAME_COLUMN_WIDTH,
    POD_COLUMNS,
    SELECTION_MARKER,
    SERVICE_COLUMNS,
)
from kubeview.constants.values import PLACEHOLDER_NONE
from kubeview.engine.session import Session
from kubeview.models.core import PodInfo, ServiceInfo
from kubeview.models.state.app_settings import DashboardStyles

_UNSELECTED_MARKER = " " * len(SELECTION_MARKER)


def fit_cell(value: str | None, width: int) -> str:
    """Pad or truncate ``value`` to exactly ``width`` characters.

    Missing values render as ``<none>``; values that do not fit end in ``...``.
    """
    text = value if value else PLACEHOLDER_NONE
    if len(text) > width:
        if width <= len(ELLIPSIS):
            return text[:width]
        text = text[: width - len(ELLIPSIS)] + ELLIPSIS
    return text.ljust(width)


def visible_window(count: int, selected: int, rows: int) -> range:
    """Return the slice of row indexes to draw so the selection stays on screen.

    ``rows <= 0`` means the height is unknown and every row is drawn.
    """
    if rows <= 0 or count <= rows:
        return range(count)
    start = min(max(0, selected - rows // 2), count - rows)
    return range(start, start + rows)


class DashboardPresenter:
    """Builds frames for every dashboard view."""

    def __init__(self, styles: DashboardStyles | None = None) -> None:
        self.styles = styles or DashboardStyles()

    def render(self, session: Session, spinner_frame: str = "") -> Text:
        """Render the frame for the current session state."""
        if session.loading:
            return self.render_loading(session.status_message, spinner_frame)
        if session.error_message:
            return self.render_error(session.error_message)

        width = session.width or DEFAULT_FRAME_WIDTH
        rows = max(1, session.height - FRAME_CHROME_LINES) if session.height else 0
        view = session.current_view

        if view is ViewType.PODS:
            return self.render_pods(session, width, rows)
        if view is ViewType.SERVICES:
            return self.render_services(session, width, rows)
        if view is ViewType.NAMESPACES:
            return self.render_namespaces(session, rows)
        return self.render_detail(session.detail_content)

    # =========================================================================
    # Status frames
    # =========================================================================

    def render_loading(self, message: str, spinner_frame: str = "") -> Text:
        frame = Text("\n  ")
        if spinner_frame:
            frame.append(spinner_frame, style=self.styles.status)
            frame.append(" ")
        frame.append(message)
        frame.append("\n")
        return frame

    def render_error(self, message: str) -> Text:
        frame = Text("\n  ")
        frame.append(message, style=self.styles.error)
        frame.append("\n\n  ")
        frame.append(HELP_ERROR_VIEW, style=self.styles.help)
        return frame

    # =========================================================================
    # Views
    # =========================================================================

    def _title(self, title: str, context_name: str) -> Text:
        line = Text("  ")
        line.append(title, style=self.styles.title)
        line.append(f" (Context: {context_name or PLACEHOLDER_NONE})", style=self.styles.status)
        line.append("\n\n")
        return line

    def _help(self, help_text: str) -> Text:
        return Text(f"\n  {help_text}", style=self.styles.help)

    @staticmethod
    def _name_width(width: int, columns: Sequence[tuple[str, int]]) -> int:
        fixed = len(SELECTION_MARKER) + sum(column_width + 1 for _, column_width in columns)
        return max(MIN_NAME_COLUMN_WIDTH, width - fixed)

    def _header(self, name_width: int, columns: Sequence[tuple[str, int]]) -> Text:
        cells = [fit_cell("NAME", name_width)]
        cells += [fit_cell(header, column_width) for header, column_width in columns]
        return Text(_UNSELECTED_MARKER + " ".join(cells).rstrip() + "\n", style=self.styles.table_header)

    def _status_style(self, status: str) -> str:
        if status == PodPhase.RUNNING.value:
            return self.styles.success
        if status == PodPhase.PENDING.value:
            return self.styles.warning
        if status in (PodPhase.FAILED.value, PodPhase.UNKNOWN.value, "Error"):
            return self.styles.error
        return self.styles.item

    def _pod_row(self, pod: PodInfo, selected: bool, name_width: int) -> Text:
        row_style = self.styles.selected_item if selected else self.styles.item
        widths = dict(POD_COLUMNS)
        line = Text(SELECTION_MARKER if selected else _UNSELECTED_MARKER, style=row_style)
        line.append(fit_cell(pod.name, name_width) + " ", style=row_style)
        line.append(
            fit_cell(pod.status, widths["STATUS"]),
            style=row_style if selected else self._status_style(pod.status),
        )
        rest = [
            fit_cell(f"{pod.ready_count}/{len(pod.containers)}", widths["READY"]),
            fit_cell(str(pod.restart_count), widths["RESTARTS"]),
            fit_cell(pod.age, widths["AGE"]),
            fit_cell(pod.ip, widths["IP"]),
            fit_cell(pod.node, widths["NODE"]),
        ]
        line.append((" " + " ".join(rest)).rstrip() + "\n", style=row_style)
        return line

    def _service_row(self, service: ServiceInfo, selected: bool, name_width: int) -> Text:
        row_style = self.styles.selected_item if selected else self.styles.item
        widths = dict(SERVICE_COLUMNS)
        cells = [
            fit_cell(service.name, name_width),
            fit_cell(service.type, widths["TYPE"]),
            fit_cell(service.cluster_ip, widths["CLUSTER-IP"]),
            fit_cell(service.external_ip, widths["EXTERNAL-IP"]),
            fit_cell(service.ports, widths["PORTS"]),
            fit_cell(service.age, widths["AGE"]),
        ]
        marker = SELECTION_MARKER if selected else _UNSELECTED_MARKER
        return Text(marker + " ".join(cells).rstrip() + "\n", style=row_style)

    def render_pods(self, session: Session, width: int = DEFAULT_FRAME_WIDTH, rows: int = 0) -> Text:
        pods = session.resources.pods
        frame = self._title(f"Pods in namespace: {session.namespace}", session.context_name)
        if not pods:
            frame.append(f"  No pods found in namespace {session.namespace}\n")
        else:
            name_width = self._name_width(width, POD_COLUMNS)
            frame.append_text(self._header(name_width, POD_COLUMNS))
            for index in visible_window(len(pods), session.selected_index, rows):
                frame.append_text(
                    self._pod_row(pods[index], index == session.selected_index, name_width)
                )
        frame.append_text(self._help(HELP_LIST_VIEW))
        return frame

    def render_services(
        self, session: Session, width: int = DEFAULT_FRAME_WIDTH, rows: int = 0
    ) -> Text:
        services = session.resources.services
        frame = self._title(f"Services in namespace: {session.namespace}", session.context_name)
        if not services:
            frame.append(f"  No services found in namespace {session.namespace}\n")
        else:
            name_width = self._name_width(width, SERVICE_COLUMNS)
            frame.append_text(self._header(name_width, SERVICE_COLUMNS))
            for index in visible_window(len(services), session.selected_index, rows):
                frame.append_text(
                    self._service_row(
                        services[index], index == session.selected_index, name_width
                    )
                )
        frame.append_text(self._help(HELP_LIST_VIEW))
        return frame

    def render_namespaces(self, session: Session, rows: int = 0) -> Text:
        frame = self._title("Select Namespace", session.context_name)
        if not session.namespaces:
            frame.append("  No namespaces found\n")
        for index in visible_window(len(session.namespaces), session.selected_index, rows):
            name = session.namespaces[index]
            selected = index == session.selected_index
            marker = SELECTION_MARKER if selected else _UNSELECTED_MARKER
            suffix = " (current)" if name == session.namespace else ""
            frame.append(
                f"{marker}{name}{suffix}\n",
                style=self.styles.selected_item if selected else self.styles.item,
            )
        frame.append_text(self._help(HELP_NAMESPACE_VIEW))
        return frame

    def render_detail(self, detail_content: str) -> Text:
        frame = Text("  ")
        frame.append("Details", style=self.styles.header)
        frame.append("\n\n")
        if detail_content:
            frame.append(detail_content if detail_content.endswith("\n") else detail_content + "\n")
        else:
            frame.append("  No details available\n")
        frame.append_text(self._help(HELP_DETAIL_VIEW))
        return frame
