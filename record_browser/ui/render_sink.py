from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from dash import html

from record_browser.core.formatting import TextSegment
from record_browser.core.render_sink import RenderSink
from record_browser.core.table_view import CellDescriptor, NoDataRow, TableView
from record_browser.ui.ids import page_button_id


def _segments_to_children(segments: tuple[TextSegment, ...]) -> List[Any]:
    return [html.Mark(s.text) if s.matched else s.text for s in segments]


def _cell_to_td(cell: CellDescriptor) -> html.Td:
    if cell.css_class:
        return html.Td(_segments_to_children(cell.segments), className=cell.css_class)
    return html.Td(_segments_to_children(cell.segments))


def _message_row(message: str, n_columns: int, icon: str, class_name: str) -> html.Tr:
    return html.Tr(
        html.Td(
            [html.Div(icon, className="no-data-icon"), message],
            colSpan=n_columns,
            className=class_name,
        )
    )


@dataclass
class DashRenderSink(RenderSink):
    """
    Collects Dash components for one callback invocation.

    Attributes mirror the callback outputs; defaults describe an empty table.
    """
    n_columns: int = 8
    table_rows: List[Any] = field(default_factory=list)
    page_buttons: List[Any] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 1
    first_disabled: bool = True
    prev_disabled: bool = True
    next_disabled: bool = True
    last_disabled: bool = True
    total_records: int = 0
    filtered_records: int = 0

    def render(self, view: TableView) -> None:
        rows: List[Any] = []
        for row in view.rows:
            if isinstance(row, NoDataRow):
                rows.append(_message_row(row.message, self.n_columns, "📭", "no-data"))
            else:
                rows.append(html.Tr([_cell_to_td(c) for c in row.cells]))
        self.table_rows = rows

        self.page_buttons = [
            html.Button(
                str(b.number),
                id=page_button_id(b.number),
                n_clicks=0,
                className="pagination-btn active" if b.active else "pagination-btn",
            )
            for b in view.page_buttons
        ]
        self.current_page = view.current_page
        self.total_pages = view.total_pages
        self.first_disabled = not view.controls.first
        self.prev_disabled = not view.controls.previous
        self.next_disabled = not view.controls.next
        self.last_disabled = not view.controls.last
        self.total_records = view.total_records
        self.filtered_records = view.filtered_records

    def show_error(self, message: str) -> None:
        self.table_rows = [_message_row(message, self.n_columns, "❌", "no-data load-error")]
        self.page_buttons = []
        self.current_page = 1
        self.total_pages = 1
        self.first_disabled = self.prev_disabled = True
        self.next_disabled = self.last_disabled = True
        self.total_records = 0
        self.filtered_records = 0

    def outputs(self) -> tuple:
        """Values in the order register_render_callbacks declares its outputs."""
        return (
            self.table_rows,
            self.page_buttons,
            self.current_page,
            self.total_pages,
            self.first_disabled,
            self.prev_disabled,
            self.next_disabled,
            self.last_disabled,
            self.total_records,
            self.filtered_records,
            self.filtered_records,
        )
