from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from record_browser.config.model import LocaleFormat, RecordColumns
from record_browser.core.filter_state import FilterCriteria
from record_browser.core.formatting import (
    TextSegment,
    format_amount,
    format_date,
    highlight_segments,
)
from record_browser.core.pagination import PageResult
from record_browser.core.record_store import Record
from record_browser.core.table_state import TableState

NO_DATA_MESSAGE = "No records match the current filters."


@dataclass(frozen=True)
class CellDescriptor:
    column: str
    segments: Tuple[TextSegment, ...]
    css_class: Optional[str] = None

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.segments)


@dataclass(frozen=True)
class RowDescriptor:
    cells: Tuple[CellDescriptor, ...]


@dataclass(frozen=True)
class NoDataRow:
    message: str = NO_DATA_MESSAGE


@dataclass(frozen=True)
class NavigationControls:
    """Enabled flags for the first/prev/next/last buttons."""
    first: bool
    previous: bool
    next: bool
    last: bool


@dataclass(frozen=True)
class PageButton:
    number: int
    active: bool


@dataclass(frozen=True)
class TableView:
    """Everything a render sink needs to draw one recompute of the table."""
    rows: Tuple[Union[RowDescriptor, NoDataRow], ...]
    current_page: int
    total_pages: int
    controls: NavigationControls
    page_buttons: Tuple[PageButton, ...]
    total_records: int
    filtered_records: int

    @property
    def is_empty(self) -> bool:
        return len(self.rows) == 1 and isinstance(self.rows[0], NoDataRow)


def _cell(text, term: str, column: str, css_class: Optional[str] = None) -> CellDescriptor:
    return CellDescriptor(column=column, segments=tuple(highlight_segments(text, term)), css_class=css_class)


def build_row(
    record: Record,
    criteria: FilterCriteria,
    columns: RecordColumns,
    locale: LocaleFormat,
) -> RowDescriptor:
    """Render one record; the three filtered columns carry highlight runs."""
    def plain(key: str) -> CellDescriptor:
        value = record.get(key)
        return _cell("" if value is None else value, "", key)

    return RowDescriptor(cells=(
        _cell(record.get(columns.group_name), criteria.group_name, columns.group_name),
        _cell(record.get(columns.code), criteria.code, columns.code),
        _cell(record.get(columns.name), criteria.name, columns.name),
        plain(columns.customer_code),
        plain(columns.customer_name),
        plain(columns.address),
        _cell(format_amount(record.get(columns.revenue), locale), "", columns.revenue, "amount-cell"),
        _cell(format_date(record.get(columns.upload_date), locale), "", columns.upload_date),
    ))


def build_rows(
    records: Sequence[Record],
    criteria: FilterCriteria,
    columns: RecordColumns,
    locale: LocaleFormat,
) -> Tuple[Union[RowDescriptor, NoDataRow], ...]:
    if not records:
        return (NoDataRow(),)
    criteria = criteria.normalised()
    return tuple(build_row(r, criteria, columns, locale) for r in records)


def build_controls(page: PageResult) -> NavigationControls:
    return NavigationControls(
        first=not page.is_first,
        previous=not page.is_first,
        next=not page.is_last,
        last=not page.is_last,
    )


def build_page_buttons(page: PageResult) -> List[PageButton]:
    return [PageButton(number=n, active=n == page.current_page) for n in page.page_numbers]


def build_table_view(state: TableState, locale: Optional[LocaleFormat] = None) -> TableView:
    locale = locale or LocaleFormat()
    page = state.page()
    return TableView(
        rows=build_rows(page.records, state.criteria, state.columns, locale),
        current_page=page.current_page,
        total_pages=page.total_pages,
        controls=build_controls(page),
        page_buttons=tuple(build_page_buttons(page)),
        total_records=state.store.total_count,
        filtered_records=state.store.filtered_count,
    )
