from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any, Optional

from record_browser.config.model import LocaleFormat
from record_browser.core.data_source import DataSource, LoadResult, fetch_dataset
from record_browser.core.debounce import Debouncer
from record_browser.core.filter_state import FilterCriteria
from record_browser.core.pagination import PageAction
from record_browser.core.render_sink import RenderSink
from record_browser.core.table_state import TableState
from record_browser.core.table_view import TableView, build_table_view

if TYPE_CHECKING:
    from record_browser.services.export_service import ExportFile, ExportService

logger = logging.getLogger(__name__)


class TableController:
    """
    Drives a TableState and pushes a fresh TableView to the sink after every
    change: load, filter input, page navigation.

    Filter input goes through the debouncer; everything else recomputes
    synchronously.
    """

    def __init__(
        self,
        state: TableState,
        sink: RenderSink,
        *,
        debouncer: Optional[Debouncer] = None,
        locale: Optional[LocaleFormat] = None,
    ) -> None:
        self.state = state
        self.sink = sink
        self.debouncer = debouncer
        self.locale = locale or LocaleFormat()

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------
    def load(self, source: DataSource) -> LoadResult:
        self.sink.show_loading(True)
        try:
            result = fetch_dataset(source)
        finally:
            self.sink.show_loading(False)
        self.accept(result)
        return result

    def accept(self, result: LoadResult) -> None:
        if result.ok:
            self.state.load_records(result.records)
        else:
            self.state.fail(result.error or "")
        self.refresh()

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------
    def on_filter_input(self, criteria: FilterCriteria) -> None:
        """Debounced entry point for keystrokes; only the last one in a burst applies."""
        if self.debouncer is None:
            self.set_criteria(criteria)
            return
        self.debouncer.schedule(self.set_criteria, criteria)

    def tick(self) -> bool:
        """Give the debouncer a chance to fire; call from the host event loop."""
        return self.debouncer.fire_due() if self.debouncer is not None else False

    def set_criteria(self, criteria: FilterCriteria) -> None:
        self.state.apply_criteria(criteria)
        logger.info(
            "Filter applied",
            extra={
                "criteria": self.state.criteria.to_dict(),
                "filtered_records": self.state.store.filtered_count,
            },
        )
        self.refresh()

    # -------------------------------------------------------------------------
    # Pagination
    # -------------------------------------------------------------------------
    def go_to_page(self, page: Any) -> None:
        self.state.go_to_page(page)
        self.refresh()

    def navigate(self, action: PageAction | str) -> None:
        self.state.navigate(action)
        self.refresh()

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    def view(self) -> TableView:
        return build_table_view(self.state, self.locale)

    def refresh(self) -> None:
        if self.state.error_message is not None:
            self.sink.show_error(self.state.error_message)
            return
        self.sink.render(self.view())

    def export(self, service: ExportService, day: Optional[date] = None) -> ExportFile:
        return service.build_export(self.state.store.filtered, day)
