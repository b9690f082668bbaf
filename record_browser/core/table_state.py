from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from record_browser.config.model import DEFAULT_PAGE_SIZE, DEFAULT_PAGE_WINDOW, RecordColumns
from record_browser.core.filter_engine import apply_filters
from record_browser.core.filter_state import FilterCriteria
from record_browser.core.pagination import (
    PageAction,
    PageResult,
    paginate,
    resolve_page_request,
)
from record_browser.core.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class TableState:
    """
    Everything the table pipeline owns: dataset, filtered subset, criteria,
    pagination position and the terminal error (if the load failed).

    Each mutating method leaves 1 <= current_page <= total_pages.
    """
    store: RecordStore = field(default_factory=RecordStore)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    columns: RecordColumns = field(default_factory=RecordColumns)
    page_size: int = DEFAULT_PAGE_SIZE
    window_width: int = DEFAULT_PAGE_WINDOW
    current_page: int = 1
    error_message: Optional[str] = None

    # -------------------------------------------------------------------------
    # Dataset lifecycle
    # -------------------------------------------------------------------------
    def load_records(self, records: Iterable[Mapping[str, Any]]) -> None:
        """Replace the dataset wholesale and re-run the active filters."""
        self.error_message = None
        self.store.replace(records)
        self._refilter()

    def fail(self, message: str) -> None:
        """Enter the error-display state with an empty dataset."""
        self.store.clear()
        self.current_page = 1
        self.error_message = message

    # -------------------------------------------------------------------------
    # Filtering / navigation
    # -------------------------------------------------------------------------
    def apply_criteria(self, criteria: FilterCriteria) -> None:
        self.criteria = criteria.normalised()
        self._refilter()

    def go_to_page(self, requested: Any) -> PageResult:
        result = self.page(requested)
        self.current_page = result.current_page
        return result

    def navigate(self, action: PageAction | str) -> PageResult:
        requested = resolve_page_request(action, self.current_page, self.page().total_pages)
        return self.go_to_page(requested)

    def page(self, requested: Any = None) -> PageResult:
        return paginate(
            self.store.filtered,
            self.page_size,
            self.current_page if requested is None else requested,
            self.window_width,
        )

    @property
    def total_pages(self) -> int:
        return self.page().total_pages

    def _refilter(self) -> None:
        self.store.set_filtered(apply_filters(self.store.dataset, self.criteria, self.columns))
        self.current_page = 1
        logger.debug(
            "Filters applied",
            extra={
                "total_records": self.store.total_count,
                "filtered_records": self.store.filtered_count,
            },
        )
