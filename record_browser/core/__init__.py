"""
Core domain layer: record store, filter engine, pagination, highlighting
and the table pipeline. Nothing here depends on a presentation technology.
"""

from .debounce import Debouncer, ManualClock, MonotonicClock
from .filter_engine import apply_filters
from .filter_state import FilterCriteria
from .pagination import PageAction, PageResult, paginate
from .pipeline import TableController
from .record_store import RecordStore
from .render_sink import RenderSink
from .table_state import TableState
from .table_view import TableView, build_table_view

__all__ = [
    "Debouncer",
    "ManualClock",
    "MonotonicClock",
    "apply_filters",
    "FilterCriteria",
    "PageAction",
    "PageResult",
    "paginate",
    "TableController",
    "RecordStore",
    "RenderSink",
    "TableState",
    "TableView",
    "build_table_view",
]
