from __future__ import annotations

from datetime import date

from record_browser.config.model import RecordColumns
from record_browser.core.data_source import LOAD_ERROR_MESSAGE, DataSource
from record_browser.core.debounce import Debouncer, ManualClock
from record_browser.core.exceptions import DataSourceError
from record_browser.core.filter_state import FilterCriteria
from record_browser.core.pagination import PageAction
from record_browser.core.pipeline import TableController
from record_browser.core.render_sink import RenderSink
from record_browser.core.table_state import TableState
from record_browser.core.table_view import NoDataRow
from record_browser.services.export_service import ExportService

COLS = RecordColumns()


class RecordingSink(RenderSink):
    def __init__(self):
        self.views = []
        self.errors = []
        self.loading = []

    def render(self, view):
        self.views.append(view)

    def show_error(self, message):
        self.errors.append(message)

    def show_loading(self, loading):
        self.loading.append(loading)

    @property
    def last(self):
        return self.views[-1]


class StaticSource(DataSource):
    def __init__(self, records):
        self.records = records

    def fetch_records(self):
        return list(self.records)


class BrokenSource(DataSource):
    def fetch_records(self):
        raise DataSourceError("HTTP 500")


def _make_records(n: int) -> list[dict]:
    return [
        {COLS.group_name: f"Group {i % 3}", COLS.code: f"C{i:03d}", COLS.name: f"Name {i}"}
        for i in range(1, n + 1)
    ]


def _controller(records, page_size: int = 10, debouncer=None):
    sink = RecordingSink()
    controller = TableController(TableState(page_size=page_size), sink, debouncer=debouncer)
    controller.load(StaticSource(records))
    return controller, sink


def test_twelve_records_first_page():
    _, sink = _controller(_make_records(12))
    view = sink.last

    assert len(view.rows) == 10
    assert view.current_page == 1
    assert view.total_pages == 2
    assert not view.controls.previous
    assert view.controls.next
    assert sink.loading == [True, False]


def test_zero_match_criterion_renders_no_data():
    controller, sink = _controller(_make_records(12))

    controller.set_criteria(FilterCriteria(name="abc"))
    view = sink.last

    assert controller.state.store.filtered == ()
    assert view.total_pages == 1
    assert view.current_page == 1
    assert view.rows == (NoDataRow(),)


def test_filter_change_on_page_three_resets_to_first_page():
    records = _make_records(50)
    controller, sink = _controller(records)
    controller.go_to_page(3)
    assert sink.last.current_page == 3

    # "Name 1" matches Name 1, Name 10..19 -> 11 records, 2 pages
    controller.set_criteria(FilterCriteria(name="name 1"))

    assert sink.last.current_page == 1
    assert sink.last.total_pages == 2


def test_filter_reset_applies_even_when_page_would_still_be_valid():
    controller, sink = _controller(_make_records(50))
    controller.go_to_page(2)

    controller.set_criteria(FilterCriteria(group_name="group"))

    assert sink.last.total_pages == 5
    assert sink.last.current_page == 1


def test_navigation_pushes_a_view_each_time():
    controller, sink = _controller(_make_records(25))
    n_before = len(sink.views)

    controller.navigate(PageAction.LAST)
    controller.navigate(PageAction.NEXT)
    controller.navigate(PageAction.PREVIOUS)

    assert [v.current_page for v in sink.views[n_before:]] == [3, 3, 2]


def test_debounced_filter_input_applies_only_last_value():
    clock = ManualClock()
    controller, sink = _controller(_make_records(30), debouncer=Debouncer(0.5, clock))
    n_before = len(sink.views)

    controller.on_filter_input(FilterCriteria(code="c0"))
    clock.advance(0.25)
    controller.on_filter_input(FilterCriteria(code="c00"))
    clock.advance(0.25)
    assert controller.tick() is False
    assert len(sink.views) == n_before

    clock.advance(0.25)
    assert controller.tick() is True
    assert len(sink.views) == n_before + 1
    assert controller.state.criteria == FilterCriteria(code="c00")
    assert sink.last.filtered_records == 9


def test_filter_input_without_debouncer_applies_immediately():
    controller, sink = _controller(_make_records(5))

    controller.on_filter_input(FilterCriteria(code="C001"))

    assert sink.last.filtered_records == 1
    assert controller.tick() is False


def test_fetch_failure_shows_error_and_leaves_dataset_empty():
    sink = RecordingSink()
    controller = TableController(TableState(), sink)

    result = controller.load(BrokenSource())

    assert not result.ok
    assert sink.errors == [LOAD_ERROR_MESSAGE]
    assert sink.views == []
    assert controller.state.store.total_count == 0
    assert sink.loading == [True, False]


def test_export_covers_whole_filtered_set_not_just_page():
    controller, _ = _controller(_make_records(25))
    controller.set_criteria(FilterCriteria(group_name="group 1"))

    export = controller.export(ExportService(), day=date(2024, 3, 5))

    assert export.filename == "filtered_data_2024-03-05.json"
    assert export.content.count(b'"C0') == controller.state.store.filtered_count
