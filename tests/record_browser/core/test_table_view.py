from __future__ import annotations

from record_browser.config.model import RecordColumns
from record_browser.core.filter_state import FilterCriteria
from record_browser.core.table_state import TableState
from record_browser.core.table_view import NoDataRow, RowDescriptor, build_table_view

COLS = RecordColumns()


def _make_record(i: int) -> dict:
    return {
        COLS.group_name: "Nhóm Bán Lẻ",
        COLS.code: f"SP{i:03d}",
        COLS.name: f"Nguyễn Văn {i}",
        COLS.customer_code: f"KH{i:04d}",
        COLS.customer_name: f"Cửa hàng {i}",
        COLS.address: "1 Lê Lợi",
        COLS.revenue: "1,234,567",
        COLS.upload_date: "2024-03-05",
    }


def _state(n: int, page_size: int = 10) -> TableState:
    state = TableState(page_size=page_size)
    state.load_records([_make_record(i) for i in range(1, n + 1)])
    return state


def test_row_cells_follow_display_order_and_formatting():
    view = build_table_view(_state(1))
    row = view.rows[0]

    assert isinstance(row, RowDescriptor)
    assert [c.column for c in row.cells] == COLS.display_order()
    texts = [c.text for c in row.cells]
    assert texts[6] == "1.234.567 đ"
    assert texts[7] == "05/03/2024"
    assert row.cells[6].css_class == "amount-cell"


def test_filtered_columns_carry_highlight_runs():
    state = _state(3)
    state.apply_criteria(FilterCriteria(group_name="BÁN", name="văn", code="p00"))

    row = build_table_view(state).rows[0]
    group, code, name = row.cells[0], row.cells[1], row.cells[2]

    assert [s.text for s in group.segments if s.matched] == ["Bán"]
    assert [s.text for s in code.segments if s.matched] == ["P00"]
    assert [s.text for s in name.segments if s.matched] == ["Văn"]
    # other columns are never highlighted
    assert not any(s.matched for c in row.cells[3:] for s in c.segments)


def test_missing_plain_field_renders_empty_cell():
    state = TableState()
    state.load_records([{COLS.group_name: "G", COLS.code: "C", COLS.name: "N"}])

    row = build_table_view(state).rows[0]

    assert row.cells[3].text == ""
    assert row.cells[6].text == "0 đ"
    assert row.cells[7].text == ""


def test_empty_page_yields_single_no_data_row():
    state = _state(5)
    state.apply_criteria(FilterCriteria(name="zzz"))

    view = build_table_view(state)

    assert view.rows == (NoDataRow(),)
    assert view.is_empty
    assert view.filtered_records == 0
    assert view.total_records == 5


def test_controls_and_page_buttons():
    state = _state(60)
    state.go_to_page(4)

    view = build_table_view(state)

    assert view.current_page == 4
    assert view.total_pages == 6
    assert [b.number for b in view.page_buttons] == [2, 3, 4, 5, 6]
    assert [b.number for b in view.page_buttons if b.active] == [4]
    assert view.controls.first and view.controls.previous
    assert view.controls.next and view.controls.last


def test_every_kept_row_shows_its_match():
    state = TableState()
    state.load_records([
        {COLS.group_name: "G", COLS.code: "C1", COLS.name: "Straße"},
        {COLS.group_name: "G", COLS.code: "C2", COLS.name: "Lê Lợi"},
    ])
    state.apply_criteria(FilterCriteria(name="SS"))

    rows = build_table_view(state).rows

    assert len(rows) == 1
    assert [s.text for s in rows[0].cells[2].segments if s.matched] == ["ß"]
