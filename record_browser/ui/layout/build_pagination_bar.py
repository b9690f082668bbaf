from __future__ import annotations

from dash import html

from record_browser.ui.ids import IDs


def build_pagination_bar() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    html.Button("«", id=IDs.Control.FIRST_PAGE, n_clicks=0, className="pagination-btn", title="First page"),
                    html.Button("‹", id=IDs.Control.PREV_PAGE, n_clicks=0, className="pagination-btn", title="Previous page"),
                    html.Div(id=IDs.Control.PAGE_NUMBERS, className="page-numbers"),
                    html.Button("›", id=IDs.Control.NEXT_PAGE, n_clicks=0, className="pagination-btn", title="Next page"),
                    html.Button("»", id=IDs.Control.LAST_PAGE, n_clicks=0, className="pagination-btn", title="Last page"),
                ],
                className="d-flex align-items-center gap-1",
            ),
            html.Div(
                [
                    "Page ",
                    html.Span("1", id=IDs.Control.CURRENT_PAGE),
                    " / ",
                    html.Span("1", id=IDs.Control.TOTAL_PAGES),
                ],
                className="text-muted",
            ),
        ],
        className="d-flex justify-content-between align-items-center mt-3 rb-pagination",
    )
