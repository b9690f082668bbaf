from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from record_browser.config.model import GlobalConfig
from record_browser.ui.ids import IDs


def _text_filter(label: str, input_id: str, placeholder: str, debounce: float) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label", htmlFor=input_id),
            dcc.Input(
                id=input_id,
                type="text",
                value="",
                placeholder=placeholder,
                debounce=debounce,
                className="form-control mb-3",
            ),
        ]
    )


def build_filter_panel(global_config: GlobalConfig) -> dbc.Card:
    # dcc.Input takes the quiet period in seconds; 0 means "send on every change"
    debounce = global_config.debounce_seconds or False

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    _text_filter("Group name", IDs.Control.FILTER_GROUP_NAME, "All groups", debounce),
                    _text_filter("Name", IDs.Control.FILTER_NAME, "All names", debounce),
                    _text_filter("Code", IDs.Control.FILTER_CODE, "All codes", debounce),
                    html.P(
                        [
                            html.Span("0", id=IDs.Control.SEARCH_RESULTS, className="fw-semibold"),
                            " matching records",
                        ],
                        className="text-muted mb-3",
                    ),
                    html.Hr(),
                    dbc.Button(
                        "Export filtered data",
                        id=IDs.Control.EXPORT_BTN,
                        color="success",
                        className="w-100",
                    ),
                    dcc.Download(id=IDs.Control.DOWNLOAD_EXPORT),
                ]
            ),
        ],
        className="rb-sidebar",
    )
