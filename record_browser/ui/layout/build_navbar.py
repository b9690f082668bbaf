from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from record_browser.config.model import GlobalConfig
from record_browser.ui.ids import IDs


def _stat(label: str, value_id: str) -> html.Div:
    return html.Div(
        [
            html.Div(label, className="navbar-stat-label"),
            dbc.Badge("0", id=value_id, color="primary", className="navbar-stat-value"),
        ],
        className="navbar-stat me-3",
    )


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: record counts
                html.Div(
                    [
                        _stat("Total records", IDs.Control.TOTAL_RECORDS),
                        _stat("Filtered", IDs.Control.FILTERED_RECORDS),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm rb-navbar",
    )
