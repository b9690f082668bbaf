from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from record_browser.ui.config import AppConfig
from record_browser.ui.ids import IDs
from record_browser.ui.layout.build_filter_panel import build_filter_panel
from record_browser.ui.layout.build_navbar import build_navbar
from record_browser.ui.layout.build_table_panel import build_table_panel


def build_layout(ctx: AppConfig) -> dbc.Container:
    cfg = ctx.global_config

    return dbc.Container(
        fluid=True,
        className="rb-root",
        children=[
            build_navbar(cfg),

            # App-level stores
            dcc.Store(id=IDs.Store.FILTER_CRITERIA, storage_type="memory"),
            dcc.Store(id=IDs.Store.CURRENT_PAGE, storage_type="memory", data=1),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(cfg), md=3, className="mt-3"),
                    dbc.Col(build_table_panel(cfg.columns), md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
