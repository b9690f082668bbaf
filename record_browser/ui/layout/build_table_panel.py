from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from record_browser.config.model import RecordColumns
from record_browser.ui.ids import IDs
from record_browser.ui.layout.build_pagination_bar import build_pagination_bar


def build_table_panel(columns: RecordColumns) -> dbc.Card:
    header = html.Thead(html.Tr([html.Th(key) for key in columns.display_order()]))

    return dbc.Card(
        [
            dbc.CardBody(
                [
                    dcc.Loading(
                        id=IDs.Control.TABLE_LOADING,
                        type="circle",
                        children=html.Div(
                            html.Table(
                                [header, html.Tbody(id=IDs.Control.TABLE_BODY)],
                                className="table table-striped table-hover rb-table",
                            ),
                            className="table-responsive",
                        ),
                    ),
                    build_pagination_bar(),
                ]
            ),
        ],
        className="rb-table-card",
    )
