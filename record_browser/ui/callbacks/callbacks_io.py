from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions

from record_browser.ui.callbacks.callbacks_utils import restore_table_state
from record_browser.ui.ids import IDs

if TYPE_CHECKING:
    from record_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Export Logic: whole filtered set, not just the visible page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_EXPORT, "data"),
        Input(IDs.Control.EXPORT_BTN, "n_clicks"),
        State(IDs.Store.FILTER_CRITERIA, "data"),
        prevent_initial_call=True,
    )
    def download_filtered_data(n_clicks, criteria_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        state = restore_table_state(ctx, criteria_data, 1)
        if state.error_message is not None:
            raise exceptions.PreventUpdate

        export = ctx.export_service.build_export(state.store.filtered)
        return dcc.send_bytes(export.content, export.filename, type=export.media_type)
