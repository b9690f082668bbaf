from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from record_browser.core.data_source import LOAD_ERROR_MESSAGE
from record_browser.core.pipeline import TableController
from record_browser.ui.callbacks.callbacks_utils import restore_table_state
from record_browser.ui.ids import IDs
from record_browser.ui.render_sink import DashRenderSink

if TYPE_CHECKING:
    from record_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_table(ctx: AppConfig, criteria_data: Any, page_data: Any) -> DashRenderSink:
    """Stores -> headless pipeline -> Dash components."""
    cfg = ctx.global_config
    sink = DashRenderSink(n_columns=len(cfg.columns.display_order()))
    try:
        state = restore_table_state(ctx, criteria_data, page_data)
        TableController(state, sink, locale=cfg.locale).refresh()
    except Exception:
        logger.exception(
            "Error in render_table",
            extra={"filter_criteria": criteria_data, "page": page_data},
        )
        sink.show_error(LOAD_ERROR_MESSAGE)
    return sink


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Criteria + page -> table rows, pagination controls, stats
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.PAGE_NUMBERS, "children"),
        Output(IDs.Control.CURRENT_PAGE, "children"),
        Output(IDs.Control.TOTAL_PAGES, "children"),
        Output(IDs.Control.FIRST_PAGE, "disabled"),
        Output(IDs.Control.PREV_PAGE, "disabled"),
        Output(IDs.Control.NEXT_PAGE, "disabled"),
        Output(IDs.Control.LAST_PAGE, "disabled"),
        Output(IDs.Control.TOTAL_RECORDS, "children"),
        Output(IDs.Control.FILTERED_RECORDS, "children"),
        Output(IDs.Control.SEARCH_RESULTS, "children"),
        Input(IDs.Store.FILTER_CRITERIA, "data"),
        Input(IDs.Store.CURRENT_PAGE, "data"),
    )
    def update_table(criteria_data: dict[str, Any] | None, page_data: Any):
        return render_table(ctx, criteria_data, page_data).outputs()
