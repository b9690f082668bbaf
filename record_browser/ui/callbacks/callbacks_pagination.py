from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import ALL, Input, Output, State, exceptions

from record_browser.core.pagination import PageAction
from record_browser.ui.callbacks.callbacks_utils import restore_table_state
from record_browser.ui.ids import IDs

if TYPE_CHECKING:
    from record_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

NAV_ACTIONS = {
    IDs.Control.FIRST_PAGE: PageAction.FIRST,
    IDs.Control.PREV_PAGE: PageAction.PREVIOUS,
    IDs.Control.NEXT_PAGE: PageAction.NEXT,
    IDs.Control.LAST_PAGE: PageAction.LAST,
}


def resolve_requested_page(
    ctx: AppConfig,
    triggered_id: Any,
    criteria_data: Any,
    page_data: Any,
) -> int:
    """
    Page to store after a click on a nav button or a page-number button.

    Pure helper so the navigation rules can be tested without a Dash request.
    """
    state = restore_table_state(ctx, criteria_data, page_data)

    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.PAGE_BUTTON:
        return state.go_to_page(triggered_id.get("index")).current_page

    action = NAV_ACTIONS.get(triggered_id)
    if action is None:
        raise exceptions.PreventUpdate
    return state.navigate(action).current_page


def register_pagination_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Store.CURRENT_PAGE, "data", allow_duplicate=True),
        Input(IDs.Control.FIRST_PAGE, "n_clicks"),
        Input(IDs.Control.PREV_PAGE, "n_clicks"),
        Input(IDs.Control.NEXT_PAGE, "n_clicks"),
        Input(IDs.Control.LAST_PAGE, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_BUTTON, "index": ALL}, "n_clicks"),
        State(IDs.Store.FILTER_CRITERIA, "data"),
        State(IDs.Store.CURRENT_PAGE, "data"),
        prevent_initial_call=True,
    )
    def change_page(_first, _prev, _next, _last, _numbers, criteria_data, page_data):
        # Page-number buttons are recreated on every render, which fires this
        # callback with n_clicks == 0; only real clicks count.
        triggered = dash.callback_context.triggered
        if not triggered or not triggered[0].get("value"):
            raise exceptions.PreventUpdate

        page = resolve_requested_page(ctx, dash.ctx.triggered_id, criteria_data, page_data)
        if page == page_data:
            raise exceptions.PreventUpdate
        return page
