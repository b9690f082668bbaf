from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from record_browser.core.filter_state import FilterCriteria
from record_browser.ui.ids import IDs

if TYPE_CHECKING:
    from record_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def build_criteria(group_name: str | None, name: str | None, code: str | None) -> dict:
    """Raw input values -> store payload (trimmed, case-folded)."""
    criteria = FilterCriteria(
        group_name=group_name or "",
        name=name or "",
        code=code or "",
    ).normalised()
    return criteria.to_dict()


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Inputs -> criteria store; any criteria change restarts at page 1
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_CRITERIA, "data"),
        Output(IDs.Store.CURRENT_PAGE, "data", allow_duplicate=True),
        Input(IDs.Control.FILTER_GROUP_NAME, "value"),
        Input(IDs.Control.FILTER_NAME, "value"),
        Input(IDs.Control.FILTER_CODE, "value"),
        prevent_initial_call="initial_duplicate",
    )
    def update_filter_criteria(group_name, name, code):
        data = build_criteria(group_name, name, code)
        logger.info("filter_input", extra={"criteria": data})
        return data, 1
