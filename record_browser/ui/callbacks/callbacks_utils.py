from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from record_browser.core.filter_state import FilterCriteria
from record_browser.core.pagination import coerce_page
from record_browser.core.table_state import TableState

if TYPE_CHECKING:
    from record_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def try_parse_criteria(data: object) -> FilterCriteria:
    if not isinstance(data, dict) or not data:
        return FilterCriteria()
    try:
        return FilterCriteria.from_dict(data)
    except Exception:
        logger.exception("Invalid filter-criteria: %r", data)
        return FilterCriteria()


def restore_table_state(ctx: AppConfig, criteria_data: Any, page_data: Any) -> TableState:
    """
    Rebuild the table pipeline for one callback from the browser stores.

    Dash callbacks are stateless, so the dataset comes from the cached
    RecordService and the position from the stores; the result is the
    same TableState the headless controller would hold at this point.
    """
    state = ctx.new_table_state()
    result = ctx.record_service.result
    if not result.ok:
        state.fail(result.error or "")
        return state

    state.load_records(result.records)
    state.apply_criteria(try_parse_criteria(criteria_data))
    state.go_to_page(coerce_page(page_data))
    return state
