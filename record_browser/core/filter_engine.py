from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

from record_browser.config.model import RecordColumns
from record_browser.core.filter_state import FilterCriteria
from record_browser.core.record_store import Record


def _field_matches(value: Optional[Any], term: str) -> bool:
    if not term:
        return True
    # A missing field can only satisfy an empty criterion
    if value is None:
        return False
    return term in str(value).casefold()


def record_matches(record: Record, criteria: FilterCriteria, columns: RecordColumns) -> bool:
    """True when the record satisfies all three (already normalised) criteria."""
    return (
        _field_matches(record.get(columns.group_name), criteria.group_name)
        and _field_matches(record.get(columns.name), criteria.name)
        and _field_matches(record.get(columns.code), criteria.code)
    )


def apply_filters(
    records: Iterable[Record],
    criteria: FilterCriteria,
    columns: Optional[RecordColumns] = None,
) -> Tuple[Record, ...]:
    """
    Return the records matching every criterion, in their original order.

    Criteria are normalised here, so raw user input can be passed directly.
    Empty criteria return every record.
    """
    columns = columns or RecordColumns()
    criteria = criteria.normalised()
    if criteria.is_empty:
        return tuple(records)
    return tuple(r for r in records if record_matches(r, criteria, columns))
