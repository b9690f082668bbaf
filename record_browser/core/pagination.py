from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Sequence, Tuple

DEFAULT_WINDOW_WIDTH = 5


class PageAction(str, Enum):
    FIRST = "first"
    PREVIOUS = "previous"
    NEXT = "next"
    LAST = "last"


@dataclass(frozen=True)
class PageResult:
    """
    One page of the filtered set plus the page-number window around it.

    window_start/window_end are inclusive page numbers.
    """
    records: Tuple[Any, ...]
    current_page: int
    total_pages: int
    window_start: int
    window_end: int

    @property
    def page_numbers(self) -> List[int]:
        return list(range(self.window_start, self.window_end + 1))

    @property
    def is_first(self) -> bool:
        return self.current_page == 1

    @property
    def is_last(self) -> bool:
        return self.current_page == self.total_pages


def coerce_page(value: Any) -> int:
    """Best-effort int for page numbers coming from UI stores; junk becomes 1."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 1
    except OverflowError:
        # infinities land on the nearest edge once clamped
        return sys.maxsize if value > 0 else 1


def total_pages(count: int, page_size: int) -> int:
    page_size = max(1, int(page_size))
    return max(1, math.ceil(count / page_size))


def clamp_page(requested: Any, total: int) -> int:
    return min(max(coerce_page(requested), 1), max(1, total))


def page_window(current: int, total: int, width: int = DEFAULT_WINDOW_WIDTH) -> Tuple[int, int]:
    """
    Inclusive range of page numbers to show as buttons.

    Slides with the current page and is pinned to [1, total]; its length
    is min(total, width).
    """
    width = max(1, int(width))
    start = max(1, current - width // 2)
    end = start + width - 1
    if end > total:
        end = total
        start = max(1, end - width + 1)
    return start, end


def paginate(
    records: Sequence[Any],
    page_size: int,
    requested_page: Any,
    window_width: int = DEFAULT_WINDOW_WIDTH,
) -> PageResult:
    page_size = max(1, int(page_size))
    total = total_pages(len(records), page_size)
    current = clamp_page(requested_page, total)
    offset = (current - 1) * page_size
    start, end = page_window(current, total, window_width)
    return PageResult(
        records=tuple(records[offset:offset + page_size]),
        current_page=current,
        total_pages=total,
        window_start=start,
        window_end=end,
    )


def resolve_page_request(action: PageAction | str, current_page: int, total: int) -> int:
    """Translate a navigation button into the page to request next."""
    action = PageAction(action)
    if action is PageAction.FIRST:
        return 1
    if action is PageAction.LAST:
        return total
    if action is PageAction.PREVIOUS:
        return current_page - 1 if current_page > 1 else current_page
    return current_page + 1 if current_page < total else current_page
