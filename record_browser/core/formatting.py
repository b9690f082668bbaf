"""
Cell helpers: substring highlighting and locale-aware amount/date rendering.

Every function here is total: malformed input degrades to a safe default
(0 for amounts, the original text for dates) instead of raising.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Optional, Tuple

import pandas as pd

from record_browser.config.model import LocaleFormat

MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"

# Same prefix grammar as a browser's parseFloat: "12.5abc" -> 12.5
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class TextSegment:
    text: str
    matched: bool = False


def _casefold_with_index(text: str) -> Tuple[str, List[int]]:
    """Casefolded text plus, per folded character, the index of its source character."""
    folded: List[str] = []
    index: List[int] = []
    for i, char in enumerate(text):
        fold = char.casefold()
        folded.append(fold)
        index.extend([i] * len(fold))
    return "".join(folded), index


def highlight_segments(text: Optional[str], term: Optional[str]) -> List[TextSegment]:
    """
    Split text into runs, flagging every case-insensitive occurrence of term.

    The term is matched literally; "a.b" matches "a.b" but not "axb".
    Both sides are casefolded as in the filter engine; a match covering part
    of an expanding character ("ss" in "ß") marks the whole character.
    """
    if text is None:
        return []
    text = str(text)
    needle = term.casefold() if term else ""
    if not needle or not text:
        return [TextSegment(text)] if text else []

    folded, index = _casefold_with_index(text)
    segments: List[TextSegment] = []
    pos = 0
    start = folded.find(needle)
    while start != -1:
        lo = max(index[start], pos)
        hi = index[start + len(needle) - 1] + 1
        if hi > lo:
            if lo > pos:
                segments.append(TextSegment(text[pos:lo]))
            segments.append(TextSegment(text[lo:hi], matched=True))
            pos = hi
        start = folded.find(needle, start + len(needle))
    if pos < len(text):
        segments.append(TextSegment(text[pos:]))
    return segments


def highlight(
    text: Optional[str],
    term: Optional[str],
    marker: Tuple[str, str] = (MARK_OPEN, MARK_CLOSE),
) -> Optional[str]:
    if not term or not text:
        return text
    opening, closing = marker
    return "".join(
        f"{opening}{seg.text}{closing}" if seg.matched else seg.text
        for seg in highlight_segments(text, term)
    )


def parse_amount(value: Any) -> float:
    """Numbers pass through; '1,234,567' -> 1234567.0; anything else -> 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # ints past the float range
            return math.inf if value > 0 else -math.inf
        return 0 if math.isnan(number) else number
    match = _LEADING_NUMBER.match(str(value).replace(",", ""))
    if match is None:
        return 0
    try:
        number = float(match.group(1))
    except (ValueError, OverflowError):
        return 0
    return 0 if math.isnan(number) else number


def format_amount(value: Any, locale: Optional[LocaleFormat] = None) -> str:
    locale = locale or LocaleFormat()
    number = round(float(parse_amount(value)), locale.max_fraction_digits)
    if number == 0:
        number = 0.0  # no "-0"
    if math.isinf(number):
        return f"{'-' if number < 0 else ''}∞{locale.currency_suffix}"

    text = f"{number:,.{locale.max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    text = text.translate(str.maketrans({
        ",": locale.group_separator,
        ".": locale.decimal_separator,
    }))
    return f"{text}{locale.currency_suffix}"


def format_date(value: Any, locale: Optional[LocaleFormat] = None) -> str:
    locale = locale or LocaleFormat()
    if value is None or value == "":
        return ""
    if isinstance(value, (datetime, date)):
        return value.strftime(locale.date_format)

    original = str(value)
    # pandas reads digit-free words such as "now" or "today" as relative dates
    if not any(char.isdigit() for char in original):
        return original
    try:
        parsed = pd.to_datetime(original, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return original
    if parsed is None or pd.isna(parsed):
        return original
    return parsed.strftime(locale.date_format)
