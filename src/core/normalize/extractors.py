"""Field extractors: pull scalars out of optional, nested provider JSON.

None of these raise. Absent or malformed input yields ``None`` or the
documented sentinel string.
"""

import math
import re
from datetime import datetime
from typing import Any, NamedTuple

from core.models.normalized import DATE_UNAVAILABLE, DURATION_UNAVAILABLE

_NUMBER = re.compile(r"\d[\d,]*(?:\.\d+)?")
_LEADING_RATING = re.compile(r"^\s*(\d+(?:\.\d+)?)")
_REVIEW_COUNT = re.compile(r"\((\d[\d,]*)\)")


class Rating(NamedTuple):
    rating: float | None
    review_count: int | None


def dig(node: Any, *path: str | int, default: Any = None) -> Any:
    """Follow dict keys and list indexes, returning ``default`` at the first gap."""
    current = node
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return default
            current = current[step]
        else:
            if not isinstance(current, dict):
                return default
            current = current.get(step)
        if current is None:
            return default
    return current


def text(value: Any) -> str | None:
    """Non-blank string form of a scalar, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


def first_text(*values: Any, default: Any = None) -> Any:
    for value in values:
        found = text(value)
        if found is not None:
            return found
    return default


def parse_price(raw: Any) -> float | None:
    """Numeric value or numeric-looking string to float; anything else to None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    return value if math.isfinite(value) else None


def parse_display_price(raw: Any) -> float | None:
    """First number inside a display string such as ``"$1,234 total"``."""
    if not isinstance(raw, str):
        return parse_price(raw)
    match = _NUMBER.search(raw)
    if not match:
        return None
    return parse_price(match.group(0).replace(",", ""))


def to_int(raw: Any) -> int | None:
    if isinstance(raw, str):
        raw = raw.replace(",", "")
    value = parse_price(raw)
    return int(value) if value is not None else None


def parse_rating_text(value: Any) -> Rating:
    """Split ``"4.8 (1,203)"`` into rating 4.8 and review count 1203."""
    if not isinstance(value, str):
        return Rating(None, None)
    rating_match = _LEADING_RATING.match(value)
    count_match = _REVIEW_COUNT.search(value)
    return Rating(
        float(rating_match.group(1)) if rating_match else None,
        int(count_match.group(1).replace(",", "")) if count_match else None,
    )


def format_duration(total_seconds: Any) -> str:
    """Render seconds as ``"3h 45m"``; the hour part is omitted when zero."""
    if total_seconds is None or isinstance(total_seconds, bool):
        return DURATION_UNAVAILABLE
    try:
        seconds = float(total_seconds)
    except (TypeError, ValueError):
        return DURATION_UNAVAILABLE
    if not math.isfinite(seconds) or seconds < 0:
        return DURATION_UNAVAILABLE
    hours, remainder = divmod(int(seconds), 3600)
    minutes = remainder // 60
    if hours:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_date_for_display(value: Any) -> str:
    """ISO date/time to ``M/D/YYYY``; unparseable input is echoed back."""
    if value is None or value == "":
        return DATE_UNAVAILABLE
    if not isinstance(value, str):
        return str(value)
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return value
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def extract_booking_link(item: Any, base_origin: str) -> str | None:
    """First booking URL among ``bookingOptions.edges``; paths are qualified against ``base_origin``."""
    edges = dig(item, "bookingOptions", "edges", default=[])
    if not isinstance(edges, list):
        return None
    for edge in edges:
        url = dig(edge, "node", "bookingUrl")
        if not isinstance(url, str) or not url.strip():
            continue
        if url.startswith("/"):
            return f"{base_origin.rstrip('/')}{url}"
        return url
    return None
