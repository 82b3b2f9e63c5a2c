"""Date parsing and comparison for series points.

Dates are ISO-8601 strings such as ``2017-01-17T12:51:49.637937Z``.
Comparison is always by parsed instant, never lexical. Naive values are
read as UTC so that ``2017-01-17T12:00:00`` and ``2017-01-17T12:00:00Z``
denote the same instant.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from scoreslice.domain.types import Ordering


def parse_instant(value: Any) -> datetime | None:
    """Parse *value* into an aware datetime, or None if it is not a date."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def is_valid_date_string(value: Any) -> bool:
    """True iff *value* parses to a representable instant.

    Examples:
        >>> is_valid_date_string("2017-01-17T12:51:49.637937Z")
        True
        >>> is_valid_date_string("not-a-date")
        False
    """
    return parse_instant(value) is not None


def compare(a: Any, b: Any) -> Ordering:
    """Compare two date strings by instant.

    If either side does not parse the result is ``AFTER``; an invalid
    date is never equal to anything and never raises.
    """
    left = parse_instant(a)
    right = parse_instant(b)
    if left is None or right is None:
        return Ordering.AFTER
    if left < right:
        return Ordering.BEFORE
    if left == right:
        return Ordering.EQUAL
    return Ordering.AFTER
