"""Binary search over dated series, boundary fallback, and extra alignment.

INVARIANT: series are sorted ascending by instant. This is a caller
precondition and is never checked; unsorted input gives unspecified (but
non-raising) results.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from scoreslice.domain.dates import compare
from scoreslice.domain.models import DatedPoint
from scoreslice.domain.types import Ordering

# Kept at -1 so the unchecked extraction slices with it exactly as it always has.
NOT_FOUND: Final = -1


def search_date_in_series(series: Sequence[DatedPoint], target: str) -> int:
    """Return the index of the point dated *target*, or ``NOT_FOUND``.

    O(log N) comparisons. With duplicate instants any one matching index
    may be returned.
    """
    low, high = 0, len(series) - 1
    while low <= high:
        middle = low + (high - low) // 2
        ordering = compare(series[middle].x, target)
        if ordering is Ordering.EQUAL:
            return middle
        if ordering is Ordering.AFTER:
            high = middle - 1
        else:
            low = middle + 1
    return NOT_FOUND


def resolve_boundary(position: int, *, is_start: bool, length: int) -> int:
    """Turn a search result into a usable index.

    A missing start falls back to the first point and a missing end to the
    last, so absent boundaries mean "from the beginning" / "through the end".
    """
    if position != NOT_FOUND:
        return position
    return 0 if is_start else length - 1


def resolve_extra(
    scores: Sequence[DatedPoint],
    extras: Sequence[DatedPoint],
    index: int,
    *,
    positional: bool = True,
) -> DatedPoint | None:
    """Find the extra entry that belongs to ``scores[index]``.

    When both series have the same length the extra at the same position is
    assumed to match and is returned without searching. Otherwise (or with
    ``positional=False``) *extras* is searched for the score's date.
    """
    if positional and len(scores) == len(extras):
        return extras[index]
    position = search_date_in_series(extras, scores[index].x)
    if position == NOT_FOUND:
        return None
    return extras[position]
