"""Series keys, category tags, and comparison outcomes."""

from __future__ import annotations

from enum import StrEnum

OVERALL_SLUG = "aggregation-overall"


class SeriesKey(StrEnum):
    """Distinguished keys of the named series inside an entity's details."""

    SCORE = "score"
    EXTRA = "extra"


class Ordering(StrEnum):
    """Result of comparing two instants."""

    BEFORE = "before"
    EQUAL = "equal"
    AFTER = "after"
