"""Date-range extraction over the entities of one category.

Two modes:

- :func:`extract_basic` is the unchecked variant. Both boundary dates must
  be present in every matching score series; otherwise the not-found
  sentinel is used as a slice endpoint and the slice comes out empty or
  wrong. No validation, no fallback.
- :func:`extract_enriched` validates both dates, falls back to the series
  ends when a boundary is absent, and pairs every score with its aligned
  extra.

An extra's ``y`` becomes the record's ``extra`` as a shallow copy when it is
a mapping, and as an index-keyed mapping (``{"0": ..., "1": ...}``) when it
is a list or tuple. Strings, numbers and missing extras give ``{}``.

Time: O(M * log S) for basic, O(M * S * log E) worst case for enriched.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from scoreslice.domain.dates import is_valid_date_string
from scoreslice.domain.models import (
    Dataset,
    DatedPoint,
    Entity,
    ResultRecord,
    filter_by_slug,
)
from scoreslice.domain.search import (
    NOT_FOUND,
    resolve_boundary,
    resolve_extra,
    search_date_in_series,
)
from scoreslice.domain.types import OVERALL_SLUG, SeriesKey

MissHandler = Callable[[Entity, str], None]
EntityHandler = Callable[[Entity, list[ResultRecord]], None]


def extract_basic(
    dataset: Dataset,
    start: str,
    end: str,
    *,
    slug: str = OVERALL_SLUG,
    score_key: str = SeriesKey.SCORE,
    on_miss: MissHandler | None = None,
) -> list[DatedPoint]:
    """Score points between *start* and *end* (inclusive), unchecked.

    *on_miss* is called with ``(entity, "start" | "end")`` for every boundary
    that is absent from an entity's score series. It only observes; the
    slice is taken with the sentinel regardless.
    """
    result: list[DatedPoint] = []
    for entity in filter_by_slug(dataset, slug):
        scores = entity.series_for(score_key)
        start_position = search_date_in_series(scores, start)
        end_position = search_date_in_series(scores, end)
        if on_miss is not None:
            if start_position == NOT_FOUND:
                on_miss(entity, "start")
            if end_position == NOT_FOUND:
                on_miss(entity, "end")
        result.extend(scores[start_position : end_position + 1])
    return result


def invalid_boundary(start: str, end: str) -> str | None:
    """``"start"`` or ``"end"`` for the first boundary that is not a date."""
    if not is_valid_date_string(start):
        return "start"
    if not is_valid_date_string(end):
        return "end"
    return None


def extract_enriched(
    dataset: Dataset,
    start: str,
    end: str,
    *,
    slug: str = OVERALL_SLUG,
    score_key: str = SeriesKey.SCORE,
    extra_key: str = SeriesKey.EXTRA,
    positional: bool = True,
    on_entity: EntityHandler | None = None,
) -> list[ResultRecord] | None:
    """Score records between *start* and *end* with their aligned extras.

    Returns None when either date is not a valid date string, which is
    distinct from an empty list (valid dates, nothing in range).
    *on_entity* receives each matching entity with the records it produced.
    """
    if invalid_boundary(start, end) is not None:
        return None

    records: list[ResultRecord] = []
    for entity in filter_by_slug(dataset, slug):
        batch = extract_entity(
            entity,
            start,
            end,
            score_key=score_key,
            extra_key=extra_key,
            positional=positional,
        )
        if on_entity is not None:
            on_entity(entity, batch)
        records.extend(batch)
    return records


def extract_entity(
    entity: Entity,
    start: str,
    end: str,
    *,
    score_key: str = SeriesKey.SCORE,
    extra_key: str = SeriesKey.EXTRA,
    positional: bool = True,
) -> list[ResultRecord]:
    """Enriched records for a single entity; empty if it has no scores."""
    scores = entity.series_for(score_key)
    if not scores:
        return []

    start_position, end_position = resolve_range(scores, start, end)
    extras = entity.series_for(extra_key)

    records: list[ResultRecord] = []
    for index in range(start_position, end_position + 1):
        score = scores[index]
        extra = resolve_extra(scores, extras, index, positional=positional)
        records.append(
            ResultRecord(
                title=entity.title,
                date=score.x,
                score=score.y,
                extra=_extra_payload(extra),
            )
        )
    return records


def resolve_range(scores: list[DatedPoint], start: str, end: str) -> tuple[int, int]:
    """Inclusive index range for *start*..*end* with boundary fallback."""
    length = len(scores)
    return (
        resolve_boundary(search_date_in_series(scores, start), is_start=True, length=length),
        resolve_boundary(search_date_in_series(scores, end), is_start=False, length=length),
    )


def _extra_payload(extra: DatedPoint | None) -> dict[str, Any]:
    if extra is None:
        return {}
    if isinstance(extra.y, Mapping):
        return dict(extra.y)
    if isinstance(extra.y, (list, tuple)):
        return {str(i): value for i, value in enumerate(extra.y)}
    return {}
