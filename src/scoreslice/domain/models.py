"""Pydantic models for the tagged-series dataset and extraction records.

The dataset is read-only input. Models are frozen so extraction can share
``x``/``y`` values with its output without risk of mutation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_validator


class DatedPoint(BaseModel):
    """One point of a series. ``y`` is opaque (a score or a metadata object)."""

    model_config = {"frozen": True}

    x: str
    y: Any = None


class NamedSeries(BaseModel):
    """A keyed series inside an entity's ``details``."""

    model_config = {"frozen": True}

    key: str = ""
    series: list[DatedPoint] = Field(default_factory=list)

    @field_validator("series", mode="before")
    @classmethod
    def _null_series_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Entity(BaseModel):
    """A tagged entity carrying one or more named series."""

    model_config = {"frozen": True}

    slug: str = ""
    title: str = ""
    details: list[NamedSeries] = Field(default_factory=list)

    @field_validator("slug", "title", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("details", mode="before")
    @classmethod
    def _null_details_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def series_for(self, key: str) -> list[DatedPoint]:
        """Series of the first detail named *key*, or an empty list."""
        for detail in self.details:
            if detail.key == key:
                return detail.series
        return []


class ResultRecord(BaseModel):
    """One enriched extraction row: a score paired with its aligned extra."""

    model_config = {"frozen": True}

    title: str
    date: str
    score: Any = None
    extra: dict[str, Any] = Field(default_factory=dict)


Dataset = list[Entity]

DATASET_ADAPTER: TypeAdapter[list[Entity]] = TypeAdapter(list[Entity])


def filter_by_slug(dataset: Dataset, slug: str) -> list[Entity]:
    """Entities whose slug equals *slug*, in dataset order."""
    return [entity for entity in dataset if entity.slug == slug]
