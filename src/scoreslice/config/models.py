"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, scoreslice.toml only holds overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from scoreslice.domain.types import OVERALL_SLUG, SeriesKey


class DatasetConfig(BaseModel):
    """[dataset] section."""

    model_config = {"frozen": True}

    path: Path | None = None


class ExtractConfig(BaseModel):
    """[extract] section."""

    model_config = {"frozen": True}

    slug: str = OVERALL_SLUG
    score_key: str = SeriesKey.SCORE.value
    extra_key: str = SeriesKey.EXTRA.value
    positional_alignment: bool = True
