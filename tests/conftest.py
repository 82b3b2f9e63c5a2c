"""Shared pytest fixtures and test helpers for scoreslice tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from scoreslice.domain.models import DATASET_ADAPTER, Dataset, DatedPoint
from scoreslice.services.telemetry import disable_telemetry

NOON = "2017-01-17T12:00:00Z"
ONE_PM = "2017-01-17T13:00:00Z"
TWO_PM = "2017-01-17T14:00:00Z"


def points(*pairs: tuple[str, Any]) -> list[dict[str, Any]]:
    """Raw ``{x, y}`` dicts for building dataset fixtures."""
    return [{"x": x, "y": y} for x, y in pairs]


def as_series(*pairs: tuple[str, Any]) -> list[DatedPoint]:
    return [DatedPoint(x=x, y=y) for x, y in pairs]


def entity(
    title: str,
    *,
    slug: str = "aggregation-overall",
    score: list[dict[str, Any]] | None = None,
    extra: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Raw entity dict with optional score/extra series."""
    details = []
    if score is not None:
        details.append({"key": "score", "series": score})
    if extra is not None:
        details.append({"key": "extra", "series": extra})
    return {"slug": slug, "title": title, "details": details}


def build_dataset(*entities: dict[str, Any]) -> Dataset:
    return DATASET_ADAPTER.validate_python(list(entities))


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging handlers and telemetry flags set by CLI invocations."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def raw_entities() -> list[dict[str, Any]]:
    """Two overall entities (aligned and misaligned extras) plus one other slug."""
    return [
        entity(
            "Site A",
            score=points((NOON, 1), (ONE_PM, 2), (TWO_PM, 3)),
            extra=points(
                (NOON, {"visits": 10}),
                (ONE_PM, {"visits": 20}),
                (TWO_PM, {"visits": 30}),
            ),
        ),
        entity("Site B", slug="aggregation-daily", score=points((NOON, 99))),
        entity(
            "Site C",
            score=points((NOON, 4), (TWO_PM, 6)),
            extra=points(
                ("2017-01-17T11:00:00Z", {"visits": 1}),
                (NOON, {"visits": 2}),
                (TWO_PM, {"visits": 3}),
            ),
        ),
    ]


@pytest.fixture
def dataset(raw_entities: list[dict[str, Any]]) -> Dataset:
    return build_dataset(*raw_entities)


@pytest.fixture
def dataset_file(tmp_path: Path, raw_entities: list[dict[str, Any]]) -> Path:
    """The ``dataset`` fixture written as ``{"data": [...]}`` JSON."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"data": raw_entities}), encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config or env overrides."""
    monkeypatch.chdir(tmp_path)
    for var in ("SCORESLICE_CONFIG", "SCORESLICE_EXTRACT__SLUG", "SCORESLICE_DATASET__PATH"):
        monkeypatch.delenv(var, raising=False)
