"""Command: extract a date range of scores from a dataset."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scoreslice.commands._base import ScoreCommand

if TYPE_CHECKING:
    from scoreslice.commands._context import AppContext


@click.command(
    cls=ScoreCommand,
    examples="""\
  scoreslice extract 2017-01-17T12:51:49Z 2017-01-17T17:27:12Z --dataset data.json
  scoreslice extract 2017-01-17 2017-01-18 --slug aggregation-daily
  scoreslice --json extract 2017-01-17T12:00:00Z 2017-01-17T14:00:00Z --unchecked""",
)
@click.argument("start")
@click.argument("end")
@click.option(
    "--dataset",
    "dataset_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Dataset JSON file (defaults to [dataset] path).",
)
@click.option("--slug", default=None, help="Category tag to filter entities by.")
@click.option(
    "--unchecked",
    is_flag=True,
    help="Basic mode: no validation, no fallback; dates must exist in every series.",
)
@click.option(
    "--no-positional",
    is_flag=True,
    help="Always search extras by date, even when lengths match.",
)
@click.pass_obj
def extract(
    app: AppContext,
    start: str,
    end: str,
    dataset_path: Path | None,
    slug: str | None,
    unchecked: bool,
    no_positional: bool,
) -> None:
    """Extract scores dated START through END (inclusive)."""
    from scoreslice.services.extract import ExtractService

    config = app.settings.extract
    overrides: dict[str, object] = {}
    if slug:
        overrides["slug"] = slug
    if no_positional:
        overrides["positional_alignment"] = False
    if overrides:
        config = config.model_copy(update=overrides)

    service = ExtractService(app.load_dataset(dataset_path), config)
    app.emit(service.basic(start, end) if unchecked else service.enriched(start, end))
