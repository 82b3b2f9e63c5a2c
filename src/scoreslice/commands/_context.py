"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup, dataset loading, and result
emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from scoreslice.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from scoreslice.config.settings import ScoreSettings
    from scoreslice.domain.models import Dataset
    from scoreslice.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ScoreSettings) -> None:
        self.settings = settings

        from scoreslice.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        from scoreslice.services.telemetry import disable_telemetry, enable_telemetry

        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    def load_dataset(self, path: Path | None = None) -> Dataset:
        """Load *path*, or the configured ``[dataset] path``; exit 1 on failure."""
        from scoreslice.services.extract import load_dataset_result

        dataset, failure = load_dataset_result(path or self.settings.dataset.path)
        if failure is not None:
            self.emit(failure)
        assert dataset is not None
        return dataset

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, warnings to stderr (except in JSON mode, where
          they are part of the payload).
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
