"""Subcommand modules for scoreslice.

register_commands() imports lazily so ``scoreslice --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from scoreslice.commands.extract import extract

    cli.add_command(extract)
