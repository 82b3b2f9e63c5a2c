"""Rich Console factory and theme for scoreslice output.

Consoles render into a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` function. Outside a TTY (tests, pipes) Rich
drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SCORE_THEME = Theme(
    {
        "ss.ok": "bold green",
        "ss.error": "bold red",
        "ss.warning": "bold yellow",
        "ss.op": "bold cyan",
        "ss.key": "dim",
        "ss.title": "bold",
        "ss.date": "blue",
        "ss.score": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SCORE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
