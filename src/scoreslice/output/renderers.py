"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op``; unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from scoreslice.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from scoreslice.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: one tab-separated ``date score`` line per item."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(_quiet_line(item) for item in items)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _quiet_line(item: dict[str, Any]) -> str:
    date = item.get("date", item.get("x", ""))
    score = item.get("score", item.get("y", ""))
    return f"{date}\t{score}"


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), sort_keys=True)
    return "" if value is None else str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "ss.ok"), (f"  {result.op}", "ss.op")))


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        console.print(Text.assemble((f"  {key}: ", "ss.key"), _cell(value)))


def _render_points(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("date", style="ss.date")
    table.add_column("score", style="ss.score", justify="right")
    for item in result.data.get("items", []):
        table.add_row(Text(_cell(item.get("x"))), Text(_cell(item.get("y"))))
    console.print(table)
    console.print(Text(f"  count: {result.data.get('count', 0)}", style="ss.key"))


def _render_records(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("title", style="ss.title")
    table.add_column("date", style="ss.date")
    table.add_column("score", style="ss.score", justify="right")
    table.add_column("extra")
    for item in result.data.get("items", []):
        table.add_row(
            Text(_cell(item.get("title"))),
            Text(_cell(item.get("date"))),
            Text(_cell(item.get("score"))),
            Text(_cell(item.get("extra"))),
        )
    console.print(table)
    console.print(Text(f"  count: {result.data.get('count', 0)}", style="ss.key"))


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    code = f" [{result.error.code}]" if result.error else ""
    console.print(Text.assemble(("ERROR", "ss.error"), f"  {result.op}{code} — {msg}"))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {_cell(value)}", markup=False)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    line = f"{' ' * indent}{span.get('duration_ms', 0.0):>8.2f}ms  {span.get('name', '?')}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(Text(line, style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "extract_basic": _render_points,
    "extract_enriched": _render_records,
}
