"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from clockspeak.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from clockspeak.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: clip-ids one per line, or the status line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    clips = list(result.data.get("clips", []))
    for section in ("time", "date"):
        part = result.data.get(section)
        if isinstance(part, dict):
            clips.extend(part.get("clips", []))
    if clips:
        return "\n".join(clips)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="clock.ok")
    op = Text(f"  {result.op}", style="clock.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="clock.key")
    style = "clock.time" if key in ("time", "date", "local", "reading") else ""
    console.print(k, Text(str(value), style=style), sep="", end="")
    console.print()


def _playlist_table(playlist: dict[str, Any]) -> Table:
    """Clips in playback order; the pause point is marked after its clip."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Clip", style="clock.clip", no_wrap=True)
    table.add_column("")

    pause_after = playlist.get("pause_after")
    for index, clip in enumerate(playlist.get("clips", [])):
        marker = Text("pause", style="clock.pause") if index == pause_after else Text("")
        table.add_row(str(index), clip, marker)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="clock.error")
    op = Text(f"  {result.op}", style="clock.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Playlist renderers ────────────────────────────────────────────────


def _render_compiled(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render compile_time / compile_date results."""
    _status_line(console, result)
    for key in ("time", "date", "weekday", "language"):
        if key in result.data:
            _field(console, key, result.data[key])
    console.print(_playlist_table(result.data))


def _render_announce(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    keys = ("reading", "local", "language", "epoch") if verbose else ("local", "language")
    for key in keys:
        _field(console, key, result.data[key])
    for section in ("time", "date"):
        part = result.data.get(section)
        if part is None:
            continue
        console.print(Text(f"  {section}:", style="clock.key"))
        console.print(_playlist_table(part))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "compile_time": _render_compiled,
    "compile_date": _render_compiled,
    "announce": _render_announce,
    "localize": _render_generic,
}
