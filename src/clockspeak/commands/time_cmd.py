"""Command: compile the playlist for a given time of day."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clockspeak.commands._base import ClockCommand
from clockspeak.commands._params import ClockTime, language_option, to_language

if TYPE_CHECKING:
    from clockspeak.commands._context import AppContext


@click.command(
    "time",
    cls=ClockCommand,
    examples="""\
  clockspeak time 09:05
  clockspeak time 15:45 --lang en
  clockspeak --quiet time 00:00 --lang en
  clockspeak --json time 13:00""",
)
@click.argument("hhmm", type=ClockTime())
@language_option
@click.pass_obj
def time_cmd(app: AppContext, hhmm: tuple[int, int], lang: str | None) -> None:
    """Compile the clips announcing HHMM (24-hour input)."""
    hour, minute = hhmm
    app.emit(app.speech.compile_time(hour, minute, to_language(lang)))
