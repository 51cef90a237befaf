"""Command: compile the playlist for a given calendar date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clockspeak.commands._base import ClockCommand
from clockspeak.commands._params import DottedDate, language_option, to_language

if TYPE_CHECKING:
    from clockspeak.commands._context import AppContext


@click.command(
    "date",
    cls=ClockCommand,
    examples="""\
  clockspeak date 29.01.2026
  clockspeak date 01.03.1999 --lang en
  clockspeak --json date 24.12.2030""",
)
@click.argument("ddmmyyyy", type=DottedDate())
@language_option
@click.pass_obj
def date_cmd(app: AppContext, ddmmyyyy: tuple[int, int, int], lang: str | None) -> None:
    """Compile the clips announcing a date given as DD.MM.YYYY."""
    day, month, year = ddmmyyyy
    app.emit(app.speech.compile_date(day, month, year, to_language(lang)))
