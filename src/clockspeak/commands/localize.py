"""Command: show the local wall-clock time for an RTC reading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clockspeak.commands._base import ClockCommand
from clockspeak.commands._params import Reading

if TYPE_CHECKING:
    from clockspeak.commands._context import AppContext
    from clockspeak.domain.calendar import CalendarDateTime


@click.command(
    "localize",
    cls=ClockCommand,
    examples="""\
  clockspeak localize 2026-03-29T01:00
  clockspeak --json localize 2026-10-25T00:59:59""",
)
@click.argument("reading", type=Reading())
@click.pass_obj
def localize_cmd(app: AppContext, reading: CalendarDateTime) -> None:
    """Convert an RTC reading to local time using the configured rule."""
    app.emit(app.speech.localize_reading(reading))
