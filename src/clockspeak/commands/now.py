"""Command: announce the current time, as on a button press."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clockspeak.commands._base import ClockCommand
from clockspeak.commands._params import Reading, language_option, to_language

if TYPE_CHECKING:
    from clockspeak.commands._context import AppContext
    from clockspeak.domain.calendar import CalendarDateTime


@click.command(
    cls=ClockCommand,
    examples="""\
  clockspeak now
  clockspeak now --with-date --lang en
  clockspeak now --reading 2026-03-29T01:00
  clockspeak now --reading 2026-01-29T12:58:10 --previous-epoch 1769691480""",
)
@click.option("--with-date", is_flag=True, help="Also announce the date.")
@click.option(
    "--reading",
    type=Reading(),
    default=None,
    help="Use this RTC reading instead of the configured clock.",
)
@click.option(
    "--previous-epoch",
    type=int,
    default=None,
    help="Epoch of the previous trigger; a close one adds the date.",
)
@language_option
@click.pass_obj
def now(
    app: AppContext,
    with_date: bool,
    reading: CalendarDateTime | None,
    previous_epoch: int | None,
    lang: str | None,
) -> None:
    """Read the clock, localize it, and compile the announcement."""
    app.emit(
        app.speech.announce(
            to_language(lang),
            with_date=with_date,
            reading=reading,
            previous_epoch=previous_epoch,
        )
    )
