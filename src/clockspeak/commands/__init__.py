"""Subcommand modules for clockspeak.

Provides register_commands() which uses deferred imports to keep
``clockspeak --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from clockspeak.commands.date_cmd import date_cmd
    from clockspeak.commands.localize import localize_cmd
    from clockspeak.commands.now import now
    from clockspeak.commands.time_cmd import time_cmd

    cli.add_command(time_cmd)
    cli.add_command(date_cmd)
    cli.add_command(now)
    cli.add_command(localize_cmd)
