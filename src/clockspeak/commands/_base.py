"""Custom Click base classes with --examples support.

ClockCommand and ClockGroup accept an ``examples`` parameter. When
``--examples`` is passed, the command prints usage examples and exits,
which keeps ``--help`` concise; the help text only points at the flag.

ClockGroup lists its commands in registration order (time, date, now,
localize) rather than alphabetically, so ``--help`` reads from the test
console commands to the live clock.
"""

from __future__ import annotations

from typing import Any

import click

EXAMPLES_HINT = "Run with --examples for usage examples."


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag and a help hint to *cmd*."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )
    if not cmd.epilog:
        cmd.epilog = EXAMPLES_HINT


class ClockCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ClockGroup(click.Group):
    """Click Group subclass with ``--examples`` and registration-ordered help.

    Sets ``command_class = ClockCommand`` so subcommands accept the
    ``examples`` parameter without an explicit ``cls=``.
    """

    command_class = ClockCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)
