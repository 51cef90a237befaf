"""Root CLI group for clockspeak with global flags and command registration."""

from __future__ import annotations

import click

from clockspeak import __version__
from clockspeak.commands import register_commands
from clockspeak.commands._base import ClockGroup
from clockspeak.commands._context import AppContext
from clockspeak.config.settings import ClockSettings
from clockspeak.domain.types import SpeechLanguage


@click.group(
    cls=ClockGroup,
    invoke_without_command=True,
    examples="""\
  clockspeak now
  clockspeak --lang en now --with-date
  clockspeak -q time 07:30
  clockspeak --json localize 2026-10-25T00:30""",
)
@click.version_option(version=__version__, prog_name="clockspeak")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Clip-ids only, one per line.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--lang",
    "language",
    type=click.Choice([language.value for language in SpeechLanguage]),
    default=None,
    help="Speech language (overrides config).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    language: str | None,
) -> None:
    """clockspeak — speaking-clock playlist compiler."""
    ctx.ensure_object(dict)
    settings = ClockSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        language=language,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
