"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides the lazily built SpeechService and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clockspeak.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from clockspeak.config.settings import ClockSettings
    from clockspeak.services.result import ServiceResult
    from clockspeak.services.speech import SpeechService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The speech service is built on first use so ``--help`` and
    ``--version`` never start a clock or touch the timezone database.
    """

    def __init__(self, settings: ClockSettings) -> None:
        self.settings = settings
        self._speech: SpeechService | None = None

        from clockspeak.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            clock_context={
                "language": settings.effective_language.value,
                "clock_source": settings.clock.source,
                "tz": settings.clock.posix_tz or "fixed-eu",
            },
        )

    @property
    def speech(self) -> SpeechService:
        """The speech service (created lazily on first access)."""
        if self._speech is None:
            from clockspeak.services.speech import SpeechService

            self._speech = SpeechService(self.settings)
        return self._speech

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
