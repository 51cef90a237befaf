"""Shared Click parameters for clockspeak commands."""

from __future__ import annotations

import re
from typing import Any

import click

from clockspeak.domain.calendar import CalendarDateTime
from clockspeak.domain.types import SpeechLanguage

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_DATE_PATTERN = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")


class ClockTime(click.ParamType):
    """``HH:MM`` in 24-hour form, as ``(hour, minute)``."""

    name = "HH:MM"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, tuple):
            return value
        match = _TIME_PATTERN.match(str(value).strip())
        if not match:
            self.fail(f"{value!r} is not a time like 09:05", param, ctx)
        return int(match.group(1)), int(match.group(2))


class DottedDate(click.ParamType):
    """``DD.MM.YYYY``, as ``(day, month, year)``."""

    name = "DD.MM.YYYY"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, tuple):
            return value
        match = _DATE_PATTERN.match(str(value).strip())
        if not match:
            self.fail(f"{value!r} is not a date like 29.01.2026", param, ctx)
        return int(match.group(1)), int(match.group(2)), int(match.group(3))


class Reading(click.ParamType):
    """ISO 8601 RTC reading such as ``2026-03-29T01:00``."""

    name = "READING"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, CalendarDateTime):
            return value
        try:
            return CalendarDateTime.parse(str(value))
        except ValueError as exc:
            self.fail(f"{value!r} is not a valid reading: {exc}", param, ctx)


def language_option(func: Any) -> Any:
    """``--lang de|en`` override for a single command."""
    return click.option(
        "--lang",
        "lang",
        type=click.Choice([language.value for language in SpeechLanguage]),
        default=None,
        help="Speech language for this command (overrides config).",
    )(func)


def to_language(lang: str | None) -> SpeechLanguage | None:
    return SpeechLanguage(lang) if lang else None
