"""Timezone localization — RTC reading to local wall-clock time.

Three paths, chosen by the deployment's LocalizationRule:

1. RTC on UTC with a timezone string: delegate to a TimeZoneConverter.
2. RTC on UTC without one: fixed offset, plus one hour while the EU
   summer-time rule (tested on the UTC reading) says so.
3. RTC on local time: plus one hour while the local EU rule says so.

Converters are injected. Without one, path 1 evaluates the timezone
string as a POSIX TZ rule; services swap in the IANA-database converter
when the string names a zone.
"""

from __future__ import annotations

from typing import Protocol

from clockspeak.domain.calendar import (
    CalendarDateTime,
    add_minutes,
    epoch_seconds_utc,
    from_epoch_seconds,
)
from clockspeak.domain.dst import is_eu_dst_local, is_eu_dst_utc
from clockspeak.domain.posix_tz import PosixTimeZone
from clockspeak.domain.types import LocalizationRule

DST_SHIFT_MINUTES = 60


class TimeZoneConverter(Protocol):
    """Converts a UTC reading into local wall-clock time."""

    def to_local(self, utc: CalendarDateTime) -> CalendarDateTime: ...

    def abbreviation(self, utc: CalendarDateTime) -> str | None:
        """Zone abbreviation in force at *utc*, or None if the converter has none."""
        ...


class PosixTzConverter:
    """Evaluates a POSIX TZ string such as ``CET-1CEST,M3.5.0/02,M10.5.0/03``."""

    def __init__(self, tz: str) -> None:
        self.tz = tz
        self.zone = PosixTimeZone.parse(tz)

    def to_local(self, utc: CalendarDateTime) -> CalendarDateTime:
        epoch = epoch_seconds_utc(utc)
        return from_epoch_seconds(epoch + self.zone.utc_offset(epoch))

    def abbreviation(self, utc: CalendarDateTime) -> str | None:
        return self.zone.abbreviation(epoch_seconds_utc(utc))

    def __repr__(self) -> str:
        return f"PosixTzConverter({self.tz!r})"


class FixedEuRuleConverter:
    """Fixed offset east of UTC plus the EU summer-time hour."""

    def __init__(self, offset_minutes: int, *, dst_enabled: bool = True) -> None:
        self.offset_minutes = offset_minutes
        self.dst_enabled = dst_enabled

    def to_local(self, utc: CalendarDateTime) -> CalendarDateTime:
        local = add_minutes(utc, self.offset_minutes)
        # DST is decided on the original UTC reading, not the shifted one.
        if self.dst_enabled and is_eu_dst_utc(utc):
            local = add_minutes(local, DST_SHIFT_MINUTES)
        return local

    def abbreviation(self, utc: CalendarDateTime) -> str | None:
        return None

    def __repr__(self) -> str:
        return f"FixedEuRuleConverter({self.offset_minutes}, dst_enabled={self.dst_enabled})"


def default_converter(rule: LocalizationRule) -> TimeZoneConverter:
    """Converter for a UTC-source rule when none is injected."""
    if rule.posix_tz:
        return PosixTzConverter(rule.posix_tz)
    return FixedEuRuleConverter(rule.offset_minutes, dst_enabled=rule.dst_enabled)


def localize(
    rtc: CalendarDateTime,
    rule: LocalizationRule,
    converter: TimeZoneConverter | None = None,
) -> CalendarDateTime:
    """Local wall-clock time for the RTC reading *rtc*.

    *converter* is only consulted for a UTC-source rule with a non-empty
    timezone string.
    """
    if not rule.source_is_utc:
        if rule.dst_enabled and is_eu_dst_local(rtc):
            return add_minutes(rtc, DST_SHIFT_MINUTES)
        return rtc
    if not rule.posix_tz or converter is None:
        converter = default_converter(rule)
    return converter.to_local(rtc)
