"""Timezone database converter and converter selection.

The timezone string of a deployment may be a POSIX TZ rule
(``CET-1CEST,M3.5.0/02,M10.5.0/03``) or an IANA key (``Europe/Berlin``).
POSIX rules are evaluated in pure Python by the domain layer; IANA keys
go through the host's timezone database via :mod:`zoneinfo`.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from clockspeak.domain.calendar import CalendarDateTime
from clockspeak.domain.localize import (
    FixedEuRuleConverter,
    PosixTzConverter,
    TimeZoneConverter,
)
from clockspeak.domain.posix_tz import is_posix_tz
from clockspeak.domain.types import LocalizationRule

logger = logging.getLogger(__name__)


class ZoneInfoConverter:
    """Converts UTC readings with an IANA timezone database entry."""

    def __init__(self, key: str) -> None:
        self.key = key
        self.zone = ZoneInfo(key)

    def to_local(self, utc: CalendarDateTime) -> CalendarDateTime:
        local = self._aware(utc)
        return CalendarDateTime(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
        )

    def abbreviation(self, utc: CalendarDateTime) -> str | None:
        return self._aware(utc).tzname()

    def _aware(self, utc: CalendarDateTime) -> datetime:
        instant = datetime(
            utc.year, utc.month, utc.day, utc.hour, utc.minute, utc.second, tzinfo=UTC
        )
        return instant.astimezone(self.zone)

    def __repr__(self) -> str:
        return f"ZoneInfoConverter({self.key!r})"


def converter_for(rule: LocalizationRule) -> TimeZoneConverter:
    """Pick the converter a UTC-source *rule* calls for.

    Empty timezone string selects the fixed EU rule, a POSIX rule string
    the POSIX evaluator, and anything else must be an IANA key.

    Raises:
        ValueError: if the string is neither a POSIX rule nor a known key.
    """
    tz = rule.posix_tz.strip()
    if not tz:
        return FixedEuRuleConverter(rule.offset_minutes, dst_enabled=rule.dst_enabled)
    if is_posix_tz(tz):
        return PosixTzConverter(tz)
    try:
        converter = ZoneInfoConverter(tz)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown timezone {tz!r}: not a POSIX TZ rule or IANA key"
        raise ValueError(msg) from exc
    logger.debug("Using timezone database entry %s", tz)
    return converter
