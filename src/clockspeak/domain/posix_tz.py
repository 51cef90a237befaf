"""POSIX ``TZ`` strings — parsing and UTC offset evaluation.

Grammar (glibc manual, "TZ Variable")::

    std offset [dst [offset] [,start[/time],end[/time]]]

Names are three or more letters or ``<...>`` quoted. Offsets are
``[+-]hh[:mm[:ss]]`` and count *west* of UTC, so ``CET-1`` is one hour
east. Transition dates use one of three forms:

- ``Mm.w.d`` — weekday *d* (0=Sunday) of week *w* (5 = last) in month *m*
- ``Jn`` — day 1..365, February 29 never counted
- ``n`` — zero-based day 0..365, February 29 counted

The start transition is expressed in standard local time, the end
transition in daylight local time. A default time of 02:00:00 applies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from clockspeak.domain.calendar import (
    CalendarDateTime,
    days_in_month,
    epoch_seconds_utc,
    from_epoch_seconds,
    is_leap_year,
    weekday_for_date,
)

DEFAULT_TRANSITION_SECONDS = 2 * 3600
DEFAULT_DST_SHIFT = 3600
# glibc falls back to US rules when a DST name has no explicit dates.
DEFAULT_RULES = "M3.2.0,M11.1.0"

_NAME = r"<[A-Za-z0-9+\-]+>|[A-Za-z]{3,}"
_OFFSET = r"[+-]?\d{1,3}(?::\d{1,2}){0,2}"

_TZ_PATTERN = re.compile(
    rf"""^
    (?P<std>{_NAME})(?P<std_offset>{_OFFSET})
    (?:
        (?P<dst>{_NAME})(?P<dst_offset>{_OFFSET})?
        (?:,(?P<start>[^,]+),(?P<end>[^,]+))?
    )?
    $""",
    re.VERBOSE,
)
_RULE_PATTERN = re.compile(
    rf"^(?:M(?P<month>\d{{1,2}})\.(?P<week>\d)\.(?P<weekday>\d)|J(?P<julian>\d{{1,3}})|(?P<zero_based>\d{{1,3}}))"
    rf"(?:/(?P<time>{_OFFSET}))?$"
)


def parse_hms(text: str) -> int:
    """``[+-]hh[:mm[:ss]]`` as signed seconds."""
    sign = -1 if text.startswith("-") else 1
    fields = [int(part) for part in text.lstrip("+-").split(":")]
    fields += [0] * (3 - len(fields))
    hours, minutes, seconds = fields
    return sign * (hours * 3600 + minutes * 60 + seconds)


def _month_day_from_ordinal(year: int, ordinal: int) -> tuple[int, int]:
    """Month and day for 1-based day-of-year *ordinal*."""
    month = 1
    while ordinal > days_in_month(year, month):
        ordinal -= days_in_month(year, month)
        month += 1
    return month, ordinal


@dataclass(frozen=True)
class TransitionRule:
    """One ``date[/time]`` component of a POSIX TZ string."""

    form: str  # "M", "J" or "N"
    month: int = 0
    week: int = 0
    weekday: int = 0
    day: int = 0
    seconds: int = DEFAULT_TRANSITION_SECONDS

    @classmethod
    def parse(cls, text: str) -> TransitionRule:
        match = _RULE_PATTERN.match(text)
        if not match:
            msg = f"Invalid transition rule: {text!r}"
            raise ValueError(msg)
        seconds = parse_hms(match["time"]) if match["time"] else DEFAULT_TRANSITION_SECONDS
        if match["month"] is not None:
            month, week, weekday = int(match["month"]), int(match["week"]), int(match["weekday"])
            if not (1 <= month <= 12 and 1 <= week <= 5 and 0 <= weekday <= 6):
                msg = f"Invalid M rule: {text!r}"
                raise ValueError(msg)
            return cls(form="M", month=month, week=week, weekday=weekday, seconds=seconds)
        if match["julian"] is not None:
            day = int(match["julian"])
            if not 1 <= day <= 365:
                msg = f"Invalid J rule: {text!r}"
                raise ValueError(msg)
            return cls(form="J", day=day, seconds=seconds)
        day = int(match["zero_based"])
        if not 0 <= day <= 365:
            msg = f"Invalid day rule: {text!r}"
            raise ValueError(msg)
        return cls(form="N", day=day, seconds=seconds)

    def date_in(self, year: int) -> tuple[int, int]:
        """(month, day) on which this transition happens in *year*."""
        if self.form == "M":
            first = weekday_for_date(year, self.month, 1)
            day = 1 + (self.weekday - first) % 7 + (self.week - 1) * 7
            while day > days_in_month(year, self.month):
                day -= 7
            return self.month, day
        if self.form == "J":
            ordinal = self.day + 1 if is_leap_year(year) and self.day >= 60 else self.day
            return _month_day_from_ordinal(year, ordinal)
        # Zero-based day 365 only exists in leap years; clamp to Dec 31.
        ordinal = min(self.day + 1, 366 if is_leap_year(year) else 365)
        return _month_day_from_ordinal(year, ordinal)

    def utc_instant(self, year: int, utc_offset: int) -> int:
        """Epoch seconds of the transition, given the offset in force before it."""
        month, day = self.date_in(year)
        local_midnight = epoch_seconds_utc(CalendarDateTime(year=year, month=month, day=day))
        return local_midnight + self.seconds - utc_offset


@dataclass(frozen=True)
class PosixTimeZone:
    """A parsed POSIX TZ string. Offsets are seconds *east* of UTC."""

    std_name: str
    std_offset: int
    dst_name: str | None = None
    dst_offset: int | None = None
    start: TransitionRule | None = None
    end: TransitionRule | None = None

    @classmethod
    def parse(cls, text: str) -> PosixTimeZone:
        """Parse *text*, raising ValueError if it is not a POSIX TZ string."""
        value = text.strip().removeprefix(":")
        match = _TZ_PATTERN.match(value)
        if not match:
            msg = f"Invalid POSIX TZ string: {text!r}"
            raise ValueError(msg)
        std_offset = -parse_hms(match["std_offset"])
        if match["dst"] is None:
            return cls(std_name=match["std"].strip("<>"), std_offset=std_offset)

        dst_offset = -parse_hms(match["dst_offset"]) if match["dst_offset"] else std_offset + DEFAULT_DST_SHIFT
        start_text, end_text = (match["start"], match["end"]) if match["start"] else DEFAULT_RULES.split(",")
        return cls(
            std_name=match["std"].strip("<>"),
            std_offset=std_offset,
            dst_name=match["dst"].strip("<>"),
            dst_offset=dst_offset,
            start=TransitionRule.parse(start_text),
            end=TransitionRule.parse(end_text),
        )

    def is_dst(self, epoch: int) -> bool:
        """True if daylight time is in force at *epoch* seconds."""
        if self.start is None or self.end is None or self.dst_offset is None:
            return False
        year = from_epoch_seconds(max(epoch + self.std_offset, 0)).year
        start = self.start.utc_instant(year, self.std_offset)
        end = self.end.utc_instant(year, self.dst_offset)
        if start < end:
            return start <= epoch < end
        # Southern hemisphere: daylight time spans the new year.
        return not end <= epoch < start

    def utc_offset(self, epoch: int) -> int:
        """Seconds east of UTC in force at *epoch*."""
        if self.is_dst(epoch):
            assert self.dst_offset is not None
            return self.dst_offset
        return self.std_offset

    def abbreviation(self, epoch: int) -> str:
        if self.is_dst(epoch):
            assert self.dst_name is not None
            return self.dst_name
        return self.std_name


def is_posix_tz(text: str) -> bool:
    """True if *text* parses as a POSIX TZ string."""
    try:
        PosixTimeZone.parse(text)
    except ValueError:
        return False
    return True
