"""Clock sources — where RTC readings come from.

The hardware RTC driver lives outside this package. These sources stand
in for it: a software clock that counts from a fixed start (what the
device runs while no RTC is attached), the host clock, and a fixed
reading for replaying a known instant.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

from clockspeak.domain.calendar import CalendarDateTime, add_seconds, days_in_month

logger = logging.getLogger(__name__)

_ISO_FIELDS = re.compile(
    r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ](\d{1,2}):(\d{1,2})(?::(\d{1,2}))?)?$"
)


class ClockReadError(RuntimeError):
    """The clock could not produce a reading."""


class ClockSource(Protocol):
    def read(self) -> CalendarDateTime:
        """Current reading. Raises ClockReadError when unavailable."""
        ...


class SoftwareClock:
    """Counts whole seconds from a start reading using a monotonic timer."""

    def __init__(
        self,
        start: CalendarDateTime,
        *,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self.start = start
        self._monotonic = monotonic
        self._started_at: float | None = None

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> SoftwareClock:
        """Build a clock from raw fields, clamping month and day into range."""
        month = min(max(month, 1), 12)
        day = min(max(day, 1), days_in_month(year, month))
        start = CalendarDateTime(
            year=year, month=month, day=day, hour=hour, minute=minute, second=second
        )
        return cls(start, monotonic=monotonic)

    @classmethod
    def from_iso(
        cls,
        text: str,
        *,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> SoftwareClock:
        """Build a clock from ``YYYY-MM-DD[THH:MM[:SS]]``, clamping month and day.

        Raises:
            ValueError: if *text* is not in that shape, or the year or time
                fields are out of range.
        """
        match = _ISO_FIELDS.match(text.strip())
        if not match:
            msg = f"Invalid software clock start: {text!r}"
            raise ValueError(msg)
        fields = [int(group) if group else 0 for group in match.groups()]
        return cls.from_fields(*fields, monotonic=monotonic)

    def begin(self) -> None:
        self._started_at = self._monotonic()
        logger.debug("Software clock started at %s", self.start)

    def read(self) -> CalendarDateTime:
        if self._started_at is None:
            raise ClockReadError("software clock not started")
        elapsed = int(self._monotonic() - self._started_at)
        return add_seconds(self.start, elapsed)


class SystemClock:
    """The host's clock, read as a UTC reading."""

    def __init__(self, now: Callable[[], datetime] | None = None) -> None:
        self._now = now or (lambda: datetime.now(UTC))

    def read(self) -> CalendarDateTime:
        current = self._now().astimezone(UTC)
        try:
            return CalendarDateTime(
                year=current.year,
                month=current.month,
                day=current.day,
                hour=current.hour,
                minute=current.minute,
                second=current.second,
            )
        except ValueError as exc:
            raise ClockReadError(f"host clock out of range: {current.isoformat()}") from exc


class FixedClock:
    """Always returns the same reading."""

    def __init__(self, reading: CalendarDateTime) -> None:
        self.reading = reading

    def read(self) -> CalendarDateTime:
        return self.reading
