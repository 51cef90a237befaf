"""Calendar arithmetic on RTC-style date-times.

All weekday numbers in this package use the RTC convention
0=Sunday .. 6=Saturday and are computed by :func:`weekday_for_date`.

INVARIANT: a CalendarDateTime never stores its weekday. It is derived
from (year, month, day) on access, so every value produced by addition
or epoch conversion is weekday-consistent by construction.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, Field, computed_field, model_validator

EPOCH_YEAR = 1970
SECONDS_PER_DAY = 86_400
MINUTES_PER_DAY = 1_440

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_WEEKDAY_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def weekday_for_date(year: int, month: int, day: int) -> int:
    """Weekday of a Gregorian date, 0=Sunday .. 6=Saturday.

    Jan/Feb count as months of the previous year for the offset table.

    Examples:
        >>> weekday_for_date(2000, 1, 1)
        6
        >>> weekday_for_date(2026, 1, 29)
        4
    """
    if month < 3:
        year -= 1
    return (year + year // 4 - year // 100 + year // 400 + _WEEKDAY_OFFSETS[month - 1] + day) % 7


def last_sunday_of_month(year: int, month: int) -> int:
    """Day-of-month of the last Sunday in *month*."""
    last_day = days_in_month(year, month)
    return last_day - weekday_for_date(year, month, last_day)


class CalendarDateTime(BaseModel):
    """Broken-down wall-clock reading as delivered by an RTC.

    The frame (UTC or local) is not part of the value; it is declared by
    the deployment's :class:`~clockspeak.domain.types.LocalizationRule`.
    """

    model_config = {"frozen": True}

    year: int = Field(ge=EPOCH_YEAR)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)

    @model_validator(mode="after")
    def _day_fits_month(self) -> Self:
        limit = days_in_month(self.year, self.month)
        if self.day > limit:
            msg = f"day {self.day} out of range for {self.year:04d}-{self.month:02d} (max {limit})"
            raise ValueError(msg)
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def weekday(self) -> int:
        """0=Sunday .. 6=Saturday."""
        return weekday_for_date(self.year, self.month, self.day)

    def replace(self, **changes: Any) -> CalendarDateTime:
        """Return a validated copy with *changes* applied."""
        fields = self.model_dump(exclude={"weekday"})
        fields.update(changes)
        return type(self).model_validate(fields)

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    @classmethod
    def parse(cls, text: str) -> CalendarDateTime:
        """Parse an ISO 8601 reading (``2026-03-29T01:00[:SS]``).

        Any UTC offset in *text* is ignored: the reading is taken as-is.
        """
        parsed = datetime.fromisoformat(text.strip())
        return cls(
            year=parsed.year,
            month=parsed.month,
            day=parsed.day,
            hour=parsed.hour,
            minute=parsed.minute,
            second=parsed.second,
        )

    def __str__(self) -> str:
        return self.isoformat()


def _shift_days(year: int, month: int, day: int, day_delta: int) -> tuple[int, int, int]:
    """Move a date by *day_delta* days, one day at a time."""
    while day_delta > 0:
        if day < days_in_month(year, month):
            day += 1
        else:
            day = 1
            if month < 12:
                month += 1
            else:
                month = 1
                year += 1
        day_delta -= 1
    while day_delta < 0:
        if day > 1:
            day -= 1
        else:
            if month > 1:
                month -= 1
            else:
                month = 12
                year -= 1
            day = days_in_month(year, month)
        day_delta += 1
    return year, month, day


def add_minutes(dt: CalendarDateTime, delta_minutes: int) -> CalendarDateTime:
    """Add a signed number of minutes, rolling over days, months and years.

    Seconds are carried through unchanged.

    Raises:
        pydantic.ValidationError: if the result falls before 1970.
    """
    if delta_minutes == 0:
        return dt
    total = dt.hour * 60 + dt.minute + delta_minutes
    day_delta, minute_of_day = divmod(total, MINUTES_PER_DAY)
    year, month, day = _shift_days(dt.year, dt.month, dt.day, day_delta)
    return CalendarDateTime(
        year=year,
        month=month,
        day=day,
        hour=minute_of_day // 60,
        minute=minute_of_day % 60,
        second=dt.second,
    )


def add_seconds(dt: CalendarDateTime, seconds: int) -> CalendarDateTime:
    """Advance *dt* by a non-negative number of seconds."""
    if seconds < 0:
        msg = f"seconds must be non-negative, got {seconds}"
        raise ValueError(msg)
    total = dt.hour * 3600 + dt.minute * 60 + dt.second + seconds
    day_delta, second_of_day = divmod(total, SECONDS_PER_DAY)
    year, month, day = _shift_days(dt.year, dt.month, dt.day, day_delta)
    return CalendarDateTime(
        year=year,
        month=month,
        day=day,
        hour=second_of_day // 3600,
        minute=(second_of_day // 60) % 60,
        second=second_of_day % 60,
    )


def epoch_seconds_utc(dt: CalendarDateTime) -> int:
    """POSIX seconds since 1970-01-01T00:00:00Z (no leap seconds)."""
    days = 0
    for year in range(EPOCH_YEAR, dt.year):
        days += 366 if is_leap_year(year) else 365
    for month in range(1, dt.month):
        days += days_in_month(dt.year, month)
    days += dt.day - 1
    return days * SECONDS_PER_DAY + dt.hour * 3600 + dt.minute * 60 + dt.second


def from_epoch_seconds(seconds: int) -> CalendarDateTime:
    """Inverse of :func:`epoch_seconds_utc`."""
    if seconds < 0:
        msg = f"epoch seconds must be non-negative, got {seconds}"
        raise ValueError(msg)
    days, second_of_day = divmod(seconds, SECONDS_PER_DAY)
    year = EPOCH_YEAR
    while True:
        year_length = 366 if is_leap_year(year) else 365
        if days < year_length:
            break
        days -= year_length
        year += 1
    month = 1
    while days >= days_in_month(year, month):
        days -= days_in_month(year, month)
        month += 1
    return CalendarDateTime(
        year=year,
        month=month,
        day=days + 1,
        hour=second_of_day // 3600,
        minute=(second_of_day // 60) % 60,
        second=second_of_day % 60,
    )
