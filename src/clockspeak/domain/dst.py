"""EU summer-time window tests.

Summer time runs from the last Sunday of March to the last Sunday of
October. Months strictly between are always summer time; January,
February, November and December never are. Only March and October need
a day and hour comparison.

The UTC test switches at 01:00 on both boundary days. The local test
switches at 02:00 in March and 03:00 in October, which is the same
instant seen from CET and CEST respectively. During the repeated local
hour in October (02:00-02:59 occurs twice) the local test always answers
True.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clockspeak.domain.calendar import last_sunday_of_month

if TYPE_CHECKING:
    from clockspeak.domain.calendar import CalendarDateTime


def is_eu_dst_utc(dt: CalendarDateTime) -> bool:
    """True if the UTC reading *dt* falls inside EU summer time."""
    if dt.month < 3 or dt.month > 10:
        return False
    if 3 < dt.month < 10:
        return True

    if dt.month == 3:
        start_day = last_sunday_of_month(dt.year, 3)
        if dt.day != start_day:
            return dt.day > start_day
        return dt.hour >= 1

    end_day = last_sunday_of_month(dt.year, 10)
    if dt.day != end_day:
        return dt.day < end_day
    return dt.hour < 1


def is_eu_dst_local(dt: CalendarDateTime) -> bool:
    """True if the local reading *dt* falls inside EU summer time."""
    if dt.month < 3 or dt.month > 10:
        return False
    if 3 < dt.month < 10:
        return True

    if dt.month == 3:
        start_day = last_sunday_of_month(dt.year, 3)
        if dt.day != start_day:
            return dt.day > start_day
        return dt.hour >= 2

    end_day = last_sunday_of_month(dt.year, 10)
    if dt.day != end_day:
        return dt.day < end_day
    return dt.hour < 3
