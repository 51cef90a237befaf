"""Time grammar — local time to clip names.

German uses one recorded clip per full hour (``0100`` .. ``2300``) and
otherwise an hour clip followed by a minute clip (``09_Uhr``, ``05``).

English speaks the 12-hour clock. Full hours are ``<hh>oclock`` plus
AM/PM, except midnight and noon which have their own phrases. Minutes
below ten use the "oh" clips (``o5`` reads "oh five").
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clockspeak.domain.playlist import Playlist, PlaylistBuilder
from clockspeak.domain.types import DEFAULT_LAYOUT, ClipLayout, SpeechLanguage

if TYPE_CHECKING:
    from clockspeak.domain.calendar import CalendarDateTime

TIME_CAPACITY = 5


def _clips_de(hour: int, minute: int) -> list[str]:
    if minute == 0:
        return [f"{hour:02d}{minute:02d}"]
    return [f"{hour:02d}_Uhr", f"{minute:02d}"]


def _clips_en(hour: int, minute: int) -> list[str]:
    hour12 = hour % 12 or 12
    meridiem = "AM" if hour < 12 else "PM"
    if minute == 0:
        if hour == 0:
            return ["it_is", "midnight"]
        if hour == 12:
            return ["it_is", "12noon"]
        return [f"{hour12:02d}oclock", meridiem]
    minute_clip = f"o{minute}" if minute < 10 else f"{minute:02d}"
    return [f"{hour12:02d}", minute_clip, meridiem]


def time_clip_names(hour: int, minute: int, language: SpeechLanguage) -> list[str]:
    """Bare clip names for *hour*:*minute*, normalized modulo 24/60.

    Examples:
        >>> time_clip_names(9, 5, SpeechLanguage.GERMAN)
        ['09_Uhr', '05']
        >>> time_clip_names(15, 5, SpeechLanguage.ENGLISH)
        ['03', 'o5', 'PM']
    """
    hour %= 24
    minute %= 60
    if language is SpeechLanguage.ENGLISH:
        return _clips_en(hour, minute)
    return _clips_de(hour, minute)


def compile_time_playlist(
    local: CalendarDateTime,
    language: SpeechLanguage,
    layout: ClipLayout = DEFAULT_LAYOUT,
) -> Playlist:
    """Playlist announcing the time of day of *local*."""
    builder = PlaylistBuilder(language, TIME_CAPACITY, layout)
    builder.extend(time_clip_names(local.hour, local.minute, language))
    return builder.build()
