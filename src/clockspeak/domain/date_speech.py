"""Date grammar — local date to clip names.

Number clips exist for 0..20 and every multiple of ten; anything else is
spoken as tens then ones (23 -> ``20``, ``3``). Ordinal clips follow the
same split under the ``h-`` prefix.

German reads weekday, day, month and then the year as a number
(2026 -> "zwei tausend zwanzig sechs" clips). English reads weekday,
month, day and then the year as two two-digit groups ("twenty twenty-six"),
each addressed directly as a recorded two-digit clip. English playback
pauses briefly after the weekday clip; the playlist marks that point.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from clockspeak.domain.playlist import Playlist, PlaylistBuilder
from clockspeak.domain.types import DEFAULT_LAYOUT, ClipLayout, SpeechLanguage

if TYPE_CHECKING:
    from clockspeak.domain.calendar import CalendarDateTime

DATE_CAPACITY = 10


def _split(n: int) -> list[int]:
    if n <= 20 or n % 10 == 0:
        return [n]
    return [n // 10 * 10, n % 10]


def decompose_number(n: int) -> list[str]:
    """Number clips for *n*.

    Examples:
        >>> decompose_number(23)
        ['20', '3']
        >>> decompose_number(20)
        ['20']
    """
    return [str(part) for part in _split(n)]


def decompose_ordinal(n: int) -> list[str]:
    """Ordinal clips for *n*, e.g. 21 -> ``h-20``, ``h-1``."""
    return [f"h-{part}" for part in _split(n)]


def decompose_year(year: int) -> list[str]:
    """Year as thousands, hundreds and remainder.

    Examples:
        >>> decompose_year(2026)
        ['2', 'thousand', '20', '6']
        >>> decompose_year(1999)
        ['1', 'thousand', '9', 'hundred', '90', '9']
    """
    if year < 1000:
        return decompose_number(year)
    thousands, rest = divmod(year, 1000)
    clips = [*decompose_number(thousands), "thousand"]
    if rest >= 100:
        hundreds, rest = divmod(rest, 100)
        clips += [*decompose_number(hundreds), "hundred"]
    if rest > 0:
        clips += decompose_number(rest)
    return clips


def _clips_de(date: CalendarDateTime) -> list[str]:
    return [
        f"{date.weekday}_day",
        f"{date.day:02d}_",
        f"{date.month:02d}_mo",
        *decompose_year(date.year),
    ]


def _clips_en(date: CalendarDateTime) -> list[str]:
    weekday = date.weekday or 7  # 1=Monday .. 7=Sunday
    return [
        f"{weekday:02d}d",
        f"{date.month:02d}mo",
        f"{date.day:02d}_",
        f"{date.year // 100:02d}",
        f"{date.year % 100:02d}",
    ]


def date_clip_names(date: CalendarDateTime, language: SpeechLanguage) -> list[str]:
    """Bare clip names announcing the date part of *date*."""
    if language is SpeechLanguage.ENGLISH:
        return _clips_en(date)
    return _clips_de(date)


def compile_date_playlist(
    local: CalendarDateTime,
    language: SpeechLanguage,
    layout: ClipLayout = DEFAULT_LAYOUT,
) -> Playlist:
    """Playlist announcing the date of *local*.

    English playlists carry ``pause_after=0``: the caller plays clip 0,
    waits briefly, then plays the rest as one block.
    """
    builder = PlaylistBuilder(language, DATE_CAPACITY, layout)
    builder.extend(date_clip_names(local, language))
    pause_after = 0 if language is SpeechLanguage.ENGLISH else None
    return builder.build(pause_after=pause_after)
