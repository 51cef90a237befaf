"""Domain layer — calendar arithmetic, DST rules, localization, speech grammars.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

from clockspeak.domain.calendar import CalendarDateTime
from clockspeak.domain.date_speech import compile_date_playlist
from clockspeak.domain.localize import localize
from clockspeak.domain.playlist import Playlist
from clockspeak.domain.time_speech import compile_time_playlist
from clockspeak.domain.types import ClipLayout, LocalizationRule, SpeechLanguage

__all__ = [
    "CalendarDateTime",
    "ClipLayout",
    "LocalizationRule",
    "Playlist",
    "SpeechLanguage",
    "compile_date_playlist",
    "compile_time_playlist",
    "localize",
]
