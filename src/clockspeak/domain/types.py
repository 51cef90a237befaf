"""Speech languages, clip layout, and the per-deployment localization rule."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class SpeechLanguage(StrEnum):
    """Languages with a recorded clip set."""

    GERMAN = "de"
    ENGLISH = "en"


class LocalizationRule(BaseModel):
    """How an RTC reading becomes local wall-clock time.

    Attributes:
        source_is_utc: The RTC holds UTC (True) or local time (False).
        posix_tz: Timezone for delegated conversion. Empty selects the
            fixed offset + EU DST fallback.
        offset_minutes: Base offset of the fallback path, east of UTC.
        dst_enabled: Apply the EU summer-time rule on the fallback and
            local-source paths.
    """

    model_config = {"frozen": True}

    source_is_utc: bool = True
    posix_tz: str = "CET-1CEST,M3.5.0/02,M10.5.0/03"
    offset_minutes: int = 60
    dst_enabled: bool = True


class ClipLayout(BaseModel):
    """Where each language's clips live and how clip-ids are spelled."""

    model_config = {"frozen": True}

    base_path_de: str = "/mp3"
    base_path_en: str = "/mp3_en"
    extension: str = "mp3"

    def base_path(self, language: SpeechLanguage) -> str:
        if language is SpeechLanguage.ENGLISH:
            return self.base_path_en
        return self.base_path_de

    def clip_id(self, language: SpeechLanguage, name: str) -> str:
        """``<base>/<name>.<ext>`` for *language*."""
        return f"{self.base_path(language)}/{name}.{self.extension}"


DEFAULT_LAYOUT = ClipLayout()
