"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, clockspeak.toml only contains
overrides. The defaults describe the reference deployment: RTC on UTC,
Central European rules, German clips.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from clockspeak.domain.types import ClipLayout, LocalizationRule, SpeechLanguage


class ClockConfig(BaseModel):
    """[clock] section."""

    model_config = {"frozen": True}

    # "system" reads the host clock, "soft" counts from soft_start.
    source: Literal["system", "soft"] = "system"
    rtc_is_utc: bool = True
    posix_tz: str = "CET-1CEST,M3.5.0/02,M10.5.0/03"
    offset_minutes: int = 60
    eu_dst: bool = True
    # A second trigger within this many seconds also announces the date.
    date_window_seconds: int = 20
    # Month and day are clamped into range when the software clock starts.
    soft_start: str = "2026-01-29T13:58:00"

    def to_rule(self) -> LocalizationRule:
        return LocalizationRule(
            source_is_utc=self.rtc_is_utc,
            posix_tz=self.posix_tz,
            offset_minutes=self.offset_minutes,
            dst_enabled=self.eu_dst,
        )


class SpeechConfig(BaseModel):
    """[speech] section."""

    model_config = {"frozen": True}

    language: SpeechLanguage = SpeechLanguage.GERMAN
    base_path_de: str = "/mp3"
    base_path_en: str = "/mp3_en"
    extension: str = "mp3"
    audio_root: Path | None = None

    def to_layout(self) -> ClipLayout:
        return ClipLayout(
            base_path_de=self.base_path_de,
            base_path_en=self.base_path_en,
            extension=self.extension,
        )
