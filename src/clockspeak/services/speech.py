"""SpeechService — clock reading to announcement playlists.

Composes the configured clock source, the timezone converter chosen by
the deployment's settings, and the time/date grammars. Mirrors what the
device does on a button press (read RTC, localize, compile, play) and
what its serial test console does (compile a given time or date).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from clockspeak.domain.calendar import CalendarDateTime, epoch_seconds_utc
from clockspeak.domain.date_speech import compile_date_playlist
from clockspeak.domain.localize import localize
from clockspeak.domain.time_speech import compile_time_playlist
from clockspeak.infrastructure.clips import ClipStore
from clockspeak.infrastructure.clock import ClockReadError, SoftwareClock, SystemClock
from clockspeak.infrastructure.zoneinfo_tz import converter_for
from clockspeak.services.result import ServiceResult

if TYPE_CHECKING:
    from clockspeak.config.settings import ClockSettings
    from clockspeak.domain.localize import TimeZoneConverter
    from clockspeak.domain.playlist import Playlist
    from clockspeak.domain.types import SpeechLanguage
    from clockspeak.infrastructure.clock import ClockSource

log = structlog.get_logger(__name__)

# Custom times from the test console are spoken on a fixed date.
TEST_CONSOLE_DATE = (2026, 1, 1)


def date_requested(previous_epoch: int | None, now_epoch: int, window_seconds: int) -> bool:
    """True if a trigger at *now_epoch* follows the previous one closely enough.

    A second press within *window_seconds* announces the date after the
    time. A clock that went backwards never counts as a second press.
    """
    if previous_epoch is None:
        return False
    return 0 <= now_epoch - previous_epoch <= window_seconds


class SpeechService:
    """Builds announcement playlists from settings, a clock and a converter.

    Args:
        settings: Resolved settings (clock rule, clip layout, language).
        clock: Reading source for :meth:`announce`. Defaults to the host
            clock, or a started software clock when ``clock.source`` is
            ``"soft"``.
        converter: Timezone converter override. Defaults to the converter
            selected from ``clock.posix_tz``.
        clip_store: Storage to probe for missing clips. Defaults to
            ``speech.audio_root`` when configured.
    """

    def __init__(
        self,
        settings: ClockSettings,
        *,
        clock: ClockSource | None = None,
        converter: TimeZoneConverter | None = None,
        clip_store: ClipStore | None = None,
    ) -> None:
        self._settings = settings
        self._rule = settings.clock.to_rule()
        self._layout = settings.speech.to_layout()
        self._clock = clock
        self._converter = converter
        if clip_store is None and settings.speech.audio_root is not None:
            clip_store = ClipStore(settings.speech.audio_root)
        self._clip_store = clip_store

    # ── Helpers ──────────────────────────────────────────────────────

    def _language(self, language: SpeechLanguage | None) -> SpeechLanguage:
        return language or self._settings.effective_language

    def _get_clock(self) -> ClockSource:
        if self._clock is None:
            if self._settings.clock.source == "soft":
                start = self._settings.clock.soft_start
                try:
                    soft = SoftwareClock.from_iso(start)
                except ValueError as exc:
                    msg = f"invalid soft_start {start!r}: {exc}"
                    raise ClockReadError(msg) from exc
                soft.begin()
                self._clock = soft
            else:
                self._clock = SystemClock()
        return self._clock

    def _get_converter(self) -> TimeZoneConverter | None:
        if self._converter is None and self._rule.source_is_utc:
            self._converter = converter_for(self._rule)
        return self._converter

    def _localize(
        self, op: str, reading: CalendarDateTime
    ) -> tuple[CalendarDateTime | None, ServiceResult | None]:
        """Local time for *reading*, or the failure result explaining why not."""
        try:
            converter = self._get_converter()
        except ValueError as exc:
            return None, ServiceResult.failure(op, "INVALID_TIMEZONE", str(exc))
        try:
            return localize(reading, self._rule, converter), None
        except ValueError as exc:
            # Valid zone, but the local time falls before 1970.
            return None, ServiceResult.failure(
                op,
                "OUT_OF_RANGE",
                f"Local time for {reading.isoformat()} is out of range",
                reason=str(exc),
            )

    def _playlist_data(self, playlist: Playlist, warnings: list[str]) -> dict[str, Any]:
        if self._clip_store is not None:
            for clip_id in self._clip_store.missing(playlist.clips):
                warnings.append(f"Missing clip: {clip_id}")
        return {
            "language": playlist.language.value,
            "clips": list(playlist.clips),
            "pause_after": playlist.pause_after,
        }

    # ── Operations ───────────────────────────────────────────────────

    def compile_time(
        self, hour: int, minute: int, language: SpeechLanguage | None = None
    ) -> ServiceResult:
        """Playlist for a given wall-clock time (test console ``E HH:MM``)."""
        op = "compile_time"
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            return ServiceResult.failure(
                op, "INVALID_TIME", f"Time out of range: {hour:02d}:{minute:02d}"
            )
        year, month, day = TEST_CONSOLE_DATE
        dt = CalendarDateTime(year=year, month=month, day=day, hour=hour, minute=minute)
        lang = self._language(language)
        warnings: list[str] = []
        data = self._playlist_data(compile_time_playlist(dt, lang, self._layout), warnings)
        data["time"] = f"{hour:02d}:{minute:02d}"
        log.debug("compile_time", time=data["time"], language=lang.value, clips=len(data["clips"]))
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def compile_date(
        self, day: int, month: int, year: int, language: SpeechLanguage | None = None
    ) -> ServiceResult:
        """Playlist for a given calendar date (test console ``E DD.MM.YYYY``)."""
        op = "compile_date"
        try:
            dt = CalendarDateTime(year=year, month=month, day=day)
        except ValidationError:
            return ServiceResult.failure(
                op, "INVALID_DATE", f"Not a valid date: {day:02d}.{month:02d}.{year:04d}"
            )
        lang = self._language(language)
        warnings: list[str] = []
        data = self._playlist_data(compile_date_playlist(dt, lang, self._layout), warnings)
        data["date"] = dt.isoformat()[:10]
        data["weekday"] = dt.weekday
        log.debug("compile_date", date=data["date"], language=lang.value, clips=len(data["clips"]))
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def localize_reading(self, reading: CalendarDateTime) -> ServiceResult:
        """Local wall-clock time for an RTC *reading*."""
        op = "localize"
        local, failure = self._localize(op, reading)
        if failure is not None:
            return failure
        assert local is not None
        converter = self._converter if self._rule.source_is_utc else None
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "reading": reading.isoformat(),
                "local": local.isoformat(),
                "weekday": local.weekday,
                "converter": repr(converter) if converter else "local-eu-dst",
                "abbreviation": converter.abbreviation(reading) if converter else None,
            },
        )

    def announce(
        self,
        language: SpeechLanguage | None = None,
        *,
        with_date: bool = False,
        reading: CalendarDateTime | None = None,
        previous_epoch: int | None = None,
    ) -> ServiceResult:
        """Read the clock, localize, and compile the time (and date) playlists.

        The date is included when *with_date* is set or when
        *previous_epoch* marks a trigger within the configured window.
        """
        op = "announce"
        if reading is None:
            try:
                reading = self._get_clock().read()
            except ClockReadError as exc:
                log.warning("RTC read failed", error=str(exc))
                return ServiceResult.failure(op, "RTC_READ_FAILED", "RTC read failed", reason=str(exc))

        local, failure = self._localize(op, reading)
        if failure is not None:
            return failure
        assert local is not None

        now_epoch = epoch_seconds_utc(reading)
        window = self._settings.clock.date_window_seconds
        include_date = with_date or date_requested(previous_epoch, now_epoch, window)

        lang = self._language(language)
        warnings: list[str] = []
        data: dict[str, Any] = {
            "reading": reading.isoformat(),
            "local": local.isoformat(),
            "epoch": now_epoch,
            "language": lang.value,
            "time": self._playlist_data(compile_time_playlist(local, lang, self._layout), warnings),
        }
        if include_date:
            data["date"] = self._playlist_data(
                compile_date_playlist(local, lang, self._layout), warnings
            )
        log.debug("announce", local=data["local"], with_date=include_date, language=lang.value)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
