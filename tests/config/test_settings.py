"""Tests for ClockSettings — unified settings with TOML source."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click
import pytest

from clockspeak.config.settings import ClockSettings
from clockspeak.domain.types import SpeechLanguage


class TestClockSettingsDefaults:
    def test_all_defaults(self, settings: ClockSettings) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.language is None
        assert settings.effective_language is SpeechLanguage.GERMAN
        assert settings.clock.source == "system"
        assert settings.clock.rtc_is_utc is True
        assert settings.clock.posix_tz == "CET-1CEST,M3.5.0/02,M10.5.0/03"
        assert settings.clock.date_window_seconds == 20
        assert settings.speech.base_path_en == "/mp3_en"

    def test_frozen(self, settings: ClockSettings) -> None:
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, make_settings: Callable[[str], ClockSettings]) -> None:
        settings = make_settings(
            '[clock]\nposix_tz = ""\noffset_minutes = 120\n[speech]\nlanguage = "en"\n'
        )
        assert settings.clock.posix_tz == ""
        assert settings.clock.offset_minutes == 120
        assert settings.clock.eu_dst is True  # default preserved
        assert settings.effective_language is SpeechLanguage.ENGLISH

    def test_discovered_by_walk_up(self, tmp_path: Path) -> None:
        (tmp_path / "clockspeak.toml").write_text("[clock]\nrtc_is_utc = false\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = ClockSettings.from_cli(search_from=nested)
        assert settings.clock.rtc_is_utc is False
        assert settings.config_path == (tmp_path / "clockspeak.toml").resolve()

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = ClockSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.clock.offset_minutes == 60

    def test_invalid_toml(self, make_settings: Callable[[str], ClockSettings]) -> None:
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            make_settings("[clock\n")

    def test_to_rule_and_layout(self, make_settings: Callable[[str], ClockSettings]) -> None:
        settings = make_settings(
            '[clock]\neu_dst = false\n[speech]\nbase_path_de = "/sd"\nextension = "wav"\n'
        )
        rule = settings.clock.to_rule()
        assert rule.dst_enabled is False
        assert rule.source_is_utc is True
        layout = settings.speech.to_layout()
        assert layout.clip_id(SpeechLanguage.GERMAN, "1300") == "/sd/1300.wav"


class TestPriority:
    def test_env_overrides_toml(
        self,
        make_settings: Callable[[str], ClockSettings],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("CLOCKSPEAK_CLOCK__POSIX_TZ", "UTC0")
        settings = make_settings('[clock]\nposix_tz = "EST5EDT"\n')
        assert settings.clock.posix_tz == "UTC0"

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOCKSPEAK_LANGUAGE", "de")
        settings = ClockSettings.from_cli(search_from=tmp_path, language="en")
        assert settings.effective_language is SpeechLanguage.ENGLISH

    def test_none_flags_do_not_mask(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLOCKSPEAK_LANGUAGE", "en")
        settings = ClockSettings.from_cli(search_from=tmp_path, language=None)
        assert settings.language is SpeechLanguage.ENGLISH

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = ClockSettings.from_cli(
            search_from=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_config_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("[clock]\ndate_window_seconds = 5\n")
        monkeypatch.setenv("CLOCKSPEAK_CONFIG", str(custom))
        settings = ClockSettings.from_cli(search_from=tmp_path)
        assert settings.clock.date_window_seconds == 5
