"""Shared pytest fixtures and test helpers for clockspeak tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from clockspeak.config.settings import ClockSettings

_ENV_VARS = (
    "CLOCKSPEAK_CONFIG",
    "CLOCKSPEAK_LANGUAGE",
    "CLOCKSPEAK_CLOCK__POSIX_TZ",
    "CLOCKSPEAK_CLOCK__RTC_IS_UTC",
    "CLOCKSPEAK_SPEECH__LANGUAGE",
)


@pytest.fixture(autouse=True)
def _clean_env(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CLOCKSPEAK_* environment and user config out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so no clockspeak.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> ClockSettings:
    """Default settings with config discovery rooted in an empty temp dir."""
    return ClockSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def make_settings(tmp_path: Path) -> Callable[[str], ClockSettings]:
    """Build settings from a TOML snippet written to a temp clockspeak.toml."""

    def _make(toml: str) -> ClockSettings:
        path = tmp_path / "clockspeak.toml"
        path.write_text(toml, encoding="utf-8")
        return ClockSettings.from_cli(config_path=str(path))

    return _make

