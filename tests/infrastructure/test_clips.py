"""Tests for ClipStore probing."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from clockspeak.infrastructure.clips import ClipStore


@pytest.fixture
def store(tmp_path: Path) -> ClipStore:
    (tmp_path / "mp3").mkdir()
    (tmp_path / "mp3" / "1300.mp3").write_bytes(b"ID3")
    return ClipStore(tmp_path)


class TestClipStore:
    def test_path_for_strips_leading_slash(self, store: ClipStore, tmp_path: Path) -> None:
        assert store.path_for("/mp3/1300.mp3") == tmp_path / "mp3" / "1300.mp3"

    def test_exists(self, store: ClipStore) -> None:
        assert store.exists("/mp3/1300.mp3")
        assert not store.exists("/mp3/1400.mp3")

    def test_missing_keeps_order_and_logs(
        self, store: ClipStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="clockspeak"):
            missing = store.missing(["/mp3/09_Uhr.mp3", "/mp3/1300.mp3", "/mp3/05.mp3"])
        assert missing == ["/mp3/09_Uhr.mp3", "/mp3/05.mp3"]
        assert "Missing clip: /mp3/05.mp3" in caplog.text
