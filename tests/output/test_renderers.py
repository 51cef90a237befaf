"""Tests for output formatting and Rich renderers."""

from __future__ import annotations

import json

from clockspeak.output.console import create_console, get_output
from clockspeak.output.formatters import OutputSettings, format_result
from clockspeak.output.renderers import render_quiet, render_result
from clockspeak.services.result import ServiceResult

TIME_RESULT = ServiceResult(
    ok=True,
    op="compile_time",
    data={
        "language": "de",
        "clips": ["/mp3/09_Uhr.mp3", "/mp3/05.mp3"],
        "pause_after": None,
        "time": "09:05",
    },
)

ANNOUNCE_RESULT = ServiceResult(
    ok=True,
    op="announce",
    data={
        "reading": "2026-01-29T12:58:00",
        "local": "2026-01-29T13:58:00",
        "epoch": 1_769_691_480,
        "language": "en",
        "time": {"language": "en", "clips": ["/mp3_en/01.mp3", "/mp3_en/58.mp3", "/mp3_en/PM.mp3"], "pause_after": None},
        "date": {
            "language": "en",
            "clips": ["/mp3_en/04d.mp3", "/mp3_en/01mo.mp3"],
            "pause_after": 0,
        },
    },
)

FAILED = ServiceResult.failure("announce", "RTC_READ_FAILED", "RTC read failed", reason="timeout")


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"


class TestFormatResult:
    def test_json_wins(self) -> None:
        output = format_result(TIME_RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["data"]["time"] == "09:05"

    def test_quiet(self) -> None:
        output = format_result(TIME_RESULT, settings=OutputSettings(quiet=True))
        assert output == "/mp3/09_Uhr.mp3\n/mp3/05.mp3"

    def test_default_is_rich(self) -> None:
        output = format_result(TIME_RESULT)
        assert "compile_time" in output
        assert "/mp3/09_Uhr.mp3" in output


class TestRenderQuiet:
    def test_announce_joins_sections(self) -> None:
        lines = render_quiet(ANNOUNCE_RESULT).splitlines()
        assert lines[0] == "/mp3_en/01.mp3"
        assert lines[-1] == "/mp3_en/01mo.mp3"
        assert len(lines) == 5

    def test_failure(self) -> None:
        assert render_quiet(FAILED) == "ERROR: announce — RTC read failed"

    def test_no_clips(self) -> None:
        result = ServiceResult(ok=True, op="localize", data={"local": "2026-03-29T03:00:00"})
        assert render_quiet(result) == "OK: localize"


class TestRenderResult:
    def test_compiled_fields(self) -> None:
        output = render_result(TIME_RESULT)
        assert output.startswith("OK")
        assert "time: 09:05" in output
        assert "/mp3/05.mp3" in output

    def test_announce_marks_pause(self) -> None:
        output = render_result(ANNOUNCE_RESULT)
        assert "local: 2026-01-29T13:58:00" in output
        assert "pause" in output
        assert "epoch" not in output

    def test_announce_verbose(self) -> None:
        output = render_result(ANNOUNCE_RESULT, verbose=True)
        assert "epoch: 1769691480" in output
        assert "reading: 2026-01-29T12:58:00" in output

    def test_error_detail_only_when_verbose(self) -> None:
        assert "timeout" not in render_result(FAILED)
        output = render_result(FAILED, verbose=True)
        assert "ERROR" in output
        assert "reason: timeout" in output

    def test_generic_renderer(self) -> None:
        result = ServiceResult(
            ok=True,
            op="localize",
            data={"reading": "2026-03-29T01:00:00", "local": "2026-03-29T03:00:00", "weekday": 0},
        )
        output = render_result(result)
        assert "local: 2026-03-29T03:00:00" in output
        assert "weekday: 0" in output
