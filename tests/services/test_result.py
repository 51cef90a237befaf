"""Tests for ServiceResult and ServiceError."""

import json

from clockspeak.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="compile_time", data={"clips": ["/mp3/1300.mp3"]})
        assert result.ok is True
        assert result.data == {"clips": ["/mp3/1300.mp3"]}
        assert result.warnings == []
        assert result.error is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("announce", "RTC_READ_FAILED", "RTC read failed", reason="i2c")
        assert result.ok is False
        assert result.error == ServiceError(
            code="RTC_READ_FAILED", message="RTC read failed", detail={"reason": "i2c"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="localize", data={"local": "2026-03-29T03:00:00"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["local"] == "2026-03-29T03:00:00"
        assert parsed["error"] is None
