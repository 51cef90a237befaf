"""Tests for converter selection and the timezone database converter."""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from clockspeak.domain.calendar import CalendarDateTime
from clockspeak.domain.localize import FixedEuRuleConverter, PosixTzConverter
from clockspeak.domain.types import LocalizationRule
from clockspeak.infrastructure.zoneinfo_tz import ZoneInfoConverter, converter_for


def _has_zone(key: str) -> bool:
    try:
        ZoneInfo(key)
    except ZoneInfoNotFoundError:
        return False
    return True


needs_tzdata = pytest.mark.skipif(
    not _has_zone("Europe/Berlin"), reason="no timezone database available"
)


class TestConverterFor:
    def test_empty_selects_fixed_rule(self) -> None:
        converter = converter_for(LocalizationRule(posix_tz="  "))
        assert isinstance(converter, FixedEuRuleConverter)
        assert converter.offset_minutes == 60

    def test_posix_string(self) -> None:
        assert isinstance(converter_for(LocalizationRule()), PosixTzConverter)

    @needs_tzdata
    def test_iana_key(self) -> None:
        converter = converter_for(LocalizationRule(posix_tz="Europe/Berlin"))
        assert isinstance(converter, ZoneInfoConverter)
        assert repr(converter) == "ZoneInfoConverter('Europe/Berlin')"

    def test_unknown_zone(self) -> None:
        with pytest.raises(ValueError, match="Unknown timezone"):
            converter_for(LocalizationRule(posix_tz="Not/AZone"))


@needs_tzdata
class TestZoneInfoConverter:
    @pytest.mark.parametrize(
        ("utc", "local"),
        [
            ("2026-01-29T12:58:00", "2026-01-29T13:58:00"),
            ("2026-03-29T01:00:00", "2026-03-29T03:00:00"),
            ("2026-10-25T01:00:00", "2026-10-25T02:00:00"),
        ],
    )
    def test_berlin(self, utc: str, local: str) -> None:
        converter = ZoneInfoConverter("Europe/Berlin")
        assert converter.to_local(CalendarDateTime.parse(utc)).isoformat() == local

    def test_agrees_with_posix_rule(self) -> None:
        zone = ZoneInfoConverter("Europe/Berlin")
        posix = PosixTzConverter("CET-1CEST,M3.5.0/02,M10.5.0/03")
        for month in range(1, 13):
            for hour in (0, 1, 2, 23):
                utc = CalendarDateTime(year=2027, month=month, day=28, hour=hour)
                assert zone.to_local(utc) == posix.to_local(utc)
