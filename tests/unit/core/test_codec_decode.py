"""Tests for decoding date/time strings into instants."""

import logging

import pytest

from pgtemporal import TemporalCodec, TemporalConfig, ZoneMode, decode, decode_self_describing, decode_with_mode
from pgtemporal.core.instant import Instant
from pgtemporal.exceptions import TemporalDecodeError, TemporalModeError
from pgtemporal.utils.logging import DecodeEvent

MIDNIGHT_UTC_MS = 1_621_900_800_000  # 2021-05-25T00:00:00Z
REFERENCE_MS = 1_621_953_670_249  # 2021-05-25T14:41:10.249Z
FIVE_HOURS_MS = 5 * 3_600_000


class TestNullPreservation:
    @pytest.mark.parametrize("mode", [None, "UTC", "local", ZoneMode.UTC, ZoneMode.LOCAL, "bogus"])
    def test_none_in_none_out(self, mode: "str | None") -> None:
        assert decode(None, mode) is None  # type: ignore[arg-type]

    def test_named_variants(self) -> None:
        assert decode_self_describing(None) is None
        assert decode_with_mode(None, "UTC") is None
        assert decode_with_mode(None, None) is None

    def test_strict_codec(self) -> None:
        assert TemporalCodec(TemporalConfig(strict=True)).decode(None) is None


class TestSelfDescribing:
    @pytest.mark.parametrize(
        "value",
        ["2021-05-25T14:41:10.249097Z", "2021-05-25T16:41:10.249097+02", "2021-05-25T09:41:10.249-05:00"],
    )
    def test_decode_zoned(self, value: str) -> None:
        assert decode(value) == Instant(REFERENCE_MS)
        assert decode_self_describing(value) == Instant(REFERENCE_MS)

    def test_host_zone_does_not_matter(self, host_tz: str) -> None:
        assert decode("2021-05-25T14:41:10.249Z") == Instant(REFERENCE_MS)

    def test_zoneless_is_parsed_leniently(self, host_tz: str) -> None:
        assert decode("2021-05-25") == Instant(MIDNIGHT_UTC_MS)
        assert decode("2021-05-25T00:00") == Instant(MIDNIGHT_UTC_MS + FIVE_HOURS_MS)

    def test_zoneless_rejected_in_strict_mode(self) -> None:
        codec = TemporalCodec(TemporalConfig(strict=True))
        with pytest.raises(TemporalDecodeError, match="no zone suffix"):
            codec.decode("2021-05-25T14:41:10")
        with pytest.raises(TemporalDecodeError):
            codec.decode_self_describing("2021-05-25")


class TestUTCMode:
    def test_date_only_is_utc_midnight(self, host_tz: str) -> None:
        assert decode("2021-05-25", "UTC") == Instant(MIDNIGHT_UTC_MS)

    def test_timestamp(self, host_tz: str) -> None:
        assert decode("2021-05-25T14:41:10.249097", "UTC") == Instant(REFERENCE_MS)

    def test_enum_and_string_agree(self) -> None:
        assert decode("2021-05-25T14:41", ZoneMode.UTC) == decode("2021-05-25T14:41", "UTC")

    def test_decode_with_mode(self) -> None:
        assert decode_with_mode("2021-05-25", "UTC") == Instant(MIDNIGHT_UTC_MS)


class TestLocalMode:
    def test_date_only_is_local_midnight(self, host_tz: str) -> None:
        result = decode("2021-05-25", "local")
        assert result == Instant(MIDNIGHT_UTC_MS + FIVE_HOURS_MS)
        assert result != Instant(MIDNIGHT_UTC_MS)

    @pytest.mark.parametrize("host_tz", ["XJT-09"], indirect=True)
    def test_date_only_east_of_utc(self, host_tz: str) -> None:
        assert decode("2021-05-25", ZoneMode.LOCAL) == Instant(MIDNIGHT_UTC_MS - 9 * 3_600_000)

    def test_timestamp(self, host_tz: str) -> None:
        assert decode("2021-05-25T09:41:10.249097", "local") == Instant(REFERENCE_MS)

    def test_local_date_matches_local_midnight_timestamp(self, host_tz: str) -> None:
        assert decode("2021-05-25", "local") == decode("2021-05-25T00:00", "local")

    @pytest.mark.parametrize("host_tz", ["CET-1CEST,M3.5.0,M10.5.0/3"], indirect=True)
    def test_daylight_saving_offset(self, host_tz: str) -> None:
        # CEST is UTC+2 in May, CET is UTC+1 in January
        assert decode("2021-05-25", "local") == Instant(MIDNIGHT_UTC_MS - 2 * 3_600_000)
        assert decode("2021-01-01T00:00", "local") == Instant(1_609_459_200_000 - 3_600_000)


class TestTruncation:
    @pytest.mark.parametrize("mode", ["UTC", "local"])
    def test_microseconds_are_truncated(self, mode: str, host_tz: str) -> None:
        result = decode("2021-05-25T14:41:10.249999", mode)  # type: ignore[arg-type]
        assert result is not None
        assert result.epoch_ms is not None
        assert result.epoch_ms % 1000 == 249

    def test_zoned_microseconds_are_truncated(self) -> None:
        assert decode("2021-05-25T14:41:10.2499Z") == Instant(REFERENCE_MS)


class TestModes:
    def test_unknown_mode(self) -> None:
        with pytest.raises(TemporalModeError):
            decode("2021-05-25", "utc")  # type: ignore[arg-type]

    def test_decode_with_mode_requires_mode(self) -> None:
        with pytest.raises(TemporalModeError):
            decode_with_mode("2021-05-25", None)


class TestMalformedInput:
    @pytest.mark.parametrize(("value", "mode"), [("garbage", None), ("2021-13-40", "UTC"), ("2021-02-30", "local")])
    def test_lenient_returns_invalid_instant(self, value: str, mode: "str | None") -> None:
        result = decode(value, mode)  # type: ignore[arg-type]
        assert result is not None
        assert not result.is_valid

    def test_strict_raises(self) -> None:
        codec = TemporalCodec(TemporalConfig(strict=True))
        with pytest.raises(TemporalDecodeError) as exc_info:
            codec.decode("2021-13-40", "UTC")
        assert exc_info.value.value == "2021-13-40"

    def test_invalid_input_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pgtemporal"):
            decode("garbage")
        records = [r for r in caplog.records if r.name == "pgtemporal.core.codec"]
        assert records
        event = records[0].decode_event  # type: ignore[attr-defined]
        assert event == DecodeEvent(value="garbage", mode=None, shape=None)

    def test_logging_can_be_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        codec = TemporalCodec(TemporalConfig(log_invalid=False))
        with caplog.at_level(logging.DEBUG, logger="pgtemporal"):
            codec.decode("garbage")
        assert not [r for r in caplog.records if r.name == "pgtemporal.core.codec"]


def test_codec_config_is_copied() -> None:
    config = TemporalConfig(strict=True)
    codec = TemporalCodec(config)
    config.strict = False
    assert codec.config.strict is True
