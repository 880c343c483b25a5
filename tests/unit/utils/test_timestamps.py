"""Unit tests for brbs.utils.timestamps."""

from datetime import date, datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from brbs.utils.timestamps import (
    EPOCH_MIN,
    as_utc,
    format_timestamp,
    parse_timestamp,
    utc_now,
)

UTC = timezone.utc


class TestParseTimestamp:
    """parse_timestamp"""

    @staticmethod
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2025-04-19T14:10:00Z", datetime(2025, 4, 19, 14, 10, tzinfo=UTC)),
            ("2025-04-19T16:10:00+02:00", datetime(2025, 4, 19, 14, 10, tzinfo=UTC)),
            ("2025-01-10", datetime(2025, 1, 10, tzinfo=UTC)),
            ("2025-01-10T08:00:00", datetime(2025, 1, 10, 8, tzinfo=UTC)),
            (" 2025-01-10 ", datetime(2025, 1, 10, tzinfo=UTC)),
            (date(2024, 6, 1), datetime(2024, 6, 1, tzinfo=UTC)),
        ],
    )
    def test_parses_to_aware_utc(raw, expected):
        parsed = parse_timestamp(raw)
        assert parsed == expected
        assert parsed is not None and parsed.tzinfo is not None

    @staticmethod
    @pytest.mark.parametrize("raw", [None, "", "next tuesday", 42, ["2025-01-01"]])
    def test_unusable_values_are_none(raw):
        assert parse_timestamp(raw) is None

    @staticmethod
    def test_naive_datetime_is_taken_as_utc():
        assert parse_timestamp(datetime(2025, 1, 1, 12)) == datetime(
            2025, 1, 1, 12, tzinfo=UTC
        )


class TestFormatTimestamp:
    """format_timestamp"""

    @staticmethod
    def test_none_passes_through():
        assert format_timestamp(None) is None

    @staticmethod
    def test_converts_offsets_to_utc():
        value = datetime(2025, 1, 1, 14, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2025-01-01T12:00:00+00:00"

    @staticmethod
    @given(
        st.datetimes(
            min_value=datetime(1970, 1, 1), max_value=datetime(2100, 1, 1), timezones=st.just(UTC)
        )
    )
    @pytest.mark.property
    def test_parse_inverts_format(value):
        assert parse_timestamp(format_timestamp(value)) == value


class TestAsUtc:
    """as_utc"""

    @staticmethod
    def test_naive_is_tagged_utc():
        assert as_utc(datetime(2026, 1, 20)) == datetime(2026, 1, 20, tzinfo=UTC)

    @staticmethod
    def test_offsets_are_converted():
        value = datetime(2026, 1, 20, 9, tzinfo=timezone(timedelta(hours=-5)))
        converted = as_utc(value)
        assert converted == datetime(2026, 1, 20, 14, tzinfo=UTC)
        assert converted.utcoffset() == timedelta(0)


def test_epoch_min_sorts_before_everything():
    assert EPOCH_MIN < datetime(1, 1, 2, tzinfo=UTC)
    assert EPOCH_MIN.tzinfo is not None


def test_utc_now_is_aware():
    assert utc_now().tzinfo is not None
