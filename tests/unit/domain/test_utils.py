"""Unit tests for govcat.domain.utils (UTC millisecond timestamps)."""

import datetime

import pytest

from govcat.domain.utils import (
    format_timestamp,
    parse_timestamp,
    truncate_to_millis,
    utc_now_ms,
)

# pylint: disable=magic-value-comparison

UTC = datetime.timezone.utc


def test_truncate_to_millis_drops_microseconds():
    """Sub-millisecond digits are discarded, not rounded."""
    value = datetime.datetime(2024, 1, 1, 0, 0, 0, 123999, tzinfo=UTC)
    assert truncate_to_millis(value).microsecond == 123000


def test_utc_now_ms_is_aware_and_truncated():
    """The wall clock is UTC and has no sub-millisecond part."""
    now = utc_now_ms()
    assert now.tzinfo is not None
    assert now.utcoffset() == datetime.timedelta(0)
    assert now.microsecond % 1000 == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (datetime.datetime(2024, 1, 1, tzinfo=UTC), "2024-01-01T00:00:00.000Z"),
        (
            datetime.datetime(2024, 3, 9, 7, 5, 3, 45000, tzinfo=UTC),
            "2024-03-09T07:05:03.045Z",
        ),
        (datetime.datetime(2024, 1, 1, 12, 0), "2024-01-01T12:00:00.000Z"),
        (
            datetime.datetime(
                2024, 1, 1, 2, 0, tzinfo=datetime.timezone(datetime.timedelta(hours=2))
            ),
            "2024-01-01T00:00:00.000Z",
        ),
    ],
    ids=["midnight", "millis", "naive", "offset"],
)
def test_format_timestamp(value, expected):
    """Timestamps render as UTC with exactly three fractional digits and ``Z``."""
    assert format_timestamp(value) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (
            "2024-01-01T00:00:00.000Z",
            datetime.datetime(2024, 1, 1, tzinfo=UTC),
        ),
        (
            "2024-01-01T02:00:00+02:00",
            datetime.datetime(2024, 1, 1, tzinfo=UTC),
        ),
        (
            "2024-01-01T00:00:00",
            datetime.datetime(2024, 1, 1, tzinfo=UTC),
        ),
    ],
    ids=["zulu", "offset", "naive"],
)
def test_parse_timestamp(text, expected):
    """ISO-8601 input is normalized to an aware UTC datetime."""
    parsed = parse_timestamp(text)
    assert parsed == expected
    assert parsed.utcoffset() == datetime.timedelta(0)


def test_parse_timestamp_rejects_garbage():
    """Non-ISO input raises ValueError."""
    with pytest.raises(ValueError):
        parse_timestamp("yesterday")


def test_written_timestamps_survive_a_round_trip():
    """format → parse → format reproduces the same text."""
    text = format_timestamp(utc_now_ms())
    assert format_timestamp(parse_timestamp(text)) == text
