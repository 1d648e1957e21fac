"""Timestamp formatting tests: ISO-8601 UTC with millisecond precision."""

from datetime import datetime, timedelta, timezone

from app.core.timestamps import format_iso_timestamp, utc_now


def test_formats_with_milliseconds_and_z():
    moment = datetime(2023, 12, 7, 10, 30, 0, 123456, tzinfo=timezone.utc)
    assert format_iso_timestamp(moment) == "2023-12-07T10:30:00.123Z"


def test_whole_seconds_keep_milliseconds():
    moment = datetime(2023, 12, 7, 10, 30, tzinfo=timezone.utc)
    assert format_iso_timestamp(moment) == "2023-12-07T10:30:00.000Z"


def test_converts_other_offsets_to_utc():
    brt = timezone(timedelta(hours=-3))
    moment = datetime(2023, 12, 7, 7, 30, tzinfo=brt)
    assert format_iso_timestamp(moment) == "2023-12-07T10:30:00.000Z"


def test_naive_datetime_treated_as_utc():
    assert format_iso_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo is timezone.utc
