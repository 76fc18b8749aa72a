"""Tests for common.formatting module."""

from datetime import datetime, timedelta, timezone

import pytest

from redmine_cli.common.formatting import ellipsize, parse_timestamp, time_difference_as_text, unquote

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestTimeDifference:
    """Test human readable time differences."""

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(0), "0 seconds"),
            (timedelta(seconds=1), "1 second"),
            (timedelta(seconds=59), "59 seconds"),
            (timedelta(minutes=1, seconds=30), "1 minute"),
            (timedelta(hours=3), "3 hours"),
            (timedelta(days=2, hours=5), "2 days"),
            (timedelta(days=65), "2 months"),
            (timedelta(days=800), "2 years"),
        ],
    )
    def test_largest_unit(self, delta, expected):
        assert time_difference_as_text(START, START + delta) == expected

    def test_future_moment(self):
        assert time_difference_as_text(START + timedelta(hours=1), START) == "1 hour"


class TestParseTimestamp:
    def test_utc_suffix(self):
        assert parse_timestamp("2024-01-01T00:00:00Z") == START

    def test_naive_is_utc(self):
        assert parse_timestamp("2024-01-01T00:00:00") == START


class TestEllipsize:
    def test_short_text_unchanged(self):
        assert ellipsize("Short", 24) == "Short"

    def test_long_text_cut(self):
        text = ellipsize("This subject is much longer than allowed", 24)
        assert text == "This subject is much ..."
        assert len(text) == 24


class TestUnquote:
    @pytest.mark.parametrize(
        "value, expected",
        [('"Foo Bar"', "Foo Bar"), ("Foo", "Foo"), ('"Foo', '"Foo'), ('"', '"'), ('""', "")],
    )
    def test_unquote(self, value, expected):
        assert unquote(value) == expected
