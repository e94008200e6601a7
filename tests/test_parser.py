"""Tests for duration string parsing."""

import sys

import pytest

from durationkit.errors import ParseError
from durationkit.parser import parse


@pytest.mark.parametrize(
    "text, expected",
    [
        # HH:MM:SS
        ("02:30:45", 9045),
        ("00:00:01", 1),
        ("10:30:15", 37815),
        ("2:5:3", 7503),
        # HH:MM
        ("02:30", 9000),
        ("00:30", 1800),
        ("1:30", 5400),
        # plain seconds
        ("150", 150),
        ("0", 0),
        # short units
        ("2h 30m", 9000),
        ("2h30m", 9000),
        ("90m", 5400),
        ("30s", 30),
        ("1d 2h 30m", 95400),
        ("2d 3h 15m", 184500),
        ("1w", 604800),
        ("1mo", 2592000),
        ("1y", 31536000),
        # long units
        ("2 hours 30 minutes", 9000),
        ("2.5 hours", 9000),
        ("90 minutes", 5400),
        ("1 hour", 3600),
        ("30 seconds", 30),
        ("1h 30m 45s", 5445),
    ],
)
def test_parse(text, expected):
    assert parse(text) == expected


def test_decimal_comma():
    assert parse("2,5 hours") == 9000
    assert parse("1,5d") == 129600


def test_fraction_truncated_per_match():
    # 0.5s + 0.5s: each product is truncated on its own
    assert parse("0.5s 0.5s") == 0
    assert parse("1.5m") == 90


def test_unknown_units_are_skipped():
    assert parse("2h 5 parsecs 30m") == 9000
    assert parse("5 xyz") == 0


def test_no_match_is_zero():
    assert parse("") == 0
    assert parse("soon") == 0
    assert parse("1:2:3:4") == 0


def test_uppercase_units_not_recognised():
    assert parse("2H") == 0


class TestStrict:
    def test_valid_input_still_parses(self):
        assert parse("2h 30m", strict=True) == 9000
        assert parse("02:30", strict=True) == 9000
        assert parse("", strict=True) == 0

    def test_unknown_unit_raises(self):
        with pytest.raises(ParseError) as exc_info:
            parse("2h 5 parsecs", strict=True)
        assert exc_info.value.text == "2h 5 parsecs"
        assert "parsecs" in str(exc_info.value)

    def test_nothing_recognised_raises(self):
        with pytest.raises(ParseError):
            parse("soon", strict=True)


def test_overflowing_number_raises():
    with pytest.raises(ParseError):
        parse("9" * 400 + "h")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("9" * 400 + "s")


@pytest.mark.parametrize("text", ["١٢h", "١٢:٣٠", "١٢:٣٠:٠٠", "١٢"])
def test_non_ascii_digits_not_recognised(text):
    assert parse(text) == 0


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits"),
    reason="int() has no digit limit before Python 3.11",
)
@pytest.mark.parametrize("text", ["9" * 5000, "9" * 5000 + ":30", "1:" + "9" * 5000 + ":00"])
def test_overlong_numeric_literal_raises(text):
    with pytest.raises(ParseError):
        parse(text)
