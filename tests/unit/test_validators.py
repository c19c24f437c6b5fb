"""Unit tests for the field validators.

Covers:
- Each predicate's accept/reject boundary
- Trimming of surrounding whitespace
- Browser-style number parsing for count fields
- Totality: any input yields a bool without raising
"""

import math

import pytest

from wanderlux.forms import validators


@pytest.mark.parametrize(
    "value,expected",
    [("", False), ("A", False), ("  A  ", False), ("Al", True), ("  Jo  ", True)],
)
def test_is_non_empty_name(value, expected):
    assert validators.is_non_empty_name(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("jane@example.com", True),
        ("  jane@example.com  ", True),
        ("a@b.co", True),
        ("not-an-email", False),
        ("jane@example", False),
        ("jane doe@example.com", False),
        ("jane@@example.com", False),
        ("@example.com", False),
        ("jane@.com", False),
        ("", False),
    ],
)
def test_is_valid_email(value, expected):
    assert validators.is_valid_email(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("0412 345 678", True),
        ("+61 (2) 9999-0000", True),
        ("12345678", True),
        ("1234567", False),
        ("0412-345-67a", False),
        ("", False),
        # Digit-free strings of permitted characters are accepted
        ("(((())))", True),
    ],
)
def test_is_valid_phone(value, expected):
    assert validators.is_valid_phone(value) is expected


def test_is_valid_date_only_checks_presence():
    assert validators.is_valid_date("2026-11-01") is True
    assert validators.is_valid_date("whenever") is True
    assert validators.is_valid_date("   ") is False


@pytest.mark.parametrize(
    "value,expected",
    [("short", False), ("   123456789   ", False), ("a" * 10, True), ("Hello there, Bali!", True)],
)
def test_is_long_enough_message(value, expected):
    assert validators.is_long_enough_message(value) is expected


def test_known_destinations_and_styles():
    for destination in ("bali", "tokyo", "paris", "sydney"):
        assert validators.is_known_destination(destination) is True
    for style in ("budget", "standard", "luxury"):
        assert validators.is_known_style(style) is True

    assert validators.is_known_destination("london") is False
    assert validators.is_known_destination("") is False
    assert validators.is_known_destination(None) is False
    assert validators.is_known_style("premium") is False


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1", True),
        (" 3 ", True),
        ("2.5", True),
        ("1e1", True),
        ("0", False),
        ("0.99", False),
        ("-2", False),
        ("", False),
        ("abc", False),
        ("inf", False),
        ("nan", False),
        ("1_0", False),
    ],
)
def test_is_positive_count(value, expected):
    assert validators.is_positive_count(value) is expected


def test_parse_count_matches_browser_number_parse():
    assert validators.parse_count("") == 0.0
    assert validators.parse_count("  7 ") == 7.0
    assert math.isnan(validators.parse_count("seven"))


@pytest.mark.parametrize("value", [None, "", " ", "\n\t", "@", "💥" * 20, 42, 3.5])
def test_validators_are_total(value):
    predicates = [
        validators.is_non_empty_name,
        validators.is_valid_email,
        validators.is_valid_phone,
        validators.is_valid_date,
        validators.is_long_enough_message,
        validators.is_known_destination,
        validators.is_known_style,
        validators.is_positive_count,
    ]
    for predicate in predicates:
        assert isinstance(predicate(value), bool)
