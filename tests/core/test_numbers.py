"""Tests for number parsing and result formatting."""

from decimal import Decimal

import pytest

from mathcli.core.numbers import format_number, parse_number


class TestParseNumber:
    """Accepted and rejected number syntax."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", Decimal(0)),
            ("42", Decimal(42)),
            ("-7", Decimal(-7)),
            ("+3", Decimal(3)),
            ("2.5", Decimal("2.5")),
            (".5", Decimal("0.5")),
            ("5.", Decimal(5)),
            ("1e3", Decimal(1000)),
            ("-1.5E-2", Decimal("-0.015")),
        ],
    )
    def test_valid(self, text: str, expected: Decimal) -> None:
        """Signed integers, decimals and exponents parse."""
        assert parse_number(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "abc", "1,000", "1_000", "NaN", "Infinity", "inf", "0x10", "1e", "--1", ".", "", "1 2",
            # Non-ASCII digits (Arabic-Indic, fullwidth)
            "١٢", "３",
        ],
    )
    def test_invalid(self, text: str) -> None:
        """Anything outside the decimal grammar is rejected."""
        assert parse_number(text) is None

    def test_fraction_is_exact(self) -> None:
        """Decimal parsing keeps 0.1 exact (no binary float rounding)."""
        assert parse_number("0.1") + parse_number("0.2") == Decimal("0.3")  # type: ignore[operator]


class TestFormatNumber:
    """Plain number output."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal(6), "6"),
            (Decimal("3.0"), "3"),
            (Decimal("0.50"), "0.5"),
            (Decimal("1E+3"), "1000"),
            (Decimal("-2.25"), "-2.25"),
            (Decimal("0.00"), "0"),
            (Decimal("-0"), "0"),
            (Decimal("1E-7"), "0.0000001"),
        ],
    )
    def test_format(self, value: Decimal, expected: str) -> None:
        """No trailing zeros, no exponent notation, no whitespace."""
        assert format_number(value) == expected
