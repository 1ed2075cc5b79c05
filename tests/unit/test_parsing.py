"""
Тесты для Parsing — разбор сумм из пользовательского ввода

Невалидный ввод → None (не 0): вызывающий код отклоняет ввод явно.
"""

import pytest

from src.core.math.decimal_float import ZERO, from_number
from src.core.presentation.parsing import (
    MAGNITUDE_SUFFIXES,
    parse_friendly_amount,
    parse_friendly_decimal,
)


class TestParseFriendlyAmount:
    """Тесты parse_friendly_amount."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12.5k", 12_500.0),
            ("3.4e9", 3.4e9),
            ("1,250", 1_250.0),
            ("1,250,000", 1_250_000.0),
            ("  7  ", 7.0),
            ("2K", 2_000.0),
            ("1.5 m", 1_500_000.0),
            ("4B", 4e9),
            ("3t", 3e12),
            ("1q", 1e15),
            ("1e3k", 1e6),
            (".5", 0.5),
            ("12.", 12.0),
            ("0", 0.0),
            ("-5", -5.0),
        ],
    )
    def test_accepted(self, text, expected):
        assert parse_friendly_amount(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            ",,,",
            "abc",
            "12kk",
            "k",
            "1.2.3",
            "12x",
            "inf",
            "nan",
            "Infinity",
            "0x10",
            "1_000",
            "1e400",
            "1e308q",
            "$100",
            "１２k",
            "٣",
            "12٣",
            "１.５",
        ],
    )
    def test_rejected(self, text):
        """Мусор → None, а не 0."""
        assert parse_friendly_amount(text) is None

    @pytest.mark.parametrize("value", [None, 123, 4.5, ["1k"]])
    def test_non_string_rejected(self, value):
        assert parse_friendly_amount(value) is None

    def test_suffix_table(self):
        assert MAGNITUDE_SUFFIXES == {"k": 1e3, "m": 1e6, "b": 1e9, "t": 1e12, "q": 1e15}


class TestParseFriendlyDecimal:
    """Тесты parse_friendly_decimal."""

    def test_valid(self):
        assert parse_friendly_decimal("12.5k") == from_number(12_500)

    def test_negative_clamped_to_zero(self):
        assert parse_friendly_decimal("-5") == ZERO

    def test_invalid_is_none(self):
        assert parse_friendly_decimal("abc") is None
        assert parse_friendly_decimal(None) is None
