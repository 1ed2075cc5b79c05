"""
Тесты для Formatting — суффиксная и научная нотация
"""

import pytest

from src.core.math.decimal_float import ZERO, DecimalFloat, from_number
from src.core.presentation.formatting import (
    SUFFIXES,
    FormatConfig,
    Notation,
    format_money,
    format_scientific,
    format_suffix,
    format_with_config,
)


# =============================================================================
# ТЕСТЫ: format_suffix
# =============================================================================


class TestFormatSuffix:
    """Тесты суффиксной нотации."""

    def test_thousands(self):
        """1500 → "1.50K" """
        assert format_suffix(from_number(1500)) == "1.50K"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5, "5.00"),
            (42.5, "42.5"),
            (999, "999"),
            (0.5, "0.50"),
            (12345, "12.3K"),
            (456e9, "456B"),
            (1e15, "1.00Qa"),
            (2.5e6, "2.50M"),
        ],
    )
    def test_values(self, value, expected):
        assert format_suffix(from_number(value)) == expected

    def test_plain_rounding_rolls_into_thousands(self):
        """999.6 округляется до 1000: "1.00K", а не "1000"."""
        assert format_suffix(from_number(999.6)) == "1.00K"
        assert format_suffix(from_number(999.996)) == "1.00K"
        assert format_suffix(from_number(999.4)) == "999"

    def test_zero(self):
        assert format_suffix(ZERO) == "0"

    def test_negative_is_zero(self):
        assert format_suffix(DecimalFloat(-5.0, 4)) == "0"

    def test_last_suffix(self):
        assert format_suffix(DecimalFloat(2.0, 60)) == "2.00Nod"

    def test_beyond_table_falls_back_to_scientific(self):
        """tier >= len(SUFFIXES) → научная нотация, без IndexError."""
        exponent = len(SUFFIXES) * 3
        assert format_suffix(DecimalFloat(1.5, exponent)) == f"1.500e{exponent}"

    def test_huge_exponent(self):
        assert format_suffix(DecimalFloat(7.0, 123456)) == "7.000e123456"

    def test_rounding_rolls_into_next_tier(self):
        """999.96K → "1.00M", а не "1000K" """
        assert format_suffix(DecimalFloat(9.9996, 5)) == "1.00M"

    def test_bounded_width(self):
        """Ширина строки ограничена на всём диапазоне таблицы."""
        for exponent in range(-3, len(SUFFIXES) * 3):
            for mantissa in (1.0, 4.5678, 9.999):
                assert len(format_suffix(DecimalFloat(mantissa, exponent))) <= 8

    def test_custom_decimals(self):
        assert format_suffix(from_number(1500), decimals=3) == "1.500K"


# =============================================================================
# ТЕСТЫ: format_scientific
# =============================================================================


class TestFormatScientific:
    """Тесты научной нотации."""

    def test_small_exponent(self):
        assert format_scientific(from_number(1500)) == "1.50e3"

    def test_large_exponent_more_decimals(self):
        assert format_scientific(DecimalFloat(4.5678, 42)) == "4.568e42"

    def test_zero(self):
        assert format_scientific(ZERO) == "0"

    def test_rounding_carries_into_exponent(self):
        """9.9999e7 → "1.000e8", а не "10.000e7" """
        assert format_scientific(DecimalFloat(9.9999, 7)) == "1.000e8"

    def test_negative_exponent(self):
        assert format_scientific(DecimalFloat(2.5, -3)) == "2.50e-3"


# =============================================================================
# ТЕСТЫ: format_money
# =============================================================================


class TestFormatMoney:
    """Тесты переключателя нотации."""

    def test_default_suffix(self):
        assert format_money(from_number(1500)) == "1.50K"

    def test_sci_enum(self):
        assert format_money(from_number(1500), Notation.SCI) == "1.50e3"

    def test_sci_string(self):
        assert format_money(from_number(1500), "sci") == "1.50e3"

    def test_unknown_notation_is_suffix(self):
        assert format_money(from_number(1500), "engineering") == "1.50K"

    def test_with_config(self):
        config = FormatConfig(notation=Notation.SCI, decimals=1)
        assert format_with_config(from_number(1500), config) == "1.5e3"
        assert format_with_config(from_number(1500)) == "1.50K"
