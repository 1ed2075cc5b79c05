"""
Presentation — отображение и ввод денежных величин

Суффиксная и научная нотация DecimalFloat, разбор сумм из свободного ввода.
"""

from src.core.presentation.formatting import (
    DEFAULT_DECIMALS,
    SCI_WIDE_DECIMALS,
    SCI_WIDE_EXPONENT,
    SUFFIX_MIN_EXPONENT,
    SUFFIXES,
    FormatConfig,
    Notation,
    format_money,
    format_scientific,
    format_suffix,
    format_with_config,
)
from src.core.presentation.parsing import (
    MAGNITUDE_SUFFIXES,
    parse_friendly_amount,
    parse_friendly_decimal,
)

__all__ = [
    # Formatting — Constants
    "DEFAULT_DECIMALS",
    "SCI_WIDE_DECIMALS",
    "SCI_WIDE_EXPONENT",
    "SUFFIX_MIN_EXPONENT",
    "SUFFIXES",
    # Formatting — Types
    "FormatConfig",
    "Notation",
    # Formatting — Functions
    "format_money",
    "format_scientific",
    "format_suffix",
    "format_with_config",
    # Parsing
    "MAGNITUDE_SUFFIXES",
    "parse_friendly_amount",
    "parse_friendly_decimal",
]
