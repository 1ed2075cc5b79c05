"""
Parsing — разбор денежных сумм из пользовательского ввода

Грамматика:
    NUMBER [SUFFIX]

    NUMBER — обычный или научный десятичный литерал ("1250", "12.5", "3.4e9");
             запятые (разделители тысяч) удаляются до разбора
    SUFFIX — k/m/b/t/q (регистр не важен): ×10^3 / 10^6 / 10^9 / 10^12 / 10^15

Невалидный ввод возвращает None (а не 0): вызывающий код должен отклонить
ввод явно, а не трактовать мусор как "$0".
"""

import re
from typing import Final

from src.core.logging import get_logger
from src.core.math.decimal_float import DecimalFloat, from_number
from src.core.math.numerical_safeguards import is_valid_float

logger = get_logger(__name__)

# Множители суффиксов величины
MAGNITUDE_SUFFIXES: Final[dict[str, float]] = {
    "k": 1e3,
    "m": 1e6,
    "b": 1e9,
    "t": 1e12,
    "q": 1e15,
}

_AMOUNT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""
    ^
    (?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    \s*
    (?P<suffix>[kmbtq])?
    $
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


def parse_friendly_amount(text: str | None) -> float | None:
    """
    Разбор суммы из свободного текста в plain float.

    Args:
        text: Ввод пользователя

    Returns:
        Число или None, если ввод не соответствует грамматике
        либо результат не конечен

    Examples:
        >>> parse_friendly_amount("12.5k")
        12500.0
        >>> parse_friendly_amount("1,250")
        1250.0
        >>> parse_friendly_amount("3.4e9")
        3400000000.0
        >>> parse_friendly_amount("abc") is None
        True
    """
    if not isinstance(text, str):
        return None

    cleaned = text.strip().replace(",", "")
    if not cleaned:
        return None

    match = _AMOUNT_PATTERN.match(cleaned)
    if match is None:
        logger.debug("friendly_amount_rejected", text=text)
        return None

    amount = float(match.group("number"))
    suffix = match.group("suffix")
    if suffix:
        amount *= MAGNITUDE_SUFFIXES[suffix.lower()]

    if not is_valid_float(amount):
        logger.debug("friendly_amount_not_finite", text=text)
        return None

    return amount


def parse_friendly_decimal(text: str | None) -> DecimalFloat | None:
    """
    Разбор суммы сразу в DecimalFloat.

    Returns:
        DecimalFloat (отрицательные суммы → ZERO) или None при невалидном вводе
    """
    amount = parse_friendly_amount(text)
    if amount is None:
        return None
    return from_number(amount)
