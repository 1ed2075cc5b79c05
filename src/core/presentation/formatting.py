"""
Formatting — человекочитаемое отображение DecimalFloat

Два режима:
- Suffix (default): 1.50K, 12.3M, 456B, ... Qad, Nod
- Scientific: 1.50e3, 4.567e42

Ширина строки ограничена: число знаков после запятой уменьшается
с ростом величины внутри tier (2 → 1 → 0), поэтому отображение
не превышает 7 символов (8 — при fallback на научную нотацию).

Ноль и отрицательные значения (денежный домен) отображаются как "0".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.math.decimal_float import DecimalFloat, to_float

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Суффиксы по tier = exponent // 3 (индекс 0: без суффикса)
SUFFIXES: Final[tuple[str, ...]] = (
    "", "K", "M", "B", "T",
    "Qa", "Qi", "Sx", "Sp", "Oc", "No",
    "Dc", "Ud", "Dd", "Td", "Qad", "Qid",
    "Sxd", "Spd", "Ocd", "Nod",
)

# Значения ниже 10^3 отображаются как обычное десятичное число
SUFFIX_MIN_EXPONENT: Final[int] = 3

# Начиная с этого exponent научная нотация показывает больше знаков мантиссы
SCI_WIDE_EXPONENT: Final[int] = 6

# Число знаков мантиссы в научной нотации при exponent >= SCI_WIDE_EXPONENT
SCI_WIDE_DECIMALS: Final[int] = 3

DEFAULT_DECIMALS: Final[int] = 2


class Notation(str, Enum):
    """Режим отображения денежных величин."""

    SUFFIX = "suffix"
    SCI = "sci"


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация отображения (переключатель нотации в настройках)."""

    notation: Notation = Notation.SUFFIX
    decimals: int = DEFAULT_DECIMALS


# =============================================================================
# HELPERS
# =============================================================================


def _decimals_for(value: float, decimals: int) -> int:
    """2 знака до 10, 1 знак до 100, 0 знаков от 100."""
    if value >= 100:
        return 0
    if value >= 10:
        return 1
    return decimals


def _display_places(value: float, decimals: int) -> int:
    """Число знаков с учётом округления: 9.999 → "10.0", а не "10.00"."""
    places = _decimals_for(value, decimals)
    return _decimals_for(round(value, places), decimals)


def _fixed(value: float, places: int) -> str:
    return f"{value:.{places}f}"


# =============================================================================
# SCIENTIFIC
# =============================================================================


def format_scientific(value: DecimalFloat, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Научная нотация: mantissa.toFixed(d) + "e" + exponent.

    При exponent >= SCI_WIDE_EXPONENT показывается SCI_WIDE_DECIMALS знаков,
    т.к. грубая мантисса на больших порядках вводит в заблуждение.

    Examples:
        >>> format_scientific(from_number(1500))
        '1.50e3'
        >>> format_scientific(from_number(4.5678e42))
        '4.568e42'
    """
    if value.mantissa <= 0:
        return "0"

    places = decimals if value.exponent < SCI_WIDE_EXPONENT else max(decimals, SCI_WIDE_DECIMALS)
    mantissa = value.mantissa
    exponent = value.exponent

    # 9.9996 → "10.000" недопустимо: переносим разряд в exponent
    if round(mantissa, places) >= 10:
        mantissa /= 10.0
        exponent += 1

    return f"{_fixed(mantissa, places)}e{exponent}"


# =============================================================================
# SUFFIX
# =============================================================================


def format_suffix(value: DecimalFloat, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Суффиксная нотация.

    tier = exponent // 3; остаток exponent внутри tier переносится в
    отображаемую мантиссу. Если tier выходит за таблицу SUFFIXES —
    fallback на научную нотацию.

    Examples:
        >>> format_suffix(from_number(1500))
        '1.50K'
        >>> format_suffix(from_number(42.5))
        '42.5'
    """
    if value.mantissa <= 0:
        return "0"

    if value.exponent < SUFFIX_MIN_EXPONENT:
        # Tier 0 без суффикса, включая дробные значения
        tier = 0
        shown = to_float(value)
    else:
        tier = value.exponent // 3
        if tier >= len(SUFFIXES):
            return format_scientific(value, decimals)
        shown = value.mantissa * 10 ** (value.exponent - tier * 3)

    places = _display_places(shown, decimals)

    # 999.7K → "1000K", 999.6 → "1000": переносим в следующий tier
    if round(shown, places) >= 1000:
        tier += 1
        if tier >= len(SUFFIXES):
            return format_scientific(value, decimals)
        shown /= 1000.0
        places = _display_places(shown, decimals)

    return f"{_fixed(shown, places)}{SUFFIXES[tier]}"


# =============================================================================
# DISPATCH
# =============================================================================


def format_money(
    value: DecimalFloat,
    notation: Notation | str = Notation.SUFFIX,
    decimals: int = DEFAULT_DECIMALS,
) -> str:
    """
    Отображение денежной величины в выбранной нотации.

    Неизвестная нотация трактуется как suffix.
    """
    if notation == Notation.SCI:
        return format_scientific(value, decimals)
    return format_suffix(value, decimals)


def format_with_config(value: DecimalFloat, config: FormatConfig | None = None) -> str:
    """format_money с параметрами из FormatConfig."""
    cfg = config or FormatConfig()
    return format_money(value, cfg.notation, cfg.decimals)
