"""
Arithmetic — операции над DecimalFloat

Модуль реализует арифметику extended-range чисел с сохранением инварианта
нормализации для операндов, отличающихся на сотни порядков:
- compare / add / subtract / multiply / divide / multiply_scalar
- pow10 (дробный показатель) и log10 — пара для вычислений в log-space

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не выбрасывает исключений (never throw: код работает
   внутри per-frame цикла)
2. Денежный clamp: результат subtract никогда не отрицателен
3. Деление на ноль → канонический ноль
4. Операнды не мутируются, результат — новый DecimalFloat
5. Отрицательные мантиссы при сравнении трактуются как ноль
"""

import math
from typing import Final

from src.core.math.decimal_float import ZERO, DecimalFloat
from src.core.math.numerical_safeguards import (
    is_valid_float,
    safe_log10,
    safe_pow10,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Порог точности для add/subtract: если показатели различаются больше чем
# на 12 порядков, меньший операнд отбрасывается целиком. Значение влияет на
# наблюдаемый баланс экономики и не должно меняться.
PRECISION_CUTOFF_EXPONENT: Final[int] = 12

# Ниже этого показателя pow10 возвращает канонический ноль
POW10_MIN_EXPONENT: Final[float] = -999_999_999.0


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def is_zero(a: DecimalFloat) -> bool:
    """True если значение — канонический ноль."""
    return a.mantissa == 0


def compare(a: DecimalFloat, b: DecimalFloat) -> int:
    """
    Сравнение двух DecimalFloat.

    Порядок проверок:
        1. Ноль равен нулю; ненулевое больше нуля
        2. Больший exponent побеждает
        3. При равных exponent сравниваются мантиссы

    Отрицательные значения трактуются как ноль (денежный домен).

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> compare(from_number(5), from_number(8))
        -1
        >>> compare(ZERO, ZERO)
        0
    """
    a_empty = a.mantissa <= 0
    b_empty = b.mantissa <= 0

    if a_empty and b_empty:
        return 0
    if a_empty:
        return -1
    if b_empty:
        return 1

    if a.exponent != b.exponent:
        return -1 if a.exponent < b.exponent else 1
    if a.mantissa == b.mantissa:
        return 0
    return -1 if a.mantissa < b.mantissa else 1


def max_of(a: DecimalFloat, b: DecimalFloat) -> DecimalFloat:
    """Больший из двух операндов (по compare)."""
    return b if compare(b, a) > 0 else a


def min_of(a: DecimalFloat, b: DecimalFloat) -> DecimalFloat:
    """Меньший из двух операндов (по compare)."""
    return b if compare(b, a) < 0 else a


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def _non_negative(value: DecimalFloat) -> DecimalFloat:
    """Денежный clamp: отрицательный результат насыщается до ZERO."""
    return ZERO if value.mantissa < 0 else value


def add(a: DecimalFloat, b: DecimalFloat) -> DecimalFloat:
    """
    Сложение a + b.

    Меньший по порядку операнд переводится в систему отсчёта большего:
        m = hi.m + lo.m / 10^(hi.e - lo.e)

    Если разница порядков > PRECISION_CUTOFF_EXPONENT, меньший операнд
    отбрасывается (его вклад ниже точности большего).
    Отрицательный результат насыщается до ZERO.

    Examples:
        >>> add(from_number(5), from_number(5))
        DecimalFloat(mantissa=1.0, exponent=1)
    """
    if is_zero(a):
        return _non_negative(b)
    if is_zero(b):
        return _non_negative(a)

    hi, lo = (b, a) if b.exponent > a.exponent else (a, b)
    delta = hi.exponent - lo.exponent
    if delta > PRECISION_CUTOFF_EXPONENT:
        return _non_negative(hi)

    return _non_negative(DecimalFloat(hi.mantissa + lo.mantissa / 10.0 ** delta, hi.exponent))


def subtract(a: DecimalFloat, b: DecimalFloat) -> DecimalFloat:
    """
    Вычитание a - b с денежным clamp.

    - compare(a, b) <= 0 → ZERO (никогда не отрицательно)
    - b пренебрежимо мал относительно a (> PRECISION_CUTOFF_EXPONENT порядков) → a
    - неположительный b не уменьшает a

    Examples:
        >>> subtract(from_number(5), from_number(8))
        DecimalFloat(mantissa=0.0, exponent=0)
    """
    if b.mantissa <= 0:
        return _non_negative(a)
    if compare(a, b) <= 0:
        return ZERO

    delta = a.exponent - b.exponent
    if delta > PRECISION_CUTOFF_EXPONENT:
        return a

    return DecimalFloat(a.mantissa - b.mantissa / 10.0 ** delta, a.exponent)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def multiply(a: DecimalFloat, b: DecimalFloat) -> DecimalFloat:
    """Умножение: мантиссы перемножаются, показатели складываются."""
    if is_zero(a) or is_zero(b):
        return ZERO
    return DecimalFloat(a.mantissa * b.mantissa, a.exponent + b.exponent)


def divide(a: DecimalFloat, b: DecimalFloat) -> DecimalFloat:
    """
    Деление a / b.

    Деление на ноль возвращает ZERO вместо исключения.
    """
    if is_zero(a) or is_zero(b):
        return ZERO
    return DecimalFloat(a.mantissa / b.mantissa, a.exponent - b.exponent)


def multiply_scalar(a: DecimalFloat, scalar: float) -> DecimalFloat:
    """
    Умножение на plain float.

    Скаляр сначала нормализуется, поэтому большие скаляры (1e300)
    не переполняют мантиссу. Нулевой, NaN/Inf скаляр → ZERO.
    """
    if is_zero(a) or not is_valid_float(scalar) or scalar == 0:
        return ZERO
    return multiply(a, DecimalFloat(scalar, 0))


# =============================================================================
# LOG-SPACE
# =============================================================================


def pow10(exponent: float) -> DecimalFloat:
    """
    10^exponent для дробного вещественного показателя.

    exponent = e + f, где e = floor(exponent), f ∈ [0, 1):
        10^exponent = 10^f × 10^e

    10^f вычисляется обычным float (всегда в [1, 10)), поэтому
    промежуточные значения никогда не переполняются.

    Examples:
        >>> pow10(3.0)
        DecimalFloat(mantissa=1.0, exponent=3)
        >>> pow10(float('inf'))
        DecimalFloat(mantissa=0.0, exponent=0)
    """
    if not is_valid_float(exponent) or exponent < POW10_MIN_EXPONENT:
        return ZERO
    whole = math.floor(exponent)
    frac = exponent - whole
    return DecimalFloat(safe_pow10(frac), whole)


def log10(a: DecimalFloat) -> float:
    """
    log10 значения как plain float: log10(mantissa) + exponent.

    Returns:
        -inf для нуля и отрицательных значений; ±inf если exponent
        не помещается во float64
    """
    if a.mantissa <= 0:
        return -math.inf
    try:
        return safe_log10(a.mantissa) + a.exponent
    except OverflowError:
        # int показатель вне диапазона float64
        return math.copysign(math.inf, a.exponent)
