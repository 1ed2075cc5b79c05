"""
DecimalFloat — Extended-range decimal floating value

Представление денежных величин, выходящих за диапазон float64:

    value = mantissa × 10^exponent

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Канонический ноль: mantissa = 0.0, exponent = 0 (других нулей нет)
2. Для ненулевых значений: 1 <= |mantissa| < 10, exponent — целое
3. NaN/Inf в любом поле → канонический ноль (никогда не пропагирует)
4. Значение immutable: операции всегда возвращают новый экземпляр

Нормализация выполняется в конструкторе, поэтому невалидный DecimalFloat
не может существовать ни в одной точке системы.
"""

import math
from dataclasses import dataclass
from typing import Final

from src.core.math.numerical_safeguards import FLOAT_MAX_EXP10, is_valid_float

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Верхняя граница мантиссы (исключительно)
MANTISSA_UPPER: Final[float] = 10.0

# Нижняя граница мантиссы (включительно) для ненулевых значений
MANTISSA_LOWER: Final[float] = 1.0

# Максимальный сдвиг, при котором 10**shift гарантированно конечен и ненулевой
_SINGLE_STEP_SHIFT_LIMIT: Final[int] = 300


# =============================================================================
# NORMALIZER
# =============================================================================


def _scale_by_pow10(mantissa: float, shift: int) -> float:
    """mantissa / 10**shift без overflow/underflow промежуточного 10**shift."""
    if -_SINGLE_STEP_SHIFT_LIMIT <= shift <= _SINGLE_STEP_SHIFT_LIMIT:
        # 10**k точно представимо только для k >= 0: 0.6 / 0.1 != 6.0, 0.6 * 10 == 6.0
        if shift < 0:
            return mantissa * 10.0 ** -shift
        return mantissa / 10.0 ** shift
    half = shift // 2
    return _scale_by_pow10(_scale_by_pow10(mantissa, half), shift - half)


def normalize_parts(mantissa: float, exponent: float) -> tuple[float, int]:
    """
    Приведение произвольной пары (mantissa, exponent) к канонической форме.

    Алгоритм:
        1. NaN/Inf в любом поле или mantissa == 0 → (0.0, 0)
        2. exponent усекается до целого
        3. shift = floor(log10(|mantissa|)); mantissa /= 10^shift; exponent += shift
        4. Fix-up цикл поглощает дрейф округления (9.9999999997, 10.0000000003)

    Args:
        mantissa: Мантисса (любое float значение)
        exponent: Показатель степени (дробная часть отбрасывается)

    Returns:
        (mantissa, exponent) в канонической форме

    Examples:
        >>> normalize_parts(1500.0, 0)
        (1.5, 3)
        >>> normalize_parts(float('nan'), 3)
        (0.0, 0)
        >>> normalize_parts(-0.25, 2)
        (-2.5, 1)
    """
    if not is_valid_float(mantissa) or not is_valid_float(exponent):
        return (0.0, 0)
    if mantissa == 0:
        return (0.0, 0)

    sign = -1.0 if mantissa < 0 else 1.0
    e = math.trunc(exponent)
    try:
        m = abs(float(mantissa))
    except OverflowError:
        # int вне диапазона float64: старшие разряды переносятся в exponent
        digits = math.floor(math.log10(abs(mantissa)))
        m = abs(mantissa) / 10**digits
        e += digits

    # Уже нормализовано: log10 около 10 округляется до 1.0 и сдвигает мантиссу
    if MANTISSA_LOWER <= m < MANTISSA_UPPER:
        return (sign * m, e)

    shift = math.floor(math.log10(m))
    m = _scale_by_pow10(m, shift)
    e += shift

    # Дрейф округления после деления
    while m >= MANTISSA_UPPER:
        m /= 10.0
        e += 1
    while m < MANTISSA_LOWER:
        m *= 10.0
        e -= 1

    return (sign * m, e)


# =============================================================================
# VALUE TYPE
# =============================================================================


@dataclass(frozen=True)
class DecimalFloat:
    """
    Immutable extended-range число: mantissa × 10^exponent.

    Конструктор всегда нормализует входные данные, поэтому
    DecimalFloat(15, 2) == DecimalFloat(1.5, 3).

    Арифметика доступна как через функции src.core.math.arithmetic,
    так и через операторы (+, -, *, /, <, <=, >, >=).
    Операнды-числа арифметики приводятся через from_number; сравнения
    (как и ==) определены только между DecimalFloat.
    """

    mantissa: float = 0.0
    exponent: int = 0

    def __post_init__(self) -> None:
        m, e = normalize_parts(self.mantissa, self.exponent)
        object.__setattr__(self, "mantissa", m)
        object.__setattr__(self, "exponent", e)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        """True для канонического нуля."""
        return self.mantissa == 0

    def __bool__(self) -> bool:
        return not self.is_zero

    def __float__(self) -> float:
        return to_float(self)

    # -------------------------------------------------------------------------
    # Операторы (делегируют в arithmetic)
    # -------------------------------------------------------------------------

    def __add__(self, other):
        return _ops.add(self, coerce(other))

    __radd__ = __add__

    def __sub__(self, other):
        return _ops.subtract(self, coerce(other))

    def __rsub__(self, other):
        return _ops.subtract(coerce(other), self)

    def __mul__(self, other):
        if isinstance(other, DecimalFloat):
            return _ops.multiply(self, other)
        return _ops.multiply_scalar(self, other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return _ops.divide(self, coerce(other))

    def __rtruediv__(self, other):
        return _ops.divide(coerce(other), self)

    def __lt__(self, other):
        if not isinstance(other, DecimalFloat):
            return NotImplemented
        return _ops.compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, DecimalFloat):
            return NotImplemented
        return _ops.compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, DecimalFloat):
            return NotImplemented
        return _ops.compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, DecimalFloat):
            return NotImplemented
        return _ops.compare(self, other) >= 0


ZERO: Final[DecimalFloat] = DecimalFloat(0.0, 0)
ONE: Final[DecimalFloat] = DecimalFloat(1.0, 0)


# =============================================================================
# КОНСТРУКТОРЫ И КОНВЕРСИИ
# =============================================================================


def normalize(mantissa: float, exponent: float = 0) -> DecimalFloat:
    """Построение DecimalFloat из сырой пары (mantissa, exponent)."""
    return DecimalFloat(mantissa, exponent)


def from_number(value: float) -> DecimalFloat:
    """
    DecimalFloat из plain числа.

    Денежный домен: неположительные и NaN/Inf значения → ZERO.

    Examples:
        >>> from_number(1500)
        DecimalFloat(mantissa=1.5, exponent=3)
        >>> from_number(-3)
        DecimalFloat(mantissa=0.0, exponent=0)
    """
    if not is_valid_float(value) or value <= 0:
        return ZERO
    return DecimalFloat(value, 0)


def coerce(value) -> DecimalFloat:
    """DecimalFloat как есть, число — через from_number."""
    if isinstance(value, DecimalFloat):
        return value
    return from_number(value)


def to_float(a: DecimalFloat) -> float:
    """
    Конверсия в plain float.

    Returns:
        mantissa × 10^exponent; ±inf если значение вне диапазона float64,
        0.0 при underflow
    """
    if a.is_zero:
        return 0.0
    if a.exponent > FLOAT_MAX_EXP10:
        return math.copysign(math.inf, a.mantissa)
    if a.exponent < -2 * FLOAT_MAX_EXP10:
        return math.copysign(0.0, a.mantissa)
    # Отрицательные степени дают underflow в 0.0 без исключений
    return a.mantissa * 10.0 ** a.exponent


# arithmetic импортирует DecimalFloat, поэтому импорт выполняется после определения класса
from src.core.math import arithmetic as _ops  # noqa: E402
