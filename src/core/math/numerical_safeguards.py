"""
Numerical Safeguards — Safe Float Primitives

Модуль обеспечивает численную устойчивость операций над plain float,
на которых построен DecimalFloat:
- NaN/Inf санитизация для предотвращения распространения невалидных значений
- Epsilon-сравнения float с учётом машинной точности
- Безопасные log10 / pow10 для plain float
- Clamp для ограничения результатов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют (заменяются на fallback)
2. Ни одна функция модуля не выбрасывает исключений на данных
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Максимальный показатель степени, при котором 10**x ещё конечен в float64
FLOAT_MAX_EXP10: Final[int] = 308


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение валидным числом (не NaN, не Inf).

    Нечисловые значения (None, строки) считаются невалидными.
    Целые (int) конечны при любой величине, включая значения вне
    диапазона float64 (показатели DecimalFloat).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False иначе
    """
    if isinstance(value, int):
        return True
    try:
        return math.isfinite(value)
    except (TypeError, OverflowError):
        return False


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        float(value) если валидное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if not is_valid_float(value):
        return fallback
    try:
        return float(value)
    except OverflowError:
        return fallback


def sanitize_count(value: float, fallback: int = 0) -> int:
    """
    Санитизация счётчика (owned, k): усечение до int, отрицательные → 0.

    Examples:
        >>> sanitize_count(3.7)
        3
        >>> sanitize_count(-2)
        0
        >>> sanitize_count(float('nan'))
        0
    """
    if not is_valid_float(value):
        return fallback
    return max(math.trunc(value), 0)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# БЕЗОПАСНЫЕ LOG / POW
# =============================================================================


def safe_log10(value: float) -> float:
    """
    log10 без MathDomainError.

    Returns:
        log10(value) для value > 0, -inf для value <= 0 или NaN/Inf

    Examples:
        >>> safe_log10(1000.0)
        3.0
        >>> safe_log10(0.0)
        -inf
    """
    if not is_valid_float(value) or value <= 0:
        return -math.inf
    return math.log10(value)


def safe_pow10(exponent: float, fallback: float = 0.0) -> float:
    """
    10**exponent без OverflowError.

    Используется только там, где результат заведомо помещается в float64
    (например, дробная часть показателя). Для больших показателей
    следует использовать DecimalFloat.

    Examples:
        >>> safe_pow10(2.0)
        100.0
        >>> safe_pow10(400.0)
        0.0
    """
    if not is_valid_float(exponent) or exponent > FLOAT_MAX_EXP10:
        return fallback
    # Огромный отрицательный int не конвертируется во float: результат всё равно 0.0
    if exponent < -2 * FLOAT_MAX_EXP10:
        return 0.0
    return 10.0 ** exponent


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(15, 0, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
