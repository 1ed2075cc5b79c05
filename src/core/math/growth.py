"""
Growth — Geometric-growth pricing without overflow

Модуль вычисляет цены в экономике с геометрическим ростом стоимости:
- Цена очередной единицы: base_cost × growth^owned (через log-space)
- Стоимость серии из k единиц: closed-form геометрическая прогрессия
- Обратная задача: максимальная серия, укладывающаяся в бюджет

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. growth^owned никогда не материализуется как plain float
   (вычисляется как pow10(owned × log10(growth)))
2. Стоимость серии никогда не считается циклом по k единицам
3. Ни одна функция не выбрасывает исключений: вырожденные входы → 0 / ZERO
4. max_affordable_run ограничен сверху GrowthConfig.max_run

ФОРМУЛЫ:
    price(n)         = base × g^n
    total(owned, k)  = price(owned) × (g^k - 1) / (g - 1)
    max k:  g^k <= 1 + budget × (g - 1) / price(owned)
            k   = floor(log_g(1 + ratio))
"""

import math
from dataclasses import dataclass
from typing import Final

from src.core.math.arithmetic import (
    compare,
    is_zero,
    log10,
    multiply,
    multiply_scalar,
    pow10,
    subtract,
)
from src.core.math.decimal_float import ONE, ZERO, DecimalFloat, from_number
from src.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    safe_pow10,
    sanitize_count,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Верхняя граница результата max_affordable_run
MAX_RUN_DEFAULT: Final[int] = 1_000_000

# Если log10(ratio) ниже порога, ratio безопасно считать в plain float;
# выше "+1" пренебрежимо мал, и решение остаётся в log-space
RATIO_LINEAR_LOG10_LIMIT: Final[float] = 6.0

# Порог k × ln(g), до которого множитель (g^k - 1) считается через expm1
# в plain float (exp(700) ≈ 1e304 ещё конечен)
SERIES_EXPM1_LN_LIMIT: Final[float] = 700.0

# Сколько шагов ±1 допускается для коррекции оценки k после floor
SETTLE_STEPS_DEFAULT: Final[int] = 4


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class GrowthConfig:
    """Конфигурация поиска максимальной доступной серии."""

    max_run: int = MAX_RUN_DEFAULT
    settle_steps: int = SETTLE_STEPS_DEFAULT


_DEFAULT_CONFIG: Final[GrowthConfig] = GrowthConfig()


def _valid_growth(growth: float) -> bool:
    return is_valid_float(growth) and growth > 0


# =============================================================================
# PRICE AT OWNED COUNT
# =============================================================================


def price_at_owned_count(base_cost: DecimalFloat, growth: float, owned: int) -> DecimalFloat:
    """
    Цена следующей единицы при owned уже купленных.

    price = base_cost × growth^owned = base_cost × pow10(owned × log10(growth))

    Args:
        base_cost: Цена 0-й единицы
        growth: Множитель роста цены (> 1 в корректной конфигурации)
        owned: Количество уже купленных единиц

    Returns:
        Цена единицы; ZERO для growth <= 0 или NaN/Inf

    Examples:
        >>> price_at_owned_count(from_number(10), 1.1, 0)
        DecimalFloat(mantissa=1.0, exponent=1)
    """
    if not _valid_growth(growth):
        return ZERO
    owned = sanitize_count(owned)
    return multiply(base_cost, pow10(owned * math.log10(growth)))


# =============================================================================
# TOTAL COST FOR RUN
# =============================================================================


def _series_factor(growth: float, k: int) -> DecimalFloat:
    """(g^k - 1) / (g - 1) для g > 1."""
    ln_growth_k = k * math.log(growth)
    inv_growth_minus = 1.0 / (growth - 1.0)

    if ln_growth_k < SERIES_EXPM1_LN_LIMIT:
        # expm1 сохраняет точность при g близком к 1
        return multiply_scalar(from_number(math.expm1(ln_growth_k)), inv_growth_minus)

    growth_k = pow10(k * math.log10(growth))
    return multiply_scalar(subtract(growth_k, ONE), inv_growth_minus)


def total_cost_for_run(
    base_cost: DecimalFloat,
    growth: float,
    owned: int,
    k: int,
) -> DecimalFloat:
    """
    Стоимость покупки k единиц подряд, начиная с owned.

    total = price(owned) × (g^k - 1) / (g - 1)

    Вырожденные случаи:
    - k <= 0 → ZERO
    - k == 1 → price(owned) без ошибки округления ряда
    - growth <= 1 (ошибка конфигурации) → price(owned) × k (линейно)

    Examples:
        >>> total_cost_for_run(from_number(10), 1.1, 0, 3)  # 10 + 11 + 12.1
        DecimalFloat(mantissa=3.31..., exponent=1)
    """
    k = sanitize_count(k)
    if k <= 0:
        return ZERO

    first = price_at_owned_count(base_cost, growth, owned)
    if is_zero(first):
        return ZERO
    if k == 1:
        return first

    if not (growth > 1.0) or not is_valid_float(growth - 1.0):
        return multiply_scalar(first, k)

    return multiply(first, _series_factor(growth, k))


# =============================================================================
# MAX AFFORDABLE RUN
# =============================================================================


def within_budget(cost: DecimalFloat, budget: DecimalFloat) -> bool:
    """
    Критерий доступности: compare(cost, budget) <= 0, без допусков.

    Тот же критерий использует max_affordable_run, поэтому серия,
    найденная поиском, всегда проходит эту проверку.
    """
    return compare(cost, budget) <= 0


def _estimate_run(budget: DecimalFloat, first: DecimalFloat, growth: float) -> float:
    """Оценка k из логарифмированного неравенства (до floor)."""
    log_ratio = log10(budget) + math.log10(growth - 1.0) - log10(first)

    if log_ratio < RATIO_LINEAR_LOG10_LIMIT:
        ratio = safe_pow10(log_ratio)
        return math.log1p(ratio) / math.log(growth)

    # ratio >= 1e6: log10(1 + ratio) ≈ log10(ratio)
    return log_ratio / math.log10(growth)


def max_affordable_run(
    budget: DecimalFloat,
    base_cost: DecimalFloat,
    growth: float,
    owned: int,
    config: GrowthConfig | None = None,
) -> int:
    """
    Максимальное k, для которого total_cost_for_run(..., k) <= budget.

    Алгоритм:
        1. Цена первой единицы недоступна или growth <= 1 → 0
        2. k = floor(log_g(1 + budget × (g - 1) / price(owned))) в log-space
        3. clamp k в [0, max_run]
        4. Коррекция ±1 против closed-form стоимости (ошибки округления floor),
           бисекция если оценка промахнулась дальше settle_steps

    Args:
        budget: Доступный баланс
        base_cost: Цена 0-й единицы
        growth: Множитель роста цены
        owned: Количество уже купленных единиц
        config: Конфигурация поиска (default: GrowthConfig())

    Returns:
        Количество единиц (int >= 0)

    Examples:
        >>> max_affordable_run(from_number(33.1), from_number(10), 1.1, 0)
        3
    """
    cfg = config or _DEFAULT_CONFIG

    if not is_valid_float(growth) or not (growth > 1.0):
        return 0

    first = price_at_owned_count(base_cost, growth, owned)
    if is_zero(first) or compare(budget, first) < 0:
        return 0

    estimate = _estimate_run(budget, first, growth)
    if math.isnan(estimate) or estimate < 0:
        return 0

    # +inf: показатель бюджета вне диапазона float64
    k = cfg.max_run if math.isinf(estimate) else int(clamp(math.floor(estimate), 0, cfg.max_run))

    def fits(n: int) -> bool:
        return within_budget(total_cost_for_run(base_cost, growth, owned, n), budget)

    for _ in range(cfg.settle_steps):
        if k <= 0 or fits(k):
            break
        k -= 1

    if k > 0 and not fits(k):
        # Оценка промахнулась дальше settle_steps: бисекция, fits(0) всегда True
        lo, hi = 0, k
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if fits(mid):
                lo = mid
            else:
                hi = mid
        k = lo

    for _ in range(cfg.settle_steps):
        if k >= cfg.max_run or not fits(k + 1):
            break
        k += 1

    return k
