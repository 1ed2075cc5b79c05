"""
Purchase — покупка серии единиц по режиму x1 / x10 / x100 / max

Порядок покупки:
1. Определение длины серии по режиму (max — через max_affordable_run)
2. Котировка: стоимость серии через closed-form формулу
3. Сравнение баланса со стоимостью (within_budget: compare(cost, balance) <= 0)
4. Только при успехе: списание (subtract) и owned += k

Заблокированная покупка не меняет ни баланс, ни owned и несёт
block_reason для UI.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.logging import get_logger
from src.core.domain.pricing import PricingParameters
from src.core.math.arithmetic import subtract
from src.core.math.decimal_float import ZERO, DecimalFloat
from src.core.math.growth import GrowthConfig, within_budget

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

BLOCK_REASON_NONE: Final[str] = ""
BLOCK_REASON_ZERO_QUANTITY: Final[str] = "zero_quantity_block"
BLOCK_REASON_INSUFFICIENT_FUNDS: Final[str] = "insufficient_funds_block"


# =============================================================================
# ENUMS
# =============================================================================


class BuyMode(str, Enum):
    """Режим покупки (переключатель в UI)."""

    X1 = "x1"
    X10 = "x10"
    X100 = "x100"
    MAX = "max"


# Фиксированные длины серий
FIXED_RUN_LENGTHS: Final[dict[BuyMode, int]] = {
    BuyMode.X1: 1,
    BuyMode.X10: 10,
    BuyMode.X100: 100,
}


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class PurchaseQuote:
    """Котировка покупки: сколько единиц и за сколько."""

    mode: BuyMode
    quantity: int
    cost: DecimalFloat
    affordable: bool
    block_reason: str


@dataclass(frozen=True)
class PurchaseResult:
    """Результат покупки. При purchased=False состояние не изменено."""

    purchased: bool
    block_reason: str
    quantity: int
    cost: DecimalFloat
    balance: DecimalFloat
    params: PricingParameters


# =============================================================================
# PURCHASE FLOW
# =============================================================================


def run_length_for_mode(
    mode: BuyMode | str,
    balance: DecimalFloat,
    params: PricingParameters,
    config: GrowthConfig | None = None,
) -> int:
    """
    Длина серии для режима покупки.

    Неизвестный режим трактуется как x1.
    """
    try:
        resolved = BuyMode(mode)
    except ValueError:
        return 1

    if resolved is BuyMode.MAX:
        return params.max_run(balance, config)
    return FIXED_RUN_LENGTHS[resolved]


def quote_purchase(
    balance: DecimalFloat,
    params: PricingParameters,
    mode: BuyMode | str = BuyMode.X1,
    config: GrowthConfig | None = None,
) -> PurchaseQuote:
    """
    Котировка покупки без изменения состояния.

    Returns:
        PurchaseQuote; affordable=True только если quantity > 0
        и стоимость укладывается в баланс (within_budget)
    """
    try:
        resolved = BuyMode(mode)
    except ValueError:
        resolved = BuyMode.X1

    quantity = run_length_for_mode(resolved, balance, params, config)
    if quantity <= 0:
        return PurchaseQuote(
            mode=resolved,
            quantity=0,
            cost=ZERO,
            affordable=False,
            block_reason=BLOCK_REASON_ZERO_QUANTITY,
        )

    cost = params.run_cost(quantity)
    affordable = within_budget(cost, balance)

    return PurchaseQuote(
        mode=resolved,
        quantity=quantity,
        cost=cost,
        affordable=affordable,
        block_reason=BLOCK_REASON_NONE if affordable else BLOCK_REASON_INSUFFICIENT_FUNDS,
    )


def apply_purchase(
    balance: DecimalFloat,
    params: PricingParameters,
    mode: BuyMode | str = BuyMode.X1,
    config: GrowthConfig | None = None,
) -> PurchaseResult:
    """
    Покупка серии: списание баланса и увеличение owned.

    Входные значения не мутируются; новое состояние возвращается
    в PurchaseResult.
    """
    quote = quote_purchase(balance, params, mode, config)

    if not quote.affordable:
        logger.debug(
            "purchase_blocked",
            mode=quote.mode.value,
            quantity=quote.quantity,
            owned=params.owned,
            block_reason=quote.block_reason,
        )
        return PurchaseResult(
            purchased=False,
            block_reason=quote.block_reason,
            quantity=quote.quantity,
            cost=quote.cost,
            balance=balance,
            params=params,
        )

    return PurchaseResult(
        purchased=True,
        block_reason=BLOCK_REASON_NONE,
        quantity=quote.quantity,
        cost=quote.cost,
        balance=subtract(balance, quote.cost),
        params=params.with_owned(params.owned + quote.quantity),
    )
