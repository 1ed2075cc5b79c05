"""
Domain models and value objects.

Граница между игровой логикой и growth-слоем: параметры цены
покупаемой сущности и поток покупки по режимам.
"""

from src.core.domain.pricing import PricingParameters
from src.core.domain.purchase import (
    BLOCK_REASON_INSUFFICIENT_FUNDS,
    BLOCK_REASON_NONE,
    BLOCK_REASON_ZERO_QUANTITY,
    FIXED_RUN_LENGTHS,
    BuyMode,
    PurchaseQuote,
    PurchaseResult,
    apply_purchase,
    quote_purchase,
    run_length_for_mode,
)

__all__ = [
    # Pricing model
    "PricingParameters",
    # Purchase — Constants
    "BLOCK_REASON_INSUFFICIENT_FUNDS",
    "BLOCK_REASON_NONE",
    "BLOCK_REASON_ZERO_QUANTITY",
    "FIXED_RUN_LENGTHS",
    # Purchase — Types
    "BuyMode",
    "PurchaseQuote",
    "PurchaseResult",
    # Purchase — Functions
    "apply_purchase",
    "quote_purchase",
    "run_length_for_mode",
]
