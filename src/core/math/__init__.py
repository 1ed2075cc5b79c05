"""
Core math modules

Extended-range числа (DecimalFloat) и экономика геометрического роста цен
с гарантией отсутствия переполнений.
"""

# Representation + Normalizer (импортируется первым: arithmetic зависит от класса)
from src.core.math.decimal_float import (
    MANTISSA_LOWER,
    MANTISSA_UPPER,
    ONE,
    ZERO,
    DecimalFloat,
    coerce,
    from_number,
    normalize,
    normalize_parts,
    to_float,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    FLOAT_MAX_EXP10,
    clamp,
    is_close,
    is_valid_float,
    safe_log10,
    safe_pow10,
    sanitize_count,
    sanitize_float,
)

# Arithmetic core
from src.core.math.arithmetic import (
    POW10_MIN_EXPONENT,
    PRECISION_CUTOFF_EXPONENT,
    add,
    compare,
    divide,
    is_zero,
    log10,
    max_of,
    min_of,
    multiply,
    multiply_scalar,
    pow10,
    subtract,
)

# Growth economy
from src.core.math.growth import (
    MAX_RUN_DEFAULT,
    RATIO_LINEAR_LOG10_LIMIT,
    SERIES_EXPM1_LN_LIMIT,
    GrowthConfig,
    max_affordable_run,
    price_at_owned_count,
    total_cost_for_run,
    within_budget,
)

__all__ = [
    # DecimalFloat — Constants
    "MANTISSA_LOWER",
    "MANTISSA_UPPER",
    "ONE",
    "ZERO",
    # DecimalFloat — Types
    "DecimalFloat",
    # DecimalFloat — Functions
    "coerce",
    "from_number",
    "normalize",
    "normalize_parts",
    "to_float",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "FLOAT_MAX_EXP10",
    # Numerical Safeguards — Functions
    "clamp",
    "is_close",
    "is_valid_float",
    "safe_log10",
    "safe_pow10",
    "sanitize_count",
    "sanitize_float",
    # Arithmetic — Constants
    "POW10_MIN_EXPONENT",
    "PRECISION_CUTOFF_EXPONENT",
    # Arithmetic — Functions
    "add",
    "compare",
    "divide",
    "is_zero",
    "log10",
    "max_of",
    "min_of",
    "multiply",
    "multiply_scalar",
    "pow10",
    "subtract",
    # Growth — Constants
    "MAX_RUN_DEFAULT",
    "RATIO_LINEAR_LOG10_LIMIT",
    "SERIES_EXPM1_LN_LIMIT",
    # Growth — Types
    "GrowthConfig",
    # Growth — Functions
    "max_affordable_run",
    "price_at_owned_count",
    "total_cost_for_run",
    "within_budget",
]
