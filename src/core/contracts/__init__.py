"""
Contract Validation Module

Модуль для валидации JSON контрактов сохранённого состояния экономики.
"""

from .validators import (
    ContractValidator,
    DecimalFloatRecordValidator,
    PricingParametersValidator,
    SchemaLoader,
    validate_decimal_float_record,
    validate_pricing_parameters,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalFloatRecordValidator",
    "PricingParametersValidator",
    # Functions
    "validate_decimal_float_record",
    "validate_pricing_parameters",
]
