"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных записей
- Детекция нарушений required полей
- Детекция нарушений типов и диапазона мантиссы
- Интеграция с persistence и Pydantic моделями
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    DecimalFloatRecordValidator,
    PricingParametersValidator,
    SchemaLoader,
    validate_decimal_float_record,
    validate_pricing_parameters,
)
from src.core.domain import PricingParameters
from src.core.math import ZERO, DecimalFloat, from_number, multiply, pow10
from src.core.persistence import to_record


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_record():
    """Валидная запись DecimalFloat."""
    return {"mantissa": 1.5, "exponent": 3}


@pytest.fixture
def valid_pricing():
    """Валидные параметры ценообразования."""
    return {
        "base_cost": {"mantissa": 1.0, "exponent": 1},
        "growth": 1.1,
        "owned": 0,
    }


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Все схемы загружаются и проходят meta-validation."""
    loader = SchemaLoader()

    for name in ("decimal_float", "pricing_parameters"):
        schema = loader.load_schema(name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert schema["type"] == "object"


def test_schema_loader_caches_schemas():
    loader = SchemaLoader()

    first = loader.load_schema("decimal_float")
    second = loader.load_schema("decimal_float")
    assert first is second


def test_schema_loader_raises_on_missing_schema():
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("does_not_exist")


def test_schema_loader_raises_on_missing_directory(tmp_path):
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path: Path):
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError):
        loader.load_schema("broken")


# =============================================================================
# DECIMAL FLOAT RECORD TESTS
# =============================================================================


def test_decimal_float_validator_accepts_valid_record(valid_record):
    validator = DecimalFloatRecordValidator()
    validator.validate(valid_record)
    assert validator.is_valid(valid_record)


def test_decimal_float_validate_function(valid_record):
    validate_decimal_float_record(valid_record)


def test_decimal_float_accepts_zero():
    validate_decimal_float_record({"mantissa": 0, "exponent": 0})
    validate_decimal_float_record({"mantissa": 0.0, "exponent": 0})


def test_decimal_float_accepts_huge_exponent():
    validate_decimal_float_record({"mantissa": 4.2, "exponent": 10**6})


@pytest.mark.parametrize(
    "record",
    [
        {"mantissa": 15, "exponent": 2},
        {"mantissa": 0.5, "exponent": 2},
        {"mantissa": 10, "exponent": 2},
        {"mantissa": -0.5, "exponent": 2},
    ],
)
def test_decimal_float_rejects_unnormalized_mantissa(record):
    with pytest.raises(ValidationError):
        validate_decimal_float_record(record)


@pytest.mark.parametrize(
    "field", ["mantissa", "exponent"],
)
def test_decimal_float_rejects_missing_required_field(valid_record, field):
    del valid_record[field]

    with pytest.raises(ValidationError) as exc_info:
        validate_decimal_float_record(valid_record)
    assert field in str(exc_info.value)


def test_decimal_float_rejects_wrong_type(valid_record):
    valid_record["mantissa"] = "1.5"
    with pytest.raises(ValidationError):
        validate_decimal_float_record(valid_record)


def test_decimal_float_rejects_fractional_exponent(valid_record):
    valid_record["exponent"] = 3.5
    with pytest.raises(ValidationError):
        validate_decimal_float_record(valid_record)


def test_decimal_float_rejects_legacy_keys():
    """Короткие ключи m/e читаются persistence, но не являются контрактом."""
    assert not DecimalFloatRecordValidator().is_valid({"m": 1.5, "e": 3})


def test_decimal_float_iter_errors_collects_all():
    errors = list(DecimalFloatRecordValidator().iter_errors({"mantissa": "x"}))
    assert len(errors) >= 2


@pytest.mark.parametrize(
    "value",
    [
        ZERO,
        from_number(1500),
        from_number(0.000123),
        DecimalFloat(9.999999999999998, 40),
        multiply(DecimalFloat(9.0, 200), DecimalFloat(9.0, 200)),
        pow10(98765.4321),
    ],
)
def test_to_record_output_satisfies_contract(value):
    """to_record всегда производит запись, проходящую контракт."""
    validate_decimal_float_record(to_record(value))


# =============================================================================
# PRICING PARAMETERS TESTS
# =============================================================================


def test_pricing_validator_accepts_valid_data(valid_pricing):
    validator = PricingParametersValidator()
    validator.validate(valid_pricing)
    assert validator.is_valid(valid_pricing)


def test_pricing_validate_function(valid_pricing):
    validate_pricing_parameters(valid_pricing)


@pytest.mark.parametrize("growth", [1.0, 0.5, 0, -1.1])
def test_pricing_rejects_growth_not_above_one(valid_pricing, growth):
    valid_pricing["growth"] = growth
    with pytest.raises(ValidationError):
        validate_pricing_parameters(valid_pricing)


def test_pricing_rejects_negative_owned(valid_pricing):
    valid_pricing["owned"] = -1
    with pytest.raises(ValidationError):
        validate_pricing_parameters(valid_pricing)


def test_pricing_rejects_negative_base_cost(valid_pricing):
    valid_pricing["base_cost"] = {"mantissa": -1.0, "exponent": 1}
    with pytest.raises(ValidationError):
        validate_pricing_parameters(valid_pricing)


def test_pricing_rejects_missing_owned(valid_pricing):
    del valid_pricing["owned"]
    with pytest.raises(ValidationError):
        validate_pricing_parameters(valid_pricing)


def test_pricing_rejects_additional_properties(valid_pricing):
    valid_pricing["discount"] = 0.1
    with pytest.raises(ValidationError):
        validate_pricing_parameters(valid_pricing)


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


def test_pricing_model_dump_satisfies_contract():
    params = PricingParameters(base_cost=from_number(60), growth=1.145, owned=12)
    validate_pricing_parameters(params.model_dump())


def test_pricing_model_json_satisfies_contract():
    params = PricingParameters(base_cost=DecimalFloat(1.7, 6), growth=1.165, owned=0)
    validate_pricing_parameters(json.loads(params.model_dump_json()))
