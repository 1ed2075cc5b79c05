"""
Records — сохранение и загрузка DecimalFloat

Формат записи (JSON-совместимый):
    {"mantissa": <float>, "exponent": <int>}

Старые сохранения используют короткие ключи {"m": ..., "e": ...};
они принимаются при загрузке.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. from_record(to_record(x)) == x для любого нормализованного x
2. Отсутствующее, нечисловое или NaN/Inf поле → канонический ноль
   (повреждённое сохранение деградирует к нулевой экономике, а не к ошибке)
3. Загрузка никогда не выбрасывает исключений
"""

import json
from typing import Any, Iterable, Mapping

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from src.core.logging import get_logger
from src.core.math.decimal_float import ZERO, DecimalFloat

logger = get_logger(__name__)


# =============================================================================
# MODELS
# =============================================================================


class DecimalFloatRecord(BaseModel):
    """Каноническая запись DecimalFloat для сохранения."""

    mantissa: float = Field(..., description="Мантисса в [1, 10) или 0")
    exponent: int = Field(..., description="Показатель степени 10")

    model_config = {"frozen": True}


class _StoredRecord(BaseModel):
    """Запись в том виде, в каком она пришла из хранилища (все поля опциональны)."""

    mantissa: float | None = Field(
        default=None, validation_alias=AliasChoices("mantissa", "m")
    )
    exponent: int | float | None = Field(
        default=None, validation_alias=AliasChoices("exponent", "e")
    )

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# RECORD ROUND TRIP
# =============================================================================


def to_record(value: DecimalFloat) -> dict[str, Any]:
    """
    DecimalFloat → JSON-совместимый dict.

    Examples:
        >>> to_record(from_number(1500))
        {'mantissa': 1.5, 'exponent': 3}
    """
    return DecimalFloatRecord(mantissa=value.mantissa, exponent=value.exponent).model_dump()


def from_record(record: Any) -> DecimalFloat:
    """
    Запись → DecimalFloat с санитизацией.

    Args:
        record: dict из сохранения (может быть None, повреждён, неполон)

    Returns:
        Нормализованный DecimalFloat; ZERO при любой проблеме записи
    """
    if not isinstance(record, Mapping):
        if record is not None:
            logger.debug("record_not_mapping", record_type=type(record).__name__)
        return ZERO

    try:
        stored = _StoredRecord.model_validate(record)
    except ValidationError as e:
        logger.debug("record_invalid", errors=e.error_count())
        return ZERO

    if stored.mantissa is None or stored.exponent is None:
        logger.debug("record_incomplete", keys=sorted(str(k) for k in record))
        return ZERO

    return DecimalFloat(stored.mantissa, stored.exponent)


# =============================================================================
# JSON
# =============================================================================


def dumps_record(value: DecimalFloat) -> str:
    """DecimalFloat → JSON строка."""
    return DecimalFloatRecord(mantissa=value.mantissa, exponent=value.exponent).model_dump_json()


def loads_record(text: str | bytes | None) -> DecimalFloat:
    """JSON строка → DecimalFloat; невалидный JSON → ZERO."""
    if not text:
        return ZERO
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.debug("record_json_invalid", error=str(e))
        return ZERO
    return from_record(data)


# =============================================================================
# NAMED BALANCES
# =============================================================================


def to_records(values: Mapping[str, DecimalFloat]) -> dict[str, dict[str, Any]]:
    """
    Набор именованных величин (money, lifetime, ...) → dict записей.

    Examples:
        >>> to_records({"money": from_number(5)})
        {'money': {'mantissa': 5.0, 'exponent': 0}}
    """
    return {name: to_record(value) for name, value in values.items()}


def from_records(data: Any, names: Iterable[str]) -> dict[str, DecimalFloat]:
    """
    Загрузка именованных величин.

    Каждое имя из names присутствует в результате; отсутствующие
    и повреждённые записи → ZERO.
    """
    source = data if isinstance(data, Mapping) else {}
    return {name: from_record(source.get(name)) for name in names}
