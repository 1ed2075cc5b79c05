"""
JSON Schema Contract Validators

Модуль для валидации сохранённых записей согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema.

Схемы (src/core/contracts/schema/):
- decimal_float.json — запись DecimalFloat {mantissa, exponent}
- pricing_parameters.json — параметры ценообразования {base_cost, growth, owned}

Загрузка сохранений по умолчанию санитизирует невалидные записи в ноль
(см. src.core.persistence). Валидаторы используются на границах, где
требуется жёсткий отказ вместо санитизации.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат рядом с модулем в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'decimal_float')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class DecimalFloatRecordValidator(ContractValidator):
    """Валидатор для записи DecimalFloat."""

    def __init__(self):
        super().__init__("decimal_float")


class PricingParametersValidator(ContractValidator):
    """Валидатор для параметров ценообразования."""

    def __init__(self):
        super().__init__("pricing_parameters")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_decimal_float_record(data: Dict[str, Any]) -> None:
    """
    Валидация записи DecimalFloat.

    Raises:
        ValidationError: Если запись не соответствует схеме
    """
    DecimalFloatRecordValidator().validate(data)


def validate_pricing_parameters(data: Dict[str, Any]) -> None:
    """
    Валидация параметров ценообразования.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PricingParametersValidator().validate(data)
