"""
PricingParameters — параметры геометрического ценообразования

Immutable Pydantic модель, которой владеет покупаемая сущность
(бизнес, апгрейд): цена 0-й единицы, множитель роста, количество
уже купленных единиц.

Модель — единственная граница, через которую игровая логика обращается
к growth-слою; поля DecimalFloat напрямую не читаются.
"""

from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

from src.core.math.decimal_float import DecimalFloat, from_number
from src.core.math.growth import (
    GrowthConfig,
    max_affordable_run,
    price_at_owned_count,
    total_cost_for_run,
)
from src.core.persistence.records import from_record, to_record


class PricingParameters(BaseModel):
    """
    Параметры цены покупаемой сущности.

    Immutable модель (frozen=True): покупка создаёт новый экземпляр
    через with_owned, owned только растёт.
    """

    base_cost: DecimalFloat = Field(..., description="Цена 0-й единицы")
    growth: float = Field(..., gt=1, allow_inf_nan=False, description="Множитель роста цены за единицу")
    owned: int = Field(default=0, ge=0, description="Количество уже купленных единиц")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("base_cost", mode="before")
    @classmethod
    def coerce_base_cost(cls, v: Any) -> Any:
        """Принимает DecimalFloat, plain число или сохранённую запись."""
        if isinstance(v, DecimalFloat):
            return v
        if isinstance(v, dict):
            return from_record(v)
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return from_number(v)
        return v

    @field_serializer("base_cost")
    def serialize_base_cost(self, v: DecimalFloat) -> dict[str, Any]:
        return to_record(v)

    # -------------------------------------------------------------------------
    # Цены
    # -------------------------------------------------------------------------

    def next_price(self) -> DecimalFloat:
        """Цена следующей единицы."""
        return price_at_owned_count(self.base_cost, self.growth, self.owned)

    def run_cost(self, k: int) -> DecimalFloat:
        """Стоимость следующих k единиц."""
        return total_cost_for_run(self.base_cost, self.growth, self.owned, k)

    def max_run(self, budget: DecimalFloat, config: GrowthConfig | None = None) -> int:
        """Сколько единиц можно купить на budget."""
        return max_affordable_run(budget, self.base_cost, self.growth, self.owned, config)

    def with_owned(self, owned: int) -> "PricingParameters":
        """Новый экземпляр с другим owned (после успешной покупки)."""
        return self.model_copy(update={"owned": owned})
