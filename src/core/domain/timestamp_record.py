"""
TimestampRecord — Сериализуемое представление Universal Time

Immutable Pydantic модель, отображающая Timestamp в схему и обратно.
Полная совместимость с JSON Schema (contracts/schema/universal_time.json).

Timestamp сам по себе не зависит от pydantic: этот адаптер — единственное
место, где момент времени превращается в dict/JSON.
"""

from pydantic import BaseModel, Field

from src.core.domain.universal_time import Timestamp
from src.core.math.time_units import NANOSECONDS_PER_SECOND, SECONDS_PER_DAY


# =============================================================================
# TIMESTAMP RECORD
# =============================================================================


class TimestampRecord(BaseModel):
    """
    Запись момента времени в канонической форме.

    Принимаются только канонические компоненты: нормализация — обязанность
    Timestamp, запись лишь фиксирует уже нормализованное значение.
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    days: int = Field(..., description="Целые сутки от эпохи (отрицательные до эпохи)")
    seconds: int = Field(
        ..., ge=0, lt=SECONDS_PER_DAY, description="Секунды внутри суток"
    )
    nanoseconds: float = Field(
        ...,
        ge=0.0,
        lt=NANOSECONDS_PER_SECOND,
        allow_inf_nan=False,
        description="Дробный остаток секунды (наносекунды)",
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_timestamp(cls, timestamp: Timestamp) -> "TimestampRecord":
        """Создание записи из Timestamp."""
        return cls(
            days=timestamp.days,
            seconds=timestamp.seconds,
            nanoseconds=timestamp.nanoseconds,
        )

    def to_timestamp(self) -> Timestamp:
        """Восстановление Timestamp из записи."""
        return Timestamp(self.days, self.seconds, self.nanoseconds)
