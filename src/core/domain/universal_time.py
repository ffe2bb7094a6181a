"""
UniversalTime — Модель момента времени от фиксированной эпохи

Timestamp хранит время, прошедшее с "нулевого дня", тремя компонентами
(days, seconds, nanoseconds) вместо одного скаляра: это сохраняет точность
до долей наносекунды на диапазоне в десятки лет без дрейфа float.

Immutable value object (frozen dataclass). Каждое создание и каждая
арифметическая операция возвращает новый, уже нормализованный экземпляр.
Сериализация вынесена во внешний адаптер (TimestampRecord).
"""

from dataclasses import dataclass

from src.core.math.time_normalization import is_non_negative_order, normalize_components
from src.core.math.time_units import total_nanoseconds, total_seconds


# =============================================================================
# TIMESTAMP
# =============================================================================


@dataclass(frozen=True, order=True)
class Timestamp:
    """
    Момент времени от эпохи в канонической форме.

    Инварианты (после __post_init__):
    - 0 <= seconds < 86400
    - 0 <= nanoseconds < 1e9
    - days — любой знак (отрицательный для моментов до эпохи)

    Сравнение (order=True) лексикографическое по (days, seconds, nanoseconds),
    что для канонической формы совпадает с порядком моментов времени.
    Равенство и hash — по всем трём компонентам.

    Examples:
        >>> Timestamp(0, 0, 0.0) - Timestamp(0, 0, 1.0)
        Timestamp(days=-1, seconds=86399, nanoseconds=999999999.0)
        >>> Timestamp(0, 86400, 0.0) == Timestamp(1, 0, 0.0)
        True
    """

    days: int = 0
    seconds: int = 0
    nanoseconds: float = 0.0

    def __post_init__(self) -> None:
        days, seconds, nanoseconds = normalize_components(
            self.days, self.seconds, self.nanoseconds
        )
        # frozen dataclass: единственная точка записи компонент
        object.__setattr__(self, "days", days)
        object.__setattr__(self, "seconds", seconds)
        object.__setattr__(self, "nanoseconds", nanoseconds)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Timestamp":
        """Покомпонентная сумма с последующей нормализацией."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return Timestamp(
            self.days + other.days,
            self.seconds + other.seconds,
            self.nanoseconds + other.nanoseconds,
        )

    def __sub__(self, other: object) -> "Timestamp":
        """
        Покомпонентная разность с последующей нормализацией.

        Операнды не изменяются. Если self раньше other, результат имеет
        отрицательные days.
        """
        if not isinstance(other, Timestamp):
            return NotImplemented
        return Timestamp(
            self.days - other.days,
            self.seconds - other.seconds,
            self.nanoseconds - other.nanoseconds,
        )

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    def is_negative(self) -> bool:
        """True если момент раньше эпохи."""
        return not is_non_negative_order(self.days, self.seconds, self.nanoseconds)

    def total_seconds(self) -> float:
        """
        Момент как вещественное число секунд от эпохи.

        Для точных сравнений используйте сами компоненты: float теряет
        суб-микросекундную точность при больших |days|.
        """
        return total_seconds(self.days, self.seconds, self.nanoseconds)

    def total_nanoseconds(self) -> float:
        """Момент как вещественное число наносекунд от эпохи."""
        return total_nanoseconds(self.days, self.seconds, self.nanoseconds)

    def as_tuple(self) -> tuple[int, int, float]:
        """Каноническая тройка (days, seconds, nanoseconds)."""
        return (self.days, self.seconds, self.nanoseconds)
