"""
TimeUnits — Единицы и константы Universal Time

Единственный допустимый источник констант для преобразований между:
- days (целые сутки от эпохи)
- seconds (секунды внутри суток)
- nanoseconds (дробный остаток секунды)

ЗАПРЕЩЕНО использовать "магические" 86400 / 1e9 вне этого модуля.
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ ЕДИНИЦ
# =============================================================================

SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 60 * SECONDS_PER_MINUTE

# Длина суток фиксирована: leap seconds не моделируются
SECONDS_PER_DAY: Final[int] = 24 * SECONDS_PER_HOUR

NANOSECONDS_PER_SECOND: Final[float] = 1.0e9

# Целочисленный вариант для точного переноса int-наносекунд (> 2**53)
NANOSECONDS_PER_SECOND_INT: Final[int] = 10**9

NANOSECONDS_PER_MICROSECOND: Final[float] = 1.0e3

# Epsilon для сравнения моментов времени (в наносекундах).
# Покрывает округление double при переносах через границу 1e9 ns.
EPS_NANOSECONDS: Final[float] = 1.0e-3


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def whole_seconds(days: int, seconds: int) -> int:
    """
    Целое число секунд, представленное парой (days, seconds).

    Вычисление выполняется в int и потому точно для любых величин.
    """
    return days * SECONDS_PER_DAY + seconds


def total_seconds(days: int, seconds: int, nanoseconds: float) -> float:
    """
    Момент времени как вещественное число секунд от эпохи.

    days*86400 + seconds + nanoseconds*1e-9

    ВНИМАНИЕ: для больших |days| float теряет суб-микросекундную точность.
    Для точных сравнений используйте instant_difference_ns.
    """
    return whole_seconds(days, seconds) + nanoseconds / NANOSECONDS_PER_SECOND


def total_nanoseconds(days: int, seconds: int, nanoseconds: float) -> float:
    """Момент времени как вещественное число наносекунд от эпохи."""
    return whole_seconds(days, seconds) * NANOSECONDS_PER_SECOND + nanoseconds


def instant_difference_ns(
    lhs: tuple[int, int, float],
    rhs: tuple[int, int, float],
) -> float:
    """
    Разность двух троек (days, seconds, nanoseconds) в наносекундах.

    Целая часть вычисляется в int, поэтому ошибка округления определяется
    только разностью наносекундных компонент, а не величиной days.

    Args:
        lhs: Первая тройка (может быть ненормализованной)
        rhs: Вторая тройка (может быть ненормализованной)

    Returns:
        lhs - rhs в наносекундах

    Examples:
        >>> instant_difference_ns((1, 0, 0.0), (0, 86399, 1.0e9))
        0.0
        >>> instant_difference_ns((0, 1, 0.0), (0, 0, 5.0e8))
        500000000.0
    """
    whole = whole_seconds(lhs[0], lhs[1]) - whole_seconds(rhs[0], rhs[1])
    return whole * NANOSECONDS_PER_SECOND + (lhs[2] - rhs[2])
