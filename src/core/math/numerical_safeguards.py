"""
Numerical Safeguards — Safe Math Primitives для Universal Time

Модуль обеспечивает численную устойчивость операций над компонентами времени:
- Валидация конечности float (NaN/Inf не допускаются в наносекундах)
- Валидация целочисленности days/seconds
- Точное деление с усечением к нулю (int и float)
- Epsilon-сравнения моментов времени

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в Timestamp (ValueError на входе)
2. Остаток деления float вычисляется точно (math.fmod), без накопления ошибки
3. Все операции O(1), без итеративных циклов
4. Все операции детерминированы и воспроизводимы
"""

import math
import operator
from typing import SupportsIndex

from src.core.math.time_units import EPS_NANOSECONDS, instant_difference_ns


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение является конечным числом.

    Args:
        value: Проверяемое значение (int или float)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к float

    Raises:
        ValueError: Если value NaN/Inf
    """
    result = float(value)
    if not is_valid_float(result):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")
    return result


def validate_integral(value: SupportsIndex, name: str) -> int:
    """
    Валидация, что значение является целым числом.

    Float (даже 1.0) не принимается: дробные days/seconds означают
    потерю наносекунд, которую вызывающий код должен выполнить явно.

    Raises:
        TypeError: Если value не поддерживает __index__
    """
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        ) from None


def as_integral(value: object) -> int | None:
    """
    Целое значение, если value поддерживает __index__, иначе None.

    Examples:
        >>> as_integral(10**18 + 7)
        1000000000000000007
        >>> as_integral(1.0) is None
        True
    """
    try:
        return operator.index(value)
    except TypeError:
        return None


# =============================================================================
# ДЕЛЕНИЕ С УСЕЧЕНИЕМ К НУЛЮ
# =============================================================================


def trunc_divmod_int(value: int, divisor: int) -> tuple[int, int]:
    """
    Целочисленное деление с усечением к нулю (семантика C static_cast<int>).

    В отличие от divmod() Python (floor), знак остатка совпадает со знаком
    делимого.

    Args:
        value: Делимое
        divisor: Делитель (положительный)

    Returns:
        (quotient, remainder): value == quotient * divisor + remainder,
        |remainder| < divisor

    Examples:
        >>> trunc_divmod_int(90000, 86400)
        (1, 3600)
        >>> trunc_divmod_int(-90000, 86400)
        (-1, -3600)
        >>> trunc_divmod_int(-5, 86400)
        (0, -5)
    """
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")

    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def trunc_divmod_float(value: float, divisor: float) -> tuple[int, float]:
    """
    Деление float с усечением к нулю и точным остатком.

    Остаток вычисляется через math.fmod, который точен для любых конечных
    входов; частное восстанавливается из (value - remainder), что является
    точным кратным divisor.

    Examples:
        >>> trunc_divmod_float(2.5e9, 1.0e9)
        (2, 500000000.0)
        >>> trunc_divmod_float(-2.5e9, 1.0e9)
        (-2, -500000000.0)
        >>> trunc_divmod_float(-1.0, 1.0e9)
        (0, -1.0)
    """
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")

    remainder = math.fmod(value, divisor)
    quotient = int(round((value - remainder) / divisor))
    return quotient, remainder


# =============================================================================
# EPSILON-СРАВНЕНИЯ МОМЕНТОВ ВРЕМЕНИ
# =============================================================================


def instants_close(
    lhs: tuple[int, int, float],
    rhs: tuple[int, int, float],
    abs_tol_ns: float = EPS_NANOSECONDS,
) -> bool:
    """
    Проверка, обозначают ли две тройки один и тот же момент времени.

    Args:
        lhs: Первая тройка (days, seconds, nanoseconds)
        rhs: Вторая тройка (days, seconds, nanoseconds)
        abs_tol_ns: Абсолютная толерантность в наносекундах

    Returns:
        True если |lhs - rhs| <= abs_tol_ns

    Examples:
        >>> instants_close((1, 0, 0.0), (0, 86400, 0.0))
        True
        >>> instants_close((0, 0, 0.0), (0, 0, 1.0))
        False
    """
    if abs_tol_ns < 0:
        raise ValueError(f"abs_tol_ns must be non-negative, got {abs_tol_ns}")

    return abs(instant_difference_ns(lhs, rhs)) <= abs_tol_ns


def compare_instants(
    lhs: tuple[int, int, float],
    rhs: tuple[int, int, float],
    abs_tol_ns: float = EPS_NANOSECONDS,
) -> int:
    """
    Сравнение двух моментов времени с учётом толерантности.

    Returns:
        -1 если lhs < rhs, 0 если lhs ≈ rhs, +1 если lhs > rhs
    """
    diff = instant_difference_ns(lhs, rhs)

    if abs(diff) <= abs_tol_ns:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1
