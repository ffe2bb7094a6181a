"""
Time Normalization — каноническая форма тройки (days, seconds, nanoseconds)

Модуль приводит произвольную (в том числе отрицательную или переполненную)
тройку компонент времени к канонической форме:

    0 <= seconds < 86400
    0 <= nanoseconds < 1e9
    days — без ограничений по знаку и величине

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Момент времени сохраняется: days*86400 + seconds + nanoseconds*1e-9
   до и после нормализации совпадает (с точностью округления double)
2. Нормализация O(1): никаких итеративных циклов
3. Нормализация идемпотентна: каноническая тройка возвращается без изменений
   (бит в бит)
4. Отрицательные моменты (до эпохи) представимы: days < 0, остальные
   компоненты неотрицательны

ОРИЕНТАЦИЯ ЗНАКА:
    is_non_negative_order — лексикографический тест (days, затем seconds,
    затем nanoseconds). В канонической форме знак момента несёт только days,
    поэтому направление заёма на шаге 3 всегда одно и то же (к
    неотрицательным seconds/nanoseconds) для любой ориентации тройки.
    Свёртка отрицательной тройки в компоненты одного знака (все <= 0)
    канонической формы не даёт и не применяется.

АЛГОРИТМ:
    1. Валидация: days/seconds целые, nanoseconds конечное; целые (int)
       nanoseconds переносятся в seconds точно, до приведения к float
    2. Перенос величины с усечением к нулю:
           nanoseconds → seconds (частное nanoseconds / 1e9)
           seconds → days (частное seconds / 86400)
       После переноса |nanoseconds| < 1e9 и |seconds| < 86400, но знаки
       компонент могут различаться (например seconds = -1, nanoseconds = +1)
    3. Заём одной единицы в направлении канонической формы:
           nanoseconds < 0 → seconds -= 1, nanoseconds += 1e9
           seconds < 0     → days -= 1,    seconds += 86400
       Одного заёма достаточно, так как шаг 2 уже ограничил величины
    4. Защита от округления: nanoseconds + 1e9 может округлиться ровно до 1e9
       (например -1e-8 + 1e9), такая единица возвращается в seconds
"""

from src.core.math.numerical_safeguards import (
    as_integral,
    trunc_divmod_float,
    trunc_divmod_int,
    validate_finite,
    validate_integral,
)
from src.core.math.time_units import (
    NANOSECONDS_PER_SECOND,
    NANOSECONDS_PER_SECOND_INT,
    SECONDS_PER_DAY,
)


# =============================================================================
# ОРИЕНТАЦИЯ ЗНАКА
# =============================================================================


def is_non_negative_order(days: int, seconds: int, nanoseconds: float) -> bool:
    """
    Лексикографический тест ориентации тройки.

    Тройка неотрицательна, если days > 0; при days == 0 — если seconds > 0;
    при days == seconds == 0 — если nanoseconds >= 0.
    Младшая компонента учитывается только когда все старшие равны нулю.

    Для канонической тройки результат совпадает со знаком момента времени.

    Examples:
        >>> is_non_negative_order(0, 1, -5.0e8)
        True
        >>> is_non_negative_order(0, 0, -1.0)
        False
        >>> is_non_negative_order(-1, 86399, 9.0e8)
        False
    """
    if days != 0:
        return days > 0
    if seconds != 0:
        return seconds > 0
    return nanoseconds >= 0.0


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def carry_magnitude(days: int, seconds: int, nanoseconds: float) -> tuple[int, int, float]:
    """
    Перенос переполнения в старшие компоненты (усечение к нулю).

    Returns:
        Тройка с |nanoseconds| < 1e9 и |seconds| < 86400; знаки компонент
        могут различаться
    """
    overflow_seconds, nanoseconds = trunc_divmod_float(nanoseconds, NANOSECONDS_PER_SECOND)
    seconds += overflow_seconds

    overflow_days, seconds = trunc_divmod_int(seconds, SECONDS_PER_DAY)
    days += overflow_days

    return days, seconds, nanoseconds


def borrow_into_range(days: int, seconds: int, nanoseconds: float) -> tuple[int, int, float]:
    """
    Заём одной единицы из старшей компоненты для отрицательных младших.

    Ожидает тройку после carry_magnitude (|nanoseconds| < 1e9,
    |seconds| < 86400).
    """
    if nanoseconds < 0.0:
        seconds -= 1
        nanoseconds += NANOSECONDS_PER_SECOND

    # -1e-8 + 1e9 округляется в double ровно до 1e9
    if nanoseconds >= NANOSECONDS_PER_SECOND:
        seconds += 1
        nanoseconds -= NANOSECONDS_PER_SECOND

    if seconds < 0:
        days -= 1
        seconds += SECONDS_PER_DAY
    elif seconds >= SECONDS_PER_DAY:
        days += 1
        seconds -= SECONDS_PER_DAY

    return days, seconds, nanoseconds


def normalize_components(
    days: int,
    seconds: int,
    nanoseconds: float,
) -> tuple[int, int, float]:
    """
    Приведение тройки (days, seconds, nanoseconds) к канонической форме.

    Чистая функция: входы не модифицируются, результат зависит только от
    входов.

    Args:
        days: Целые сутки от эпохи (любой знак)
        seconds: Секунды (любой знак и величина)
        nanoseconds: Наносекунды (любой знак и величина, конечное число)

    Returns:
        Каноническая тройка (days, seconds, nanoseconds)

    Raises:
        TypeError: Если days или seconds не целые
        ValueError: Если nanoseconds NaN/Inf

    Examples:
        >>> normalize_components(0, 0, -1.0)
        (-1, 86399, 999999999.0)
        >>> normalize_components(0, 1, -991974300.0)
        (0, 0, 8025700.0)
        >>> normalize_components(0, 90000, 2.5e9)
        (1, 3602, 500000000.0)
    """
    days = validate_integral(days, "days")
    seconds = validate_integral(seconds, "seconds")

    # int-наносекунды переносятся в int до приведения к float
    whole_nanoseconds = as_integral(nanoseconds)
    if whole_nanoseconds is not None:
        overflow_seconds, nanoseconds = trunc_divmod_int(
            whole_nanoseconds, NANOSECONDS_PER_SECOND_INT
        )
        seconds += overflow_seconds

    nanoseconds = validate_finite(nanoseconds, "nanoseconds")

    days, seconds, nanoseconds = carry_magnitude(days, seconds, nanoseconds)
    days, seconds, nanoseconds = borrow_into_range(days, seconds, nanoseconds)

    # -0.0 → 0.0
    return days, seconds, nanoseconds + 0.0


def is_canonical(days: int, seconds: int, nanoseconds: float) -> bool:
    """Проверка инварианта канонической формы."""
    return 0 <= seconds < SECONDS_PER_DAY and 0.0 <= nanoseconds < NANOSECONDS_PER_SECOND
