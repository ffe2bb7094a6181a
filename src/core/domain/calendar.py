"""
Calendar — Конверсия Universal Time в календарное время и обратно

Stateless-отображение между Timestamp и timezone-aware datetime (UTC).
Эпоха задаётся календарным годом: момент полуночи 1 января этого года (UTC)
является "нулевым днём".

Поддерживаемые конвенции эпохи:
- SNO+ : 2010-01-01T00:00:00Z (по умолчанию)
- SNO  : 1996-01-01T00:00:00Z

ВНИМАНИЕ: datetime имеет разрешение 1 микросекунда, поэтому наносекунды
округляются до ближайшей микросекунды при конверсии в календарное время.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Final

import structlog

from src.core.domain.universal_time import Timestamp
from src.core.math.time_units import NANOSECONDS_PER_MICROSECOND

logger = structlog.get_logger(__name__)


# =============================================================================
# ЭПОХИ
# =============================================================================

SNO_PLUS_EPOCH_YEAR: Final[int] = 2010
SNO_EPOCH_YEAR: Final[int] = 1996


class EpochConvention(str, Enum):
    """Конвенция эпохи (нулевого дня)"""

    SNO_PLUS = "SNO_PLUS"
    SNO = "SNO"

    @property
    def epoch_year(self) -> int:
        """Календарный год эпохи."""
        return _EPOCH_YEARS[self]


_EPOCH_YEARS: Final[dict[EpochConvention, int]] = {
    EpochConvention.SNO_PLUS: SNO_PLUS_EPOCH_YEAR,
    EpochConvention.SNO: SNO_EPOCH_YEAR,
}


def epoch_start(epoch_year: int) -> datetime:
    """
    Момент начала эпохи: полночь 1 января epoch_year (UTC).

    Raises:
        ValueError: Если год вне диапазона datetime (1..9999)
    """
    if not 1 <= epoch_year <= 9999:
        raise ValueError(f"epoch_year must be in [1, 9999], got {epoch_year}")
    return datetime(epoch_year, 1, 1, tzinfo=timezone.utc)


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def to_calendar(timestamp: Timestamp, epoch_year: int = SNO_PLUS_EPOCH_YEAR) -> datetime:
    """
    Конверсия Timestamp → календарное время (UTC).

    Args:
        timestamp: Момент относительно эпохи
        epoch_year: Календарный год эпохи (default: SNO+ 2010)

    Returns:
        timezone-aware datetime в UTC

    Raises:
        ValueError: Если epoch_year вне диапазона
        OverflowError: Если результат вне диапазона datetime

    Examples:
        >>> to_calendar(Timestamp(1, 3600, 0.0))
        datetime.datetime(2010, 1, 2, 1, 0, tzinfo=datetime.timezone.utc)
    """
    moment = epoch_start(epoch_year) + timedelta(
        days=timestamp.days,
        seconds=timestamp.seconds,
        microseconds=timestamp.nanoseconds / NANOSECONDS_PER_MICROSECOND,
    )
    logger.debug(
        "timestamp_to_calendar",
        days=timestamp.days,
        seconds=timestamp.seconds,
        nanoseconds=timestamp.nanoseconds,
        epoch_year=epoch_year,
        moment=moment.isoformat(),
    )
    return moment


def from_calendar(moment: datetime, epoch_year: int = SNO_PLUS_EPOCH_YEAR) -> Timestamp:
    """
    Конверсия календарного времени → Timestamp.

    Args:
        moment: timezone-aware datetime (любая зона, приводится к UTC)
        epoch_year: Календарный год эпохи (default: SNO+ 2010)

    Returns:
        Нормализованный Timestamp (days < 0 для моментов до эпохи)

    Raises:
        ValueError: Если moment naive (без tzinfo)
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError(f"moment must be timezone-aware, got naive {moment.isoformat()}")

    delta = moment.astimezone(timezone.utc) - epoch_start(epoch_year)
    timestamp = Timestamp(
        delta.days,
        delta.seconds,
        delta.microseconds * NANOSECONDS_PER_MICROSECOND,
    )
    logger.debug(
        "calendar_to_timestamp",
        moment=moment.isoformat(),
        epoch_year=epoch_year,
        days=timestamp.days,
        seconds=timestamp.seconds,
        nanoseconds=timestamp.nanoseconds,
    )
    return timestamp


def rebase(timestamp: Timestamp, from_epoch_year: int, to_epoch_year: int) -> Timestamp:
    """
    Пересчёт Timestamp из одной эпохи в другую без потери наносекунд.

    Разность эпох — целое число суток, поэтому seconds/nanoseconds
    сохраняются точно.

    Examples:
        >>> rebase(Timestamp(0, 0, 0.0), SNO_PLUS_EPOCH_YEAR, SNO_EPOCH_YEAR).days
        5114
    """
    offset_days = (epoch_start(from_epoch_year) - epoch_start(to_epoch_year)).days
    return timestamp + Timestamp(offset_days, 0, 0.0)
