"""Normalization Fuzz — рандомизированная проверка нормализации Timestamp.

Генерирует детерминированную (seed) последовательность сырых троек
(days, seconds, nanoseconds) в широком диапазоне, включая отрицательные и
переполненные компоненты, и проверяет для каждой:
- каноническую форму результата (0 <= seconds < 86400, 0 <= ns < 1e9)
- сохранение момента времени (с толерантностью EPS_NANOSECONDS)

Распределение по умолчанию:
    days        = 2 * (int(r * 100) - 50)
    seconds     = 2 * (int(r * 100000) - 50000)
    nanoseconds = (r - 0.5) * 2e9
"""

import random
from dataclasses import dataclass, field
from typing import Iterator, List

import structlog

from src.core.domain.universal_time import Timestamp
from src.core.math.time_normalization import is_canonical
from src.core.math.time_units import EPS_NANOSECONDS, instant_difference_ns

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FuzzConfig:
    """Конфигурация fuzz-прогона.

    day_span / second_span — ширина диапазона до удвоения (см. распределение
    в docstring модуля), nanosecond_span — полная ширина диапазона наносекунд.
    """
    seed: int = 5
    iterations: int = 90_000
    day_span: int = 100
    second_span: int = 100_000
    nanosecond_span: float = 2.0e9
    instant_tolerance_ns: float = EPS_NANOSECONDS


@dataclass(frozen=True)
class FuzzViolation:
    """Нарушение инварианта на одной сырой тройке."""

    raw: tuple[int, int, float]
    normalized: tuple[int, int, float]
    reason: str


@dataclass(frozen=True)
class FuzzReport:
    """Результат fuzz-прогона."""

    iterations: int
    seed: int
    max_instant_error_ns: float
    violations: List[FuzzViolation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations


def generate_raw_triples(config: FuzzConfig) -> Iterator[tuple[int, int, float]]:
    """Детерминированная последовательность сырых троек."""
    rng = random.Random(config.seed)
    half_days = config.day_span // 2
    half_seconds = config.second_span // 2

    for _ in range(config.iterations):
        days = 2 * (int(rng.random() * config.day_span) - half_days)
        seconds = 2 * (int(rng.random() * config.second_span) - half_seconds)
        nanoseconds = (rng.random() - 0.5) * config.nanosecond_span
        yield days, seconds, nanoseconds


def check_triple(
    raw: tuple[int, int, float],
    tolerance_ns: float = EPS_NANOSECONDS,
) -> tuple[Timestamp, float, List[str]]:
    """Нормализация одной тройки и проверка инвариантов.

    Returns:
        (timestamp, instant_error_ns, reasons) — reasons пуст, если
        инварианты выполнены
    """
    timestamp = Timestamp(*raw)
    normalized = timestamp.as_tuple()
    error_ns = abs(instant_difference_ns(raw, normalized))

    reasons = []
    if not is_canonical(*normalized):
        reasons.append("not_canonical")
    if error_ns > tolerance_ns:
        reasons.append("instant_not_preserved")
    return timestamp, error_ns, reasons


def run_normalization_fuzz(config: FuzzConfig | None = None) -> FuzzReport:
    """Прогон нормализации на config.iterations сырых тройках.

    Args:
        config: конфигурация прогона (default FuzzConfig())

    Returns:
        FuzzReport с максимальной ошибкой момента и списком нарушений
    """
    config = config or FuzzConfig()

    violations: List[FuzzViolation] = []
    max_error_ns = 0.0

    for raw in generate_raw_triples(config):
        timestamp, error_ns, reasons = check_triple(raw, config.instant_tolerance_ns)
        max_error_ns = max(max_error_ns, error_ns)

        for reason in reasons:
            violation = FuzzViolation(raw=raw, normalized=timestamp.as_tuple(), reason=reason)
            violations.append(violation)
            logger.warning(
                "normalization_violation",
                raw=violation.raw,
                normalized=violation.normalized,
                reason=reason,
            )

    report = FuzzReport(
        iterations=config.iterations,
        seed=config.seed,
        max_instant_error_ns=max_error_ns,
        violations=violations,
    )
    logger.info(
        "normalization_fuzz_complete",
        iterations=report.iterations,
        seed=report.seed,
        violations=len(report.violations),
        max_instant_error_ns=report.max_instant_error_ns,
    )
    return report
