"""
Diagnostics — рандомизированные проверки инвариантов Universal Time.
"""

from src.diagnostics.normalization_fuzz import (
    FuzzConfig,
    FuzzReport,
    FuzzViolation,
    check_triple,
    generate_raw_triples,
    run_normalization_fuzz,
)

__all__ = [
    "FuzzConfig",
    "FuzzReport",
    "FuzzViolation",
    "check_triple",
    "generate_raw_triples",
    "run_normalization_fuzz",
]
