"""
Core math modules для Universal Time

Единицы времени, численные примитивы и алгоритм нормализации
с гарантией стабильности.
"""

# Time Units
from src.core.math.time_units import (
    EPS_NANOSECONDS,
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_SECOND,
    NANOSECONDS_PER_SECOND_INT,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    instant_difference_ns,
    total_nanoseconds,
    total_seconds,
    whole_seconds,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Validation
    as_integral,
    is_valid_float,
    validate_finite,
    validate_integral,
    # Truncating division
    trunc_divmod_float,
    trunc_divmod_int,
    # Epsilon comparisons
    compare_instants,
    instants_close,
)

# Time Normalization
from src.core.math.time_normalization import (
    borrow_into_range,
    carry_magnitude,
    is_canonical,
    is_non_negative_order,
    normalize_components,
)

__all__ = [
    # Time Units — Constants
    "EPS_NANOSECONDS",
    "NANOSECONDS_PER_MICROSECOND",
    "NANOSECONDS_PER_SECOND",
    "NANOSECONDS_PER_SECOND_INT",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    # Time Units — Functions
    "instant_difference_ns",
    "total_nanoseconds",
    "total_seconds",
    "whole_seconds",
    # Numerical Safeguards — Validation
    "as_integral",
    "is_valid_float",
    "validate_finite",
    "validate_integral",
    # Numerical Safeguards — Truncating division
    "trunc_divmod_float",
    "trunc_divmod_int",
    # Numerical Safeguards — Epsilon comparisons
    "compare_instants",
    "instants_close",
    # Time Normalization
    "borrow_into_range",
    "carry_magnitude",
    "is_canonical",
    "is_non_negative_order",
    "normalize_components",
]
