"""
Contract Validation Module

Модуль для валидации JSON контрактов Universal Time.
"""

from .validators import (
    SCHEMA_DIR,
    UniversalTimeValidator,
    load_schema,
    validate_universal_time,
)

__all__ = [
    "SCHEMA_DIR",
    "UniversalTimeValidator",
    "load_schema",
    "validate_universal_time",
]
