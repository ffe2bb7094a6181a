"""
Domain models and value objects.

Contains the Timestamp value type, its calendar conversion and its
serialized record.
"""

from src.core.domain.universal_time import Timestamp
from src.core.domain.calendar import (
    SNO_EPOCH_YEAR,
    SNO_PLUS_EPOCH_YEAR,
    EpochConvention,
    epoch_start,
    from_calendar,
    rebase,
    to_calendar,
)
from src.core.domain.timestamp_record import TimestampRecord

__all__ = [
    # Universal time
    "Timestamp",
    # Calendar conversion
    "SNO_EPOCH_YEAR",
    "SNO_PLUS_EPOCH_YEAR",
    "EpochConvention",
    "epoch_start",
    "from_calendar",
    "rebase",
    "to_calendar",
    # Serialization
    "TimestampRecord",
]
