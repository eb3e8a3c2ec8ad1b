"""
Domain models and value objects.

Contains fundamental domain entities like TimeUnit, Tense, Duration.
"""

from src.core.domain.duration import Duration, derive_tense
from src.core.domain.time_units import (
    AVERAGE_DAYS_PER_MONTH,
    DAYS_PER_YEAR,
    ESTIMATION_DAYS_PER_MONTH,
    HOURS_PER_DAY,
    MILLISECONDS_PER_SECOND,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    QuantityDisplayMode,
    Tense,
    TimeUnit,
    months_from_days,
    years_from_days,
)

__all__ = [
    # Time units module
    "AVERAGE_DAYS_PER_MONTH",
    "DAYS_PER_YEAR",
    "ESTIMATION_DAYS_PER_MONTH",
    "HOURS_PER_DAY",
    "MILLISECONDS_PER_SECOND",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "QuantityDisplayMode",
    "Tense",
    "TimeUnit",
    "months_from_days",
    "years_from_days",
    # Duration model
    "Duration",
    "derive_tense",
]
