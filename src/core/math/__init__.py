"""
Core math modules

Численные и календарные примитивы для пороговой арифметики.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    ceil_to_int,
    floor_to_int,
    is_valid_float,
    validate_in_range,
)

# Dates
from src.core.math.dates import add_months, calendar_days_between

__all__ = [
    # Numerical Safeguards — Validation
    "is_valid_float",
    "validate_in_range",
    # Numerical Safeguards — Rounding
    "ceil_to_int",
    "floor_to_int",
    # Dates
    "add_months",
    "calendar_days_between",
]
