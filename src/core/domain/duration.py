"""
Duration — Неотрицательный промежуток времени между двумя моментами

Immutable Pydantic модель поверх timedelta.

Два представления одного и того же промежутка:
- компоненты (days, hours, minutes, seconds, milliseconds) — целые,
  стандартное деление/остаток
- totals (total_milliseconds ... total_days) — непрерывные (float)

Оба представления вычисляются из одного elapsed, поэтому всегда согласованы.
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field, field_validator

from src.core.domain.time_units import (
    MILLISECONDS_PER_SECOND,
    MINUTES_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    Tense,
)


_ONE_MILLISECOND = timedelta(milliseconds=1)


# =============================================================================
# TENSE
# =============================================================================


def derive_tense(input_dt: datetime, reference_dt: datetime) -> Tense:
    """
    FUTURE, если input строго позже reference, иначе PAST.

    Равные моменты дают PAST.
    """
    return Tense.FUTURE if input_dt > reference_dt else Tense.PAST


# =============================================================================
# DURATION MODEL
# =============================================================================


class Duration(BaseModel):
    """
    Абсолютный промежуток времени.

    Examples:
        >>> d = Duration(elapsed=timedelta(days=1, hours=6, seconds=5))
        >>> (d.days, d.hours, d.seconds)
        (1, 6, 5)
    """

    elapsed: timedelta = Field(..., description="Промежуток (>= 0)")

    model_config = {"frozen": True}

    @field_validator("elapsed")
    @classmethod
    def validate_non_negative(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError(f"elapsed must be non-negative, got {v}")
        return v

    @classmethod
    def between(cls, input_dt: datetime, reference_dt: datetime) -> "Duration":
        """
        |reference - input| для двух моментов в любом порядке.

        Raises:
            TypeError: naive и aware datetime смешаны (от datetime)
        """
        return cls(elapsed=abs(reference_dt - input_dt))

    # -------------------------------------------------------------------------
    # Компоненты
    # -------------------------------------------------------------------------

    @property
    def days(self) -> int:
        return self.elapsed.days

    @property
    def hours(self) -> int:
        return self.elapsed.seconds // SECONDS_PER_HOUR

    @property
    def minutes(self) -> int:
        return (self.elapsed.seconds // SECONDS_PER_MINUTE) % MINUTES_PER_HOUR

    @property
    def seconds(self) -> int:
        return self.elapsed.seconds % SECONDS_PER_MINUTE

    @property
    def milliseconds(self) -> int:
        return self.elapsed.microseconds // 1000

    # -------------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------------

    @property
    def total_milliseconds(self) -> float:
        return self.elapsed / _ONE_MILLISECOND

    @property
    def total_seconds(self) -> float:
        return self.total_milliseconds / MILLISECONDS_PER_SECOND

    @property
    def total_minutes(self) -> float:
        return self.total_seconds / SECONDS_PER_MINUTE

    @property
    def total_hours(self) -> float:
        return self.total_seconds / SECONDS_PER_HOUR

    @property
    def total_days(self) -> float:
        return self.total_seconds / SECONDS_PER_DAY
