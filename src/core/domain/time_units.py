"""
TimeUnits — Единицы времени и константы календарной конверсии

Единственный источник констант для перевода между:
- миллисекундами, секундами, минутами, часами, днями
- днями и месяцами/годами (приближённые оценки)

Календарная конвенция фиксирована: 60 s/min, 60 min/hr, 24 hr/day.
Месяцы и годы не имеют фиксированной длины и оцениваются по дням.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class TimeUnit(str, Enum):
    """Единица, которой выражается прошедшее время.

    Порядок объявления соответствует порядку величины (от меньшей к большей).
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class Tense(str, Enum):
    """Время фразы: input раньше reference (PAST) или позже (FUTURE)."""

    PAST = "past"
    FUTURE = "future"


class QuantityDisplayMode(str, Enum):
    """Как форматтер выводит количество: цифрой, словом или никак.

    Для алгоритмов непрозрачно, передаётся форматтеру без изменений.
    """

    NONE = "none"
    NUMERIC = "numeric"
    WORDS = "words"


# =============================================================================
# КАЛЕНДАРНЫЕ КОНСТАНТЫ
# =============================================================================
MILLISECONDS_PER_SECOND: Final[int] = 1000
SECONDS_PER_MINUTE: Final[int] = 60
MINUTES_PER_HOUR: Final[int] = 60
HOURS_PER_DAY: Final[int] = 24

SECONDS_PER_HOUR: Final[int] = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY: Final[int] = SECONDS_PER_HOUR * HOURS_PER_DAY

# Средняя длина месяца для default-эвристики (floor(total_days / 29.5))
AVERAGE_DAYS_PER_MONTH: Final[float] = 29.5

# Длина месяца для precision-оценки (floor/ceil(days / 30))
ESTIMATION_DAYS_PER_MONTH: Final[int] = 30

# Максимум дней, которые ещё считаются "одним месяцем" в precision-оценке
MAX_DAYS_IN_MONTH: Final[int] = 31

DAYS_PER_YEAR: Final[int] = 365

# Максимум дней, которые ещё считаются "одним годом" в precision-оценке
MAX_DAYS_IN_YEAR: Final[int] = 366


# =============================================================================
# ПОРОГИ DEFAULT-ЭВРИСТИКИ
# =============================================================================
# Всё, что короче, считается "сейчас" (Millisecond/0)
NOW_THRESHOLD_MS: Final[float] = 500.0

# 60–119 s → "1 minute"
ONE_MINUTE_UPPER_SECONDS: Final[float] = 120.0

# 60–89 min → "1 hour"
ONE_HOUR_UPPER_MINUTES: Final[float] = 90.0

# < 48 hr → день по календарной разнице дат
CALENDAR_DAY_UPPER_HOURS: Final[float] = 48.0

# [28, 30) дней → проверка выравнивания на календарный месяц
MONTH_ALIGNMENT_LOWER_DAYS: Final[float] = 28.0
MONTH_ALIGNMENT_UPPER_DAYS: Final[float] = 30.0

# < 345 дней → месяцы, иначе годы
MONTHS_UPPER_DAYS: Final[float] = 345.0


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def months_from_days(total_days: float) -> int:
    """
    Приближённое число месяцев для default-эвристики.

    Args:
        total_days: Непрерывное число дней (>= 0)

    Returns:
        floor(total_days / AVERAGE_DAYS_PER_MONTH)
    """
    return int(total_days // AVERAGE_DAYS_PER_MONTH)


def years_from_days(total_days: float) -> int:
    """
    Число полных лет для default-эвристики, но не меньше 1.

    Ветка "годы" срабатывает начиная с 345 дней, поэтому "0 лет"
    никогда не выводится.
    """
    return max(int(total_days // DAYS_PER_YEAR), 1)
