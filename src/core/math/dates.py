"""
Dates — Календарная арифметика над датами

- add_months: сдвиг даты на N календарных месяцев с прижатием дня
  к последнему дню целевого месяца (Jan 31 + 1 month → Feb 28/29)
- calendar_days_between: разница дат без учёта времени суток

Работает только с date-частью моментов; время суток и таймзона
не участвуют.
"""

import calendar
from datetime import date, datetime


def add_months(value: date, months: int) -> date:
    """
    Сдвиг даты на months календарных месяцев (может быть отрицательным).

    День прижимается к длине целевого месяца.

    Examples:
        >>> add_months(date(2023, 1, 31), 1)
        datetime.date(2023, 2, 28)
        >>> add_months(date(2024, 1, 31), 1)
        datetime.date(2024, 2, 29)
        >>> add_months(date(2023, 3, 31), -1)
        datetime.date(2023, 2, 28)
        >>> add_months(date(2023, 12, 15), 1)
        datetime.date(2024, 1, 15)

    Raises:
        ValueError: Если результат выходит за пределы date.min/date.max
    """
    month_index = value.year * 12 + (value.month - 1) + months
    year, month_zero = divmod(month_index, 12)
    month = month_zero + 1

    if not date.min.year <= year <= date.max.year:
        raise ValueError(f"add_months({value}, {months}) is out of range")

    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def calendar_days_between(first: datetime, second: datetime) -> int:
    """
    Абсолютная разница в днях между датами двух моментов.

    30 часов через одну полночь (Mon 20:00 → Wed 02:00) дают 2,
    а Mon 01:00 → Tue 23:00 даёт 1.

    Examples:
        >>> calendar_days_between(datetime(2023, 5, 1, 20), datetime(2023, 5, 3, 2))
        2
        >>> calendar_days_between(datetime(2023, 5, 1, 1), datetime(2023, 5, 2, 23))
        1
    """
    return abs((first.date() - second.date()).days)
