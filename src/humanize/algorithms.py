"""Алгоритмы перевода расстояния между двумя моментами в слова.

Две стратегии с общей подготовкой:
    duration = |reference - input|
    tense = FUTURE если input > reference, иначе PAST

Default — каскад фиксированных порогов по totals (первое совпадение выигрывает):
    < 500 ms          → Millisecond/0
    < 60 s            → Second/seconds
    < 120 s           → Minute/1
    < 60 min          → Minute/minutes
    < 90 min          → Hour/1
    < 24 hr           → Hour/hours
    < 48 hr           → Day/календарная разница дат
    < 28 days         → Day/days
    [28, 30) days     → Month/1 если reference ± 1 месяц == дата input, иначе Day/days
    < 345 days        → Month/floor(total_days / 29.5)
    иначе             → Year/max(floor(total_days / 365), 1)

Precision — перенос снизу вверх с допуском precision ∈ (0, 1]:
    ms >= 999p → +1 s; s >= 59p → +1 min; min >= 59p → +1 hr; hr >= 23p → +1 day
    затем независимые оценки месяцев и лет по дням,
    выбор сверху вниз: Year → Month → Day → Hour → Minute → Second → Millisecond/0

Порядок веток семантически значим и должен сохраняться.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

from src.core.domain.duration import Duration, derive_tense
from src.core.domain.time_units import (
    CALENDAR_DAY_UPPER_HOURS,
    DAYS_PER_YEAR,
    ESTIMATION_DAYS_PER_MONTH,
    HOURS_PER_DAY,
    MAX_DAYS_IN_MONTH,
    MAX_DAYS_IN_YEAR,
    MINUTES_PER_HOUR,
    MONTH_ALIGNMENT_LOWER_DAYS,
    MONTH_ALIGNMENT_UPPER_DAYS,
    MONTHS_UPPER_DAYS,
    NOW_THRESHOLD_MS,
    ONE_HOUR_UPPER_MINUTES,
    ONE_MINUTE_UPPER_SECONDS,
    SECONDS_PER_MINUTE,
    QuantityDisplayMode,
    Tense,
    TimeUnit,
    months_from_days,
    years_from_days,
)
from src.core.math.dates import add_months, calendar_days_between
from src.core.math.numerical_safeguards import (
    ceil_to_int,
    floor_to_int,
    validate_in_range,
)
from src.humanize.formatter import Formatter

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidPrecisionError(ValueError):
    """precision вне (0, 1], NaN/Inf или не число.

    Нарушение контракта вызывающей стороной, не runtime-условие.
    """

    pass


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class HumanizeDecision:
    """Выбранная единица и количество, до форматирования."""

    unit: TimeUnit
    tense: Tense
    quantity: int

    # Имя сработавшей ветки (для диагностики)
    rule: str

    def format(self, formatter: Formatter, quantity_mode: QuantityDisplayMode) -> str:
        """Единственный вызов форматтера; результат возвращается как есть."""
        return formatter.date_humanize(self.unit, self.tense, self.quantity, quantity_mode)


# =============================================================================
# SHARED SETUP
# =============================================================================


def measure(input_dt: datetime, reference_dt: datetime) -> tuple[Duration, Tense]:
    """Абсолютная длительность и tense для пары моментов."""
    return Duration.between(input_dt, reference_dt), derive_tense(input_dt, reference_dt)


def validate_precision(precision: float) -> float:
    """
    Проверка precision ∈ (0, 1].

    Raises:
        InvalidPrecisionError: Если precision вне диапазона, NaN/Inf или не число
    """
    try:
        validate_in_range(precision, "precision", min_value=0.0, max_value=1.0, min_exclusive=True)
    except ValueError as e:
        raise InvalidPrecisionError(str(e)) from e
    return float(precision)


# =============================================================================
# DEFAULT STRATEGY
# =============================================================================


def decide_default(input_dt: datetime, reference_dt: datetime) -> HumanizeDecision:
    """
    Default-эвристика: наиболее естественная единица по фиксированным порогам.

    Args:
        input_dt: Описываемый момент
        reference_dt: Момент, относительно которого описывается input

    Returns:
        HumanizeDecision с единицей, tense и количеством
    """
    ts, tense = measure(input_dt, reference_dt)

    def decision(unit: TimeUnit, quantity: int, rule: str) -> HumanizeDecision:
        return HumanizeDecision(unit=unit, tense=tense, quantity=quantity, rule=rule)

    if ts.total_milliseconds < NOW_THRESHOLD_MS:
        return decision(TimeUnit.MILLISECOND, 0, "now")

    if ts.total_seconds < SECONDS_PER_MINUTE:
        return decision(TimeUnit.SECOND, ts.seconds, "seconds")

    if ts.total_seconds < ONE_MINUTE_UPPER_SECONDS:
        return decision(TimeUnit.MINUTE, 1, "one_minute")

    if ts.total_minutes < MINUTES_PER_HOUR:
        return decision(TimeUnit.MINUTE, ts.minutes, "minutes")

    if ts.total_minutes < ONE_HOUR_UPPER_MINUTES:
        return decision(TimeUnit.HOUR, 1, "one_hour")

    if ts.total_hours < HOURS_PER_DAY:
        return decision(TimeUnit.HOUR, ts.hours, "hours")

    # Сутки через полночь: считаем по датам, а не по часам
    if ts.total_hours < CALENDAR_DAY_UPPER_HOURS:
        days = calendar_days_between(input_dt, reference_dt)
        return decision(TimeUnit.DAY, days, "calendar_days")

    if ts.total_days < MONTH_ALIGNMENT_LOWER_DAYS:
        return decision(TimeUnit.DAY, ts.days, "days")

    if ts.total_days < MONTH_ALIGNMENT_UPPER_DAYS:
        # Короткий месяц (Feb 1 → Mar 1) против произвольных 28-29 дней
        step = 1 if tense == Tense.FUTURE else -1
        try:
            aligned = add_months(reference_dt.date(), step) == input_dt.date()
        except ValueError:
            # Сдвиг за date.min/date.max: выравнивания на месяц нет
            aligned = False
        if aligned:
            return decision(TimeUnit.MONTH, 1, "calendar_month")
        return decision(TimeUnit.DAY, ts.days, "days_unaligned")

    if ts.total_days < MONTHS_UPPER_DAYS:
        return decision(TimeUnit.MONTH, months_from_days(ts.total_days), "months")

    return decision(TimeUnit.YEAR, years_from_days(ts.total_days), "years")


def default_humanize(
    input_dt: datetime,
    reference_dt: datetime,
    formatter: Formatter,
    quantity_mode: QuantityDisplayMode = QuantityDisplayMode.NUMERIC,
) -> str:
    """Расстояние между input и reference словами (default-эвристика)."""
    result = decide_default(input_dt, reference_dt)
    logger.debug(
        "default_humanize: rule=%s unit=%s quantity=%d tense=%s",
        result.rule, result.unit.value, result.quantity, result.tense.value,
    )
    return result.format(formatter, quantity_mode)


# =============================================================================
# PRECISION STRATEGY
# =============================================================================


def _round_with_tolerance(days: int, unit_days: int, precision: float) -> int:
    """
    Дробное число единиц (days / unit_days), округлённое вверх или вниз.

    Вверх, если days дотягивает до unit_days * (floor + precision).

    Examples:
        >>> _round_with_tolerance(400, 365, 0.9)
        1
        >>> _round_with_tolerance(50, 30, 0.6)
        2
    """
    factor = floor_to_int(days / unit_days)
    max_count = ceil_to_int(days / unit_days)
    return max_count if days >= unit_days * (factor + precision) else max_count - 1


def decide_precision(
    input_dt: datetime,
    reference_dt: datetime,
    precision: float,
) -> HumanizeDecision:
    """
    Precision-эвристика: округление через границы единиц с допуском.

    precision = 1 — без раннего округления; меньше — округляет охотнее.

    Args:
        input_dt: Описываемый момент
        reference_dt: Момент, относительно которого описывается input
        precision: Допуск ∈ (0, 1]

    Returns:
        HumanizeDecision с единицей, tense и количеством

    Raises:
        InvalidPrecisionError: Если precision вне (0, 1]

    Examples:
        >>> from datetime import timedelta
        >>> ref = datetime(2024, 1, 1)
        >>> decide_precision(ref - timedelta(days=400), ref, 0.9).quantity
        1
    """
    precision = validate_precision(precision)
    ts, tense = measure(input_dt, reference_dt)

    seconds, minutes, hours, days = ts.seconds, ts.minutes, ts.hours, ts.days

    # Перенос от меньших единиц к большим
    if ts.milliseconds >= 999 * precision:
        seconds += 1
    if seconds >= 59 * precision:
        minutes += 1
    if minutes >= 59 * precision:
        hours += 1
    if hours >= 23 * precision:
        days += 1

    # Месяцы
    months = 0
    if ESTIMATION_DAYS_PER_MONTH * precision <= days <= MAX_DAYS_IN_MONTH:
        months = 1
    if MAX_DAYS_IN_MONTH < days < DAYS_PER_YEAR * precision:
        months = _round_with_tolerance(days, ESTIMATION_DAYS_PER_MONTH, precision)

    # Годы, независимо от месяцев; (365, 366] уходит в многолетнюю ветку
    years = 0
    if DAYS_PER_YEAR * precision <= days <= MAX_DAYS_IN_YEAR:
        years = 1
    if days > DAYS_PER_YEAR:
        years = _round_with_tolerance(days, DAYS_PER_YEAR, precision)

    def decision(unit: TimeUnit, quantity: int) -> HumanizeDecision:
        return HumanizeDecision(
            unit=unit, tense=tense, quantity=quantity, rule=f"precision_{unit.value}"
        )

    # Выбор от больших единиц к меньшим
    if years > 0:
        return decision(TimeUnit.YEAR, years)
    if months > 0:
        return decision(TimeUnit.MONTH, months)
    if days > 0:
        return decision(TimeUnit.DAY, days)
    if hours > 0:
        return decision(TimeUnit.HOUR, hours)
    if minutes > 0:
        return decision(TimeUnit.MINUTE, minutes)
    if seconds > 0:
        return decision(TimeUnit.SECOND, seconds)
    return decision(TimeUnit.MILLISECOND, 0)


def precision_humanize(
    input_dt: datetime,
    reference_dt: datetime,
    precision: float,
    formatter: Formatter,
    quantity_mode: QuantityDisplayMode = QuantityDisplayMode.NUMERIC,
) -> str:
    """Расстояние между input и reference словами (precision-эвристика)."""
    result = decide_precision(input_dt, reference_dt, precision)
    logger.debug(
        "precision_humanize: precision=%s unit=%s quantity=%d tense=%s",
        precision, result.unit.value, result.quantity, result.tense.value,
    )
    return result.format(formatter, quantity_mode)
