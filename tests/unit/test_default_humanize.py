"""
Тесты для default-эвристики

Покрытие:
- Пороги каскада (нижняя граница включена, верхняя нет)
- Сглаживание 60–119 s → 1 minute и 60–89 min → 1 hour
- Календарная разница дат для < 48 hr
- Выравнивание на календарный месяц в [28, 30) дней
- Месяцы floor(days / 29.5), годы с минимумом 1
- Tense и единственный вызов форматтера
"""

from datetime import datetime, timedelta

import pytest

from src.core.domain.time_units import QuantityDisplayMode, Tense, TimeUnit
from src.humanize import decide_default, default_humanize


def decide_offset(reference: datetime, offset: timedelta):
    """Helper: решение для input = reference + offset."""
    return decide_default(reference + offset, reference)


# =============================================================================
# ТЕСТЫ: миллисекунды и секунды
# =============================================================================


class TestSubMinute:
    def test_200ms_ago_is_now(self, reference) -> None:
        result = decide_offset(reference, -timedelta(milliseconds=200))
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.MILLISECOND, 0, Tense.PAST)

    def test_499ms_is_now(self, reference) -> None:
        result = decide_offset(reference, timedelta(milliseconds=499))
        assert result.unit == TimeUnit.MILLISECOND
        assert result.quantity == 0

    def test_exactly_500ms_is_zero_seconds(self, reference) -> None:
        """Нижняя граница включена: 500 ms уже не "now" """
        result = decide_offset(reference, timedelta(milliseconds=500))
        assert (result.unit, result.quantity) == (TimeUnit.SECOND, 0)

    def test_45_seconds_ago(self, reference) -> None:
        result = decide_offset(reference, -timedelta(seconds=45))
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.SECOND, 45, Tense.PAST)

    def test_59_9_seconds(self, reference) -> None:
        result = decide_offset(reference, timedelta(seconds=59, milliseconds=900))
        assert (result.unit, result.quantity) == (TimeUnit.SECOND, 59)


# =============================================================================
# ТЕСТЫ: минуты и часы (сглаживание)
# =============================================================================


class TestMinutesAndHours:
    @pytest.mark.parametrize("seconds", [60, 90, 119])
    def test_one_minute_band(self, reference, seconds: int) -> None:
        """60–119 s → "1 minute", не 1.5 minute и не 90 seconds"""
        result = decide_offset(reference, -timedelta(seconds=seconds))
        assert (result.unit, result.quantity) == (TimeUnit.MINUTE, 1)
        assert result.rule == "one_minute"

    def test_120_seconds_is_two_minutes(self, reference) -> None:
        result = decide_offset(reference, timedelta(seconds=120))
        assert (result.unit, result.quantity, result.rule) == (TimeUnit.MINUTE, 2, "minutes")

    def test_59_minutes(self, reference) -> None:
        result = decide_offset(reference, timedelta(minutes=59, seconds=59))
        assert (result.unit, result.quantity) == (TimeUnit.MINUTE, 59)

    @pytest.mark.parametrize("minutes", [60, 75, 89])
    def test_one_hour_band(self, reference, minutes: int) -> None:
        """60–89 min → "1 hour" """
        result = decide_offset(reference, -timedelta(minutes=minutes))
        assert (result.unit, result.quantity, result.rule) == (TimeUnit.HOUR, 1, "one_hour")

    def test_90_minutes_uses_hour_component(self, reference) -> None:
        result = decide_offset(reference, timedelta(minutes=90))
        assert (result.unit, result.quantity, result.rule) == (TimeUnit.HOUR, 1, "hours")

    def test_23_hours(self, reference) -> None:
        result = decide_offset(reference, -timedelta(hours=23, minutes=59))
        assert (result.unit, result.quantity) == (TimeUnit.HOUR, 23)


# =============================================================================
# ТЕСТЫ: дни
# =============================================================================


class TestDays:
    def test_30_hours_across_single_midnight(self) -> None:
        """30 часов через одну полночь → 1 день по датам"""
        reference = datetime(2023, 6, 15, 0, 30)
        result = decide_default(reference + timedelta(hours=30), reference)
        assert (result.unit, result.quantity, result.rule) == (TimeUnit.DAY, 1, "calendar_days")

    def test_25_hours_across_two_midnights(self) -> None:
        reference = datetime(2023, 6, 15, 23, 0)
        result = decide_default(reference + timedelta(hours=25), reference)
        assert (result.unit, result.quantity) == (TimeUnit.DAY, 2)

    def test_47_hours_in_past(self, reference) -> None:
        result = decide_offset(reference, -timedelta(hours=47))
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.DAY, 2, Tense.PAST)

    def test_48_hours_uses_day_component(self, reference) -> None:
        result = decide_offset(reference, timedelta(hours=48))
        assert (result.unit, result.quantity, result.rule) == (TimeUnit.DAY, 2, "days")

    def test_27_days(self, reference) -> None:
        result = decide_offset(reference, timedelta(days=27, hours=23))
        assert (result.unit, result.quantity) == (TimeUnit.DAY, 27)


# =============================================================================
# ТЕСТЫ: выравнивание на календарный месяц
# =============================================================================


class TestCalendarMonthAlignment:
    def test_february_future_is_one_month(self) -> None:
        """Feb 1 → Mar 1 (28 дней) → 1 month"""
        reference = datetime(2023, 2, 1, 9, 0)
        result = decide_default(datetime(2023, 3, 1, 9, 0), reference)
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.MONTH, 1, Tense.FUTURE)
        assert result.rule == "calendar_month"

    def test_february_past_is_one_month(self) -> None:
        reference = datetime(2023, 3, 1, 9, 0)
        result = decide_default(datetime(2023, 2, 1, 9, 0), reference)
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.MONTH, 1, Tense.PAST)

    def test_leap_february_29_days(self) -> None:
        reference = datetime(2024, 2, 1)
        result = decide_default(datetime(2024, 3, 1), reference)
        assert (result.unit, result.quantity) == (TimeUnit.MONTH, 1)

    def test_unaligned_29_days_stays_days(self) -> None:
        reference = datetime(2023, 3, 1, 12, 0)
        result = decide_default(datetime(2023, 3, 30, 12, 0), reference)
        assert (result.unit, result.quantity, result.rule) == (TimeUnit.DAY, 29, "days_unaligned")

    def test_unaligned_28_days_past(self) -> None:
        reference = datetime(2023, 7, 29)
        result = decide_default(datetime(2023, 7, 1), reference)
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.DAY, 28, Tense.PAST)

    def test_jan_31_to_mar_2_is_one_month(self) -> None:
        """30 дней: уже ветка месяцев, floor(30 / 29.5) = 1"""
        reference = datetime(2023, 1, 31)
        result = decide_default(datetime(2023, 3, 2), reference)
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.MONTH, 1, Tense.FUTURE)
        assert result.rule == "months"

    def test_month_shift_before_min_date_stays_days(self) -> None:
        """Reference в январе года 1: месяц назад не существует → Day"""
        reference = datetime(1, 1, 29)
        result = decide_default(datetime(1, 1, 1), reference)
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.DAY, 28, Tense.PAST)
        assert result.rule == "days_unaligned"

    def test_month_shift_after_max_date_stays_days(self) -> None:
        """Reference в декабре года 9999: месяц вперёд не существует → Day"""
        reference = datetime(9999, 12, 2)
        result = decide_default(datetime(9999, 12, 31, 12), reference)
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.DAY, 29, Tense.FUTURE)
        assert result.rule == "days_unaligned"


# =============================================================================
# ТЕСТЫ: месяцы и годы
# =============================================================================


class TestMonthsAndYears:
    @pytest.mark.parametrize(
        "days, expected",
        [(40, 1), (58, 1), (59, 2), (90, 3), (344, 11)],
    )
    def test_months(self, reference, days: int, expected: int) -> None:
        result = decide_offset(reference, timedelta(days=days))
        assert (result.unit, result.quantity) == (TimeUnit.MONTH, expected)

    @pytest.mark.parametrize(
        "days, expected",
        [(345, 1), (364, 1), (365, 1), (400, 1), (729, 1), (730, 2), (3652, 10)],
    )
    def test_years(self, reference, days: int, expected: int) -> None:
        """Годы начиная с 345 дней, никогда не "0 years" """
        result = decide_offset(reference, -timedelta(days=days))
        assert (result.unit, result.quantity, result.tense) == (TimeUnit.YEAR, expected, Tense.PAST)


# =============================================================================
# ТЕСТЫ: tense и форматтер
# =============================================================================


class TestFormatting:
    def test_equal_instants(self, reference, formatter) -> None:
        text = default_humanize(reference, reference, formatter)
        assert text == "millisecond/0/past/numeric"

    def test_future_tense(self, reference, formatter) -> None:
        text = default_humanize(reference + timedelta(days=3), reference, formatter)
        assert text == "day/3/future/numeric"

    def test_formatter_called_once_with_mode(self, reference, formatter) -> None:
        default_humanize(
            reference - timedelta(hours=5), reference, formatter, QuantityDisplayMode.WORDS
        )
        assert formatter.calls == [
            (TimeUnit.HOUR, Tense.PAST, 5, QuantityDisplayMode.WORDS)
        ]

    def test_formatter_error_propagates(self, reference) -> None:
        class BrokenFormatter:
            def date_humanize(self, unit, tense, quantity, quantity_mode):
                raise LookupError("no resource")

        with pytest.raises(LookupError, match="no resource"):
            default_humanize(reference, reference, BrokenFormatter())

    def test_result_returned_verbatim(self, reference) -> None:
        class FixedFormatter:
            def date_humanize(self, unit, tense, quantity, quantity_mode):
                return "  as is  "

        assert default_humanize(reference, reference, FixedFormatter()) == "  as is  "
