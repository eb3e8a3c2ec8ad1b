"""Humanize — точка входа: расстояние между двумя моментами словами.

    humanize(input_dt, reference_dt, formatter)                   → default-эвристика
    humanize(input_dt, reference_dt, formatter, strategy=...)     → выбранная стратегия

Текущее время не запрашивается: reference_dt всегда задаёт вызывающий.
"""

from datetime import datetime
from typing import Optional

from src.core.domain.time_units import QuantityDisplayMode
from src.humanize.formatter import Formatter
from src.humanize.strategies import DefaultHumanizeStrategy, HumanizeStrategy

_DEFAULT_STRATEGY = DefaultHumanizeStrategy()


def humanize(
    input_dt: datetime,
    reference_dt: datetime,
    formatter: Formatter,
    strategy: Optional[HumanizeStrategy] = None,
    quantity_mode: QuantityDisplayMode = QuantityDisplayMode.NUMERIC,
) -> str:
    """
    Локализованная фраза о расстоянии между input_dt и reference_dt.

    Args:
        input_dt: Описываемый момент
        reference_dt: Момент, относительно которого описывается input_dt
        formatter: Локализованный форматтер (вызывается ровно один раз)
        strategy: Стратегия (default: DefaultHumanizeStrategy)
        quantity_mode: Режим вывода количества, передаётся форматтеру

    Returns:
        Строка форматтера без изменений ("3 days ago", "in 2 months")

    Raises:
        TypeError: naive и aware datetime смешаны
        Любое исключение форматтера — без изменений
    """
    strategy = strategy or _DEFAULT_STRATEGY
    return strategy.humanize(input_dt, reference_dt, formatter, quantity_mode)
