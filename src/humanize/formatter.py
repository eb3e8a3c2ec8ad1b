"""Formatter — граница с локализованным форматтером фраз.

Форматтер превращает (unit, tense, quantity, quantity_mode) в готовую
локализованную строку ("2 months ago", "in a minute").

Контракт:
- чистая функция своих четырёх аргументов
- quantity всегда >= 0
- не падает для валидной пары (unit, quantity)

Форматтер передаётся в каждый вызов явно; глобального реестра локалей нет.
Любое исключение форматтера пробрасывается вызывающему без изменений.
"""

from typing import Protocol, runtime_checkable

from src.core.domain.time_units import QuantityDisplayMode, Tense, TimeUnit


@runtime_checkable
class Formatter(Protocol):
    """Локализованный форматтер относительных дат."""

    def date_humanize(
        self,
        unit: TimeUnit,
        tense: Tense,
        quantity: int,
        quantity_mode: QuantityDisplayMode,
    ) -> str:
        ...
