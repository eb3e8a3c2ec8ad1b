"""Общие fixtures: stub-форматтер, записывающий вызовы."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest

from src.core.domain.time_units import QuantityDisplayMode, Tense, TimeUnit


@dataclass
class RecordingFormatter:
    """Форматтер-заглушка: "<unit>/<quantity>/<tense>/<mode>", все вызовы в calls."""

    calls: list = field(default_factory=list)

    def date_humanize(
        self,
        unit: TimeUnit,
        tense: Tense,
        quantity: int,
        quantity_mode: QuantityDisplayMode,
    ) -> str:
        self.calls.append((unit, tense, quantity, quantity_mode))
        return f"{unit.value}/{quantity}/{tense.value}/{quantity_mode.value}"


@pytest.fixture
def formatter() -> RecordingFormatter:
    """Свежий записывающий форматтер."""
    return RecordingFormatter()


@pytest.fixture
def reference() -> datetime:
    """Опорный момент: 2023-06-15 12:00:00."""
    return datetime(2023, 6, 15, 12, 0, 0)
