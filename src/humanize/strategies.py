"""Стратегии humanize — закрытый набор вариантов за одной возможностью.

- DefaultHumanizeStrategy: фиксированные пороги
- PrecisionHumanizeStrategy: округление с допуском precision (default 0.75)

Стратегия выбирается явно (объектом или конфигурацией) и передаётся
в humanize(); глобального конфигуратора нет.

Конфигурация:
    {"strategy": "default"}
    {"strategy": "precision", "precision": 0.9}

dict проверяется по JSON Schema контракту humanize_strategy, затем
строится HumanizeStrategyConfig (pydantic) и из неё стратегия.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from jsonschema import ValidationError as SchemaValidationError
from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.contracts import validate_humanize_strategy
from src.core.domain.time_units import QuantityDisplayMode
from src.humanize.algorithms import (
    HumanizeDecision,
    decide_default,
    decide_precision,
    default_humanize,
    precision_humanize,
    validate_precision,
)
from src.humanize.formatter import Formatter

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 0.75


# =============================================================================
# EXCEPTIONS
# =============================================================================


class StrategyConfigError(ValueError):
    """Конфигурация стратегии не соответствует контракту humanize_strategy."""

    pass


# =============================================================================
# STRATEGIES
# =============================================================================


@dataclass(frozen=True)
class DefaultHumanizeStrategy:
    """Default-эвристика: наиболее естественная единица."""

    def decide(self, input_dt: datetime, reference_dt: datetime) -> HumanizeDecision:
        return decide_default(input_dt, reference_dt)

    def humanize(
        self,
        input_dt: datetime,
        reference_dt: datetime,
        formatter: Formatter,
        quantity_mode: QuantityDisplayMode = QuantityDisplayMode.NUMERIC,
    ) -> str:
        return default_humanize(input_dt, reference_dt, formatter, quantity_mode)


@dataclass(frozen=True)
class PrecisionHumanizeStrategy:
    """Precision-эвристика.

    precision проверяется при создании: невалидная стратегия не существует.

    Raises:
        InvalidPrecisionError: Если precision вне (0, 1]
    """

    precision: float = DEFAULT_PRECISION

    def __post_init__(self):
        object.__setattr__(self, "precision", validate_precision(self.precision))

    def decide(self, input_dt: datetime, reference_dt: datetime) -> HumanizeDecision:
        return decide_precision(input_dt, reference_dt, self.precision)

    def humanize(
        self,
        input_dt: datetime,
        reference_dt: datetime,
        formatter: Formatter,
        quantity_mode: QuantityDisplayMode = QuantityDisplayMode.NUMERIC,
    ) -> str:
        return precision_humanize(input_dt, reference_dt, self.precision, formatter, quantity_mode)


HumanizeStrategy = Union[DefaultHumanizeStrategy, PrecisionHumanizeStrategy]


# =============================================================================
# CONFIGURATION
# =============================================================================


class StrategyKind(str, Enum):
    """Тип стратегии в конфигурации."""

    DEFAULT = "default"
    PRECISION = "precision"


class HumanizeStrategyConfig(BaseModel):
    """
    Конфигурация стратегии.

    Соответствует схеме humanize_strategy.json.
    precision допустим только для PRECISION; если не задан — 0.75.
    """

    strategy: StrategyKind = Field(StrategyKind.DEFAULT, description="Тип стратегии")
    precision: Optional[float] = Field(
        None, gt=0.0, le=1.0, description="Допуск округления (0, 1] для precision"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("precision", mode="before")
    @classmethod
    def validate_precision_not_bool(cls, v: Any) -> Any:
        """bool не является precision, хотя pydantic привёл бы True к 1.0."""
        if isinstance(v, bool):
            raise ValueError(f"precision must be a number, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_precision_usage(self) -> "HumanizeStrategyConfig":
        if self.strategy == StrategyKind.DEFAULT and self.precision is not None:
            raise ValueError("precision is only allowed for the 'precision' strategy")
        return self

    def to_contract(self) -> Dict[str, Any]:
        """dict в формате контракта humanize_strategy."""
        return self.model_dump(mode="json", exclude_none=True)


def load_strategy_config(data: Dict[str, Any]) -> HumanizeStrategyConfig:
    """
    Построение конфигурации из dict с проверкой по JSON Schema.

    Raises:
        StrategyConfigError: Если dict не соответствует контракту
    """
    try:
        validate_humanize_strategy(data)
    except SchemaValidationError as e:
        raise StrategyConfigError(f"Invalid humanize strategy config: {e.message}") from e
    return HumanizeStrategyConfig.model_validate(data)


def build_strategy(
    config: Union[HumanizeStrategyConfig, Dict[str, Any], None] = None,
) -> HumanizeStrategy:
    """
    Стратегия по конфигурации.

    Args:
        config: HumanizeStrategyConfig, dict по контракту или None (default)

    Returns:
        DefaultHumanizeStrategy или PrecisionHumanizeStrategy

    Raises:
        StrategyConfigError: Если dict не соответствует контракту
        InvalidPrecisionError: Если precision вне (0, 1]
    """
    if config is None:
        config = HumanizeStrategyConfig()
    elif isinstance(config, dict):
        config = load_strategy_config(config)

    if config.strategy == StrategyKind.PRECISION:
        precision = DEFAULT_PRECISION if config.precision is None else config.precision
        strategy: HumanizeStrategy = PrecisionHumanizeStrategy(precision=precision)
    else:
        strategy = DefaultHumanizeStrategy()

    logger.debug("Built humanize strategy: %r", strategy)
    return strategy
