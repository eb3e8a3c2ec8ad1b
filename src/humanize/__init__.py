"""Humanize — расстояние между двумя моментами словами ("3 days ago", "in 2 months").

Две стратегии (default и precision) поверх общей подготовки duration/tense;
локализованный текст строит внешний Formatter, переданный явно.
"""

from src.humanize.algorithms import (
    HumanizeDecision,
    InvalidPrecisionError,
    decide_default,
    decide_precision,
    default_humanize,
    precision_humanize,
)
from src.humanize.formatter import Formatter
from src.humanize.humanizer import humanize
from src.humanize.strategies import (
    DEFAULT_PRECISION,
    DefaultHumanizeStrategy,
    HumanizeStrategy,
    HumanizeStrategyConfig,
    PrecisionHumanizeStrategy,
    StrategyConfigError,
    StrategyKind,
    build_strategy,
    load_strategy_config,
)

__all__ = [
    # Entry point
    "humanize",
    # Algorithms
    "HumanizeDecision",
    "InvalidPrecisionError",
    "decide_default",
    "decide_precision",
    "default_humanize",
    "precision_humanize",
    # Formatter
    "Formatter",
    # Strategies
    "DEFAULT_PRECISION",
    "DefaultHumanizeStrategy",
    "PrecisionHumanizeStrategy",
    "HumanizeStrategy",
    # Configuration
    "HumanizeStrategyConfig",
    "StrategyConfigError",
    "StrategyKind",
    "build_strategy",
    "load_strategy_config",
]
