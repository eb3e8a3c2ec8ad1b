"""
Contract Validation Module

Модуль для валидации JSON контрактов конфигурации.
"""

from .validators import (
    ContractValidator,
    HumanizeStrategyValidator,
    SchemaLoader,
    validate_humanize_strategy,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "HumanizeStrategyValidator",
    # Functions
    "validate_humanize_strategy",
]
