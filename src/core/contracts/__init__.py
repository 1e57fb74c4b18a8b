"""
Contract Validation Module

Модуль для валидации JSON контрактов (сырых записей настроек).
"""

from .validators import (
    CalculatorConfigValidator,
    ContractValidator,
    SchemaLoader,
    validate_calculator_config,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculatorConfigValidator",
    # Functions
    "validate_calculator_config",
]
