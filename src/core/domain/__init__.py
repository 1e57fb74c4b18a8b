"""
Domain models and value objects.

Contains the calculator configuration and the operand variant.
"""

from src.core.domain.calculator_config import CalculatorConfig
from src.core.domain.operand import AccumulatorSource, Operand, OperandKind

__all__ = [
    # Configuration
    "CalculatorConfig",
    # Operands
    "AccumulatorSource",
    "Operand",
    "OperandKind",
]
