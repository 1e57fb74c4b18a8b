"""Precise Calculator: цепочечная точная арифметика поверх float.

Публичный API:
- PreciseCalculator: plus / minus / times / divide, to_precision / to_fixed
- plus, minus, times, divide: одноразовые вычисления
- CalculatorError и его наследники
"""

from .boundary import BoundaryMonitor
from .engine import Operator, PreciseCalculator, divide, minus, plus, times
from .errors import CalculatorError, NonFiniteResultError, UnresolvableOperandError

__all__ = [
    "PreciseCalculator",
    "Operator",
    "BoundaryMonitor",
    # Functions
    "plus",
    "minus",
    "times",
    "divide",
    # Exceptions
    "CalculatorError",
    "UnresolvableOperandError",
    "NonFiniteResultError",
]
