"""
Operand: закрытый вариант входного значения калькулятора

Операнд цепочки бывает трёх видов:
- CALCULATOR: другой калькулятор, читается его текущий accumulator
- NUMBER: нативное число (int, float, Decimal, Fraction; bool не число)
- TEXT: строка, парсится через float()

Коэрсия возвращает float или None ("unresolvable"): нечисловая строка,
калькулятор без значения, NaN/Inf, int вне диапазона float.
Всё, что не является операндом (None, list, dict, ...), вызывает TypeError.
"""

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from src.core.math.numerical_safeguards import is_valid_float


class OperandKind(str, Enum):
    """Вид операнда."""

    CALCULATOR = "CALCULATOR"
    NUMBER = "NUMBER"
    TEXT = "TEXT"


class AccumulatorSource(ABC):
    """Источник значения для CALCULATOR операнда."""

    @property
    @abstractmethod
    def value(self) -> Optional[float]:
        """Текущий accumulator (None если не установлен)."""


@dataclass(frozen=True)
class Operand:
    """Классифицированный операнд."""

    kind: OperandKind
    raw: Any

    @classmethod
    def of(cls, value: Any) -> "Operand":
        """
        Классификация значения.

        Args:
            value: Калькулятор, число, строка или уже готовый Operand

        Returns:
            Operand

        Raises:
            TypeError: Если value не может быть операндом
        """
        if isinstance(value, Operand):
            return value
        if isinstance(value, AccumulatorSource):
            return cls(OperandKind.CALCULATOR, value)
        if isinstance(value, bool):
            raise TypeError("bool is not a valid operand")
        if isinstance(value, (numbers.Real, Decimal)):
            return cls(OperandKind.NUMBER, value)
        if isinstance(value, str):
            return cls(OperandKind.TEXT, value)

        raise TypeError(
            f"Unsupported operand type {type(value).__name__!r}: "
            "expected a calculator, a number or a numeric string"
        )

    def resolve(self) -> Optional[float]:
        """
        Коэрсия к float.

        Returns:
            Конечный float или None, если операнд не разрешается
        """
        if self.kind == OperandKind.CALCULATOR:
            number = self.raw.value
        elif self.kind == OperandKind.TEXT:
            try:
                number = float(self.raw.strip())
            except ValueError:
                return None
        else:
            try:
                number = float(self.raw)
            except (OverflowError, ValueError):
                # int вне диапазона float, Decimal("sNaN")
                return None

        if number is None or not is_valid_float(number):
            return None
        return number
