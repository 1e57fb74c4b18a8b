"""PreciseCalculator: цепочечный калькулятор с точной десятичной арифметикой.

Один экземпляр владеет одним accumulator. Операции plus/minus/times/divide
сворачивают список операндов слева направо в accumulator и возвращают тот же
экземпляр, поэтому вызовы цепляются:

    >>> PreciseCalculator(0.1).plus(0.2).to_precision()
    0.3
    >>> PreciseCalculator(10).plus(5).times(2).value
    30.0

Неразрешимое начальное значение (PreciseCalculator("abc")) даёт accumulator 0.0.

Правила свёртки:
1. Accumulator не установлен → первый разрешимый операнд становится
   начальным значением (неразрешимые головы отбрасываются)
2. Неразрешимый операнд в середине списка пропускается
3. plus/minus с нулём → значение не меняется
4. times/divide с нулём → ровно 0.0 (деление на ноль даёт 0)

Экземпляр не потокобезопасен: одновременная мутация из нескольких потоков
не поддерживается.
"""

import logging
from collections import deque
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Union

from src.calculator.boundary import BoundaryMonitor
from src.calculator.errors import NonFiniteResultError, UnresolvableOperandError
from src.core.contracts import validate_calculator_config
from src.core.domain.calculator_config import CalculatorConfig
from src.core.domain.operand import AccumulatorSource, Operand
from src.core.math.numerical_safeguards import (
    CONFIG_DIGITS_MAX,
    CONFIG_DIGITS_MIN,
    is_valid_float,
    validate_digits,
)
from src.core.math.scaled_arithmetic import (
    BoundaryHook,
    format_fixed,
    round_to_precision,
    scaled_divide,
    scaled_minus,
    scaled_plus,
    scaled_times,
)

logger = logging.getLogger("precise_calc.engine")

ConfigInput = Union[CalculatorConfig, Mapping[str, Any], None]


# =============================================================================
# OPERATOR
# =============================================================================


class Operator(str, Enum):
    """Бинарная операция цепочки."""

    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    DIVIDE = "divide"


_ADDITIVE = (Operator.PLUS, Operator.MINUS)


def _resolve_config(config: ConfigInput) -> CalculatorConfig:
    if config is None:
        return CalculatorConfig()
    if isinstance(config, CalculatorConfig):
        return config
    if isinstance(config, Mapping):
        record = dict(config)
        validate_calculator_config(record)
        return CalculatorConfig.model_validate(record)

    raise TypeError(
        f"config must be a CalculatorConfig or a mapping, got {type(config).__name__!r}"
    )


# =============================================================================
# CALCULATOR
# =============================================================================


class PreciseCalculator(AccumulatorSource):
    """Цепочечный калькулятор.

    Args:
        value: Начальный операнд (число, строка или другой калькулятор);
            неразрешимый операнд даёт 0.0
        config: CalculatorConfig или сырая запись {"precision", "fractionDigits",
            "enableCheckBoundary"}
        on_boundary_exceeded: Callback для boundary диагностики вместо logging
    """

    def __init__(
        self,
        value: Any = None,
        config: ConfigInput = None,
        *,
        on_boundary_exceeded: Optional[BoundaryHook] = None,
    ):
        self._config = _resolve_config(config)
        self._boundary = BoundaryMonitor(
            enabled=self._config.enable_check_boundary,
            callback=on_boundary_exceeded,
        )
        self._value: Optional[float] = None

        if value is not None:
            self._value = Operand.of(value).resolve()
            if self._value is None:
                logger.warning(
                    "Initial operand %r is unresolvable, seeding accumulator with 0", value
                )
                self._value = 0.0

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def value(self) -> Optional[float]:
        """Текущий accumulator (None до первого значения)."""
        return self._value

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def boundary_exceeded_count(self) -> int:
        """Сколько раз сработала boundary диагностика."""
        return self._boundary.exceeded_count

    # -------------------------------------------------------------------------
    # Reduction driver
    # -------------------------------------------------------------------------

    def _apply(self, operator: Operator, accumulator: float, number: float) -> float:
        if number == 0:
            # plus/minus: без изменений; times/divide: ровно ноль
            return accumulator if operator in _ADDITIVE else 0.0

        hook = self._boundary.hook

        if operator == Operator.PLUS:
            result = scaled_plus(accumulator, number, hook)
        elif operator == Operator.MINUS:
            result = scaled_minus(accumulator, number, hook)
        elif operator == Operator.TIMES:
            result = scaled_times(accumulator, number, hook)
        else:
            result = scaled_divide(
                accumulator, number, self._config.effective_precision, hook
            )

        if not is_valid_float(result):
            raise NonFiniteResultError(
                f"{operator.value}({accumulator!r}, {number!r}) left the double range: {result!r}"
            )

        if hook is not None:
            hook(result)
        return result

    def _calculate(self, operands: tuple, operator: Operator) -> None:
        # Классификация до мутации: TypeError не оставляет полусвёрнутое состояние
        pending = deque(Operand.of(operand) for operand in operands)
        accumulator = self._value

        if accumulator is None:
            if not pending:
                return

            while pending and accumulator is None:
                head = pending.popleft()
                accumulator = head.resolve()
                if accumulator is None:
                    logger.debug("Skipping unresolvable seed operand %r", head.raw)

            if accumulator is None:
                raise UnresolvableOperandError(
                    f"{operator.value}: none of {len(operands)} operand(s) "
                    "resolves to a finite number"
                )

        for operand in pending:
            number = operand.resolve()
            if number is None:
                logger.debug("Skipping unresolvable operand %r in %s", operand.raw, operator.value)
                continue
            accumulator = self._apply(operator, accumulator, number)

        self._value = accumulator

    # -------------------------------------------------------------------------
    # Public chain
    # -------------------------------------------------------------------------

    def plus(self, *operands: Any) -> "PreciseCalculator":
        """Сложение: accumulator + op1 + op2 + ..."""
        self._calculate(operands, Operator.PLUS)
        return self

    def minus(self, *operands: Any) -> "PreciseCalculator":
        """Вычитание: accumulator - op1 - op2 - ..."""
        self._calculate(operands, Operator.MINUS)
        return self

    def times(self, *operands: Any) -> "PreciseCalculator":
        """Умножение: accumulator * op1 * op2 * ..."""
        self._calculate(operands, Operator.TIMES)
        return self

    def divide(self, *operands: Any) -> "PreciseCalculator":
        """Деление: accumulator / op1 / op2 / ... (деление на ноль → 0)."""
        self._calculate(operands, Operator.DIVIDE)
        return self

    # -------------------------------------------------------------------------
    # Finishing
    # -------------------------------------------------------------------------

    def to_precision(self, precision: Optional[int] = None) -> float:
        """
        Accumulator, округлённый до precision значащих цифр.

        Args:
            precision: 0..20 (0 → 15); None → настройка экземпляра

        Returns:
            Число; неустановленный accumulator считается нулём

        Raises:
            ValueError: Если precision вне 0..20
        """
        digits = self._config.precision if precision is None else precision
        validate_digits(digits, "precision", CONFIG_DIGITS_MIN, CONFIG_DIGITS_MAX)

        return round_to_precision(self._value or 0.0, digits)

    def to_fixed(self, fraction_digits: Optional[int] = None) -> str:
        """
        Accumulator в fixed-point записи.

        Args:
            fraction_digits: 0..20; None → настройка экземпляра

        Returns:
            Строка вида "3.14"; неустановленный accumulator считается нулём

        Raises:
            ValueError: Если fraction_digits вне 0..20
        """
        digits = self._config.fraction_digits if fraction_digits is None else fraction_digits
        validate_digits(digits, "fraction_digits", CONFIG_DIGITS_MIN, CONFIG_DIGITS_MAX)

        return format_fixed(self._value or 0.0, digits, self._config.precision)

    def __float__(self) -> float:
        return self.to_precision()

    def __str__(self) -> str:
        return self.to_fixed()

    def __repr__(self) -> str:
        return (
            f"PreciseCalculator(value={self._value!r}, precision={self._config.precision}, "
            f"fraction_digits={self._config.fraction_digits}, "
            f"enable_check_boundary={self._config.enable_check_boundary})"
        )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def plus(*operands: Any) -> float:
    """Точная сумма операндов."""
    return PreciseCalculator().plus(*operands).to_precision()


def minus(*operands: Any) -> float:
    """Точная разность: первый операнд минус остальные."""
    return PreciseCalculator().minus(*operands).to_precision()


def times(*operands: Any) -> float:
    """Точное произведение операндов."""
    return PreciseCalculator().times(*operands).to_precision()


def divide(*operands: Any) -> float:
    """Точное частное: первый операнд, делённый на остальные."""
    return PreciseCalculator().divide(*operands).to_precision()
