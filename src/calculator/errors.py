"""Исключения калькулятора."""


class CalculatorError(Exception):
    """Базовое исключение PreciseCalculator."""

    pass


class UnresolvableOperandError(CalculatorError, ValueError):
    """
    Ни один операнд не разрешился в число, а accumulator ещё не установлен.

    Accumulator остаётся неустановленным.
    """

    pass


class NonFiniteResultError(CalculatorError, ArithmeticError):
    """
    Операция вышла за диапазон double (результат NaN/Inf).

    Accumulator сохраняет значение до операции.
    """

    pass
