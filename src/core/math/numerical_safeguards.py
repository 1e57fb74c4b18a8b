"""
Numerical Safeguards: границы точности float и валидация параметров

Модуль собирает примитивы, на которые опирается scaled arithmetic:
- Границы safe integer для IEEE-754 double (2**53 - 1)
- Проверка finite float (NaN/Inf не допускаются в accumulator)
- Валидация количества цифр (precision / fraction digits)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целые float в пределах [MIN_SAFE_INTEGER, MAX_SAFE_INTEGER] представимы точно
2. Произведение/сумма двух целых float точна, пока результат в этих пределах
3. Количество цифр всегда int (bool не принимается)
"""

import math
from typing import Final

# =============================================================================
# ГРАНИЦЫ SAFE INTEGER
# =============================================================================

# Максимальное целое, для которого n и n + 1 представимы точно
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Симметричная нижняя граница
MIN_SAFE_INTEGER: Final[int] = -(2**53 - 1)


# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ ПО УМОЛЧАНИЮ
# =============================================================================

# Значащие цифры при округлении (precision rounding)
DEFAULT_PRECISION: Final[int] = 15

# Цифры после точки при fixed-point форматировании
DEFAULT_FRACTION_DIGITS: Final[int] = 2

# Диапазон, допустимый для настроек калькулятора
CONFIG_DIGITS_MIN: Final[int] = 0
CONFIG_DIGITS_MAX: Final[int] = 20

# Диапазон, который выдерживает нативное форматирование (significant digits)
FORMAT_PRECISION_MIN: Final[int] = 1
FORMAT_PRECISION_MAX: Final[int] = 100

# Диапазон fraction digits для нативного fixed-point форматирования
FORMAT_FRACTION_DIGITS_MAX: Final[int] = 100


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение (float или int)

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_safe_integer_magnitude(value: float) -> bool:
    """
    Проверка, что значение не выходит за границы safe integer.

    Scaled arithmetic работает с целыми float; за пределами
    [MIN_SAFE_INTEGER, MAX_SAFE_INTEGER] соседние целые уже не различимы,
    и результат может потерять точность.

    Args:
        value: Масштабированное (целое) значение или результат операции

    Returns:
        True если MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER

    Examples:
        >>> is_safe_integer_magnitude(2**53 - 1)
        True
        >>> is_safe_integer_magnitude(2.0**53)
        False
        >>> is_safe_integer_magnitude(float("nan"))
        False
    """
    if not is_valid_float(value):
        return False
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_digits(
    value: int,
    name: str,
    min_value: int,
    max_value: int,
) -> None:
    """
    Валидация количества цифр (precision, fraction_digits).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение
        max_value: Максимальное допустимое значение

    Raises:
        ValueError: Если value не int или вне [min_value, max_value]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
