"""
Scaled Arithmetic: точная десятичная арифметика поверх float

Наивные + - * / над двоичным float дают 0.1 + 0.2 = 0.30000000000000004.
Модуль раскладывает каждый операнд на целую мантиссу и десятичный сдвиг,
выполняет операцию над целыми float и масштабирует результат обратно.

Операции:
- scaled_times:  a * b через целые a·10^la и b·10^lb
- scaled_divide: частное целых, precision rounding, коррекция масштаба
- scaled_plus / scaled_minus: выравнивание к общему масштабу 10^max(la, lb)
- round_to_precision: округление до N значащих цифр
- format_fixed: fixed-point строка с N знаками после точки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Масштабированные операнды всегда целые float (snap к ближайшему целому)
2. Целые float до 2**53 умножаются и складываются точно
3. Округление: round half up по точному двоичному значению
4. Boundary hook только наблюдает, результат не меняется

Если 10**l не помещается в float (мантисса длиннее ~308 знаков) или
масштабированное промежуточное значение уходит в inf (1e300 + 1e-10), пара
считается обычной float операцией, это логируется как WARNING.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Callable, Optional

from src.core.math.decimal_repr import format_shortest, mantissa_length
from src.core.math.numerical_safeguards import (
    DEFAULT_FRACTION_DIGITS,
    DEFAULT_PRECISION,
    FORMAT_FRACTION_DIGITS_MAX,
    FORMAT_PRECISION_MAX,
    FORMAT_PRECISION_MIN,
    validate_digits,
)

logger = logging.getLogger("precise_calc.scaled_arithmetic")

# Hook для boundary диагностики: получает каждое масштабированное значение
BoundaryHook = Callable[[float], None]

# Начиная с этой величины fixed-point форматирование отдаёт shortest запись
FIXED_NOTATION_LIMIT = 1e21


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def _pow10(exponent: int) -> float:
    # OverflowError при exponent > 308
    return 10.0**exponent


def _require_finite(*values: float) -> None:
    # Промежуточное значение ушло в inf: пара считается обычной float операцией
    for value in values:
        if not math.isfinite(value):
            raise OverflowError(f"scaled value {value!r} exceeds the float range")


def _notify(on_boundary: Optional[BoundaryHook], *values: float) -> None:
    if on_boundary is None:
        return
    for value in values:
        on_boundary(value)


def scale_to_integer(value: float, length: int) -> float:
    """
    Сдвиг точки вправо на length разрядов с привязкой к ближайшему целому.

    value * 10**length может отличаться от целого на несколько ulp
    (4.35 * 100 == 434.99999999999994), поэтому результат округляется.

    Raises:
        OverflowError: Если 10**length или результат сдвига не помещается
            в float
    """
    scaled = value * _pow10(length)
    _require_finite(scaled)
    return float(round(scaled))


def _plain_fallback(symbol: str, a: float, b: float) -> None:
    logger.warning(
        "Decimal scaling of %r %s %r exceeds the float range, "
        "falling back to plain float arithmetic",
        a,
        symbol,
        b,
    )


# =============================================================================
# PRECISION ROUNDING
# =============================================================================


def round_to_precision(value: float, precision: Optional[int] = None) -> float:
    """
    Округление до precision значащих цифр.

    Округление выполняется по точному двоичному значению value, при
    равенстве расстояний выбирается большее по модулю (round half up),
    затем строка парсится обратно в float: хвостовые нули исчезают.

    Args:
        value: Число
        precision: Значащие цифры (1..100); None или 0 → DEFAULT_PRECISION

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если precision вне диапазона

    Examples:
        >>> round_to_precision(0.1 + 0.2)
        0.3
        >>> round_to_precision(123.456, 4)
        123.5
        >>> round_to_precision(0.125, 2)
        0.13
    """
    digits = precision or DEFAULT_PRECISION
    validate_digits(digits, "precision", FORMAT_PRECISION_MIN, FORMAT_PRECISION_MAX)

    if not math.isfinite(value):
        return float(value)
    if value == 0:
        return 0.0

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(exact.adjusted() - digits + 1)

    with localcontext() as ctx:
        # +1 цифра на перенос (9.99 → 10.0)
        ctx.prec = digits + 2
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)

    return float(rounded)


# =============================================================================
# FIXED-POINT FORMATTING
# =============================================================================


def format_fixed(
    value: float,
    fraction_digits: int = DEFAULT_FRACTION_DIGITS,
    precision: Optional[int] = None,
) -> str:
    """
    Fixed-point запись: precision rounding, затем fraction_digits знаков
    после точки.

    Args:
        value: Число
        fraction_digits: Знаков после точки (0..100)
        precision: Значащие цифры для предварительного округления

    Returns:
        Строка вида "3.14"; для |value| >= 1e21: shortest запись

    Raises:
        ValueError: Если fraction_digits или precision вне диапазона

    Examples:
        >>> format_fixed(3.14159)
        '3.14'
        >>> format_fixed(3.14159, 0)
        '3'
        >>> format_fixed(2.5, 0)
        '3'
    """
    validate_digits(fraction_digits, "fraction_digits", 0, FORMAT_FRACTION_DIGITS_MAX)

    rounded = round_to_precision(value, precision)

    if not math.isfinite(rounded) or abs(rounded) >= FIXED_NOTATION_LIMIT:
        return format_shortest(rounded)

    exact = Decimal(rounded)
    quantum = Decimal(1).scaleb(-fraction_digits)

    with localcontext() as ctx:
        # целая часть < 1e21: не более 21 цифры
        ctx.prec = 22 + fraction_digits
        fixed = exact.quantize(quantum, rounding=ROUND_HALF_UP)

    return f"{fixed:f}"


# =============================================================================
# SCALED OPERATIONS
# =============================================================================


def _scaled_times(a: float, b: float, on_boundary: Optional[BoundaryHook]) -> float:
    len_a = mantissa_length(a)
    len_b = mantissa_length(b)

    scaled_a = scale_to_integer(a, len_a)
    scaled_b = scale_to_integer(b, len_b)
    magnification = _pow10(len_a + len_b)
    _notify(on_boundary, scaled_a, scaled_b)

    product = scaled_a * scaled_b
    _require_finite(product)
    _notify(on_boundary, product)

    return product / magnification


def scaled_times(
    a: float,
    b: float,
    on_boundary: Optional[BoundaryHook] = None,
) -> float:
    """
    Точное умножение: (a·10^la) * (b·10^lb) / 10^(la+lb).

    Args:
        a: Множитель
        b: Множитель
        on_boundary: Hook для масштабированных значений (optional)

    Returns:
        Произведение

    Examples:
        >>> scaled_times(1.1, 3)
        3.3
        >>> scaled_times(4.35, 100)
        435.0
    """
    try:
        return _scaled_times(a, b, on_boundary)
    except OverflowError:
        _plain_fallback("*", a, b)
        return a * b


def scaled_divide(
    a: float,
    b: float,
    precision: Optional[int] = None,
    on_boundary: Optional[BoundaryHook] = None,
) -> float:
    """
    Точное деление.

    Частное масштабированных целых отличается от a / b в 10^(lb - la) раз;
    оно округляется до precision значащих цифр (убирает хвост float шума)
    и корректируется через scaled_times.

    Args:
        a: Делимое
        b: Делитель (ненулевой)
        precision: Значащие цифры для частного (None → DEFAULT_PRECISION)
        on_boundary: Hook для масштабированных значений (optional)

    Returns:
        Частное

    Raises:
        ZeroDivisionError: Если b == 0

    Examples:
        >>> scaled_divide(0.3, 0.1)
        3.0
        >>> scaled_divide(0.69, 10)
        0.069
    """
    if b == 0:
        raise ZeroDivisionError("scaled_divide: division by zero")

    try:
        len_a = mantissa_length(a)
        len_b = mantissa_length(b)

        scaled_a = scale_to_integer(a, len_a)
        scaled_b = scale_to_integer(b, len_b)
        magnification = _pow10(len_b - len_a)
    except OverflowError:
        _plain_fallback("/", a, b)
        return a / b

    _notify(on_boundary, scaled_a, scaled_b)

    quotient = round_to_precision(scaled_a / scaled_b, precision)
    return scaled_times(quotient, magnification, on_boundary)


def _align(
    a: float,
    b: float,
    on_boundary: Optional[BoundaryHook],
) -> tuple[float, float, float]:
    """Поднимает a и b к общему масштабу 10^max(la, lb)."""
    common = max(mantissa_length(a), mantissa_length(b))
    magnification = _pow10(common)

    lifted_a = _scaled_times(a, magnification, on_boundary)
    lifted_b = _scaled_times(b, magnification, on_boundary)
    _notify(on_boundary, lifted_a, lifted_b)

    return lifted_a, lifted_b, magnification


def scaled_plus(
    a: float,
    b: float,
    on_boundary: Optional[BoundaryHook] = None,
) -> float:
    """
    Точное сложение через общий масштаб.

    Examples:
        >>> scaled_plus(0.1, 0.2)
        0.3
    """
    try:
        lifted_a, lifted_b, magnification = _align(a, b, on_boundary)
        total = lifted_a + lifted_b
        _require_finite(total)
    except OverflowError:
        _plain_fallback("+", a, b)
        return a + b

    _notify(on_boundary, total)

    return total / magnification


def scaled_minus(
    a: float,
    b: float,
    on_boundary: Optional[BoundaryHook] = None,
) -> float:
    """
    Точное вычитание через общий масштаб.

    Examples:
        >>> scaled_minus(1.5, 1.2)
        0.3
    """
    try:
        lifted_a, lifted_b, magnification = _align(a, b, on_boundary)
        difference = lifted_a - lifted_b
        _require_finite(difference)
    except OverflowError:
        _plain_fallback("-", a, b)
        return a - b

    _notify(on_boundary, difference)

    return difference / magnification
