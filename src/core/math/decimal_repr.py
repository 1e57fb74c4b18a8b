"""
Decimal Representation: каноническая десятичная запись float

Модуль отвечает за две вещи:
- format_shortest: кратчайшая round-trip запись числа (как Number#toString):
  обычная нотация для десятичной экспоненты в [-6, 21), иначе научная d.ddde±x
- mantissa_length: сколько знаков после точки нужно сдвинуть, чтобы число
  стало целым (основа scaled arithmetic)

Кратчайшие цифры берутся из repr(float), который в CPython гарантирует
round-trip. Раскладка нотации (где ставить точку, когда переходить на
экспоненту) строится отдельно, потому что repr переходит на экспоненту
в других точках.
"""

import math
import re
from typing import Final

# Порог (включительно), с которого используется экспоненциальная нотация
EXPONENT_NOTATION_MIN_POINT: Final[int] = 22

# Наименьшая позиция точки, для которой ещё используется форма 0.000ddd
PLAIN_NOTATION_MIN_POINT: Final[int] = -5

_EXPONENT_SPLIT = re.compile(r"[eE]")


def _shortest_digits(value: float) -> tuple[str, int]:
    """
    Кратчайшие значащие цифры и позиция десятичной точки.

    Для value > 0 возвращает (digits, point), где
    value == int(digits) * 10 ** (point - len(digits)).
    """
    coefficient, _, exponent = repr(value).partition("e")
    int_part, _, frac_part = coefficient.partition(".")

    digits = int_part + frac_part
    point = len(int_part) + (int(exponent) if exponent else 0)

    significant = digits.lstrip("0")
    point -= len(digits) - len(significant)

    return significant.rstrip("0"), point


def format_shortest(value: float) -> str:
    """
    Кратчайшая десятичная запись числа.

    Args:
        value: Число (int приводится к float)

    Returns:
        Строка, которая парсится обратно в то же значение

    Examples:
        >>> format_shortest(0.1)
        '0.1'
        >>> format_shortest(100.0)
        '100'
        >>> format_shortest(1e21)
        '1e+21'
        >>> format_shortest(0.0000001)
        '1e-7'
        >>> format_shortest(2.1337983389e-12)
        '2.1337983389e-12'
    """
    value = float(value)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # -0.0 тоже
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    k = len(digits)

    if k <= point < EXPONENT_NOTATION_MIN_POINT:
        return sign + digits + "0" * (point - k)

    if 0 < point < EXPONENT_NOTATION_MIN_POINT:
        return sign + digits[:point] + "." + digits[point:]

    if PLAIN_NOTATION_MIN_POINT <= point <= 0:
        return sign + "0." + "0" * (-point) + digits

    exponent = point - 1
    exponent_sign = "+" if exponent >= 0 else "-"
    coefficient = digits[0] if k == 1 else digits[0] + "." + digits[1:]

    return f"{sign}{coefficient}e{exponent_sign}{abs(exponent)}"


def mantissa_length(value: float) -> int:
    """
    Длина мантиссы: на сколько разрядов сдвинуть точку вправо, чтобы
    число стало целым.

    Алгоритм:
        text = format_shortest(value)            # 2.1337983389e-12
        coefficient, exponent = split по e/E      # "2.1337983389", -12
        frac_len = len(цифры после точки)         # 10
        result = max(frac_len - exponent, 0)      # 22

    Args:
        value: Число

    Returns:
        Количество знаков после точки (>= 0)

    Examples:
        >>> mantissa_length(0.1)
        1
        >>> mantissa_length(123.456)
        3
        >>> mantissa_length(1e21)
        0
        >>> mantissa_length(1.5e-7)
        8
    """
    parts = _EXPONENT_SPLIT.split(format_shortest(value))
    coefficient = parts[0]
    exponent = int(parts[1]) if len(parts) > 1 else 0

    frac_len = len(coefficient.partition(".")[2])
    length = frac_len - exponent

    return length if length > 0 else 0
