"""
Core math modules

Точная десятичная арифметика поверх float и её численные примитивы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    CONFIG_DIGITS_MAX,
    CONFIG_DIGITS_MIN,
    DEFAULT_FRACTION_DIGITS,
    DEFAULT_PRECISION,
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    # Checks
    is_safe_integer_magnitude,
    is_valid_float,
    # Validation
    validate_digits,
)

# Decimal Representation
from src.core.math.decimal_repr import format_shortest, mantissa_length

# Scaled Arithmetic
from src.core.math.scaled_arithmetic import (
    BoundaryHook,
    format_fixed,
    round_to_precision,
    scale_to_integer,
    scaled_divide,
    scaled_minus,
    scaled_plus,
    scaled_times,
)

__all__ = [
    # Numerical Safeguards: Constants
    "CONFIG_DIGITS_MAX",
    "CONFIG_DIGITS_MIN",
    "DEFAULT_FRACTION_DIGITS",
    "DEFAULT_PRECISION",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Numerical Safeguards: Checks
    "is_safe_integer_magnitude",
    "is_valid_float",
    # Numerical Safeguards: Validation
    "validate_digits",
    # Decimal Representation
    "format_shortest",
    "mantissa_length",
    # Scaled Arithmetic: Types
    "BoundaryHook",
    # Scaled Arithmetic: Functions
    "format_fixed",
    "round_to_precision",
    "scale_to_integer",
    "scaled_divide",
    "scaled_minus",
    "scaled_plus",
    "scaled_times",
]
