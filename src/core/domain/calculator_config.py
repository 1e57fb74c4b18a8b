"""
CalculatorConfig: настройки калькулятора

Immutable Pydantic модель. Принимает как snake_case имена полей, так и
camelCase aliases исходной записи настроек:

    {"precision": 10, "fractionDigits": 4, "enableCheckBoundary": True}

Сырые mapping-и дополнительно проверяются JSON Schema контрактом
calculator_config (см. src.core.contracts).
"""

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import (
    CONFIG_DIGITS_MAX,
    CONFIG_DIGITS_MIN,
    DEFAULT_FRACTION_DIGITS,
    DEFAULT_PRECISION,
)


class CalculatorConfig(BaseModel):
    """
    Настройки PreciseCalculator.

    precision == 0 трактуется как DEFAULT_PRECISION (значение по умолчанию),
    значения вне 0..20 отклоняются при создании.
    """

    precision: int = Field(
        default=DEFAULT_PRECISION,
        ge=CONFIG_DIGITS_MIN,
        le=CONFIG_DIGITS_MAX,
        description="Значащие цифры при округлении (0 → 15)",
    )
    fraction_digits: int = Field(
        default=DEFAULT_FRACTION_DIGITS,
        ge=CONFIG_DIGITS_MIN,
        le=CONFIG_DIGITS_MAX,
        alias="fractionDigits",
        description="Знаков после точки для fixed-point вывода",
    )
    enable_check_boundary: bool = Field(
        default=False,
        alias="enableCheckBoundary",
        description="Диагностика выхода за границы safe integer",
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    @property
    def effective_precision(self) -> int:
        """Precision, которая реально применяется при округлении."""
        return self.precision or DEFAULT_PRECISION
