"""Unit тесты для PreciseCalculator.

Coverage:
- Точность цепочек (0.1 + 0.2, 1.1 * 3, 4.35 * 100)
- Порядок и состояние свёртки
- Нулевые операнды (plus/minus пропуск, times/divide → 0)
- Неразрешимые операнды и начальное значение
- to_precision / to_fixed без мутации
- Настройки (CalculatorConfig и сырые записи)
- Ошибки (UnresolvableOperandError, NonFiniteResultError, TypeError)
- Convenience функции
"""

import logging

import pytest
from jsonschema import ValidationError as SchemaValidationError

from src.calculator import (
    CalculatorError,
    NonFiniteResultError,
    Operator,
    PreciseCalculator,
    UnresolvableOperandError,
    divide,
    minus,
    plus,
    times,
)
from src.core.domain import CalculatorConfig


@pytest.fixture
def calc():
    """Fixture для пустого калькулятора."""
    return PreciseCalculator()


# =============================================================================
# ТОЧНОСТЬ
# =============================================================================


class TestPrecision:
    """Классические ошибки двоичного float"""

    def test_plus(self) -> None:
        assert PreciseCalculator(0.1).plus(0.2).value == 0.3
        assert PreciseCalculator(0.1).plus(0.2).to_precision() == 0.3

    def test_minus(self) -> None:
        assert PreciseCalculator(1.5).minus(1.2).value == 0.3
        assert PreciseCalculator(100).minus(0.01).value == 99.99

    def test_times(self) -> None:
        assert PreciseCalculator(1.1).times(3).value == 3.3
        assert PreciseCalculator(4.35).times(100).value == 435

    def test_divide(self) -> None:
        assert PreciseCalculator(0.3).divide(0.1).value == 3
        assert PreciseCalculator(0.69).divide(10).value == 0.069

    def test_negative_values(self) -> None:
        assert PreciseCalculator(-0.1).plus(-0.2).value == -0.3
        assert PreciseCalculator(-0.1).times(3).value == -0.3


# =============================================================================
# ЦЕПОЧКИ И СОСТОЯНИЕ
# =============================================================================


class TestChaining:
    """Свёртка слева направо с сохранением состояния"""

    def test_fluent_returns_same_instance(self, calc) -> None:
        assert calc.plus(1) is calc
        assert calc.minus(1) is calc
        assert calc.times(1) is calc
        assert calc.divide(1) is calc

    def test_left_to_right_fold(self) -> None:
        """(10 + 5) * 2 == 30, а не 10 + 5 * 2"""
        assert PreciseCalculator(10).plus(5).times(2).value == 30

    def test_variadic_operands(self) -> None:
        assert PreciseCalculator(0.1).plus(0.2, 0.3).value == 0.6
        assert PreciseCalculator(1.5).minus(0.2, 0.3).value == 1.0
        assert PreciseCalculator(2).times(0.5, 0.1).value == 0.1

    def test_first_operand_seeds_unset_accumulator(self, calc) -> None:
        calc.plus(1, 2, 3)
        assert calc.value == 6

    def test_seed_for_minus_and_divide(self) -> None:
        """Первый операнд: уменьшаемое / делимое"""
        assert PreciseCalculator().minus(10, 3).value == 7
        assert PreciseCalculator().divide(10, 4).value == 2.5

    def test_empty_call_is_noop(self, calc) -> None:
        calc.plus()
        assert calc.value is None

        seeded = PreciseCalculator(5).times()
        assert seeded.value == 5

    def test_divide_precision_configured(self) -> None:
        """Частное округляется до настроенной precision"""
        assert PreciseCalculator(1).divide(3).value == 0.333333333333333
        assert PreciseCalculator(1, {"precision": 5}).divide(3).value == 0.33333

    def test_operator_values(self) -> None:
        assert [op.value for op in Operator] == ["plus", "minus", "times", "divide"]


# =============================================================================
# НУЛЕВЫЕ ОПЕРАНДЫ
# =============================================================================


class TestZeroOperands:
    """plus/minus пропускают ноль, times/divide дают ноль"""

    def test_plus_minus_zero_pass_through(self) -> None:
        assert PreciseCalculator(7).plus(0).value == 7
        assert PreciseCalculator(7).minus(0).value == 7
        assert PreciseCalculator(7).plus("0").value == 7

    def test_times_zero(self) -> None:
        assert PreciseCalculator(7).times(0).value == 0

    def test_divide_by_zero_yields_zero(self) -> None:
        """Деление на ноль → 0, не Infinity и не exception"""
        result = PreciseCalculator(3).times(5).divide(0)
        assert result.value == 0
        assert result.to_fixed() == "0.00"

    def test_chain_continues_after_zero(self) -> None:
        assert PreciseCalculator(7).times(0).plus(2.5).value == 2.5


# =============================================================================
# НЕРАЗРЕШИМЫЕ ОПЕРАНДЫ
# =============================================================================


class TestUnresolvableOperands:
    """Нечисловые строки и пустые калькуляторы"""

    def test_skipped_in_fold(self) -> None:
        assert PreciseCalculator(1).plus("abc", 2).value == 3
        assert PreciseCalculator(4).times(PreciseCalculator(), 2).value == 8

    def test_numeric_strings(self) -> None:
        assert PreciseCalculator("0.1").plus("0.2").value == 0.3

    def test_unresolvable_seed_heads_discarded(self, calc) -> None:
        calc.plus("abc", "", "1.5", 2)
        assert calc.value == 3.5

    def test_all_unresolvable_raises(self, calc) -> None:
        with pytest.raises(UnresolvableOperandError, match="none of 2 operand"):
            calc.plus("abc", "nan")

        assert calc.value is None

    def test_unresolvable_error_is_value_error(self, calc) -> None:
        with pytest.raises(ValueError):
            calc.times("x")

    def test_unresolvable_initial_value_seeds_zero(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="precise_calc.engine"):
            calc = PreciseCalculator("abc")

        assert calc.value == 0.0
        assert "seeding accumulator with 0" in caplog.text
        assert calc.minus(5).value == -5

    def test_unset_calculator_as_initial_value_seeds_zero(self) -> None:
        assert PreciseCalculator(PreciseCalculator()).value == 0.0
        assert PreciseCalculator("nan").times(3).value == 0.0

    def test_non_operand_raises_type_error(self) -> None:
        calc = PreciseCalculator(1)

        with pytest.raises(TypeError):
            calc.plus(2, None)

        # Классификация до мутации
        assert calc.value == 1

        with pytest.raises(TypeError):
            PreciseCalculator([1, 2])


# =============================================================================
# ОПЕРАНД-КАЛЬКУЛЯТОР
# =============================================================================


class TestCalculatorOperand:
    """Другой калькулятор как операнд"""

    def test_reads_accumulator(self) -> None:
        other = PreciseCalculator(2.5).times(2)
        assert PreciseCalculator(1).plus(other).value == 6

    def test_reads_accumulator_not_formatted_output(self) -> None:
        other = PreciseCalculator(3.14159)
        assert other.to_fixed() == "3.14"
        assert PreciseCalculator(other).value == 3.14159

    def test_operand_not_mutated(self) -> None:
        other = PreciseCalculator(2)
        PreciseCalculator(1).plus(other).times(10)
        assert other.value == 2


# =============================================================================
# ФИНАЛИЗАЦИЯ
# =============================================================================


class TestFinishing:
    """to_precision / to_fixed"""

    def test_to_fixed(self) -> None:
        calc = PreciseCalculator(3.14159)

        assert calc.to_fixed(2) == "3.14"
        assert calc.to_fixed(0) == "3"
        assert calc.to_fixed() == "3.14"

    def test_to_precision(self) -> None:
        calc = PreciseCalculator(1).divide(3)

        assert calc.to_precision(10) == 0.3333333333
        assert calc.to_precision(0) == 0.333333333333333
        assert PreciseCalculator(1).divide(3).times(3).to_precision(10) == 1.0

    def test_reads_do_not_mutate(self) -> None:
        calc = PreciseCalculator(3.14159)

        assert calc.to_fixed(2) == calc.to_fixed(2)
        assert calc.to_precision(3) == calc.to_precision(3) == 3.14
        assert calc.value == 3.14159

    def test_unset_accumulator_reads_as_zero(self, calc) -> None:
        assert calc.to_precision() == 0
        assert calc.to_fixed() == "0.00"
        assert calc.value is None

    def test_out_of_range_overrides_raise(self) -> None:
        calc = PreciseCalculator(1)

        with pytest.raises(ValueError, match="precision must be <= 20"):
            calc.to_precision(25)

        with pytest.raises(ValueError, match="fraction_digits must be >= 0"):
            calc.to_fixed(-1)

    def test_dunder_conversions(self) -> None:
        calc = PreciseCalculator(0.1).plus(0.2)

        assert float(calc) == 0.3
        assert str(calc) == "0.30"
        assert repr(calc) == (
            "PreciseCalculator(value=0.3, precision=15, fraction_digits=2, "
            "enable_check_boundary=False)"
        )


# =============================================================================
# НАСТРОЙКИ
# =============================================================================


class TestConfig:
    """CalculatorConfig и сырые записи"""

    def test_default_config(self, calc) -> None:
        assert calc.config == CalculatorConfig()

    def test_model_config(self) -> None:
        calc = PreciseCalculator(3.14159, CalculatorConfig(fraction_digits=4))
        assert calc.to_fixed() == "3.1416"

    def test_raw_record(self) -> None:
        calc = PreciseCalculator(3.14159, {"precision": 3, "fractionDigits": 4})

        assert calc.config.precision == 3
        assert calc.to_fixed() == "3.1400"
        assert calc.to_precision() == 3.14

    def test_invalid_raw_record_rejected(self) -> None:
        with pytest.raises(SchemaValidationError, match=r"calculator_config: \$\.precision"):
            PreciseCalculator(1, {"precision": 21})

        with pytest.raises(SchemaValidationError):
            PreciseCalculator(1, {"fraction_digits": 2})

    def test_invalid_config_type(self) -> None:
        with pytest.raises(TypeError, match="config must be a CalculatorConfig or a mapping"):
            PreciseCalculator(1, 42)  # type: ignore


# =============================================================================
# ОШИБКИ
# =============================================================================


class TestNonFiniteResult:
    """Выход за диапазон double"""

    def test_overflow_raises_and_keeps_value(self) -> None:
        calc = PreciseCalculator(1e308)

        with pytest.raises(NonFiniteResultError):
            calc.times(10)

        assert calc.value == 1e308

    def test_overflow_checked_on_plus(self) -> None:
        calc = PreciseCalculator(1e308)

        with pytest.raises(NonFiniteResultError):
            calc.plus(1e308)

        assert calc.value == 1e308

    def test_intermediate_overflow_with_finite_result(self) -> None:
        assert PreciseCalculator(1e300).plus(1e-10).value == 1e300
        assert PreciseCalculator(1e200).minus(1e-200).value == 1e200

    def test_error_hierarchy(self) -> None:
        assert issubclass(NonFiniteResultError, CalculatorError)
        assert issubclass(NonFiniteResultError, ArithmeticError)
        assert issubclass(UnresolvableOperandError, CalculatorError)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


class TestConvenienceFunctions:
    """Одноразовые вычисления"""

    def test_functions(self) -> None:
        assert plus(0.1, 0.2) == 0.3
        assert minus(1.5, 1.2) == 0.3
        assert times(1.1, 3) == 3.3
        assert divide(0.3, 0.1) == 3

    def test_no_operands(self) -> None:
        assert plus() == 0
