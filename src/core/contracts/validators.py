"""
JSON Schema Contract Validators

Модуль для валидации сырых (JSON-подобных) записей согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (src/core/contracts/schema/):
- calculator_config.json: запись настроек калькулятора (camelCase ключи)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'calculator_config')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Все нарушения собираются в одно сообщение, по одному на поле:

            calculator_config: $.fractionDigits: 30 is greater than the maximum of 20;
            $.precision: 30 is greater than the maximum of 20

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        errors = sorted(self.validator.iter_errors(data), key=lambda e: e.json_path)
        if not errors:
            return

        details = "; ".join(f"{error.json_path}: {error.message}" for error in errors)
        raise ValidationError(f"{self.schema_name}: {details}")


class CalculatorConfigValidator(ContractValidator):
    """Валидатор для calculator_config контракта."""

    def __init__(self):
        super().__init__("calculator_config")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_calculator_config(data: Dict[str, Any]) -> None:
    """
    Валидация сырой записи настроек калькулятора.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CalculatorConfigValidator().validate(data)
