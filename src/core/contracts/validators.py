"""
JSON Schema Contract Validators

Модуль для валидации JSON данных checkout API согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- order_request.json (входной запрос на расчёт)
- checkout_quote.json (результат расчёта)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'order_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: SchemaLoader | None = None


def get_schema_loader() -> SchemaLoader:
    """Общий экземпляр загрузчика (создаётся при первом обращении)."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class OrderRequestValidator(ContractValidator):
    """Валидатор для order_request контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("order_request", loader)


class CheckoutQuoteValidator(ContractValidator):
    """Валидатор для checkout_quote контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("checkout_quote", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_order_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса на расчёт заказа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OrderRequestValidator().validate(data)


def validate_checkout_quote(data: Dict[str, Any]) -> None:
    """
    Валидация результата расчёта.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CheckoutQuoteValidator().validate(data)
