"""
JSON Schema Contract Validators

Модуль для валидации снимков точных значений согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы поставляются как package data (src/core/contracts/schema/) и
читаются через importlib.resources, поэтому доступны и из установленного
пакета, и из рабочей копии:
- decimal_snapshot.json: {"digits": "<int>", "scale": "<int>"}
- rational_snapshot.json: {"numerator": "<int>", "denominator": "<int>"}
"""

import json
from importlib import resources
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema ресурсов пакета.

    Каждая схема читается один раз, проходит meta-validation и кэшируется.
    """

    def __init__(self, package: str = __package__, directory: str = "schema"):
        self._schema_dir = resources.files(package) / directory
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'decimal_snapshot')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если ресурс схемы отсутствует в пакете
            ValueError: Если ресурс не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        resource = self._schema_dir / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema resource not found: {schema_name}.json")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор снимка по одной схеме.

    Экземпляры дешёвы: схема берётся из общего кэша загрузчика, здесь
    создаётся только Draft 2020-12 валидатор.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если снимок не соответствует схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def field_pattern(self, field: str) -> str:
        """Регулярное выражение, которым схема ограничивает строковое поле."""
        return self.schema["properties"][field]["pattern"]


class DecimalSnapshotValidator(ContractValidator):
    def __init__(self):
        super().__init__("decimal_snapshot")


class RationalSnapshotValidator(ContractValidator):
    def __init__(self):
        super().__init__("rational_snapshot")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_decimal_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация снимка Decimal (например, результата Decimal.to_json()).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    DecimalSnapshotValidator().validate(data)


def validate_rational_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация снимка Rational.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    RationalSnapshotValidator().validate(data)
