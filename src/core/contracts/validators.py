"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- ec_public_jwk.json  (публичный EC ключ из KMS в формате JWK)
- address_record.json (результат деривации адреса)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат рядом с модулем (schema/) и устанавливаются как package data.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'ec_public_jwk')

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

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика (создаётся при первом обращении)
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий SchemaLoader; файловая система не затрагивается до первого вызова."""
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

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = get_schema_loader().load_schema(schema_name)
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

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class EcPublicJwkValidator(ContractValidator):
    """Валидатор публичного EC ключа в формате JWK."""

    def __init__(self):
        super().__init__("ec_public_jwk")


class AddressRecordValidator(ContractValidator):
    """Валидатор результата деривации адреса."""

    def __init__(self):
        super().__init__("address_record")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_ec_public_jwk(data: Dict[str, Any]) -> None:
    """
    Валидация ec_public_jwk данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    EcPublicJwkValidator().validate(data)


def validate_address_record(data: Dict[str, Any]) -> None:
    """
    Валидация address_record данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    AddressRecordValidator().validate(data)
