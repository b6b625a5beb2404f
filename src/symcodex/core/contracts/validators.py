"""
JSON Schema Contract Validators

Модуль для валидации сырых данных каталога согласно формальному JSON Schema
контракту. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (symcodex/core/contracts/schema/):
- catalog.json — pre-parsed таблица символов (модули, символы, variants)

Контракт проверяет только форму данных. Структурные инварианты
(уникальность имён, единственный default, дубликаты ModifierSet)
проверяются доменными моделями при построении дерева.
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

    Схемы лежат рядом с модулем (package data) в каталоге schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
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
            schema_name: Имя схемы без расширения (например, "catalog")

        Returns:
            Распарсенная схема (dict)

        Raises:
            FileNotFoundError: Если схема не найдена
            ValueError: Если схема сама по себе невалидна
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

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class CatalogValidator(ContractValidator):
    """Валидатор для catalog контракта."""

    def __init__(self):
        super().__init__("catalog")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_catalog(data: Dict[str, Any]) -> None:
    """
    Валидация сырых данных каталога.

    Args:
        data: Документ каталога ({"schema_version": "1", "entries": [...]})

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CatalogValidator().validate(data)


def format_validation_error(error: ValidationError) -> str:
    """Сообщение об ошибке с JSON-путём до проблемного элемента."""
    location = "/".join(str(part) for part in error.absolute_path)
    return f"{location or '<document>'}: {error.message}"
