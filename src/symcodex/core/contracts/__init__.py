"""
Contract Validation Module

Модуль для валидации JSON контрактов каталога symcodex.
"""

from .validators import (
    CatalogValidator,
    ContractValidator,
    SchemaLoader,
    format_validation_error,
    validate_catalog,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CatalogValidator",
    # Functions
    "validate_catalog",
    "format_validation_error",
]
