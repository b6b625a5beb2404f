"""
Catalog — загрузка pre-parsed таблицы символов в дерево модулей.

- build_catalog / load_catalog: построение и валидация дерева
- get_default_catalog: встроенный каталог с ленивой инициализацией
"""

from .default import (
    DEFAULT_CATALOG_PATH,
    get_default_catalog,
    get_default_resolver,
    reset_default_catalog,
)
from .loader import (
    CATALOG_SCHEMA_VERSION,
    CatalogConfig,
    build_catalog,
    build_catalog_from_document,
    load_catalog,
    normalize_entries,
)

__all__ = [
    # Loader
    "CATALOG_SCHEMA_VERSION",
    "CatalogConfig",
    "build_catalog",
    "build_catalog_from_document",
    "load_catalog",
    "normalize_entries",
    # Default catalog
    "DEFAULT_CATALOG_PATH",
    "get_default_catalog",
    "get_default_resolver",
    "reset_default_catalog",
]
