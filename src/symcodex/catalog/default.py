"""
Default Catalog — каталог процесса по умолчанию

Каталог строится лениво при первом обращении. Инициализация защищена
одной блокировкой (double-checked locking): конкурентные первые вызовы не
строят дерево дважды и не видят частично построенное дерево. После
построения блокировка не нужна — дерево неизменяемо.

Встроенный каталог загружается с reject_ambiguous=True: ни один запрос к
нему не приводит к AmbiguousMatch.
"""

import logging
import threading
from pathlib import Path
from typing import Final, Optional

from symcodex.catalog.loader import CatalogConfig, load_catalog
from symcodex.core.domain import Module
from symcodex.resolver import Resolver, ResolverConfig


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH: Final[Path] = Path(__file__).parent / "data" / "default_catalog.json"

_default_root: Optional[Module] = None
_default_lock = threading.Lock()


def get_default_catalog() -> Module:
    """
    Корневой модуль встроенного каталога (модули `sym` и `emoji`).

    Returns:
        Неизменяемый корневой Module, один на процесс
    """
    global _default_root

    root = _default_root
    if root is not None:
        return root

    with _default_lock:
        if _default_root is None:
            logger.debug(f"Building default catalog from {DEFAULT_CATALOG_PATH}")
            _default_root = load_catalog(
                DEFAULT_CATALOG_PATH, CatalogConfig(reject_ambiguous=True)
            )
        return _default_root


def get_default_resolver(config: Optional[ResolverConfig] = None) -> Resolver:
    """Resolver поверх встроенного каталога."""
    return Resolver(get_default_catalog(), config)


def reset_default_catalog() -> None:
    """Сброс кэша (для тестов). Следующий вызов построит каталог заново."""
    global _default_root

    with _default_lock:
        _default_root = None
