"""
Module — Узел пространства имён

Дерево модулей — закрытый tagged union из двух случаев (Symbol | Module)
с дискриминатором `kind`, поэтому каталог валидируется напрямую из JSON.

Корень дерева безымянный (name == ""). Все остальные имена — ASCII
идентификаторы без точек.
"""

import re
from enum import Enum
from typing import Annotated, Any, Final, Iterator, Literal, Optional, Union

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from symcodex.core.domain.deprecation import DeprecationInfo
from symcodex.core.domain.symbol import Symbol
from symcodex.core.errors import CatalogInvariantViolation


NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")

PATH_SEPARATOR: Final[str] = "."


class EntryKind(str, Enum):
    """Тип элемента модуля"""

    SYMBOL = "symbol"
    MODULE = "module"


class Module(BaseModel):
    """
    Модуль: упорядоченные именованные элементы (символы и вложенные модули).

    Порядок entries сохраняется из каталога и используется при перечислении.
    """

    kind: Literal["module"] = "module"
    name: str = Field("", description="Локальное имя ('' для корня)")
    entries: tuple["Node", ...] = Field(default=(), description="Символы и вложенные модули")
    deprecation: Optional[DeprecationInfo] = Field(None, description="Module-level deprecation")

    model_config = {"frozen": True}

    _index: dict[str, "Node"] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._index = {entry.name: entry for entry in self.entries}

    @model_validator(mode="after")
    def validate_entries(self) -> "Module":
        """Имена элементов уникальны и являются идентификаторами."""
        seen: set[str] = set()
        for entry in self.entries:
            if not NAME_RE.match(entry.name):
                raise CatalogInvariantViolation(
                    f"invalid name {entry.name!r}", self.name or "<root>"
                )
            if entry.name in seen:
                raise CatalogInvariantViolation(
                    f"duplicate name {entry.name!r}", self.name or "<root>"
                )
            seen.add(entry.name)
        return self

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, name: str) -> Optional["Node"]:
        """Элемент по локальному имени (None, если нет)."""
        return self._index.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self.entries)

    def items(self) -> Iterator[tuple[str, "Node"]]:
        for entry in self.entries:
            yield entry.name, entry

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation is not None

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def walk(
        self, prefix: str = "", separator: str = PATH_SEPARATOR
    ) -> Iterator[tuple[str, Symbol]]:
        """
        Обход в глубину: (dotted path, Symbol) для всех символов поддерева.

        Args:
            prefix: Путь этого модуля (для корня — пустая строка)
            separator: Разделитель сегментов пути
        """
        for name, entry in self.items():
            path = f"{prefix}{separator}{name}" if prefix else name
            if isinstance(entry, Symbol):
                yield path, entry
            else:
                yield from entry.walk(path, separator)

    def count(self) -> tuple[int, int]:
        """(число вложенных модулей, число символов) во всём поддереве."""
        modules = symbols = 0
        for entry in self.entries:
            if isinstance(entry, Symbol):
                symbols += 1
            else:
                sub_modules, sub_symbols = entry.count()
                modules += 1 + sub_modules
                symbols += sub_symbols
        return modules, symbols


Node = Annotated[Union[Symbol, Module], Field(discriminator="kind")]

Module.model_rebuild()


def entry_kind(node: Union[Symbol, Module]) -> EntryKind:
    return EntryKind(node.kind)
