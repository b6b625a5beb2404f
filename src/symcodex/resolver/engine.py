"""Resolver — поиск символов по dotted name.

Алгоритм resolve:
1. Сегменты пути спускаются по вложенным модулям до первого символа.
2. Оставшиеся сегменты — modifiers запроса (порядок не важен).
3. Best-match внутри символа (Symbol.best_match).
4. Deprecation advisories собираются со всего пути: модули (снаружи внутрь),
   символ, вариант. Ни одно не подавляет другое.

Путь, заканчивающийся на модуле, даёт ResolvedModule (не ошибка).

Resolver не хранит изменяемого состояния и не пишет логи: все операции —
чистые функции над неизменяемым деревом, безопасны для многопоточного
использования без блокировок.
"""

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Iterator, Optional, Sequence, TypeVar, Union

from symcodex.core.domain import (
    DeprecationInfo,
    EntryKind,
    ModifierSet,
    Module,
    Symbol,
    TieBreak,
    Variant,
    entry_kind,
)
from symcodex.core.errors import DeprecatedName, ResolveError, UnknownName


T = TypeVar("T")


class DeprecationPolicy(str, Enum):
    """Что делать, если найденный элемент deprecated.

    ALLOW — только advisory в результате (по умолчанию);
    WARN — дополнительно warnings.warn(SymbolDeprecationWarning);
    ERROR — DeprecatedName вместо результата.
    """

    ALLOW = "allow"
    WARN = "warn"
    ERROR = "error"


class SymbolDeprecationWarning(DeprecationWarning):
    """Warning category для DeprecationPolicy.WARN."""


@dataclass(frozen=True)
class ResolverConfig:
    """Конфигурация Resolver."""

    separator: str = "."
    tie_break: TieBreak = TieBreak.STRICT
    deprecation_policy: DeprecationPolicy = DeprecationPolicy.ALLOW

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")


# =============================================================================
# RESULTS
# =============================================================================


def combine_deprecations(items: Sequence[DeprecationInfo]) -> Optional[DeprecationInfo]:
    """Один advisory из нескольких.

    Сообщения объединяются через "; ", replacement берётся с самого
    внутреннего уровня, где он задан.
    """
    if not items:
        return None
    if len(items) == 1:
        return items[0]
    replacement = next((d.replacement for d in reversed(items) if d.replacement), None)
    return DeprecationInfo(message="; ".join(d.message for d in items), replacement=replacement)


@dataclass(frozen=True)
class Resolution:
    """Результат resolve, указывающий на символ."""

    path: str
    canonical_name: str
    symbol: Symbol
    variant: Variant
    deprecations: tuple[DeprecationInfo, ...] = ()

    @property
    def codepoints(self) -> tuple[int, ...]:
        return self.variant.codepoints

    @property
    def value(self) -> str:
        return self.variant.value

    @property
    def is_deprecated(self) -> bool:
        return bool(self.deprecations)

    @property
    def deprecation(self) -> Optional[DeprecationInfo]:
        """Объединённый advisory (None, если ничего не устарело)."""
        return combine_deprecations(self.deprecations)


@dataclass(frozen=True)
class ResolvedModule:
    """Результат resolve, указывающий на модуль (для перечисления)."""

    path: str
    module: Module
    deprecations: tuple[DeprecationInfo, ...] = ()

    @property
    def is_deprecated(self) -> bool:
        return bool(self.deprecations)

    @property
    def deprecation(self) -> Optional[DeprecationInfo]:
        return combine_deprecations(self.deprecations)


@dataclass(frozen=True)
class VariantInfo:
    """Описание одного варианта для introspection / документации."""

    name: str
    modifiers: ModifierSet
    codepoints: tuple[int, ...]
    deprecation: Optional[DeprecationInfo] = None

    @property
    def value(self) -> str:
        return "".join(chr(cp) for cp in self.codepoints)


class Listing(Generic[T]):
    """Ленивая перезапускаемая последовательность: каждый iter() начинает заново."""

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return self._factory()


@dataclass(frozen=True)
class _Descent:
    node: Union[Symbol, Module]
    trail: tuple[str, ...]
    rest: tuple[str, ...]
    deprecations: tuple[DeprecationInfo, ...] = field(default=())


# =============================================================================
# RESOLVER
# =============================================================================


class Resolver:
    """Поиск по неизменяемому дереву модулей.

    Example:
        >>> resolver = Resolver(root)
        >>> resolver.resolve("sym.arrow.r.double").value
        '⇒'
        >>> [name for name, kind in resolver.enumerate("sym")]
        ['arrow', ...]
    """

    def __init__(self, root: Module, config: Optional[ResolverConfig] = None):
        self._root = root
        self.config = config or ResolverConfig()

    @property
    def root(self) -> Module:
        return self._root

    # -------------------------------------------------------------------------
    # Path handling
    # -------------------------------------------------------------------------

    def split(self, dotted_name: str) -> list[str]:
        """Сегменты dotted name ("" -> [])."""
        if not dotted_name:
            return []
        return dotted_name.split(self.config.separator)

    def _join(self, segments: Sequence[str]) -> str:
        return self.config.separator.join(segments)

    def _canonical(self, trail: Sequence[str], symbol: Symbol, variant: Variant) -> str:
        """Полное имя варианта: путь до символа + modifiers в порядке символа."""
        return self._join(tuple(trail) + variant.modifiers.canonical_order(symbol.modifier_order))

    def _descend(self, segments: Sequence[str]) -> _Descent:
        """Спуск по модулям до первого символа или до конца пути.

        Raises:
            UnknownName: Сегмент не найден на своём уровне
        """
        path = self._join(segments)
        module = self._root
        trail: list[str] = []
        deprecations: list[DeprecationInfo] = []

        for i, segment in enumerate(segments):
            if not segment:
                raise UnknownName(segment, path, reason="empty path segment")
            entry = module.get(segment)
            if entry is None:
                raise UnknownName(segment, path)
            if entry.deprecation is not None:
                deprecations.append(entry.deprecation)
            trail.append(segment)
            if isinstance(entry, Symbol):
                return _Descent(entry, tuple(trail), tuple(segments[i + 1:]), tuple(deprecations))
            module = entry

        return _Descent(module, tuple(trail), (), tuple(deprecations))

    def _apply_policy(
        self, path: str, deprecations: Sequence[DeprecationInfo], stacklevel: int
    ) -> None:
        if not deprecations:
            return
        policy = self.config.deprecation_policy
        if policy == DeprecationPolicy.ERROR:
            raise DeprecatedName(path, [str(d) for d in deprecations])
        if policy == DeprecationPolicy.WARN:
            for deprecation in deprecations:
                warnings.warn(
                    f"{path}: {deprecation}", SymbolDeprecationWarning, stacklevel=stacklevel
                )

    # -------------------------------------------------------------------------
    # Lookup API
    # -------------------------------------------------------------------------

    def resolve_path(self, segments: Sequence[str]) -> Union[Resolution, ResolvedModule]:
        """Resolve уже разбитого пути.

        Args:
            segments: Сегменты пути (namespace, символ, modifiers)

        Returns:
            Resolution для символа или ResolvedModule для модуля

        Raises:
            UnknownName: Сегмент namespace/symbol не найден
            InvalidModifier: Некорректный modifier в хвосте пути
            NoMatch: Нет варианта со всеми modifiers
            AmbiguousMatch: Ничья (только TieBreak.STRICT)
            DeprecatedName: Только при DeprecationPolicy.ERROR
        """
        return self._resolve(segments, stacklevel=4)

    def _resolve(
        self, segments: Sequence[str], stacklevel: int
    ) -> Union[Resolution, ResolvedModule]:
        """resolve_path; stacklevel указывает warnings на код, вызвавший публичный метод."""
        path = self._join(segments)
        descent = self._descend(segments)

        if isinstance(descent.node, Module):
            self._apply_policy(path, descent.deprecations, stacklevel)
            return ResolvedModule(path=path, module=descent.node, deprecations=descent.deprecations)

        symbol = descent.node
        try:
            query = ModifierSet.parse(descent.rest)
            variant = symbol.best_match(query, self.config.tie_break)
        except ResolveError as exc:
            exc.path = exc.path or path
            raise

        deprecations = descent.deprecations
        if variant.deprecation is not None:
            deprecations = deprecations + (variant.deprecation,)
        self._apply_policy(path, deprecations, stacklevel)

        canonical = self._canonical(descent.trail, symbol, variant)
        return Resolution(
            path=path,
            canonical_name=canonical,
            symbol=symbol,
            variant=variant,
            deprecations=deprecations,
        )

    def resolve(self, dotted_name: str) -> Union[Resolution, ResolvedModule]:
        """Resolve dotted name ("sym.arrow.r.double").

        Пустая строка соответствует корневому модулю.
        """
        return self._resolve(self.split(dotted_name), stacklevel=4)

    def get(self, dotted_name: str) -> str:
        """Строка символа по dotted name.

        Raises:
            UnknownName: Если имя указывает на модуль
        """
        result = self._resolve(self.split(dotted_name), stacklevel=4)
        if isinstance(result, ResolvedModule):
            segment = self.split(dotted_name)[-1] if dotted_name else ""
            raise UnknownName(segment, dotted_name, reason="is a module, not a symbol")
        return result.value

    def __contains__(self, dotted_name: object) -> bool:
        if not isinstance(dotted_name, str):
            return False
        try:
            self._resolve(self.split(dotted_name), stacklevel=4)
        except ResolveError:
            return False
        return True

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def enumerate(self, module_path: str = "") -> Listing[tuple[str, EntryKind]]:
        """Элементы модуля: (local_name, EntryKind) в порядке каталога.

        Raises:
            UnknownName: Путь не найден или указывает на символ
        """
        segments = self.split(module_path)
        descent = self._descend(segments)
        if not isinstance(descent.node, Module):
            raise UnknownName(
                segments[len(descent.trail) - 1], module_path, reason="is a symbol, not a module"
            )
        module = descent.node

        def factory() -> Iterator[tuple[str, EntryKind]]:
            for name, entry in module.items():
                yield name, entry_kind(entry)

        return Listing(factory)

    def variants_of(self, symbol_path: str) -> Listing[VariantInfo]:
        """Все варианты символа (в порядке объявления).

        Modifiers после имени символа сужают список до вариантов-надмножеств.
        VariantInfo.deprecation объединяет advisories модулей, символа и
        самого варианта.

        Raises:
            UnknownName: Путь не найден или указывает на модуль
            InvalidModifier: Некорректный modifier в хвосте пути
        """
        segments = self.split(symbol_path)
        descent = self._descend(segments)
        if not isinstance(descent.node, Symbol):
            segment = segments[-1] if segments else ""
            raise UnknownName(segment, symbol_path, reason="is a module, not a symbol")
        symbol = descent.node
        query = ModifierSet.parse(descent.rest)
        trail = descent.trail
        inherited = descent.deprecations

        def factory() -> Iterator[VariantInfo]:
            for variant in symbol.candidates(query):
                yield VariantInfo(
                    name=self._canonical(trail, symbol, variant),
                    modifiers=variant.modifiers,
                    codepoints=variant.codepoints,
                    deprecation=combine_deprecations(
                        inherited + ((variant.deprecation,) if variant.deprecation else ())
                    ),
                )

        return Listing(factory)

    def walk(self, module_path: str = "") -> Iterator[tuple[str, Symbol]]:
        """Все символы поддерева: (полный dotted path, Symbol)."""
        segments = self.split(module_path)
        descent = self._descend(segments)
        if isinstance(descent.node, Symbol):
            yield self._join(descent.trail), descent.node
            return
        yield from descent.node.walk(self._join(descent.trail), self.config.separator)
