"""
Errors — Таксономия ошибок symcodex

Две независимые ветки:
- ResolveError: ошибки поиска (ввод вызывающего или дефект каталога),
  возвращаются непосредственному вызывающему без повторов.
- CatalogInvariantViolation: каталог нарушает структурные инварианты,
  поднимается один раз при построении дерева.

Deprecation НЕ является ошибкой (см. DeprecationInfo). Исключение
DeprecatedName возникает только при явно выбранной DeprecationPolicy.ERROR.
"""

from typing import Optional, Sequence


class SymcodexError(Exception):
    """Базовое исключение пакета."""


# =============================================================================
# LOOKUP ERRORS
# =============================================================================


class ResolveError(SymcodexError):
    """Базовая ошибка поиска по dotted name."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class InvalidModifier(ResolveError):
    """
    Некорректный modifier token.

    Пустой token, символы вне [a-z0-9] или повтор одного token.
    """

    def __init__(self, token: str, reason: str, path: str = ""):
        super().__init__(f"Invalid modifier {token!r}: {reason}", path)
        self.token = token
        self.reason = reason


class UnknownName(ResolveError):
    """Сегмент namespace/symbol не найден на своём уровне дерева."""

    def __init__(self, segment: str, path: str = "", reason: Optional[str] = None):
        message = f"Unknown name {segment!r}"
        if path:
            message += f" in {path!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, path)
        self.segment = segment


class NoMatch(ResolveError):
    """Ни один variant не содержит все запрошенные modifiers."""

    def __init__(self, symbol: str, modifiers: Sequence[str], path: str = ""):
        super().__init__(
            f"Symbol {symbol!r} has no variant with modifiers {'.'.join(modifiers)!r}",
            path,
        )
        self.symbol = symbol
        self.modifiers = tuple(modifiers)


class AmbiguousMatch(ResolveError):
    """
    Несколько variants одинаково близки к запросу.

    Дефект каталога: для валидированного каталога недостижимо
    (см. CatalogConfig.reject_ambiguous).
    """

    def __init__(
        self,
        symbol: str,
        modifiers: Sequence[str],
        candidates: Sequence[str],
        path: str = "",
    ):
        super().__init__(
            f"Symbol {symbol!r}: modifiers {'.'.join(modifiers)!r} are ambiguous "
            f"between {', '.join(repr(c) for c in candidates)}",
            path,
        )
        self.symbol = symbol
        self.modifiers = tuple(modifiers)
        self.candidates = tuple(candidates)


class DeprecatedName(ResolveError):
    """Найденный элемент deprecated, а DeprecationPolicy требует ошибку."""

    def __init__(self, path: str, messages: Sequence[str]):
        super().__init__(f"{path!r} is deprecated: {'; '.join(messages)}", path)
        self.messages = tuple(messages)


# =============================================================================
# CONSTRUCTION ERRORS
# =============================================================================


class CatalogInvariantViolation(SymcodexError):
    """
    Каталог нарушает инварианты дерева символов.

    Поднимается при построении; частично построенное дерево не возвращается.
    """

    def __init__(self, message: str, location: str = ""):
        if location:
            message = f"{location}: {message}"
        super().__init__(message)
        self.location = location
