"""Resolver — поиск символов по dotted name в дереве модулей.

- best-match выбор варианта по modifiers
- deprecation advisories со всего пути
- перечисление модулей и вариантов для introspection
"""

from .engine import (
    DeprecationPolicy,
    Listing,
    ResolvedModule,
    Resolution,
    Resolver,
    ResolverConfig,
    SymbolDeprecationWarning,
    VariantInfo,
    combine_deprecations,
)

__all__ = [
    "Resolver",
    "ResolverConfig",
    "Resolution",
    "ResolvedModule",
    "VariantInfo",
    "Listing",
    "DeprecationPolicy",
    "SymbolDeprecationWarning",
    "combine_deprecations",
]
