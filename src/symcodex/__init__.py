"""
symcodex — каталог именованных символов Unicode с разрешением dotted names.

    >>> from symcodex import get_default_resolver
    >>> get_default_resolver().get("sym.arrow.r.double")
    '⇒'
"""

from symcodex.catalog import (
    CatalogConfig,
    build_catalog,
    get_default_catalog,
    get_default_resolver,
    load_catalog,
)
from symcodex.core.domain import (
    DeprecationInfo,
    ModifierSet,
    Module,
    Symbol,
    TieBreak,
    Variant,
)
from symcodex.core.errors import (
    AmbiguousMatch,
    CatalogInvariantViolation,
    DeprecatedName,
    InvalidModifier,
    NoMatch,
    ResolveError,
    SymcodexError,
    UnknownName,
)
from symcodex.resolver import (
    DeprecationPolicy,
    ResolvedModule,
    Resolution,
    Resolver,
    ResolverConfig,
)
from symcodex.numerals import NumeralSystem, format_number
from symcodex.styling import MathStyle, style_text, to_style

__version__ = "0.1.0"

__all__ = [
    # Models
    "DeprecationInfo",
    "ModifierSet",
    "Module",
    "Symbol",
    "TieBreak",
    "Variant",
    # Resolver
    "DeprecationPolicy",
    "ResolvedModule",
    "Resolution",
    "Resolver",
    "ResolverConfig",
    # Catalog
    "CatalogConfig",
    "build_catalog",
    "get_default_catalog",
    "get_default_resolver",
    "load_catalog",
    # Errors
    "SymcodexError",
    "ResolveError",
    "InvalidModifier",
    "UnknownName",
    "NoMatch",
    "AmbiguousMatch",
    "DeprecatedName",
    "CatalogInvariantViolation",
    # Numerals
    "NumeralSystem",
    "format_number",
    # Styling
    "MathStyle",
    "style_text",
    "to_style",
]
