"""
Domain models and value objects.

Contains the symbol tree: ModifierSet, Variant, Symbol, Module, DeprecationInfo.
"""

from symcodex.core.domain.deprecation import DeprecationInfo
from symcodex.core.domain.modifiers import (
    MODIFIER_SEPARATOR,
    MODIFIER_TOKEN_RE,
    ModifierSet,
    split_dotted,
    validate_tokens,
)
from symcodex.core.domain.module import (
    NAME_RE,
    PATH_SEPARATOR,
    EntryKind,
    Module,
    Node,
    entry_kind,
)
from symcodex.core.domain.symbol import ModifierQuery, Symbol, TieBreak
from symcodex.core.domain.variant import (
    Variant,
    format_codepoint,
    is_scalar_value,
    parse_codepoint,
)

__all__ = [
    # Modifiers
    "MODIFIER_SEPARATOR",
    "MODIFIER_TOKEN_RE",
    "ModifierSet",
    "split_dotted",
    "validate_tokens",
    # Deprecation
    "DeprecationInfo",
    # Variant
    "Variant",
    "format_codepoint",
    "is_scalar_value",
    "parse_codepoint",
    # Symbol
    "Symbol",
    "TieBreak",
    "ModifierQuery",
    # Module tree
    "NAME_RE",
    "PATH_SEPARATOR",
    "EntryKind",
    "Module",
    "Node",
    "entry_kind",
]
