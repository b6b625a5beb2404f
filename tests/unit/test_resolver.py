"""
Тесты для Resolver

Проверяет:
1. Спуск по модулям и resolve символов (Resolution)
2. Путь, заканчивающийся на модуле (ResolvedModule)
3. Ошибки: UnknownName, InvalidModifier, NoMatch, AmbiguousMatch
4. Introspection: enumerate, variants_of, walk (перезапускаемые итерации)
5. ResolverConfig: separator, tie_break
"""

import pytest

from symcodex.catalog import build_catalog
from symcodex.core.domain import EntryKind, Module, TieBreak
from symcodex.core.errors import AmbiguousMatch, InvalidModifier, NoMatch, UnknownName
from symcodex.resolver import (
    ResolvedModule,
    Resolution,
    Resolver,
    ResolverConfig,
)


@pytest.fixture
def root() -> Module:
    """Небольшой каталог: sym (arrow, dot, greek.alpha) и emoji (flag)"""
    return build_catalog(
        {
            "sym": {
                "entries": [
                    {
                        "name": "arrow",
                        "variants": [
                            {"codepoints": ["U+2192"]},
                            {"modifiers": ["r"], "codepoints": ["U+2192"]},
                            {"modifiers": ["l"], "codepoints": ["U+2190"]},
                            {"modifiers": ["t"], "codepoints": ["U+2191"]},
                            {"modifiers": ["r", "double"], "codepoints": ["U+21D2"]},
                            {"modifiers": ["l", "double"], "codepoints": ["U+21D0"]},
                            {"modifiers": ["t", "double"], "codepoints": ["U+21D1"]},
                        ],
                    },
                    {
                        "name": "dot",
                        "variants": [
                            {"codepoints": ["U+22C5"]},
                            {"modifiers": "c", "codepoints": ["U+00B7"]},
                        ],
                    },
                    {
                        "name": "greek",
                        "entries": [{"name": "alpha", "variants": [{"value": "α"}]}],
                    },
                ]
            },
            "emoji": {
                "entries": [
                    {
                        "name": "flag",
                        "variants": [
                            {"codepoints": ["U+1F6A9"]},
                            {"modifiers": ["de"], "codepoints": ["U+1F1E9", "U+1F1EA"]},
                        ],
                    }
                ]
            },
        }
    )


@pytest.fixture
def resolver(root: Module) -> Resolver:
    return Resolver(root)


# =============================================================================
# RESOLVE SYMBOLS
# =============================================================================


class TestResolveSymbol:
    """Resolve пути до символа"""

    def test_default_variant(self, resolver: Resolver) -> None:
        result = resolver.resolve("sym.arrow")
        assert isinstance(result, Resolution)
        assert result.codepoints == (0x2192,)
        assert result.value == "→"
        assert result.canonical_name == "sym.arrow"
        assert not result.is_deprecated
        assert result.deprecation is None

    def test_modifiers(self, resolver: Resolver) -> None:
        result = resolver.resolve("sym.arrow.r.double")
        assert result.value == "⇒"
        assert result.path == "sym.arrow.r.double"
        assert result.canonical_name == "sym.arrow.r.double"
        assert result.symbol.name == "arrow"

    def test_order_independent(self, resolver: Resolver) -> None:
        """sym.arrow.double.r == sym.arrow.r.double, canonical name одинаковый"""
        a = resolver.resolve("sym.arrow.double.r")
        b = resolver.resolve("sym.arrow.r.double")
        assert a.codepoints == b.codepoints
        assert a.canonical_name == b.canonical_name == "sym.arrow.r.double"

    def test_concrete_scenario(self, resolver: Resolver) -> None:
        """Под-специфицированный, однозначный и отсутствующий modifiers"""
        assert resolver.resolve("sym.arrow").codepoints == (0x2192,)
        assert resolver.resolve("sym.arrow.t.double").codepoints == (0x21D1,)
        with pytest.raises(AmbiguousMatch):
            resolver.resolve("sym.arrow.double")
        with pytest.raises(NoMatch):
            resolver.resolve("sym.arrow.left")

    def test_nested_module(self, resolver: Resolver) -> None:
        assert resolver.get("sym.greek.alpha") == "α"

    def test_multi_codepoint(self, resolver: Resolver) -> None:
        assert resolver.resolve("emoji.flag.de").codepoints == (0x1F1E9, 0x1F1EA)

    def test_string_modifiers_in_catalog(self, resolver: Resolver) -> None:
        """Modifiers в каталоге можно задать dotted строкой"""
        assert resolver.get("sym.dot.c") == "·"

    def test_resolve_path_segments(self, resolver: Resolver) -> None:
        result = resolver.resolve_path(["sym", "arrow", "double", "l"])
        assert result.value == "⇐"
        assert result.canonical_name == "sym.arrow.l.double"

    def test_contains(self, resolver: Resolver) -> None:
        assert "sym.arrow.r" in resolver
        assert "sym" in resolver
        assert "sym.arrow.left" not in resolver
        assert "sym.arrow.double" not in resolver
        assert "nope" not in resolver
        assert 42 not in resolver


# =============================================================================
# RESOLVE MODULES
# =============================================================================


class TestResolveModule:
    """Путь, заканчивающийся на модуле, — не ошибка"""

    def test_module_path(self, resolver: Resolver) -> None:
        result = resolver.resolve("sym")
        assert isinstance(result, ResolvedModule)
        assert result.module.name == "sym"
        assert not result.is_deprecated

    def test_nested_module_path(self, resolver: Resolver) -> None:
        result = resolver.resolve("sym.greek")
        assert isinstance(result, ResolvedModule)
        assert result.path == "sym.greek"

    def test_empty_path_is_root(self, resolver: Resolver, root: Module) -> None:
        result = resolver.resolve("")
        assert isinstance(result, ResolvedModule)
        assert result.module is root

    def test_get_on_module_fails(self, resolver: Resolver) -> None:
        """get() требует символ"""
        with pytest.raises(UnknownName, match="is a module"):
            resolver.get("sym.greek")


# =============================================================================
# ERRORS
# =============================================================================


class TestResolveErrors:
    """Ошибки поиска"""

    def test_unknown_top_level(self, resolver: Resolver) -> None:
        with pytest.raises(UnknownName) as exc_info:
            resolver.resolve("nope.arrow")
        assert exc_info.value.segment == "nope"
        assert exc_info.value.path == "nope.arrow"

    def test_unknown_nested(self, resolver: Resolver) -> None:
        """Модификаторы не применяются к модулям: sym.r -> UnknownName"""
        with pytest.raises(UnknownName) as exc_info:
            resolver.resolve("sym.r")
        assert exc_info.value.segment == "r"

    def test_empty_segment(self, resolver: Resolver) -> None:
        with pytest.raises(UnknownName, match="empty path segment"):
            resolver.resolve("sym..arrow")

    def test_invalid_modifier_carries_path(self, resolver: Resolver) -> None:
        with pytest.raises(InvalidModifier) as exc_info:
            resolver.resolve("sym.arrow.R")
        assert exc_info.value.path == "sym.arrow.R"

    def test_empty_modifier(self, resolver: Resolver) -> None:
        with pytest.raises(InvalidModifier):
            resolver.resolve("sym.arrow.r.")

    def test_repeated_modifier(self, resolver: Resolver) -> None:
        with pytest.raises(InvalidModifier):
            resolver.resolve("sym.arrow.r.r")

    def test_no_match_carries_path(self, resolver: Resolver) -> None:
        with pytest.raises(NoMatch) as exc_info:
            resolver.resolve("sym.arrow.l.r")
        assert exc_info.value.path == "sym.arrow.l.r"

    def test_ambiguous_candidates(self, resolver: Resolver) -> None:
        with pytest.raises(AmbiguousMatch) as exc_info:
            resolver.resolve("sym.arrow.double")
        assert set(exc_info.value.candidates) == {
            "arrow.r.double",
            "arrow.l.double",
            "arrow.t.double",
        }


# =============================================================================
# CONFIG
# =============================================================================


class TestResolverConfig:
    """ResolverConfig"""

    def test_declaration_order_tie_break(self, root: Module) -> None:
        resolver = Resolver(root, ResolverConfig(tie_break=TieBreak.DECLARATION_ORDER))
        assert resolver.get("sym.arrow.double") == "⇒"

    def test_custom_separator(self, root: Module) -> None:
        resolver = Resolver(root, ResolverConfig(separator=":"))
        result = resolver.resolve("sym:arrow:double:r")
        assert result.value == "⇒"
        assert result.canonical_name == "sym:arrow:r:double"

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ValueError):
            ResolverConfig(separator="")

    def test_config_immutable(self) -> None:
        config = ResolverConfig()
        with pytest.raises(AttributeError):
            config.separator = ":"  # type: ignore


# =============================================================================
# INTROSPECTION
# =============================================================================


class TestEnumerate:
    """Resolver.enumerate()"""

    def test_root(self, resolver: Resolver) -> None:
        assert list(resolver.enumerate()) == [
            ("sym", EntryKind.MODULE),
            ("emoji", EntryKind.MODULE),
        ]

    def test_module_declaration_order(self, resolver: Resolver) -> None:
        assert list(resolver.enumerate("sym")) == [
            ("arrow", EntryKind.SYMBOL),
            ("dot", EntryKind.SYMBOL),
            ("greek", EntryKind.MODULE),
        ]

    def test_restartable(self, resolver: Resolver) -> None:
        """Повторная итерация начинает заново"""
        listing = resolver.enumerate("sym")
        first = list(listing)
        second = list(listing)
        assert first == second
        assert len(first) == 3

    def test_symbol_path_rejected(self, resolver: Resolver) -> None:
        with pytest.raises(UnknownName, match="is a symbol"):
            resolver.enumerate("sym.arrow")

    def test_unknown_module(self, resolver: Resolver) -> None:
        with pytest.raises(UnknownName):
            resolver.enumerate("sym.nope")


class TestVariantsOf:
    """Resolver.variants_of()"""

    def test_all_variants(self, resolver: Resolver) -> None:
        names = [info.name for info in resolver.variants_of("sym.arrow")]
        assert names == [
            "sym.arrow",
            "sym.arrow.r",
            "sym.arrow.l",
            "sym.arrow.t",
            "sym.arrow.r.double",
            "sym.arrow.l.double",
            "sym.arrow.t.double",
        ]

    def test_filtered_by_modifiers(self, resolver: Resolver) -> None:
        """Modifiers после имени оставляют только надмножества"""
        infos = list(resolver.variants_of("sym.arrow.double"))
        assert [info.value for info in infos] == ["⇒", "⇐", "⇑"]

    def test_variant_info_fields(self, resolver: Resolver) -> None:
        info = next(iter(resolver.variants_of("emoji.flag.de")))
        assert info.codepoints == (0x1F1E9, 0x1F1EA)
        assert info.deprecation is None
        assert "de" in info.modifiers

    def test_restartable(self, resolver: Resolver) -> None:
        listing = resolver.variants_of("sym.dot")
        assert list(listing) == list(listing)

    def test_module_rejected(self, resolver: Resolver) -> None:
        with pytest.raises(UnknownName, match="is a module"):
            resolver.variants_of("sym.greek")


class TestWalk:
    """Resolver.walk()"""

    def test_walk_all(self, resolver: Resolver) -> None:
        paths = [path for path, _ in resolver.walk()]
        assert paths == ["sym.arrow", "sym.dot", "sym.greek.alpha", "emoji.flag"]

    def test_walk_subtree(self, resolver: Resolver) -> None:
        paths = [path for path, _ in resolver.walk("sym.greek")]
        assert paths == ["sym.greek.alpha"]

    def test_walk_symbol(self, resolver: Resolver) -> None:
        paths = [path for path, _ in resolver.walk("emoji.flag")]
        assert paths == ["emoji.flag"]
