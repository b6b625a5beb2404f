"""
Symbol — Именованный символ с вариантами и best-match поиском

Immutable Pydantic модель. Символ хранит упорядоченный список variants;
ровно один из них (без учёта deprecated алиасов) имеет пустой ModifierSet
и служит значением по умолчанию.

Best-match:
1. Кандидаты — variants, чей ModifierSet является надмножеством запроса.
2. Нет кандидатов -> NoMatch.
3. Из кандидатов берутся варианты с наименьшим ModifierSet.
4. При равенстве non-deprecated вариант вытесняет deprecated.
5. Оставшаяся ничья: TieBreak.STRICT -> AmbiguousMatch,
   TieBreak.DECLARATION_ORDER -> первый объявленный.
"""

from enum import Enum
from itertools import combinations
from typing import Any, Iterable, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from symcodex.core.domain.deprecation import DeprecationInfo
from symcodex.core.domain.modifiers import MODIFIER_SEPARATOR, ModifierSet, split_dotted
from symcodex.core.domain.variant import Variant
from symcodex.core.errors import AmbiguousMatch, CatalogInvariantViolation, NoMatch


class TieBreak(str, Enum):
    """Правило разрешения ничьей между равными по размеру кандидатами."""

    STRICT = "strict"
    DECLARATION_ORDER = "declaration_order"


ModifierQuery = Union[ModifierSet, Iterable[str], str]


def _raw_modifier_tokens(raw: Any) -> list[str]:
    """Tokens варианта из сырых данных в авторском порядке."""
    if isinstance(raw, Variant):
        return list(raw.modifiers.order)
    if isinstance(raw, dict):
        mods = raw.get("modifiers", [])
        if isinstance(mods, ModifierSet):
            return list(mods.order)
        if isinstance(mods, (set, frozenset)):
            return sorted(m for m in mods if isinstance(m, str))
        if isinstance(mods, str):
            return split_dotted(mods)
        if isinstance(mods, (list, tuple)):
            return [m for m in mods if isinstance(m, str)]
    return []


class Symbol(BaseModel):
    """
    Символ: имя + variants.

    modifier_order — порядок первого появления tokens в variants
    (вычисляется из входных данных, если не задан явно). Используется
    только для отображения: поиск от порядка не зависит.
    """

    kind: Literal["symbol"] = "symbol"
    name: str = Field(..., min_length=1, description="Локальное имя символа")
    variants: tuple[Variant, ...] = Field(..., min_length=1, description="Variants по порядку")
    deprecation: Optional[DeprecationInfo] = Field(None, description="Whole-symbol deprecation")
    modifier_order: tuple[str, ...] = Field(default=(), description="Порядок отображения tokens")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def derive_modifier_order(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("modifier_order"):
            return data
        order: list[str] = []
        for raw in data.get("variants") or ():
            for token in _raw_modifier_tokens(raw):
                if token not in order:
                    order.append(token)
        return {**data, "modifier_order": tuple(order)}

    @model_validator(mode="after")
    def validate_variants(self) -> "Symbol":
        """
        Инварианты символа.

        - ровно один non-deprecated variant на каждый ModifierSet
          (deprecated дубликаты допустимы как алиасы);
        - есть variant по умолчанию (пустой ModifierSet);
        - modifier_order покрывает все tokens без повторов.
        """
        groups: dict[ModifierSet, list[Variant]] = {}
        for variant in self.variants:
            groups.setdefault(variant.modifiers, []).append(variant)

        for modifiers, group in groups.items():
            if len(group) == 1:
                continue
            active = [v for v in group if not v.is_deprecated]
            label = self._label(modifiers)
            if len(active) > 1:
                raise CatalogInvariantViolation(
                    f"{len(active)} variants share modifiers {label!r}", self.name
                )
            if not active:
                raise CatalogInvariantViolation(
                    f"deprecated variants {label!r} alias no active variant", self.name
                )

        if ModifierSet.empty() not in groups:
            raise CatalogInvariantViolation("symbol has no default variant", self.name)

        if len(set(self.modifier_order)) != len(self.modifier_order):
            raise CatalogInvariantViolation("modifier_order repeats a token", self.name)
        known = set(self.modifier_order)
        for variant in self.variants:
            missing = variant.modifiers.tokens - known
            if missing:
                raise CatalogInvariantViolation(
                    f"modifier_order misses {', '.join(sorted(missing))}", self.name
                )
        return self

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def default(self) -> Variant:
        """Variant по умолчанию (non-deprecated, если есть алиасы)."""
        defaults = [v for v in self.variants if v.is_default]
        active = [v for v in defaults if not v.is_deprecated]
        return (active or defaults)[0]

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation is not None

    @property
    def modifiers(self) -> tuple[str, ...]:
        """Все tokens символа в порядке отображения."""
        return self.modifier_order

    def canonical_name(self, variant: Variant) -> str:
        """Отображаемое имя варианта: "arrow.r.double"."""
        if variant.is_default:
            return self.name
        return self.name + MODIFIER_SEPARATOR + variant.modifiers.dotted(self.modifier_order)

    def _label(self, modifiers: ModifierSet) -> str:
        return modifiers.dotted(self.modifier_order)

    # -------------------------------------------------------------------------
    # Best-match
    # -------------------------------------------------------------------------

    def candidates(self, query: ModifierSet) -> list[Variant]:
        """Variants, содержащие все modifiers запроса (в порядке объявления)."""
        return [v for v in self.variants if v.modifiers.is_superset_of(query)]

    def best_match(
        self,
        query: ModifierSet,
        tie_break: TieBreak = TieBreak.STRICT,
    ) -> Variant:
        """
        Выбор наиболее близкого варианта.

        Args:
            query: Modifiers, указанные после имени символа
            tie_break: Правило для ничьей между разными ModifierSet

        Returns:
            Выбранный Variant (может быть deprecated — вызывающий решает,
            что делать с advisory)

        Raises:
            NoMatch: Нет варианта-надмножества запроса
            AmbiguousMatch: Ничья после всех tie-break (TieBreak.STRICT)
        """
        candidates = self.candidates(query)
        if not candidates:
            raise NoMatch(self.name, query.canonical_order(self.modifier_order))
        if len(candidates) == 1:
            return candidates[0]

        smallest = min(len(v.modifiers) for v in candidates)
        best = [v for v in candidates if len(v.modifiers) == smallest]

        if len(best) > 1:
            active = [v for v in best if not v.is_deprecated]
            if active:
                best = active

        if len(best) > 1 and tie_break == TieBreak.STRICT:
            raise AmbiguousMatch(
                self.name,
                query.canonical_order(self.modifier_order),
                [self.canonical_name(v) for v in best],
            )
        return best[0]

    def get(self, modifiers: ModifierQuery = "", tie_break: TieBreak = TieBreak.STRICT) -> Variant:
        """
        Best-match по modifiers в любой форме.

        Examples:
            >>> arrow.get("r.double").value
            '⇒'
            >>> arrow.get(["double", "r"]).value
            '⇒'
        """
        if isinstance(modifiers, str):
            query = ModifierSet.from_dotted(modifiers)
        elif isinstance(modifiers, ModifierSet):
            query = modifiers
        else:
            query = ModifierSet.parse(modifiers)
        return self.best_match(query, tie_break)

    def ambiguities(self) -> list[ModifierSet]:
        """
        Запросы, на которых best-match даёт ничью в режиме STRICT.

        Любая ничья между A и B воспроизводится на запросе A ∩ B,
        поэтому достаточно проверить попарные пересечения. Deprecated
        variants участвуют наравне с остальными: если активного варианта
        нужного размера нет, ничья возможна и между двумя алиасами.
        """
        found: list[ModifierSet] = []
        for a, b in combinations(self.variants, 2):
            if len(a.modifiers) != len(b.modifiers) or a.modifiers == b.modifiers:
                continue
            query = ModifierSet(tokens=a.modifiers.tokens & b.modifiers.tokens)
            if query in found:
                continue
            try:
                self.best_match(query, TieBreak.STRICT)
            except AmbiguousMatch:
                found.append(query)
        return found
