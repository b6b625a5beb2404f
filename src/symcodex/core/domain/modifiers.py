"""
ModifierSet — Неупорядоченный набор modifier tokens

Immutable Pydantic модель. Порядок tokens не влияет на равенство и поиск:
`arrow.r.double` и `arrow.double.r` дают один и тот же ModifierSet.

Порядок отображения (canonical order) задаёт не сам набор, а Symbol,
которому он принадлежит: tokens сортируются по первому появлению в списке
variants этого символа.
"""

import re
from typing import Any, Final, Iterable, Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from symcodex.core.errors import InvalidModifier


# Допустимый modifier token: строчные ASCII буквы и цифры
MODIFIER_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+$")

MODIFIER_SEPARATOR: Final[str] = "."


def validate_tokens(tokens: Sequence[str]) -> frozenset[str]:
    """
    Проверка списка tokens и сборка frozenset.

    Raises:
        InvalidModifier: пустой token, недопустимые символы или повтор
    """
    seen: set[str] = set()
    for token in tokens:
        if not isinstance(token, str) or not token:
            raise InvalidModifier(str(token), "empty modifier")
        if not MODIFIER_TOKEN_RE.match(token):
            raise InvalidModifier(token, "only lowercase ASCII letters and digits are allowed")
        if token in seen:
            raise InvalidModifier(token, "modifier repeated")
        seen.add(token)
    return frozenset(seen)


class ModifierSet(BaseModel):
    """
    Набор modifiers варианта или запроса.

    Равенство — равенство множеств; hashable (frozen=True), поэтому
    ModifierSet можно использовать как ключ словаря.

    order хранит tokens в авторском порядке (как они были переданы) и не
    участвует ни в равенстве, ни в hash, ни в сериализации.
    """

    tokens: frozenset[str] = Field(default_factory=frozenset, description="Modifier tokens")
    order: tuple[str, ...] = Field(
        default=(), exclude=True, repr=False, description="Tokens в авторском порядке"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def coerce_tokens(cls, data: Any) -> Any:
        """Принимает dotted строку, последовательность tokens или dict."""
        if isinstance(data, str):
            data = split_dotted(data)
        if isinstance(data, (set, frozenset)):
            data = sorted(data)
        if isinstance(data, (list, tuple)):
            return {"tokens": validate_tokens(data), "order": tuple(data)}
        if isinstance(data, dict) and "tokens" in data:
            raw = data["tokens"]
            raw = sorted(raw) if isinstance(raw, (set, frozenset)) else list(raw)
            tokens = validate_tokens(raw)
            order = tuple(data.get("order") or raw)
            if frozenset(order) != tokens or len(order) != len(tokens):
                order = tuple(raw)
            return {**data, "tokens": tokens, "order": order}
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModifierSet):
            return NotImplemented
        return self.tokens == other.tokens

    def __hash__(self) -> int:
        return hash(self.tokens)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> "ModifierSet":
        """
        Построение набора из tokens.

        Args:
            tokens: Modifier tokens в любом порядке

        Returns:
            ModifierSet

        Raises:
            InvalidModifier: пустой token, символы вне [a-z0-9] или повтор
        """
        return cls(tokens=list(tokens))

    @classmethod
    def from_dotted(cls, text: str) -> "ModifierSet":
        """Построение из строки вида "r.double" (пустая строка -> пустой набор)."""
        return cls.parse(split_dotted(text))

    @classmethod
    def empty(cls) -> "ModifierSet":
        return _EMPTY

    # -------------------------------------------------------------------------
    # Set operations
    # -------------------------------------------------------------------------

    def is_subset_of(self, other: "ModifierSet") -> bool:
        """True, если каждый token self присутствует в other."""
        return self.tokens <= other.tokens

    def is_superset_of(self, other: "ModifierSet") -> bool:
        return self.tokens >= other.tokens

    def is_empty(self) -> bool:
        return not self.tokens

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def canonical_order(self, order: Optional[Sequence[str]] = None) -> tuple[str, ...]:
        """
        Tokens в порядке отображения.

        Args:
            order: Порядок первого появления tokens в символе
                   (Symbol.modifier_order). Tokens вне order идут в конце
                   по алфавиту; без order — чисто алфавитный порядок.

        Returns:
            Упорядоченный кортеж tokens
        """
        if not order:
            return tuple(sorted(self.tokens))
        rank = {token: i for i, token in enumerate(order)}
        return tuple(sorted(self.tokens, key=lambda t: (rank.get(t, len(rank)), t)))

    def dotted(self, order: Optional[Sequence[str]] = None) -> str:
        """Отображение набора как "r.double"."""
        return MODIFIER_SEPARATOR.join(self.canonical_order(order))

    def __str__(self) -> str:
        return self.dotted()


def split_dotted(text: str) -> list[str]:
    """Разбиение dotted строки; пустая строка -> пустой список."""
    if not text:
        return []
    return text.split(MODIFIER_SEPARATOR)


_EMPTY: Final[ModifierSet] = ModifierSet(tokens=frozenset())
