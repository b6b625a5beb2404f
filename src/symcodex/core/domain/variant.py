"""
Variant — Конкретная последовательность codepoints символа

Immutable Pydantic модель. Один символ может быть отображён несколькими
codepoints (combining sequences, variation selectors, emoji ZWJ).

Во входных данных codepoints допускаются как int, как строки "U+2192" /
"0x2192", либо целиком как литерал `value` ("→").
"""

from typing import Any, Final, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from symcodex.core.domain.deprecation import DeprecationInfo
from symcodex.core.domain.modifiers import ModifierSet


# =============================================================================
# UNICODE SCALAR VALUES
# =============================================================================

MAX_CODEPOINT: Final[int] = 0x10FFFF
SURROGATE_MIN: Final[int] = 0xD800
SURROGATE_MAX: Final[int] = 0xDFFF


def is_scalar_value(codepoint: int) -> bool:
    """Unicode scalar value: 0..0x10FFFF без суррогатов."""
    return 0 <= codepoint <= MAX_CODEPOINT and not SURROGATE_MIN <= codepoint <= SURROGATE_MAX


def parse_codepoint(raw: Any) -> int:
    """
    Разбор одного codepoint.

    Args:
        raw: int, "U+XXXX", "u+XXXX" или "0xXXXX"

    Returns:
        Целое значение codepoint

    Raises:
        ValueError: Если формат не распознан
    """
    if isinstance(raw, bool):
        raise ValueError(f"Invalid codepoint: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        for prefix in ("U+", "u+", "0x", "0X"):
            if text.startswith(prefix):
                try:
                    return int(text[len(prefix):], 16)
                except ValueError:
                    break
    raise ValueError(f"Invalid codepoint: {raw!r}")


def format_codepoint(codepoint: int) -> str:
    return f"U+{codepoint:04X}"


# =============================================================================
# VARIANT MODEL
# =============================================================================


class Variant(BaseModel):
    """
    Вариант символа: набор modifiers -> codepoints.

    Пустой ModifierSet означает variant по умолчанию.
    """

    modifiers: ModifierSet = Field(default_factory=ModifierSet.empty, description="Modifiers")
    codepoints: tuple[int, ...] = Field(..., min_length=1, description="Unicode scalar values")
    deprecation: Optional[DeprecationInfo] = Field(None, description="Variant-level deprecation")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def coerce_value(cls, data: Any) -> Any:
        """Литерал `value` раскладывается в codepoints."""
        if isinstance(data, dict) and "value" in data:
            data = dict(data)
            value = data.pop("value")
            if "codepoints" in data:
                raise ValueError("Specify either 'value' or 'codepoints', not both")
            if not isinstance(value, str):
                raise ValueError(f"'value' must be a string, got {type(value).__name__}")
            data["codepoints"] = tuple(ord(c) for c in value)
        return data

    @field_validator("codepoints", mode="before")
    @classmethod
    def coerce_codepoints(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(parse_codepoint(cp) for cp in v)
        return v

    @field_validator("codepoints")
    @classmethod
    def validate_scalar_values(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Только Unicode scalar values (без суррогатов и вне диапазона)."""
        for cp in v:
            if not is_scalar_value(cp):
                raise ValueError(f"{cp:#x} is not a Unicode scalar value")
        return v

    @property
    def value(self) -> str:
        """Строка из codepoints варианта."""
        return "".join(chr(cp) for cp in self.codepoints)

    @property
    def is_default(self) -> bool:
        return self.modifiers.is_empty()

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation is not None

    def notation(self) -> str:
        """Codepoints в нотации "U+2192 U+FE0F"."""
        return " ".join(format_codepoint(cp) for cp in self.codepoints)
