"""
Math Styling — Математические начертания символов Unicode

Преобразование символа в стилизованную форму (bold, fraktur, double-struck,
арабские initial/tailed/looped/stretched и т.д.).

Источники:
- Unicode Core Specification, глава 22 (Mathematical Alphanumeric Symbols)
- Блоки U+1D400 и U+1EE00 (Arabic Mathematical Alphabetic Symbols)
- MathML Core: text-transform mappings

Каждое начертание — упорядоченный список правил (first, last, delta):
символ из [first, last] переходит в codepoint + delta. Первое подходящее
правило выигрывает (исключения из Letterlike Symbols идут раньше общих
диапазонов). Символы без правила возвращаются без изменений.

Chancery/roundhand — variation sequences: script-форма + U+FE00 / U+FE01.
"""

from enum import Enum
from typing import Final, Optional


# =============================================================================
# VARIATION SELECTORS
# =============================================================================

VARIATION_SELECTOR_1: Final[str] = "\ufe00"  # chancery
VARIATION_SELECTOR_2: Final[str] = "\ufe01"  # roundhand


class MathStyle(str, Enum):
    """Математическое начертание"""

    SERIF = "serif"  # обычное; для арабского — isolated
    SERIF_BOLD = "serif_bold"
    SERIF_ITALIC = "serif_italic"
    SERIF_ITALIC_BOLD = "serif_italic_bold"
    SANS_SERIF = "sans_serif"
    SANS_SERIF_BOLD = "sans_serif_bold"
    SANS_SERIF_ITALIC = "sans_serif_italic"
    SANS_SERIF_ITALIC_BOLD = "sans_serif_italic_bold"
    FRAKTUR = "fraktur"
    FRAKTUR_BOLD = "fraktur_bold"
    SCRIPT = "script"
    SCRIPT_BOLD = "script_bold"
    CHANCERY = "chancery"
    CHANCERY_BOLD = "chancery_bold"
    ROUNDHAND = "roundhand"
    ROUNDHAND_BOLD = "roundhand_bold"
    DOUBLE_STRUCK = "double_struck"
    DOUBLE_STRUCK_ITALIC = "double_struck_italic"
    MONOSPACE = "monospace"
    INITIAL = "initial"
    TAILED = "tailed"
    LOOPED = "looped"
    STRETCHED = "stretched"

    @classmethod
    def from_name(cls, name: str) -> Optional["MathStyle"]:
        """Стиль по имени ("double-struck", "double_struck"); None, если неизвестен."""
        try:
            return cls(name.strip().lower().replace("-", "_"))
        except ValueError:
            return None


Rule = tuple[int, int, int]


# =============================================================================
# LATIN / GREEK / DIGITS
# =============================================================================

_SERIF_BOLD: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D3BF),  # A-Z
    (0x0061, 0x007A, 0x1D3B9),  # a-z
    (0x0391, 0x03A1, 0x1D317),  # Α-Ρ
    (0x03F4, 0x03F4, 0x1D2C5),  # ϴ
    (0x03A3, 0x03A9, 0x1D317),  # Σ-Ω
    (0x2207, 0x2207, 0x1B4BA),  # ∇
    (0x03B1, 0x03C9, 0x1D311),  # α-ω
    (0x2202, 0x2202, 0x1B4D9),  # ∂
    (0x03F5, 0x03F5, 0x1D2E7),  # ϵ
    (0x03D1, 0x03D1, 0x1D30C),  # ϑ
    (0x03F0, 0x03F0, 0x1D2EE),  # ϰ
    (0x03D5, 0x03D5, 0x1D30A),  # ϕ
    (0x03F1, 0x03F1, 0x1D2EF),  # ϱ
    (0x03D6, 0x03D6, 0x1D30B),  # ϖ
    (0x03DC, 0x03DD, 0x1D3EE),  # Ϝϝ
    (0x0030, 0x0039, 0x1D79E),  # 0-9
)

_SERIF_ITALIC: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D3F3),
    (0x0068, 0x0068, 0x020A6),  # h -> ℎ (Letterlike Symbols)
    (0x0061, 0x007A, 0x1D3ED),
    (0x0131, 0x0131, 0x1D573),  # ı
    (0x0237, 0x0237, 0x1D46E),  # ȷ
    (0x0391, 0x03A1, 0x1D351),
    (0x03F4, 0x03F4, 0x1D2FF),
    (0x03A3, 0x03A9, 0x1D351),
    (0x2207, 0x2207, 0x1B4F4),
    (0x03B1, 0x03C9, 0x1D34B),
    (0x2202, 0x2202, 0x1B513),
    (0x03F5, 0x03F5, 0x1D321),
    (0x03D1, 0x03D1, 0x1D346),
    (0x03F0, 0x03F0, 0x1D328),
    (0x03D5, 0x03D5, 0x1D344),
    (0x03F1, 0x03F1, 0x1D329),
    (0x03D6, 0x03D6, 0x1D345),
    (0x0127, 0x0127, 0x01FE8),  # ħ -> ℏ, нет в MathML Core
)

_SERIF_ITALIC_BOLD: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D427),
    (0x0061, 0x007A, 0x1D421),
    (0x0391, 0x03A1, 0x1D38B),
    (0x03F4, 0x03F4, 0x1D339),
    (0x03A3, 0x03A9, 0x1D38B),
    (0x2207, 0x2207, 0x1B52E),
    (0x03B1, 0x03C9, 0x1D385),
    (0x2202, 0x2202, 0x1B54D),
    (0x03F5, 0x03F5, 0x1D35B),
    (0x03D1, 0x03D1, 0x1D380),
    (0x03F0, 0x03F0, 0x1D362),
    (0x03D5, 0x03D5, 0x1D37E),
    (0x03F1, 0x03F1, 0x1D363),
    (0x03D6, 0x03D6, 0x1D37F),
)

_SANS_SERIF: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D55F),
    (0x0061, 0x007A, 0x1D559),
    (0x0030, 0x0039, 0x1D7B2),
)

_SANS_SERIF_BOLD: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D593),
    (0x0061, 0x007A, 0x1D58D),
    (0x0391, 0x03A1, 0x1D3C5),
    (0x03F4, 0x03F4, 0x1D373),
    (0x03A3, 0x03A9, 0x1D3C5),
    (0x2207, 0x2207, 0x1B568),
    (0x03B1, 0x03C9, 0x1D3BF),
    (0x2202, 0x2202, 0x1B587),
    (0x03F5, 0x03F5, 0x1D395),
    (0x03D1, 0x03D1, 0x1D3BA),
    (0x03F0, 0x03F0, 0x1D39C),
    (0x03D5, 0x03D5, 0x1D3B8),
    (0x03F1, 0x03F1, 0x1D39D),
    (0x03D6, 0x03D6, 0x1D3B9),
    (0x0030, 0x0039, 0x1D7BC),
)

_SANS_SERIF_ITALIC: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D5C7),
    (0x0061, 0x007A, 0x1D5C1),
)

# Цифр в sans-serif bold italic нет
_SANS_SERIF_ITALIC_BOLD: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D5FB),
    (0x0061, 0x007A, 0x1D5F5),
    (0x0391, 0x03A1, 0x1D3FF),
    (0x03F4, 0x03F4, 0x1D3AD),
    (0x03A3, 0x03A9, 0x1D3FF),
    (0x2207, 0x2207, 0x1B5A2),
    (0x03B1, 0x03C9, 0x1D3F9),
    (0x2202, 0x2202, 0x1B5C1),
    (0x03F5, 0x03F5, 0x1D3CF),
    (0x03D1, 0x03D1, 0x1D3F4),
    (0x03F0, 0x03F0, 0x1D3D6),
    (0x03D5, 0x03D5, 0x1D3F2),
    (0x03F1, 0x03F1, 0x1D3D7),
    (0x03D6, 0x03D6, 0x1D3F3),
)

_FRAKTUR: Final[tuple[Rule, ...]] = (
    (0x0043, 0x0043, 0x020EA),  # ℭ
    (0x0048, 0x0048, 0x020C4),  # ℌ
    (0x0049, 0x0049, 0x020C8),  # ℑ
    (0x0052, 0x0052, 0x020CA),  # ℜ
    (0x005A, 0x005A, 0x020CE),  # ℨ
    (0x0041, 0x005A, 0x1D4C3),
    (0x0061, 0x007A, 0x1D4BD),
)

_FRAKTUR_BOLD: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D52B),
    (0x0061, 0x007A, 0x1D525),
)

_SCRIPT: Final[tuple[Rule, ...]] = (
    (0x0042, 0x0042, 0x020EA),  # ℬ
    (0x0045, 0x0046, 0x020EB),  # ℰℱ
    (0x0048, 0x0048, 0x020C3),  # ℋ
    (0x0049, 0x0049, 0x020C7),  # ℐ
    (0x004C, 0x004C, 0x020C6),  # ℒ
    (0x004D, 0x004D, 0x020E6),  # ℳ
    (0x0052, 0x0052, 0x020C9),  # ℛ
    (0x0041, 0x005A, 0x1D45B),
    (0x0065, 0x0065, 0x020CA),  # ℯ
    (0x0067, 0x0067, 0x020A3),  # ℊ
    (0x006F, 0x006F, 0x020C5),  # ℴ
    (0x0061, 0x007A, 0x1D455),
)

_SCRIPT_BOLD: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D48F),
    (0x0061, 0x007A, 0x1D489),
)

_DOUBLE_STRUCK: Final[tuple[Rule, ...]] = (
    (0x0043, 0x0043, 0x020BF),  # ℂ
    (0x0048, 0x0048, 0x020C5),  # ℍ
    (0x004E, 0x004E, 0x020C7),  # ℕ
    (0x0050, 0x0051, 0x020C9),  # ℙℚ
    (0x0052, 0x0052, 0x020CB),  # ℝ
    (0x005A, 0x005A, 0x020CA),  # ℤ
    (0x0041, 0x005A, 0x1D4F7),
    (0x0061, 0x007A, 0x1D4F1),
    (0x0030, 0x0039, 0x1D7A8),
    (0x0628, 0x0628, 0x1E879),
    (0x062C, 0x062C, 0x1E876),
    (0x0639, 0x0639, 0x1E876),
    (0x062F, 0x062F, 0x1E874),
    (0x0632, 0x0632, 0x1E874),
    (0x0648, 0x0648, 0x1E85D),
    (0x062D, 0x062D, 0x1E87A),
    (0x0637, 0x0637, 0x1E871),
    (0x064A, 0x064A, 0x1E85F),
    (0x0644, 0x0646, 0x1E867),
    (0x0633, 0x0633, 0x1E87B),
    (0x0641, 0x0641, 0x1E86F),
    (0x0635, 0x0635, 0x1E87C),
    (0x0642, 0x0642, 0x1E870),
    (0x0631, 0x0631, 0x1E882),
    (0x0638, 0x0638, 0x1E882),
    (0x0634, 0x0634, 0x1E880),
    (0x062A, 0x062B, 0x1E88B),
    (0x062E, 0x062E, 0x1E889),
    (0x0630, 0x0630, 0x1E888),
    (0x0636, 0x0636, 0x1E883),
    (0x063A, 0x063A, 0x1E881),
    # Нет в MathML Core
    (0x0393, 0x0393, 0x01DAB),  # ℾ
    (0x03A0, 0x03A0, 0x01D9F),  # ℿ
    (0x03B3, 0x03B3, 0x01D8A),  # ℽ
    (0x03C0, 0x03C0, 0x01D7C),  # ℼ
    (0x2211, 0x2211, -0x000D1),  # ∑ -> ⅀
)

_DOUBLE_STRUCK_ITALIC: Final[tuple[Rule, ...]] = (
    (0x0044, 0x0044, 0x02101),  # ⅅ
    (0x0064, 0x0065, 0x020E2),  # ⅆⅇ
    (0x0069, 0x006A, 0x020DF),  # ⅈⅉ
)

_MONOSPACE: Final[tuple[Rule, ...]] = (
    (0x0041, 0x005A, 0x1D62F),
    (0x0061, 0x007A, 0x1D629),
    (0x0030, 0x0039, 0x1D7C6),
)


# =============================================================================
# ARABIC
# =============================================================================

_INITIAL: Final[tuple[Rule, ...]] = (
    (0x0628, 0x0628, 0x1E7F9),
    (0x062C, 0x062C, 0x1E7F6),
    (0x0639, 0x0639, 0x1E7F6),
    (0x0647, 0x0647, 0x1E7DD),
    (0x062D, 0x062D, 0x1E7FA),
    (0x064A, 0x064A, 0x1E7DF),
    (0x0643, 0x0646, 0x1E7E7),
    (0x0633, 0x0633, 0x1E7FB),
    (0x0641, 0x0641, 0x1E7EF),
    (0x0635, 0x0635, 0x1E7FC),
    (0x0642, 0x0642, 0x1E7F0),
    (0x0634, 0x0634, 0x1E800),
    (0x062A, 0x062B, 0x1E80B),
    (0x062E, 0x062E, 0x1E809),
    (0x0636, 0x0636, 0x1E803),
    (0x063A, 0x063A, 0x1E801),
)

_TAILED: Final[tuple[Rule, ...]] = (
    (0x062C, 0x062C, 0x1E816),
    (0x0639, 0x0639, 0x1E816),
    (0x062D, 0x062D, 0x1E81A),
    (0x064A, 0x064A, 0x1E7FF),
    (0x0644, 0x0644, 0x1E807),
    (0x0646, 0x0646, 0x1E807),
    (0x0633, 0x0633, 0x1E81B),
    (0x0635, 0x0635, 0x1E81C),
    (0x0642, 0x0642, 0x1E810),
    (0x0634, 0x0634, 0x1E820),
    (0x062E, 0x062E, 0x1E829),
    (0x0636, 0x0636, 0x1E823),
    (0x063A, 0x063A, 0x1E821),
    (0x06BA, 0x06BA, 0x1E7A3),
    (0x066F, 0x066F, 0x1E7F0),
)

_STRETCHED: Final[tuple[Rule, ...]] = (
    (0x0628, 0x0628, 0x1E839),
    (0x062C, 0x062C, 0x1E836),
    (0x0639, 0x0639, 0x1E836),
    (0x0647, 0x0647, 0x1E81D),
    (0x062D, 0x062D, 0x1E83A),
    (0x0637, 0x0637, 0x1E831),
    (0x064A, 0x064A, 0x1E81F),
    (0x0643, 0x0643, 0x1E827),
    (0x0645, 0x0646, 0x1E827),
    (0x0633, 0x0633, 0x1E83B),
    (0x0641, 0x0641, 0x1E82F),
    (0x0635, 0x0635, 0x1E83C),
    (0x0642, 0x0642, 0x1E830),
    (0x0634, 0x0634, 0x1E840),
    (0x062A, 0x062B, 0x1E84B),
    (0x062E, 0x062E, 0x1E849),
    (0x0636, 0x0636, 0x1E843),
    (0x0638, 0x0638, 0x1E842),
    (0x063A, 0x063A, 0x1E841),
    (0x066E, 0x066E, 0x1E80E),
    (0x06A1, 0x06A1, 0x1E7DD),
)

_LOOPED: Final[tuple[Rule, ...]] = (
    (0x0627, 0x0628, 0x1E859),
    (0x062C, 0x062C, 0x1E856),
    (0x0639, 0x0639, 0x1E856),
    (0x062F, 0x062F, 0x1E854),
    (0x0632, 0x0632, 0x1E854),
    (0x0647, 0x0648, 0x1E83D),
    (0x062D, 0x062D, 0x1E85A),
    (0x0637, 0x0637, 0x1E851),
    (0x064A, 0x064A, 0x1E83F),
    (0x0644, 0x0646, 0x1E847),
    (0x0633, 0x0633, 0x1E85B),
    (0x0641, 0x0641, 0x1E84F),
    (0x0635, 0x0635, 0x1E85C),
    (0x0642, 0x0642, 0x1E850),
    (0x0631, 0x0631, 0x1E862),
    (0x0638, 0x0638, 0x1E862),
    (0x0634, 0x0634, 0x1E860),
    (0x062A, 0x062B, 0x1E86B),
    (0x062E, 0x062E, 0x1E869),
    (0x0630, 0x0630, 0x1E868),
    (0x0636, 0x0636, 0x1E863),
    (0x063A, 0x063A, 0x1E861),
)


# Стиль -> (правила, variation selector)
_STYLE_TABLE: Final[dict[MathStyle, tuple[tuple[Rule, ...], str]]] = {
    MathStyle.SERIF: ((), ""),
    MathStyle.SERIF_BOLD: (_SERIF_BOLD, ""),
    MathStyle.SERIF_ITALIC: (_SERIF_ITALIC, ""),
    MathStyle.SERIF_ITALIC_BOLD: (_SERIF_ITALIC_BOLD, ""),
    MathStyle.SANS_SERIF: (_SANS_SERIF, ""),
    MathStyle.SANS_SERIF_BOLD: (_SANS_SERIF_BOLD, ""),
    MathStyle.SANS_SERIF_ITALIC: (_SANS_SERIF_ITALIC, ""),
    MathStyle.SANS_SERIF_ITALIC_BOLD: (_SANS_SERIF_ITALIC_BOLD, ""),
    MathStyle.FRAKTUR: (_FRAKTUR, ""),
    MathStyle.FRAKTUR_BOLD: (_FRAKTUR_BOLD, ""),
    MathStyle.SCRIPT: (_SCRIPT, ""),
    MathStyle.SCRIPT_BOLD: (_SCRIPT_BOLD, ""),
    MathStyle.CHANCERY: (_SCRIPT, VARIATION_SELECTOR_1),
    MathStyle.CHANCERY_BOLD: (_SCRIPT_BOLD, VARIATION_SELECTOR_1),
    MathStyle.ROUNDHAND: (_SCRIPT, VARIATION_SELECTOR_2),
    MathStyle.ROUNDHAND_BOLD: (_SCRIPT_BOLD, VARIATION_SELECTOR_2),
    MathStyle.DOUBLE_STRUCK: (_DOUBLE_STRUCK, ""),
    MathStyle.DOUBLE_STRUCK_ITALIC: (_DOUBLE_STRUCK_ITALIC, ""),
    MathStyle.MONOSPACE: (_MONOSPACE, ""),
    MathStyle.INITIAL: (_INITIAL, ""),
    MathStyle.TAILED: (_TAILED, ""),
    MathStyle.LOOPED: (_LOOPED, ""),
    MathStyle.STRETCHED: (_STRETCHED, ""),
}


def _apply_rules(c: str, rules: tuple[Rule, ...]) -> str:
    cp = ord(c)
    for first, last, delta in rules:
        if first <= cp <= last:
            return chr(cp + delta)
    return c


def to_style(c: str, style: MathStyle = MathStyle.SERIF) -> str:
    """
    Стилизованная форма одного символа.

    Args:
        c: Один символ
        style: Начертание

    Returns:
        Строка из одного или двух символов (chancery/roundhand добавляют
        variation selector)

    Raises:
        ValueError: Если c не является одним символом

    Examples:
        >>> to_style("M", MathStyle.SERIF_ITALIC_BOLD)
        '𝑴'
        >>> to_style("R", MathStyle.DOUBLE_STRUCK)
        'ℝ'
    """
    if len(c) != 1:
        raise ValueError(f"to_style expects a single character, got {c!r}")
    rules, selector = _STYLE_TABLE[MathStyle(style)]
    return _apply_rules(c, rules) + selector


def style_text(text: str, style: MathStyle = MathStyle.SERIF) -> str:
    """
    Стилизация строки посимвольно.

    Examples:
        >>> style_text("mono", MathStyle.MONOSPACE)
        '𝚖𝚘𝚗𝚘'
    """
    return "".join(to_style(c, style) for c in text)
