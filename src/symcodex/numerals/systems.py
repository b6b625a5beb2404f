"""
Numeral Systems — Запись целых чисел в разных системах счисления

Пять способов записи:
- positional: обычная позиционная запись (arabic, devanagari, ...);
- additive: sign-value запись, символы по убыванию веса (roman, greek, hebrew);
- bijective: биективная система без нуля: a, b, ..., z, aa, ab, ...
  (latin, kana, korean, bengali letters);
- fixed: готовый символ для малых чисел, иначе arabic (circled);
- symbolic: повторяющиеся символы *, †, ‡, ... , **, ††, ...

Китайские системы не поддерживаются.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Final, Optional, Sequence


AdditiveTable = tuple[tuple[str, int], ...]

COMBINING_OVERLINE: Final[str] = "\u0305"
GREEK_THOUSANDS: Final[str] = "\u0375"  # lower numeral sign
GREEK_ZERO: Final[str] = "\U0001018A"


def _digits(first: int) -> str:
    """Десять цифр подряд начиная с codepoint first."""
    return "".join(chr(cp) for cp in range(first, first + 10))


def _upper(table: AdditiveTable) -> AdditiveTable:
    return tuple((symbol.upper(), weight) for symbol, weight in table)


# =============================================================================
# TABLES
# =============================================================================

_ARABIC: Final[str] = "0123456789"
_EASTERN_ARABIC: Final[str] = _digits(0x0660)
_EASTERN_ARABIC_PERSIAN: Final[str] = _digits(0x06F0)
_DEVANAGARI: Final[str] = _digits(0x0966)
_BENGALI_NUMBER: Final[str] = _digits(0x09E6)

_LOWER_ROMAN: Final[AdditiveTable] = (
    ("m" + COMBINING_OVERLINE, 1_000_000),
    ("d" + COMBINING_OVERLINE, 500_000),
    ("c" + COMBINING_OVERLINE, 100_000),
    ("l" + COMBINING_OVERLINE, 50_000),
    ("x" + COMBINING_OVERLINE, 10_000),
    ("v" + COMBINING_OVERLINE, 5_000),
    ("i" + COMBINING_OVERLINE + "v" + COMBINING_OVERLINE, 4_000),
    ("m", 1000),
    ("cm", 900),
    ("d", 500),
    ("cd", 400),
    ("c", 100),
    ("xc", 90),
    ("l", 50),
    ("xl", 40),
    ("x", 10),
    ("ix", 9),
    ("v", 5),
    ("iv", 4),
    ("i", 1),
    ("n", 0),
)
_UPPER_ROMAN: Final[AdditiveTable] = _upper(_LOWER_ROMAN)

# Тысячи — числовой знак ͵ перед цифрой единиц; 6 — стигма, 90 — коппа, 900 — сампи
_LOWER_GREEK: Final[AdditiveTable] = (
    tuple((GREEK_THOUSANDS + c, w * 1000) for c, w in zip("θηζϛεδγβα", range(9, 0, -1)))
    + tuple(zip("ϡωψχφυτσρ", range(900, 0, -100)))
    + tuple(zip("ϟποξνμλκι", range(90, 0, -10)))
    + tuple(zip("θηζϛεδγβα", range(9, 0, -1)))
    + ((GREEK_ZERO, 0),)
)
_UPPER_GREEK: Final[AdditiveTable] = _upper(_LOWER_GREEK)

# 15 и 16 пишутся ט״ו / ט״ז, а не י״ה / י״ו
_HEBREW: Final[AdditiveTable] = (
    tuple(zip("תשרק", range(400, 0, -100)))
    + tuple(zip("צפעסנמלכ", range(90, 10, -10)))
    + (("יט", 19), ("יח", 18), ("יז", 17), ("טז", 16), ("טו", 15), ("י", 10))
    + tuple(zip("טחזוהדגבא", range(9, 0, -1)))
    + (("-", 0),)
)

_LOWER_LATIN: Final[str] = "abcdefghijklmnopqrstuvwxyz"
_UPPER_LATIN: Final[str] = _LOWER_LATIN.upper()

# Годзюон: с ん, без ゐ и ゑ. Ироха: с ゐ и ゑ, без ん.
_HIRAGANA_AIUEO: Final[str] = (
    "あいうえおかきくけこさしすせそたちつてとなにぬ"
    "ねのはひふへほまみむめもやゆよらりるれろわをん"
)
_HIRAGANA_IROHA: Final[str] = (
    "いろはにほへとちりぬるをわかよたれそつねならむう"
    "ゐのおくやまけふこえてあさきゆめみしゑひもせす"
)
_KATAKANA_AIUEO: Final[str] = (
    "アイウエオカキクケコサシスセソタチツテトナニヌ"
    "ネノハヒフヘホマミムメモヤユヨラリルレロワヲン"
)
_KATAKANA_IROHA: Final[str] = (
    "イロハニホヘトチリヌルヲワカヨタレソツネナラムウ"
    "ヰノオクヤマケフコエテアサキユメミシヱヒモセス"
)

_KOREAN_JAMO: Final[str] = "ㄱㄴㄷㄹㅁㅂㅅㅇㅈㅊㅋㅌㅍㅎ"
_KOREAN_SYLLABLE: Final[str] = "가나다라마바사아자차카타파하"
_BENGALI_LETTER: Final[str] = "কখগঘঙচছজঝঞটঠডঢণতথদধনপফবভমযরলশষসহ"

# ⓪, ①-⑳, ㉑-㉟, ㊱-㊿
_CIRCLED: Final[str] = "".join(
    chr(cp)
    for cp in [0x24EA, *range(0x2460, 0x2474), *range(0x3251, 0x3260), *range(0x32B1, 0x32C0)]
)
# Для нуля нет double-circled формы
_DOUBLE_CIRCLED: Final[str] = "0" + "".join(chr(cp) for cp in range(0x24F5, 0x24FF))

_SYMBOLS: Final[str] = "*†‡§¶‖"


# =============================================================================
# NOTATIONS
# =============================================================================


def positional(symbols: Sequence[str], n: int) -> str:
    """
    Позиционная запись по основанию len(symbols).

    Args:
        symbols: Цифры от нуля
        n: Неотрицательное число

    Returns:
        Запись числа (для 0 — symbols[0])
    """
    radix = len(symbols)
    if n == 0:
        return symbols[0]
    digits: list[str] = []
    while n:
        n, digit = divmod(n, radix)
        digits.append(symbols[digit])
    return "".join(reversed(digits))


def additive(table: AdditiveTable, n: int) -> str:
    """
    Sign-value запись: жадно берутся символы по убыванию веса.

    Args:
        table: Пары (symbol, weight) по убыванию weight; последняя пара с
               весом 0 задаёт запись нуля
        n: Неотрицательное число

    Returns:
        Запись числа ("0", если у таблицы нет символа нуля)
    """
    if n == 0:
        symbol, weight = table[-1]
        return symbol if weight == 0 else "0"
    parts: list[str] = []
    for symbol, weight in table:
        if weight == 0 or weight > n:
            continue
        reps, n = divmod(n, weight)
        parts.append(symbol * reps)
    return "".join(parts)


def bijective(symbols: Sequence[str], n: int) -> str:
    """Биективная запись по основанию len(symbols): 1 -> a, 26 -> z, 27 -> aa. Для 0 — "-"."""
    if n == 0:
        return "-"
    radix = len(symbols)
    digits: list[str] = []
    while n:
        n, digit = divmod(n - 1, radix)
        digits.append(symbols[digit])
    return "".join(reversed(digits))


def fixed(symbols: Sequence[str], n: int) -> str:
    """symbols[n], если такой символ есть, иначе обычная arabic запись."""
    if n < len(symbols):
        return symbols[n]
    return str(n)


def symbolic(symbols: Sequence[str], n: int) -> str:
    """Повторяющиеся символы: *, †, ..., затем **, ††, ... Для 0 — "-"."""
    if n == 0:
        return "-"
    count = len(symbols)
    return symbols[(n - 1) % count] * -(-n // count)


# =============================================================================
# NUMERAL SYSTEMS
# =============================================================================


def _check_number(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


class NumeralSystem(str, Enum):
    """Система счисления; value — имя системы (регистр значим: latin / Latin)."""

    ARABIC = "arabic"
    LOWER_LATIN = "latin"
    UPPER_LATIN = "Latin"
    LOWER_ROMAN = "roman"
    UPPER_ROMAN = "Roman"
    LOWER_GREEK = "greek"
    UPPER_GREEK = "Greek"
    SYMBOLS = "symbols"
    HEBREW = "hebrew"
    HIRAGANA_AIUEO = "hiragana.aiueo"
    HIRAGANA_IROHA = "hiragana.iroha"
    KATAKANA_AIUEO = "katakana.aiueo"
    KATAKANA_IROHA = "katakana.iroha"
    KOREAN_JAMO = "korean.jamo"
    KOREAN_SYLLABLE = "korean.syllable"
    EASTERN_ARABIC = "arabic.eastern"
    EASTERN_ARABIC_PERSIAN = "arabic.persian"
    DEVANAGARI = "devanagari"
    BENGALI_NUMBER = "bengali.number"
    BENGALI_LETTER = "bengali.letter"
    CIRCLED = "circled"
    DOUBLE_CIRCLED = "circled.double"

    @classmethod
    def from_name(cls, name: str) -> Optional["NumeralSystem"]:
        """Система по точному имени ("roman", "Roman", "arabic.eastern"); None, если неизвестна."""
        try:
            return cls(name)
        except ValueError:
            return None

    def render(self, n: int) -> str:
        """
        Запись числа в этой системе.

        Args:
            n: Неотрицательное целое

        Returns:
            Строка с записью числа

        Raises:
            ValueError: Отрицательное число
            TypeError: Не целое число
        """
        _check_number(n)
        notation, table = _NOTATIONS[self]
        return notation(table, n)

    def apply(self, n: int) -> "FormattedNumber":
        """Число вместе с системой; str() даёт запись."""
        return FormattedNumber(system=self, number=n)


@dataclass(frozen=True)
class FormattedNumber:
    """Число и система, в которой его нужно показать."""

    system: NumeralSystem
    number: int

    def __post_init__(self) -> None:
        _check_number(self.number)

    def __str__(self) -> str:
        return self.system.render(self.number)


_NOTATIONS: Final[dict[NumeralSystem, tuple[Callable[[Any, int], str], Any]]] = {
    NumeralSystem.ARABIC: (positional, _ARABIC),
    NumeralSystem.LOWER_LATIN: (bijective, _LOWER_LATIN),
    NumeralSystem.UPPER_LATIN: (bijective, _UPPER_LATIN),
    NumeralSystem.LOWER_ROMAN: (additive, _LOWER_ROMAN),
    NumeralSystem.UPPER_ROMAN: (additive, _UPPER_ROMAN),
    NumeralSystem.LOWER_GREEK: (additive, _LOWER_GREEK),
    NumeralSystem.UPPER_GREEK: (additive, _UPPER_GREEK),
    NumeralSystem.SYMBOLS: (symbolic, _SYMBOLS),
    NumeralSystem.HEBREW: (additive, _HEBREW),
    NumeralSystem.HIRAGANA_AIUEO: (bijective, _HIRAGANA_AIUEO),
    NumeralSystem.HIRAGANA_IROHA: (bijective, _HIRAGANA_IROHA),
    NumeralSystem.KATAKANA_AIUEO: (bijective, _KATAKANA_AIUEO),
    NumeralSystem.KATAKANA_IROHA: (bijective, _KATAKANA_IROHA),
    NumeralSystem.KOREAN_JAMO: (bijective, _KOREAN_JAMO),
    NumeralSystem.KOREAN_SYLLABLE: (bijective, _KOREAN_SYLLABLE),
    NumeralSystem.EASTERN_ARABIC: (positional, _EASTERN_ARABIC),
    NumeralSystem.EASTERN_ARABIC_PERSIAN: (positional, _EASTERN_ARABIC_PERSIAN),
    NumeralSystem.DEVANAGARI: (positional, _DEVANAGARI),
    NumeralSystem.BENGALI_NUMBER: (positional, _BENGALI_NUMBER),
    NumeralSystem.BENGALI_LETTER: (bijective, _BENGALI_LETTER),
    NumeralSystem.CIRCLED: (fixed, _CIRCLED),
    NumeralSystem.DOUBLE_CIRCLED: (fixed, _DOUBLE_CIRCLED),
}


def format_number(n: int, system: NumeralSystem = NumeralSystem.ARABIC) -> str:
    """Запись числа n в системе system (str или NumeralSystem)."""
    return NumeralSystem(system).render(n)
