"""
Тесты для математических начертаний (to_style / style_text)

Проверяет:
1. Общие диапазоны (латиница, греческий, цифры)
2. Исключения из Letterlike Symbols (ℎ, ℝ, ℭ, ℴ и т.д.)
3. Variation sequences для chancery/roundhand
4. Арабские начертания
5. Символы без правила возвращаются без изменений
"""

import pytest

from symcodex.styling import (
    VARIATION_SELECTOR_1,
    VARIATION_SELECTOR_2,
    MathStyle,
    style_text,
    to_style,
)


# =============================================================================
# LATIN / GREEK / DIGITS
# =============================================================================


class TestLatinGreek:
    """Латиница, греческий, цифры"""

    def test_serif_is_identity(self) -> None:
        assert style_text("xyz", MathStyle.SERIF) == "xyz"

    def test_serif_italic_bold(self) -> None:
        assert to_style("M", MathStyle.SERIF_ITALIC_BOLD) == chr(0x1D474)

    def test_serif_bold_digit(self) -> None:
        assert to_style("0", MathStyle.SERIF_BOLD) == chr(0x1D7CE)
        assert to_style("9", MathStyle.SERIF_BOLD) == chr(0x1D7D7)

    def test_serif_italic_h_exception(self) -> None:
        """h в italic — PLANCK CONSTANT U+210E, а не дыра в блоке"""
        assert to_style("h", MathStyle.SERIF_ITALIC) == "ℎ"
        assert to_style("g", MathStyle.SERIF_ITALIC) == chr(0x1D454)

    def test_serif_italic_dotless(self) -> None:
        assert to_style("ı", MathStyle.SERIF_ITALIC) == chr(0x1D6A4)
        assert to_style("ȷ", MathStyle.SERIF_ITALIC) == chr(0x1D6A5)

    def test_greek_bold(self) -> None:
        assert to_style("α", MathStyle.SERIF_BOLD) == chr(0x1D6C2)
        assert to_style("Ω", MathStyle.SERIF_BOLD) == chr(0x1D6C0)
        assert to_style("∇", MathStyle.SERIF_BOLD) == chr(0x1D6C1)

    def test_theta_symbol_uppercase(self) -> None:
        """ϴ стоит между Ρ и Σ в математическом блоке"""
        assert to_style("ϴ", MathStyle.SERIF_BOLD) == chr(0x1D6B9)

    def test_sans_serif_bold_vs_bold_italic(self) -> None:
        """Sans-serif bold и bold italic дают разные codepoints"""
        assert to_style("α", MathStyle.SANS_SERIF_BOLD) == chr(0x1D770)
        assert to_style("α", MathStyle.SANS_SERIF_ITALIC_BOLD) == chr(0x1D7AA)
        assert to_style("A", MathStyle.SANS_SERIF_ITALIC_BOLD) == chr(0x1D63C)

    def test_monospace(self) -> None:
        assert style_text("mono", MathStyle.MONOSPACE) == "".join(
            chr(cp) for cp in (0x1D696, 0x1D698, 0x1D697, 0x1D698)
        )

    def test_no_digits_in_italic(self) -> None:
        assert to_style("7", MathStyle.SERIF_ITALIC) == "7"


# =============================================================================
# LETTERLIKE EXCEPTIONS
# =============================================================================


class TestLetterlike:
    """Исключения из Letterlike Symbols"""

    @pytest.mark.parametrize(
        "c, expected",
        [("C", "ℂ"), ("H", "ℍ"), ("N", "ℕ"), ("P", "ℙ"),
         ("Q", "ℚ"), ("R", "ℝ"), ("Z", "ℤ")],
    )
    def test_double_struck(self, c: str, expected: str) -> None:
        assert to_style(c, MathStyle.DOUBLE_STRUCK) == expected

    def test_double_struck_regular(self) -> None:
        assert to_style("A", MathStyle.DOUBLE_STRUCK) == chr(0x1D538)
        assert to_style("1", MathStyle.DOUBLE_STRUCK) == chr(0x1D7D9)

    def test_double_struck_greek_and_sum(self) -> None:
        assert to_style("π", MathStyle.DOUBLE_STRUCK) == "ℼ"
        assert to_style("∑", MathStyle.DOUBLE_STRUCK) == "⅀"

    def test_double_struck_italic(self) -> None:
        assert to_style("i", MathStyle.DOUBLE_STRUCK_ITALIC) == "ⅈ"
        assert to_style("D", MathStyle.DOUBLE_STRUCK_ITALIC) == "ⅅ"
        assert to_style("x", MathStyle.DOUBLE_STRUCK_ITALIC) == "x"

    def test_fraktur(self) -> None:
        assert to_style("C", MathStyle.FRAKTUR) == "ℭ"
        assert to_style("p", MathStyle.FRAKTUR) == chr(0x1D52D)

    def test_script(self) -> None:
        assert to_style("B", MathStyle.SCRIPT) == "ℬ"
        assert to_style("o", MathStyle.SCRIPT) == "ℴ"
        assert to_style("a", MathStyle.SCRIPT) == chr(0x1D4B6)


# =============================================================================
# VARIATION SEQUENCES
# =============================================================================


class TestVariationSequences:
    """Chancery и roundhand"""

    def test_chancery(self) -> None:
        expected = chr(0x1D4BB) + VARIATION_SELECTOR_1 + "ℴ" + VARIATION_SELECTOR_1
        assert style_text("fo", MathStyle.CHANCERY) == expected

    def test_roundhand_bold(self) -> None:
        assert to_style("k", MathStyle.ROUNDHAND_BOLD) == chr(0x1D4F4) + VARIATION_SELECTOR_2

    def test_selector_added_to_unmapped(self) -> None:
        assert to_style("1", MathStyle.CHANCERY) == "1" + VARIATION_SELECTOR_1


# =============================================================================
# ARABIC
# =============================================================================


class TestArabic:
    """Арабские математические начертания"""

    def test_initial_beh(self) -> None:
        assert to_style("ب", MathStyle.INITIAL) == chr(0x1EE21)

    def test_looped_alef(self) -> None:
        assert to_style("ا", MathStyle.LOOPED) == chr(0x1EE80)

    def test_double_struck_beh(self) -> None:
        assert to_style("ب", MathStyle.DOUBLE_STRUCK) == chr(0x1EEA1)

    def test_tailed_noon(self) -> None:
        assert to_style("ن", MathStyle.TAILED) == chr(0x1EE4D)

    def test_stretched_feh(self) -> None:
        assert to_style("ف", MathStyle.STRETCHED) == chr(0x1EE70)

    def test_alef_has_no_initial_form(self) -> None:
        assert to_style("ا", MathStyle.INITIAL) == "ا"


# =============================================================================
# API
# =============================================================================


class TestStylingApi:
    """Разбор имён стилей и ошибки"""

    @pytest.mark.parametrize(
        "name, expected",
        [("double-struck", MathStyle.DOUBLE_STRUCK), ("Fraktur", MathStyle.FRAKTUR),
         ("sans_serif_bold", MathStyle.SANS_SERIF_BOLD)],
    )
    def test_from_name(self, name: str, expected: MathStyle) -> None:
        assert MathStyle.from_name(name) == expected

    def test_from_name_unknown(self) -> None:
        assert MathStyle.from_name("gothic") is None

    def test_style_as_string(self) -> None:
        assert to_style("R", "double_struck") == "ℝ"

    def test_multi_char_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_style("ab", MathStyle.SERIF_BOLD)

    def test_unmapped_passthrough(self) -> None:
        assert style_text("a+b", MathStyle.SERIF_BOLD) == chr(0x1D41A) + "+" + chr(0x1D41B)
