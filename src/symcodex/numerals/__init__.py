"""
Numerals — запись чисел в разных системах счисления (roman, greek, kana, ...).
"""

from .systems import (
    FormattedNumber,
    NumeralSystem,
    format_number,
)

__all__ = [
    "NumeralSystem",
    "FormattedNumber",
    "format_number",
]
