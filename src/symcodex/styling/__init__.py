"""
Styling — математические начертания (bold, fraktur, double-struck и т.д.).
"""

from .mappings import (
    VARIATION_SELECTOR_1,
    VARIATION_SELECTOR_2,
    MathStyle,
    style_text,
    to_style,
)

__all__ = [
    "MathStyle",
    "to_style",
    "style_text",
    "VARIATION_SELECTOR_1",
    "VARIATION_SELECTOR_2",
]
