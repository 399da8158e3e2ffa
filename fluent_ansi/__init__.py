# __init__.py

from .color import (BasicColor, Color, ColorTarget, IndexedColor, RGBColor,
                    SimpleColor, to_color)
from .definitions import RESET
from .style import (Effect, Reset, Style, StyleBuilder, StyleSet, TargetedColor,
                    UnderlineStyle, to_style)
from .styled import Styled
from .logger import Logger

__all__ = [
    "BasicColor", "Color", "ColorTarget", "IndexedColor", "RGBColor", "SimpleColor",
    "to_color", "RESET", "Effect", "Reset", "Style", "StyleBuilder", "StyleSet",
    "TargetedColor", "UnderlineStyle", "to_style", "Styled", "Logger",
]
