# fluent_ansi/color.py

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from .definitions import BASIC_BASE, BRIGHT_OFFSET, EXTENDED_SELECTOR, INDEXED_MODE, RGB_MODE


class BasicColor(Enum):
    """The eight named terminal colors, valued by their palette offset."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    def to_color(self) -> 'SimpleColor':
        return SimpleColor(self)

    def bright(self) -> 'SimpleColor':
        return SimpleColor(self, is_bright=True)

    def for_target(self, target: 'ColorTarget'):
        return self.to_color().for_target(target)

    def for_fg(self):
        return self.to_color().for_fg()

    def for_bg(self):
        return self.to_color().for_bg()


class ColorTarget(Enum):
    """The rendering plane a color is applied to."""
    FOREGROUND = 'foreground'
    BACKGROUND = 'background'


def _check_byte(name: str, value) -> None:
    # bool is an int subclass but never a meaningful channel value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Color:
    """
    Base of the three color variants: SimpleColor, IndexedColor and RGBColor.

    A color on its own is not a style; bind it to a plane with for_fg(),
    for_bg() or for_target() to get a TargetedColor.
    """

    def to_escape_parameters(self, target: ColorTarget) -> List[int]:
        """
        Return the SGR parameters selecting this color on the given plane.

        Args:
            target: Foreground or background plane

        Returns:
            Ordered list of integer parameters
        """
        # implemented by each variant
        raise NotImplementedError

    def for_target(self, target: ColorTarget):
        from .style import TargetedColor
        return TargetedColor(self, target)

    def for_fg(self):
        return self.for_target(ColorTarget.FOREGROUND)

    def for_bg(self):
        return self.for_target(ColorTarget.BACKGROUND)

    @staticmethod
    def indexed(index: int) -> 'IndexedColor':
        return IndexedColor(index)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> 'RGBColor':
        return RGBColor(r, g, b)

    @staticmethod
    def hex(value: str) -> 'RGBColor':
        """Build an RGBColor from a '#rrggbb' (or 'rrggbb') string."""
        s = value.strip()
        if s.startswith('#'):
            s = s[1:]
        if len(s) != 6:
            raise ValueError(f"Invalid hex color '{value}'")
        try:
            r, g, b = (int(s[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError as e:
            raise ValueError(f"Invalid hex color '{value}'") from e
        return RGBColor(r, g, b)


@dataclass(frozen=True)
class SimpleColor(Color):
    """One of the 16 basic colors: a BasicColor, optionally bright."""
    basic: BasicColor
    is_bright: bool = False

    def __post_init__(self):
        if not isinstance(self.basic, BasicColor):
            raise TypeError(f"basic must be a BasicColor, got {type(self.basic).__name__}")

    def bright(self) -> 'SimpleColor':
        return SimpleColor(self.basic, is_bright=True)

    def to_escape_parameters(self, target: ColorTarget) -> List[int]:
        code = BASIC_BASE[target.name] + self.basic.value
        if self.is_bright:
            code += BRIGHT_OFFSET
        return [code]


@dataclass(frozen=True)
class IndexedColor(Color):
    """An entry of the 256-color palette."""
    index: int

    def __post_init__(self):
        _check_byte('index', self.index)

    def to_escape_parameters(self, target: ColorTarget) -> List[int]:
        return [EXTENDED_SELECTOR[target.name], INDEXED_MODE, self.index]


@dataclass(frozen=True)
class RGBColor(Color):
    """A 24-bit truecolor value."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ('r', 'g', 'b'):
            _check_byte(name, getattr(self, name))

    def to_escape_parameters(self, target: ColorTarget) -> List[int]:
        return [EXTENDED_SELECTOR[target.name], RGB_MODE, self.r, self.g, self.b]


# Named constants: Color.RED, Color.BRIGHT_RED, ...
for _basic in BasicColor:
    setattr(Color, _basic.name, SimpleColor(_basic))
    setattr(Color, f'BRIGHT_{_basic.name}', SimpleColor(_basic, is_bright=True))
del _basic


ColorLike = Union[Color, BasicColor]


def to_color(value: ColorLike) -> Color:
    """Normalize a color-like value into one of the Color variants."""
    if isinstance(value, BasicColor):
        return value.to_color()
    if isinstance(value, Color) and type(value) is not Color:
        return value
    raise TypeError(f"Expected a color, got {type(value).__name__}")
