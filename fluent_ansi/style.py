# fluent_ansi/style.py

from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from .color import Color, ColorLike, ColorTarget, to_color
from .definitions import EFFECT_CODES, FMT, RESET, UNDERLINE_CODE, UNDERLINE_TOKENS


class StyleBuilder:
    """
    Fluent styling methods shared by every style element.

    Each method lifts its argument to a partial Style and merges it into
    this element's Style, returning a new value. Subclasses provide
    to_style() and, when the result should not be a plain Style,
    _with_style().
    """

    def to_style(self) -> 'Style':
        # implemented by each element type
        raise NotImplementedError

    def _with_style(self, style: 'Style'):
        return style

    def add(self, *elements):
        """Merge the given style elements, left to right, into this one."""
        style = self.to_style()
        for element in elements:
            style = style.merge(element)
        return self._with_style(style)

    def __add__(self, other):
        return self.add(other)

    def effect(self, effect):
        if not isinstance(effect, (Effect, UnderlineStyle)):
            raise TypeError(f"Expected an Effect or UnderlineStyle, got {type(effect).__name__}")
        if effect is UnderlineStyle.NONE:
            return self.underline_style(effect)
        return self.add(effect)

    def bold(self):
        return self.effect(Effect.BOLD)

    def dim(self):
        return self.effect(Effect.DIM)

    def italic(self):
        return self.effect(Effect.ITALIC)

    def blink(self):
        return self.effect(Effect.BLINK)

    def reverse(self):
        return self.effect(Effect.REVERSE)

    def hidden(self):
        return self.effect(Effect.HIDDEN)

    def strikethrough(self):
        return self.effect(Effect.STRIKETHROUGH)

    def overline(self):
        return self.effect(Effect.OVERLINE)

    def underline_style(self, variant: 'UnderlineStyle'):
        """
        Set the underline variant, replacing any previous one.

        NONE is rejected: merging never clears, so use
        set_underline_style(UnderlineStyle.NONE) or unset() instead.
        """
        if not isinstance(variant, UnderlineStyle):
            raise TypeError(f"Expected an UnderlineStyle, got {type(variant).__name__}")
        if variant is UnderlineStyle.NONE:
            raise ValueError("UnderlineStyle.NONE cannot be merged; use set_underline_style() to clear")
        return self.add(variant)

    def underline(self):
        return self.underline_style(UnderlineStyle.SINGLE)

    def double_underline(self):
        return self.underline_style(UnderlineStyle.DOUBLE)

    def curly_underline(self):
        return self.underline_style(UnderlineStyle.CURLY)

    def dotted_underline(self):
        return self.underline_style(UnderlineStyle.DOTTED)

    def dashed_underline(self):
        return self.underline_style(UnderlineStyle.DASHED)

    def fg(self, color: ColorLike):
        return self.add(TargetedColor(color, ColorTarget.FOREGROUND))

    def bg(self, color: ColorLike):
        return self.add(TargetedColor(color, ColorTarget.BACKGROUND))

    def applied_to(self, content):
        """Wrap content so it renders with this style and a trailing reset."""
        from .styled import Styled
        return Styled(content, self.to_style())

    def __str__(self) -> str:
        return self.to_style().serialize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class StyleSet(StyleBuilder):
    """Getters and clearing setters, available on Style and Styled only."""

    def set_effect(self, effect, value: bool = True):
        """
        Turn an effect on or off.

        Args:
            effect: Effect or UnderlineStyle to change
            value: True to set it, False to clear it

        Returns:
            New value of the same kind as self
        """
        style = self.to_style()
        if isinstance(effect, UnderlineStyle):
            if value:
                return self.set_underline_style(effect)
            if style.underline_variant is effect:
                return self.set_underline_style(UnderlineStyle.NONE)
            return self._with_style(style)
        if not isinstance(effect, Effect):
            raise TypeError(f"Expected an Effect or UnderlineStyle, got {type(effect).__name__}")
        effects = style.effects | {effect} if value else style.effects - {effect}
        return self._with_style(replace(style, effects=effects))

    def get_effect(self, effect) -> bool:
        style = self.to_style()
        if isinstance(effect, UnderlineStyle):
            return style.underline_variant is effect
        return effect in style.effects

    def get_effects(self) -> Tuple['Effect', ...]:
        """Return the active effects in declaration order."""
        effects = self.to_style().effects
        return tuple(e for e in Effect if e in effects)

    def set_underline_style(self, variant: 'UnderlineStyle'):
        if not isinstance(variant, UnderlineStyle):
            raise TypeError(f"Expected an UnderlineStyle, got {type(variant).__name__}")
        return self._with_style(replace(self.to_style(), underline_variant=variant))

    def get_underline_style(self) -> 'UnderlineStyle':
        return self.to_style().underline_variant

    def set_color(self, target: ColorTarget, color: Optional[ColorLike]):
        """Set or clear (with None) the color of a plane."""
        if not isinstance(target, ColorTarget):
            raise TypeError(f"Expected a ColorTarget, got {type(target).__name__}")
        color = to_color(color) if color is not None else None
        return self._with_style(replace(self.to_style(), **{target.value: color}))

    def get_color(self, target: ColorTarget) -> Optional[Color]:
        return getattr(self.to_style(), target.value)

    def unset(self, attribute):
        """Clear an Effect, an UnderlineStyle or the color of a ColorTarget."""
        if isinstance(attribute, ColorTarget):
            return self.set_color(attribute, None)
        return self.set_effect(attribute, False)


class Effect(StyleBuilder, Enum):
    """Independent on/off text attributes, valued by their SGR code."""
    BOLD = EFFECT_CODES['BOLD']
    DIM = EFFECT_CODES['DIM']
    ITALIC = EFFECT_CODES['ITALIC']
    BLINK = EFFECT_CODES['BLINK']
    REVERSE = EFFECT_CODES['REVERSE']
    HIDDEN = EFFECT_CODES['HIDDEN']
    STRIKETHROUGH = EFFECT_CODES['STRIKETHROUGH']
    OVERLINE = EFFECT_CODES['OVERLINE']

    def to_style(self) -> 'Style':
        return Style(effects=frozenset({self}))

    def to_escape_parameters(self) -> List[int]:
        return [self.value]

    def __str__(self) -> str:
        return self.to_style().serialize()


class UnderlineStyle(StyleBuilder, Enum):
    """
    Mutually exclusive underline variants, valued by their parameter token.

    The non-single variants use the colon sub-parameter form (4:2 .. 4:5),
    which is emitted as one token. NONE emits nothing.
    """
    NONE = UNDERLINE_TOKENS['NONE']
    SINGLE = UNDERLINE_TOKENS['SINGLE']
    DOUBLE = UNDERLINE_TOKENS['DOUBLE']
    CURLY = UNDERLINE_TOKENS['CURLY']
    DOTTED = UNDERLINE_TOKENS['DOTTED']
    DASHED = UNDERLINE_TOKENS['DASHED']

    def to_style(self) -> 'Style':
        return Style(underline_variant=self)

    def __str__(self) -> str:
        return self.to_style().serialize()


@dataclass(frozen=True)
class TargetedColor(StyleBuilder):
    """A color bound to the foreground or background plane."""
    color: Color
    target: ColorTarget

    def __post_init__(self):
        object.__setattr__(self, 'color', to_color(self.color))
        if not isinstance(self.target, ColorTarget):
            raise TypeError(f"Expected a ColorTarget, got {type(self.target).__name__}")

    def to_style(self) -> 'Style':
        return Style(**{self.target.value: self.color})

    def to_escape_parameters(self) -> List[int]:
        return self.color.to_escape_parameters(self.target)


@dataclass(frozen=True)
class Style(StyleSet):
    """
    The canonical aggregate of at most one color per plane, a set of
    effects and one underline variant.

    Styles are immutable; merge() and every fluent method return a new
    Style. Merging unions the effects, and for each color plane and the
    underline the right-hand side wins whenever it specifies a value.
    """
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    effects: FrozenSet[Effect] = frozenset()
    underline_variant: UnderlineStyle = UnderlineStyle.NONE

    def __post_init__(self):
        for plane in ('foreground', 'background'):
            value = getattr(self, plane)
            if value is not None:
                object.__setattr__(self, plane, to_color(value))
        effects = frozenset(self.effects)
        for effect in effects:
            if not isinstance(effect, Effect):
                raise TypeError(f"Expected an Effect, got {type(effect).__name__}")
        object.__setattr__(self, 'effects', effects)
        if not isinstance(self.underline_variant, UnderlineStyle):
            raise TypeError(f"Expected an UnderlineStyle, got {type(self.underline_variant).__name__}")

    def to_style(self) -> 'Style':
        return self

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_STYLE

    def merge(self, other) -> 'Style':
        """
        Combine with another style element; other wins on conflicts.

        Args:
            other: Style or any element convertible to one

        Returns:
            New merged Style
        """
        other = to_style(other)
        underline_variant = other.underline_variant
        if underline_variant is UnderlineStyle.NONE:
            underline_variant = self.underline_variant
        return Style(
            foreground=other.foreground if other.foreground is not None else self.foreground,
            background=other.background if other.background is not None else self.background,
            effects=self.effects | other.effects,
            underline_variant=underline_variant,
        )

    def parameters(self) -> List[str]:
        """
        Return the ordered parameter tokens of the escape sequence.

        Effects and the underline come first, ordered by code, then the
        foreground and background color parameters.
        """
        coded = [(effect.value, str(effect.value)) for effect in self.effects]
        if self.underline_variant is not UnderlineStyle.NONE:
            coded.append((UNDERLINE_CODE, self.underline_variant.value))
        params = [token for _, token in sorted(coded)]
        for target in ColorTarget:
            color = getattr(self, target.value)
            if color is not None:
                params.extend(str(code) for code in color.to_escape_parameters(target))
        return params

    def serialize(self) -> str:
        """Return the escape sequence for this style, or '' when empty."""
        params = self.parameters()
        if not params:
            return ''
        return FMT(';'.join(params))


EMPTY_STYLE = Style()


class _Reset(StyleBuilder):
    """Renders the reset sequence; lifts to the empty Style."""

    def to_style(self) -> Style:
        return EMPTY_STYLE

    def __str__(self) -> str:
        return RESET

    def __repr__(self) -> str:
        return 'Reset'


Reset = _Reset()


def to_style(element) -> Style:
    """Lift a style element (Style, Effect, UnderlineStyle, TargetedColor, Reset) to a Style."""
    if isinstance(element, StyleBuilder):
        return element.to_style()
    raise TypeError(f"Expected a style element, got {type(element).__name__}")
