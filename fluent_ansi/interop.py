# fluent_ansi/interop.py

from typing import List, Optional

from prompt_toolkit.formatted_text import FormattedText
from rich.color import Color as RichColor
from rich.style import Style as RichStyle

from .color import Color, IndexedColor, RGBColor, SimpleColor
from .style import Effect, Style, UnderlineStyle, to_style

# prompt_toolkit names for the 16 basic colors, by ANSI number
PROMPT_TOOLKIT_ANSI_NAMES = [
    'ansiblack', 'ansired', 'ansigreen', 'ansiyellow',
    'ansiblue', 'ansimagenta', 'ansicyan', 'ansigray',
    'ansibrightblack', 'ansibrightred', 'ansibrightgreen', 'ansibrightyellow',
    'ansibrightblue', 'ansibrightmagenta', 'ansibrightcyan', 'ansiwhite',
]

# prompt_toolkit has no dim or overline attribute
PROMPT_TOOLKIT_EFFECTS = {
    Effect.BOLD: 'bold',
    Effect.ITALIC: 'italic',
    Effect.BLINK: 'blink',
    Effect.REVERSE: 'reverse',
    Effect.HIDDEN: 'hidden',
    Effect.STRIKETHROUGH: 'strike',
}

RICH_EFFECTS = {
    Effect.BOLD: 'bold',
    Effect.DIM: 'dim',
    Effect.ITALIC: 'italic',
    Effect.BLINK: 'blink',
    Effect.REVERSE: 'reverse',
    Effect.HIDDEN: 'conceal',
    Effect.STRIKETHROUGH: 'strike',
    Effect.OVERLINE: 'overline',
}

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _ansi_number(color: SimpleColor) -> int:
    return color.basic.value + (8 if color.is_bright else 0)


def xterm_rgb(index: int) -> tuple:
    """
    Return the (r, g, b) value of an xterm 256-color palette entry in the
    6x6x6 cube (16-231) or the grayscale ramp (232-255).
    """
    if 16 <= index <= 231:
        index -= 16
        return (_CUBE_LEVELS[index // 36], _CUBE_LEVELS[(index // 6) % 6], _CUBE_LEVELS[index % 6])
    if 232 <= index <= 255:
        level = 8 + 10 * (index - 232)
        return (level, level, level)
    raise ValueError(f"Palette index {index} has no fixed RGB value")


def _rich_color(color: Optional[Color]) -> Optional[RichColor]:
    if color is None:
        return None
    if isinstance(color, SimpleColor):
        return RichColor.from_ansi(_ansi_number(color))
    if isinstance(color, IndexedColor):
        return RichColor.from_ansi(color.index)
    return RichColor.from_rgb(color.r, color.g, color.b)


def to_rich_style(element) -> RichStyle:
    """
    Express a style element as a rich Style.

    Args:
        element: Style or any element convertible to one

    Returns:
        rich.style.Style with the same colors and attributes
    """
    style = to_style(element)
    attributes = {name: True for effect, name in RICH_EFFECTS.items() if effect in style.effects}
    variant = style.underline_variant
    if variant is UnderlineStyle.DOUBLE:
        attributes['underline2'] = True
    elif variant is not UnderlineStyle.NONE:
        attributes['underline'] = True
    return RichStyle(
        color=_rich_color(style.foreground),
        bgcolor=_rich_color(style.background),
        **attributes
    )


def _prompt_toolkit_color(color: Color) -> str:
    if isinstance(color, SimpleColor):
        return PROMPT_TOOLKIT_ANSI_NAMES[_ansi_number(color)]
    if isinstance(color, IndexedColor):
        if color.index < 16:
            return PROMPT_TOOLKIT_ANSI_NAMES[color.index]
        return '#%02x%02x%02x' % xterm_rgb(color.index)
    if isinstance(color, RGBColor):
        return f'#{color.r:02x}{color.g:02x}{color.b:02x}'
    raise TypeError(f"Expected a color, got {type(color).__name__}")


def to_prompt_toolkit_style(element) -> str:
    """Express a style element as a prompt_toolkit style string."""
    style: Style = to_style(element)
    parts: List[str] = [name for effect, name in PROMPT_TOOLKIT_EFFECTS.items() if effect in style.effects]
    if style.underline_variant is not UnderlineStyle.NONE:
        parts.append('underline')
    if style.foreground is not None:
        parts.append(f'fg:{_prompt_toolkit_color(style.foreground)}')
    if style.background is not None:
        parts.append(f'bg:{_prompt_toolkit_color(style.background)}')
    return ' '.join(parts)


def to_formatted_text(styled) -> FormattedText:
    """Turn a Styled value into prompt_toolkit FormattedText."""
    return FormattedText([(to_prompt_toolkit_style(styled.style), str(styled.content))])
