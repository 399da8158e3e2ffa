# cli.py

import argparse
from typing import List, Optional

from rich.console import Console

from .color import BasicColor, Color
from .interop import to_rich_style
from .logger import Logger
from .style import Effect, Style, UnderlineStyle

UNDERLINE_CHOICES = [variant.name.lower() for variant in UnderlineStyle if variant is not UnderlineStyle.NONE]

def parse_color(spec: str) -> Color:
    """
    Parse a command line color.

    Accepts a basic color name ('red'), its bright form ('bright-red'),
    a palette index ('208'), a hex value ('#ff8800') or 'r,g,b'.
    """
    value = spec.strip().lower()
    try:
        if value.startswith('#'):
            return Color.hex(value)
        if ',' in value:
            channels = [int(part) for part in value.split(',')]
            if len(channels) != 3:
                raise ValueError(f"expected 3 channels, got {len(channels)}")
            return Color.rgb(*channels)
        if value.isdigit():
            return Color.indexed(int(value))
        bright = value.startswith(('bright-', 'bright_'))
        name = value[len('bright-'):] if bright else value
        basic = BasicColor[name.upper()]
        return basic.bright() if bright else basic.to_color()
    except (KeyError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"invalid color '{spec}': {e}") from e

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='fluent-ansi',
        description='Print text wrapped in ANSI styling')
    parser.add_argument('text', nargs='+',
        help='Text to style')
    parser.add_argument('--fg', type=parse_color,
        help='Foreground color (name, bright-<name>, 0-255, #rrggbb or r,g,b)')
    parser.add_argument('--bg', type=parse_color,
        help='Background color (same forms as --fg)')
    for effect in Effect:
        parser.add_argument(f'--{effect.name.lower()}',
            action='store_true',
            help=f'Apply the {effect.name.lower()} effect')
    parser.add_argument('--underline',
        choices=UNDERLINE_CHOICES,
        help='Underline variant')
    parser.add_argument('--show-codes',
        action='store_true',
        help='Print the escaped representation instead of styled output')
    parser.add_argument('--via-rich',
        action='store_true',
        help='Print through a rich Console')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    return parser

def build_style(args: argparse.Namespace) -> Style:
    """Merge the style elements selected on the command line."""
    style = Style()
    if args.fg is not None:
        style = style.fg(args.fg)
    if args.bg is not None:
        style = style.bg(args.bg)
    for effect in Effect:
        if getattr(args, effect.name.lower()):
            style = style.effect(effect)
    if args.underline:
        style = style.underline_style(UnderlineStyle[args.underline.upper()])
    return style

def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logger = Logger(__name__, args.enable_logging, args.log_file)

    style = build_style(args)
    logger.debug(f"Built style: {style!r}")
    logger.debug(f"Escape parameters: {style.parameters()}")

    styled = style.applied_to(' '.join(args.text))
    if args.show_codes:
        print(repr(styled.render()))
    elif args.via_rich:
        console = Console(force_terminal=True, color_system="truecolor", highlight=False)
        console.print(str(styled.content), style=to_rich_style(style), markup=False, emoji=False)
    else:
        print(styled)

if __name__ == "__main__":
    main()
