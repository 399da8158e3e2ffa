# fluent_ansi/definitions.py

from typing import Dict

ESC = '\033'
FMT = lambda x: f'{ESC}[{x}m'  # Core formatting utility

RESET = FMT('0')

# Plane selectors
BASIC_BASE = {
    'FOREGROUND': 30,
    'BACKGROUND': 40,
}
BRIGHT_OFFSET = 60
EXTENDED_SELECTOR = {
    'FOREGROUND': 38,
    'BACKGROUND': 48,
}
INDEXED_MODE = 5
RGB_MODE = 2

EFFECT_CODES: Dict[str, int] = {
    'BOLD': 1,
    'DIM': 2,
    'ITALIC': 3,
    'BLINK': 5,
    'REVERSE': 7,
    'HIDDEN': 8,
    'STRIKETHROUGH': 9,
    'OVERLINE': 53,
}

UNDERLINE_CODE = 4
UNDERLINE_TOKENS: Dict[str, str] = {
    'NONE': '',
    'SINGLE': f'{UNDERLINE_CODE}',
    'DOUBLE': f'{UNDERLINE_CODE}:2',
    'CURLY': f'{UNDERLINE_CODE}:3',
    'DOTTED': f'{UNDERLINE_CODE}:4',
    'DASHED': f'{UNDERLINE_CODE}:5',
}
