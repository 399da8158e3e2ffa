# test_interop.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fluent_ansi import Color, Effect, Style, UnderlineStyle
from fluent_ansi.interop import (to_formatted_text, to_prompt_toolkit_style, to_rich_style,
                                 xterm_rgb)


class TestRichStyle:
    """Test conversion to rich styles."""

    def test_effects(self):
        rich_style = to_rich_style(Style().bold().hidden().strikethrough())
        assert rich_style.bold is True
        assert rich_style.conceal is True
        assert rich_style.strike is True
        assert rich_style.italic is None

    def test_basic_and_bright_colors(self):
        rich_style = to_rich_style(Style().fg(Color.RED).bg(Color.BRIGHT_WHITE))
        assert rich_style.color.number == 1
        assert rich_style.bgcolor.number == 15

    def test_extended_colors(self):
        rich_style = to_rich_style(Style().fg(Color.indexed(208)).bg(Color.rgb(1, 2, 3)))
        assert rich_style.color.number == 208
        assert tuple(rich_style.bgcolor.triplet) == (1, 2, 3)

    def test_underline_variants(self):
        assert to_rich_style(UnderlineStyle.DOUBLE).underline2 is True
        assert to_rich_style(UnderlineStyle.CURLY).underline is True
        assert to_rich_style(Style()).underline is None

    def test_element_is_accepted(self):
        assert to_rich_style(Effect.ITALIC).italic is True


class TestPromptToolkitStyle:
    """Test conversion to prompt_toolkit style strings."""

    def test_combined(self):
        stl = Style().bold().underline().fg(Color.RED).bg(Color.rgb(0, 128, 255))
        assert to_prompt_toolkit_style(stl) == "bold underline fg:ansired bg:#0080ff"

    def test_empty(self):
        assert to_prompt_toolkit_style(Style()) == ""

    @pytest.mark.parametrize("color, expected", [
        (Color.WHITE, "fg:ansigray"),
        (Color.BRIGHT_WHITE, "fg:ansiwhite"),
        (Color.BRIGHT_BLACK, "fg:ansibrightblack"),
        (Color.indexed(9), "fg:ansibrightred"),
        (Color.indexed(16), "fg:#000000"),
        (Color.indexed(196), "fg:#ff0000"),
        (Color.indexed(231), "fg:#ffffff"),
        (Color.indexed(232), "fg:#080808"),
        (Color.indexed(255), "fg:#eeeeee"),
    ])
    def test_colors(self, color, expected):
        assert to_prompt_toolkit_style(color.for_fg()) == expected

    def test_xterm_rgb_rejects_basic_range(self):
        with pytest.raises(ValueError):
            xterm_rgb(3)

    def test_formatted_text(self):
        formatted = to_formatted_text(Effect.BOLD.applied_to("hi"))
        assert list(formatted) == [("bold", "hi")]
