# fluent_ansi/styled.py

from dataclasses import dataclass, field, replace
from typing import Any

from .definitions import RESET
from .style import Style, StyleSet, to_style


@dataclass(frozen=True)
class Styled(StyleSet):
    """
    Pairs opaque content with a Style.

    The content is only ever asked for its str(); rendering happens on
    demand and is a pure function of the content and the style. Fluent
    methods return a new Styled holding the same content.
    """
    content: Any
    style: Style = field(default_factory=Style)

    def __post_init__(self):
        object.__setattr__(self, 'style', to_style(self.style))

    def to_style(self) -> Style:
        return self.style

    def _with_style(self, style: Style) -> 'Styled':
        return replace(self, style=style)

    def with_style(self, style) -> 'Styled':
        """Return a copy holding the given style element instead of the current style."""
        return replace(self, style=to_style(style))

    def with_content(self, content) -> 'Styled':
        return Styled(content, self.style)

    def render(self) -> str:
        """
        Render the content wrapped in the style's escape sequence and a reset.

        Content under an empty style renders as its own text, without any
        escape sequence.
        """
        text = str(self.content)
        if self.style.is_empty:
            return text
        return f"{self.style.serialize()}{text}{RESET}"

    def __str__(self) -> str:
        return self.render()
