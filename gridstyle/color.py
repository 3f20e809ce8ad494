"""Define a color value used to style table borders."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, NamedTuple

from prompt_toolkit.styles import ANSI_COLOR_NAMES, Style, parse_color

if TYPE_CHECKING:
    from prompt_toolkit.styles import Attrs

log = logging.getLogger(__name__)

__all__ = [
    "BLACK",
    "BLUE",
    "CYAN",
    "Color",
    "GREEN",
    "MAGENTA",
    "RED",
    "WHITE",
    "YELLOW",
]

_EMPTY_STYLE = Style([])


@lru_cache
def _normalize(value: str) -> str:
    """Validate a color and return it in a form usable in a style string."""
    color = parse_color(value)
    if color in ("", "default") or color in ANSI_COLOR_NAMES:
        return color
    return f"#{color.lower()}"


class Color(NamedTuple):
    """A foreground and background color pair.

    Each part may be any color understood by :py:mod:`prompt_toolkit` (an ANSI
    color name, a named color or a hexadecimal color) or an empty string if it is
    not set.
    """

    fg: str = ""
    bg: str = ""

    @classmethod
    def parse(cls, fg: str = "", bg: str = "") -> Color:
        """Create a new color, validating each part.

        Args:
            fg: The foreground color
            bg: The background color

        Returns:
            A new color with normalized parts

        Raises:
            ValueError: If either part is not a valid color

        """
        return cls(fg=_normalize(fg), bg=_normalize(bg))

    @classmethod
    def from_style(cls, style: str) -> Color:
        """Create a color from a style string such as ``"fg:red bg:#000000"``."""
        fg = bg = ""
        for part in style.split():
            if part.startswith("fg:"):
                fg = part[3:]
            elif part.startswith("bg:"):
                bg = part[3:]
            else:
                raise ValueError(f"Unsupported color style {part!r}")
        return cls.parse(fg=fg, bg=bg)

    @property
    def style(self) -> str:
        """The color as a :py:mod:`prompt_toolkit` style string."""
        return " ".join(
            f"{prefix}:{value}"
            for prefix, value in (("fg", self.fg), ("bg", self.bg))
            if value
        )

    @property
    def attrs(self) -> Attrs:
        """The :py:class:`Attrs` which this color resolves to."""
        return _EMPTY_STYLE.get_attrs_for_style_str(self.style)

    def combine(self, other: Color) -> Color:
        """Layer another color on top of this one."""
        return Color(fg=other.fg or self.fg, bg=other.bg or self.bg)

    def fragment(self, text: str) -> tuple[str, str]:
        """Return a formatted text fragment of the given text in this color."""
        return (self.style, text)

    def __str__(self) -> str:
        """Represent the color as its style string."""
        return self.style


RED = Color(fg="ansired")
GREEN = Color(fg="ansigreen")
YELLOW = Color(fg="ansiyellow")
BLUE = Color(fg="ansiblue")
MAGENTA = Color(fg="ansimagenta")
CYAN = Color(fg="ansicyan")
WHITE = Color(fg="ansiwhite")
BLACK = Color(fg="ansiblack")
