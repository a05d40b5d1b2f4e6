"""Colour palettes and text styles, chosen to suit the terminal's colour support."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Optional, Tuple


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named ANSI colour, a 256-colour index or an RGB triple."""

    name: Optional[str] = None
    index: Optional[int] = None
    rgb: Optional[Tuple[int, int, int]] = None

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    CYAN: ClassVar["Color"]

    def __post_init__(self) -> None:
        given = sum(value is not None for value in (self.name, self.index, self.rgb))
        if given != 1:
            raise ValueError("a colour needs exactly one of name, index or rgb")
        if self.index is not None and not 0 <= self.index <= 255:
            raise ValueError(f"colour index out of range: {self.index}")
        if self.rgb is not None and not all(0 <= part <= 255 for part in self.rgb):
            raise ValueError(f"rgb component out of range: {self.rgb}")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        return cls(rgb=(red, green, blue))

    @classmethod
    def indexed(cls, index: int) -> "Color":
        return cls(index=index)


Color.BLACK = Color(name="black")
Color.WHITE = Color(name="white")
Color.RED = Color(name="red")
Color.GREEN = Color(name="green")
Color.YELLOW = Color(name="yellow")
Color.BLUE = Color(name="blue")
Color.CYAN = Color(name="cyan")


@dataclass(frozen=True)
class Style:
    """Foreground, background and weight of a run of text."""

    fg: Optional[Color] = None
    bg: Optional[Color] = None
    bold: bool = False

    def patch(self, fg: Optional[Color] = None, bg: Optional[Color] = None,
              bold: Optional[bool] = None) -> "Style":
        """Return a copy with the given attributes laid over this style."""
        changes = {}
        if fg is not None:
            changes["fg"] = fg
        if bg is not None:
            changes["bg"] = bg
        if bold is not None:
            changes["bold"] = bold
        return replace(self, **changes)


class Palette(Enum):
    """The colour depth the terminal supports."""

    TRUE = "truecolor"
    X256 = "256"
    ANSI = "ansi"

    def bg_style(self) -> Style:
        navy = {
            Palette.TRUE: Color.from_rgb(18, 29, 56),
            Palette.X256: Color.indexed(17),
            Palette.ANSI: Color.BLUE,
        }[self]
        return Style(bg=navy)

    def fg_style(self) -> Style:
        colour = {
            Palette.TRUE: Color.from_rgb(88, 122, 148),
            Palette.X256: Color.indexed(66),
            Palette.ANSI: Color.CYAN,
        }[self]
        return Style(fg=colour)


def detect(environ: Optional[Mapping[str, str]] = None) -> Palette:
    """Pick a palette from COLORTERM and TERM in the environment."""
    env = os.environ if environ is None else environ
    if "truecolor" in env.get("COLORTERM", "").lower():
        return Palette.TRUE
    if "256" in env.get("TERM", ""):
        return Palette.X256
    return Palette.ANSI