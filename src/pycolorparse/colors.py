"""Color values produced by the parsers."""

import re

from dataclasses import dataclass
from typing import Tuple, Union

__all__ = ("Ansi256", "Color", "Hex", "Rgb")


_HEX_PATTERN = re.compile(r"#(?:[0-9A-F]{3}|[0-9A-F]{6})")


def _is_byte(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


@dataclass(frozen=True)
class Rgb:
    """A color given by its red, green and blue channels, each between 0 and
    255, inclusive.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self):
        if not all(_is_byte(c) for c in (self.red, self.green, self.blue)):
            raise ValueError(
                "RGB values must be 0-255, got ({0!r}, {1!r}, {2!r})".format(
                    self.red, self.green, self.blue
                )
            )

    def as_tuple(self) -> Tuple[int, int, int]:
        """Returns the color as a plain RGB triplet."""
        return (self.red, self.green, self.blue)


@dataclass(frozen=True)
class Hex:
    """A color given by its normalized hexadecimal notation.

    The text is always upper-case and has the form ``#RGB`` or ``#RRGGBB``;
    short forms are kept as they are and are not expanded.
    """

    text: str

    def __post_init__(self):
        if not isinstance(self.text, str) or not _HEX_PATTERN.fullmatch(self.text):
            raise ValueError(
                "Hex color must be #RGB or #RRGGBB in upper case, "
                "got {0!r}".format(self.text)
            )


@dataclass(frozen=True)
class Ansi256:
    """A color given by its index in the ANSI 256-color palette."""

    code: int

    def __post_init__(self):
        if not _is_byte(self.code):
            raise ValueError(
                "256-color index must be 0-255, got {0!r}".format(self.code)
            )


Color = Union[Rgb, Hex, Ansi256]
"""Type specification for the color values that the parsers may return"""
