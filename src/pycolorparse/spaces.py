"""Enum corresponding to the syntactic classes of color specifications
supported by the parser.
"""

from enum import Enum
from typing import Union

__all__ = ("ColorSpace", "ColorSpaceLike")


class ColorSpace(Enum):
    """Enum representing the syntactic class of a color specification, which
    decides the parser that handles it.
    """

    RGB = "rgb"
    HEX = "hex"
    OTHER = "other"

    @staticmethod
    def detect_from_string(string: str) -> "ColorSpace":
        """Proposes a color space to use for the given color specification.

        Leading and trailing whitespace is ignored.

        Parameters:
            string: the color specification

        Returns:
            the proposed color space for the specification
        """
        string = string.strip()

        if string.startswith("#"):
            return ColorSpace.HEX
        elif string.startswith("rgb("):
            return ColorSpace.RGB
        else:
            return ColorSpace.OTHER


ColorSpaceLike = Union[ColorSpace, str]
"""Type specification for objects that can be cast into a ColorSpace"""
