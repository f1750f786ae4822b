"""
=============
pycolorparse
=============
------------------------------------------------------
Parsers for hex, RGB and ANSI 256-color specifications
------------------------------------------------------
"""

from .colors import Ansi256, Color, Hex, Rgb
from .errors import ParseColorError, ParseColorErrorKind
from .parser import parse_color, parse_hex, parse_other, parse_rgb
from .spaces import ColorSpace, ColorSpaceLike
from .version import __author__, __email__, __version_info__, __version__

__all__ = (
    "__author__",
    "__email__",
    "__version_info__",
    "__version__",
    "Ansi256",
    "Color",
    "ColorSpace",
    "ColorSpaceLike",
    "Hex",
    "ParseColorError",
    "ParseColorErrorKind",
    "Rgb",
    "parse_color",
    "parse_hex",
    "parse_other",
    "parse_rgb",
)
