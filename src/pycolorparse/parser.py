"""Parsers that turn string specifications of colors into color values.

The following formats are recognized:

    - **RGB**: three channel values, optionally wrapped in ``rgb(...)`` and
      separated by commas, slashes or whitespace (e.g., ``rgb(255, 0, 0)``,
      ``255/0/0``). Each channel is a decimal integer, a hexadecimal integer
      with an ``0x`` prefix, or a percentage (e.g., ``rgb(100% 50% 0%)``).

    - **Hex**: ``#RGB`` or ``#RRGGBB`` (e.g., ``#89b4fa``).

    - **ANSI 256**: a single palette index in decimal or with an ``0x``
      prefix (e.g., ``137`` or ``0x89``).

Anything else is treated as a color name. There is no color name table, so
names are always rejected.
"""

import logging
import re

from math import floor, isnan
from string import hexdigits
from typing import Callable, Dict, List, Optional

from .colors import Ansi256, Color, Hex, Rgb
from .errors import ParseColorError, ParseColorErrorKind
from .spaces import ColorSpace, ColorSpaceLike

__all__ = ("parse_color", "parse_hex", "parse_other", "parse_rgb")


log = logging.getLogger("pycolorparse.parser")

RGB_PREFIX = "rgb("
RGB_SUFFIX = ")"
HEX_PREFIX = "#"
HEX_NUMBER_PREFIX = "0x"
SEPARATORS = ",/"

_separator_table = str.maketrans(SEPARATORS, " " * len(SEPARATORS))
_hex_digit_set = frozenset(hexdigits)

_decimal_number = re.compile(r"\+?[0-9]+")
_hexadecimal_number = re.compile(r"\+?[0-9A-Fa-f]+")
_float_number = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _normalize(string: str) -> str:
    """Replaces all separator characters in the given string with spaces."""
    return string.translate(_separator_table)


def _tokenize(string: str) -> List[str]:
    return _normalize(string).split()


def _is_hex_digits(string: str) -> bool:
    return all(char in _hex_digit_set for char in string)


def _parse_number(token: str) -> Optional[int]:
    """Parses a single unsigned byte from a token, either in decimal or in
    hexadecimal format. Tokens starting with ``0x`` are treated as
    hexadecimal.

    Returns:
        the parsed value or ``None`` if the token is not a number or if it
        does not fit into a single byte
    """
    if token.startswith(HEX_NUMBER_PREFIX):
        digits = token[len(HEX_NUMBER_PREFIX) :]
        base, pattern = 16, _hexadecimal_number
    else:
        digits = token
        base, pattern = 10, _decimal_number

    if not pattern.fullmatch(digits):
        return None

    value = int(digits, base)
    return value if value <= 255 else None


def _parse_percent_or_255(token: str) -> Optional[int]:
    """Parses a single channel value from a token. Percentages are scaled to
    the 0-255 range and clamped; everything else is handed over to
    `_parse_number()`.
    """
    if not token.endswith("%"):
        return _parse_number(token)

    number = token[:-1]
    if not _float_number.fullmatch(number):
        return None

    # rounds half away from zero; out-of-range percentages saturate
    value = float(number) * 255 / 100
    if isnan(value) or value <= 0:
        return 0
    elif value >= 255:
        return 255
    else:
        return int(floor(value + 0.5))


def parse_rgb(string: str) -> Color:
    """Parses a string specification of an RGB color.

    The specification may be wrapped in ``rgb(...)``. The components inside
    may be separated by commas, slashes or whitespace, and each of them must
    be a decimal number, a hexadecimal number with an ``0x`` prefix, or a
    percentage.

    Returns:
        the parsed color as an `Rgb` instance

    Raises:
        ParseColorError: if the string does not contain exactly three valid
            components
    """
    components = string
    trimmed = string.strip()
    if trimmed.startswith(RGB_PREFIX) and trimmed.endswith(RGB_SUFFIX):
        components = trimmed[len(RGB_PREFIX) : -len(RGB_SUFFIX)]

    tokens = _tokenize(components)
    if len(tokens) != 3:
        raise ParseColorError(ParseColorErrorKind.INVALID_RGB, string)

    values = [_parse_percent_or_255(token) for token in tokens]
    if any(value is None or not 0 <= value <= 255 for value in values):
        raise ParseColorError(ParseColorErrorKind.INVALID_RGB, string)

    return Rgb(*values)


def parse_hex(string: str) -> Color:
    """Parses a string specification of a color in ``#RGB`` or ``#RRGGBB``
    format.

    The short form is not expanded; the result is the input converted to
    upper case.

    Raises:
        ParseColorError: if the string is not a valid hex color
    """
    if not string.startswith(HEX_PREFIX) or not _is_hex_digits(string[1:]):
        raise ParseColorError(ParseColorErrorKind.INVALID_HEX, string)

    if len(string) not in (4, 7):
        raise ParseColorError(ParseColorErrorKind.INVALID_HEX, string)

    return Hex(string.upper())


def parse_other(string: str) -> Color:
    """Parses a string specification of a color that is neither wrapped in
    ``rgb(...)`` nor starts with ``#``.

    A single component is treated as an ANSI 256-color palette index, three
    components are treated as an RGB color.

    Raises:
        ParseColorError: if the string is not a valid color. Single components
            consisting of hexadecimal digits only are reported as invalid
            palette indices, other single components are reported as
            unknown color names.
    """
    normalized = _normalize(string)
    tokens = normalized.split()

    if len(tokens) == 1:
        value = _parse_number(tokens[0])
        if value is not None:
            return Ansi256(value)
        elif _is_hex_digits(normalized):
            raise ParseColorError(ParseColorErrorKind.INVALID_ANSI256, normalized)
        else:
            raise ParseColorError(ParseColorErrorKind.INVALID_NAME, normalized)

    elif len(tokens) == 3:
        return parse_rgb(normalized)

    elif "," in string:
        raise ParseColorError(ParseColorErrorKind.INVALID_RGB, normalized)

    else:
        raise ParseColorError(ParseColorErrorKind.INVALID_NAME, normalized)


_parsers: Dict[ColorSpace, Callable[[str], Color]] = {
    ColorSpace.RGB: parse_rgb,
    ColorSpace.HEX: parse_hex,
    ColorSpace.OTHER: parse_other,
}


def parse_color(string: str, space: Optional[ColorSpaceLike] = None) -> Color:
    """Parses a string specification of a color.

    Leading and trailing whitespace is stripped.

    Parameters:
        string: the color specification
        space: the color space to parse the specification in; `None` means
            autodetection from the leading characters of the specification

    Returns:
        the parsed color

    Raises:
        ParseColorError: if the string specification cannot be parsed
    """
    string = string.strip()

    if space is None:
        space = ColorSpace.detect_from_string(string)
    space = ColorSpace(space)

    log.debug("Parsing {0!r} as {1} color".format(string, space.value))
    return _parsers[space](string)
