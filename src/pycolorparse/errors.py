"""Exceptions thrown by the color parsers."""

from enum import Enum
from typing import Optional

__all__ = ("ParseColorError", "ParseColorErrorKind")


class ParseColorErrorKind(Enum):
    """Enum representing the syntactic class of input that a failed parse
    attempt was dealing with.
    """

    INVALID_RGB = "invalid_rgb"
    INVALID_HEX = "invalid_hex"
    INVALID_ANSI256 = "invalid_ansi256"
    INVALID_NAME = "invalid_name"

    @property
    def description(self) -> str:
        """Short human-readable description of the error kind."""
        return _descriptions[self]


_descriptions = {
    ParseColorErrorKind.INVALID_RGB: "Invalid RGB color",
    ParseColorErrorKind.INVALID_HEX: "Invalid hex color",
    ParseColorErrorKind.INVALID_ANSI256: "Invalid ANSI 256-color code",
    ParseColorErrorKind.INVALID_NAME: "Unknown color name",
}


class ParseColorError(ValueError):
    """Exception thrown when a string specification of a color cannot be
    parsed.

    Attributes:
        kind: the kind of the error
        given: the string that failed to parse
    """

    def __init__(
        self, kind: ParseColorErrorKind, given: str, message: Optional[str] = None
    ):
        self.kind = kind
        self.given = given
        message = message or "{0}: {1!r}".format(kind.description, given)
        super().__init__(message)

    def __reduce__(self):
        return (self.__class__, (self.kind, self.given, str(self)))
