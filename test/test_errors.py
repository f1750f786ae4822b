import pickle

from pycolorparse.errors import ParseColorError, ParseColorErrorKind


def test_parse_color_error():
    error = ParseColorError(ParseColorErrorKind.INVALID_HEX, "#GGG")
    assert isinstance(error, ValueError)
    assert error.kind is ParseColorErrorKind.INVALID_HEX
    assert error.given == "#GGG"
    assert str(error) == "Invalid hex color: '#GGG'"


def test_parse_color_error_messages():
    def message(kind):
        return str(ParseColorError(kind, "x"))

    assert message(ParseColorErrorKind.INVALID_RGB) == "Invalid RGB color: 'x'"
    assert message(ParseColorErrorKind.INVALID_ANSI256) == (
        "Invalid ANSI 256-color code: 'x'"
    )
    assert message(ParseColorErrorKind.INVALID_NAME) == "Unknown color name: 'x'"

    error = ParseColorError(ParseColorErrorKind.INVALID_NAME, "x", "no such color")
    assert str(error) == "no such color"


def test_parse_color_error_can_be_pickled():
    error = ParseColorError(ParseColorErrorKind.INVALID_RGB, "1,2")
    copy = pickle.loads(pickle.dumps(error))
    assert copy.kind is ParseColorErrorKind.INVALID_RGB
    assert copy.given == "1,2"
    assert str(copy) == str(error)
