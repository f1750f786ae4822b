from dataclasses import FrozenInstanceError

from pytest import mark, raises

from pycolorparse.colors import Ansi256, Hex, Rgb


def test_rgb():
    color = Rgb(255, 128, 0)
    assert (color.red, color.green, color.blue) == (255, 128, 0)
    assert color.as_tuple() == (255, 128, 0)
    assert color == Rgb(255, 128, 0)
    assert hash(color) == hash(Rgb(255, 128, 0))


@mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5), (True, 0, 0)])
def test_rgb_range(channels):
    with raises(ValueError, match="RGB values must be 0-255"):
        Rgb(*channels)


@mark.parametrize("text", ["#ABC", "#89B4FA", "#000"])
def test_hex(text):
    assert Hex(text).text == text


@mark.parametrize("text", ["#abc", "ABC", "#ABCD", "#GGG", "", "#89B4FA\n"])
def test_hex_invalid(text):
    with raises(ValueError, match="Hex color must be"):
        Hex(text)


def test_ansi256():
    assert Ansi256(0).code == 0
    assert Ansi256(255).code == 255

    with raises(ValueError, match="256-color index must be 0-255"):
        Ansi256(256)
    with raises(ValueError, match="256-color index must be 0-255"):
        Ansi256(-1)


def test_colors_are_immutable():
    with raises(FrozenInstanceError):
        Rgb(1, 2, 3).red = 4
    with raises(FrozenInstanceError):
        Hex("#ABC").text = "#DEF"
    with raises(FrozenInstanceError):
        Ansi256(1).code = 2
