import pytest

from cubscene.colors import Color, parse_color
from cubscene.errors import SceneError


def test_parse_simple_value():
    assert parse_color(" 220,100,0\n", "floor") == Color(220, 100, 0)


def test_parse_without_newline_and_many_spaces():
    assert parse_color("     10,20,30", "ceiling") == Color(10, 20, 30)


def test_trailing_comma_is_accepted():
    assert parse_color(" 1,2,3,\n", "floor") == Color(1, 2, 3)


def test_limits_are_accepted():
    assert parse_color(" 0,255,000", "floor") == Color(0, 255, 0)


def test_packed_pure_channels():
    assert Color(255, 0, 0).packed() == 0xFF0000
    assert Color(0, 255, 0).packed() == 0x00FF00
    assert Color(0, 0, 255).packed() == 0x0000FF


@pytest.mark.parametrize("red,green,blue", [(0, 0, 0), (12, 34, 56), (255, 128, 1)])
def test_packed_round_trip(red, green, blue):
    value = Color(red, green, blue).packed()
    assert (value >> 16) & 0xFF == red
    assert (value >> 8) & 0xFF == green
    assert value & 0xFF == blue
    assert value >> 24 == 0


@pytest.mark.parametrize("text", ["", "   ", "\n", "   \n"])
def test_missing_colors(text):
    with pytest.raises(SceneError) as info:
        parse_color(text, "floor")
    assert str(info.value) == "Colors missing on floor"


@pytest.mark.parametrize(
    "text",
    [
        " 1,2",
        " 1,2,3,4",
        " 1000,0,0",
        " a,b,c",
        " 1,,2",
        " 1, 2,3",
        " 1,2,3 ",
        " 1,2,3,,",
        " -1,2,3",
    ],
)
def test_bad_format(text):
    with pytest.raises(SceneError) as info:
        parse_color(text, "ceiling")
    assert str(info.value) == "Bad format of ceiling"


@pytest.mark.parametrize("text", [" 256,0,0", " 0,999,0\n", " 0,0,300"])
def test_channel_too_large(text):
    with pytest.raises(SceneError) as info:
        parse_color(text, "floor")
    assert str(info.value) == "Bad color of ceiling or floor"


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(0, 256, 0)