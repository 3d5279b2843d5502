import pytest

from mbta_v3.colors import BLACK, WHITE, Color, parse_hex_color, to_css


def test_white():
    assert parse_hex_color("FFFFFF") == WHITE


@pytest.mark.parametrize(
    "text,expected",
    [
        ("000000", BLACK),
        ("DA291C", Color(218, 41, 28)),
        ("00843d", Color(0, 132, 61)),
        ("#ED8B00", Color(237, 139, 0)),
    ],
)
def test_parse(text, expected):
    assert parse_hex_color(text) == expected


@pytest.mark.parametrize("text", ["", "FFF", "FFFFFFF", "GGGGGG", "#", "##FFFFFF", "rgb(0,0,0)", " 003DA5", "003DA5\n"])
def test_parse_rejects(text):
    with pytest.raises(ValueError, match="invalid hex color"):
        parse_hex_color(text)


def test_parse_rejects_non_string():
    with pytest.raises(ValueError, match="must be a string"):
        parse_hex_color(0xFFFFFF)


def test_hex_code_is_upper_case():
    assert parse_hex_color("00843d").hex_code == "00843D"
    assert Color(1, 2, 3).css == "#010203"


def test_to_css():
    assert to_css(WHITE) == "#FFFFFF"
    assert to_css("da291c") == "#DA291C"
    with pytest.raises(ValueError):
        to_css("red")
