from typing import Annotated, Any, NamedTuple, Union
import re

from pydantic import BeforeValidator, PlainSerializer

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


class Color(NamedTuple):
    """An RGB color as the API encodes it: six hex digits, e.g. ``00843D``."""

    r: int
    g: int
    b: int

    @property
    def hex_code(self) -> str:
        """Upper-case hex digits without a leading ``#`` (the API's form)."""
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def css(self) -> str:
        return f"#{self.hex_code}"


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def parse_hex_color(value: Any) -> Color:
    """Decode ``"RRGGBB"`` (optionally ``#``-prefixed, any case) into a Color.

    Surrounding whitespace is rejected like any other non-hex character.

    Raises:
        ValueError: If value is not a string of exactly six hex digits
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise ValueError(f"hex color must be a string, got {type(value).__name__}")
    m = _HEX_RE.fullmatch(value)
    if m is None:
        raise ValueError(f"invalid hex color {value!r}: expected six hex digits like 'FFFFFF'")
    digits = m.group(1)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_css(color: Union[Color, str]) -> str:
    """Normalize a Color or hex string to ``#RRGGBB``."""
    return parse_hex_color(color).css


# Model field type for colors such as Route.color and Line.text_color
HexColor = Annotated[
    Color,
    BeforeValidator(parse_hex_color),
    PlainSerializer(lambda c: c.hex_code, return_type=str, when_used="json"),
]
