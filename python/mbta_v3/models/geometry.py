"""Coordinates and encoded polylines."""

from typing import Annotated, Any, NamedTuple, Tuple
import logging

import polyline as polyline_codec
from pydantic import BeforeValidator, PlainSerializer

logger = logging.getLogger(__name__)

# Shapes are encoded with 5 decimal places
POLYLINE_PRECISION = 5

# Every character of an encoded polyline is a 5-bit chunk offset by 63
_MIN_CHAR = 63
_MAX_CHAR = 63 + 0x3F
_CONTINUATION = 0x20


class Coordinate(NamedTuple):
    """A WGS-84 point, latitude first."""

    latitude: float
    longitude: float


class Polyline(NamedTuple):
    """An encoded polyline together with its decoded points."""

    encoded: str
    points: Tuple[Coordinate, ...]


def _check_encoding(encoded: str) -> None:
    """Reject text the polyline codec would silently misread."""
    values = 0
    in_value = False
    for pos, ch in enumerate(encoded):
        code = ord(ch)
        if code < _MIN_CHAR or code > _MAX_CHAR:
            raise ValueError(f"invalid polyline: illegal character {ch!r} at position {pos}")
        in_value = bool((code - _MIN_CHAR) & _CONTINUATION)
        if not in_value:
            values += 1
    if in_value:
        raise ValueError("invalid polyline: truncated value at end of input")
    if values % 2:
        raise ValueError("invalid polyline: odd number of values (latitude without longitude)")


def decode_polyline(value: Any) -> Polyline:
    """Decode Encoded Polyline Algorithm Format text into ordered coordinates.

    Args:
        value: Encoded polyline string

    Returns:
        Polyline holding the original text and its (latitude, longitude) points

    Raises:
        ValueError: If the text is not a valid encoded polyline
    """
    if isinstance(value, Polyline):
        return value
    if not isinstance(value, str):
        raise ValueError(f"polyline must be a string, got {type(value).__name__}")
    _check_encoding(value)
    try:
        points = polyline_codec.decode(value, POLYLINE_PRECISION)
    except (IndexError, ValueError) as e:
        raise ValueError(f"invalid polyline: {e}") from e
    logger.debug(f"Decoded polyline into {len(points)} points")
    return Polyline(value, tuple(Coordinate(lat, lon) for lat, lon in points))


EncodedPolyline = Annotated[
    Polyline,
    BeforeValidator(decode_polyline),
    PlainSerializer(lambda p: p.encoded, return_type=str, when_used="json"),
]
