"""Plot stops, vehicles and shapes onto a raster tile map.

Requires the ``map`` extra (staticmap + Pillow):

    pip install "mbta-v3[map]"
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union
import logging

from .colors import Color, to_css
from .models import Shape, Stop, Vehicle

logger = logging.getLogger(__name__)

ColorLike = Union[Color, str]

# Tile server used by staticmap when no url_template is given
DEFAULT_TILE_URL = "https://tile.openstreetmap.org/{z}/{x}/{y}.png"


class PlotError(Exception):
    """Plotting failed: bad color, unusable icon or missing map backend."""


def _staticmap():
    try:
        import staticmap  # Lazy import
    except ImportError as e:
        logger.error("staticmap not installed. Run: pip install 'mbta-v3[map]'")
        raise PlotError("staticmap required for map rendering") from e
    return staticmap


def _css(color: ColorLike) -> str:
    try:
        return to_css(color)
    except ValueError as e:
        raise PlotError(f"color conversion failed during parsing: {e}") from e


@dataclass(frozen=True)
class PlotStyle:
    """Colors and widths for plotting.

    Args:
        inner: (color, width) of the line or circle radius
        border: Optional (color, width) of an outline drawn underneath
    """

    inner: Tuple[ColorLike, float]
    border: Optional[Tuple[ColorLike, float]] = None


@dataclass(frozen=True)
class IconStyle:
    """Icon image and its whole-pixel offsets from the plotted coordinate."""

    icon: Union[str, Path]
    x_offset: int = 0
    y_offset: int = 0


def new_map(width: int, height: int, padding: int = 0, url_template: str = DEFAULT_TILE_URL):
    """Create an empty staticmap.StaticMap of the given pixel size."""
    sm = _staticmap()
    return sm.StaticMap(width, height, padding_x=padding, padding_y=padding, url_template=url_template)


def plot_stop(static_map, stop: Stop, style: PlotStyle) -> None:
    """Draw a stop as a circle, with its border circle underneath if styled."""
    sm = _staticmap()
    attrs = stop.attributes
    coord = (attrs.longitude, attrs.latitude)
    inner_color, inner_width = style.inner

    if style.border is not None:
        border_color, border_width = style.border
        static_map.add_marker(sm.CircleMarker(coord, _css(border_color), border_width + inner_width))
    static_map.add_marker(sm.CircleMarker(coord, _css(inner_color), inner_width))
    logger.debug(f"Plotted stop {stop.id} at {attrs.latitude:.5f},{attrs.longitude:.5f}")


def plot_shape(static_map, shape: Shape, style: PlotStyle) -> None:
    """Draw a shape's decoded polyline, with its border line underneath if styled."""
    sm = _staticmap()
    coords = [(p.longitude, p.latitude) for p in shape.attributes.polyline.points]
    if len(coords) < 2:
        logger.warning(f"Shape {shape.id} has {len(coords)} points; nothing to draw")
        return
    inner_color, inner_width = style.inner

    if style.border is not None:
        border_color, border_width = style.border
        static_map.add_line(sm.Line(coords, _css(border_color), border_width + inner_width))
    static_map.add_line(sm.Line(coords, _css(inner_color), inner_width))
    logger.debug(f"Plotted shape {shape.id} with {len(coords)} points")


def plot_vehicle(static_map, vehicle: Vehicle, style: IconStyle) -> None:
    """Draw a vehicle as an icon marker."""
    sm = _staticmap()
    attrs = vehicle.attributes
    coord = (attrs.longitude, attrs.latitude)
    # Pillow only pastes at integer positions
    offset_x, offset_y = int(round(style.x_offset)), int(round(style.y_offset))
    try:
        icon = sm.IconMarker(coord, str(style.icon), offset_x, offset_y)
    except OSError as e:
        raise PlotError(f"failed to load icon {style.icon}: {e}") from e
    static_map.add_marker(icon)
    logger.debug(f"Plotted vehicle {vehicle.id} at {attrs.latitude:.5f},{attrs.longitude:.5f}")


def save_map(static_map, path: Union[str, Path], zoom: Optional[int] = None,
             center: Optional[Tuple[float, float]] = None) -> None:
    """Render the map (fetching tiles) and save it as an image.

    Args:
        static_map: Map to render
        path: Output file; the format follows the extension
        zoom: Tile zoom level (fitted to the plotted features if None)
        center: (latitude, longitude) center (fitted if None)
    """
    lon_lat = (center[1], center[0]) if center is not None else None
    image = static_map.render(zoom=zoom, center=lon_lat)
    image.save(str(path))
    logger.info(f"Saved map to {path}")
