"""Data models for lines, routes and route patterns."""

from enum import IntEnum
from typing import List, Optional

from pydantic import Field

from ..colors import HexColor
from .shared import MbtaModel, Resource, RouteType


class LineAttributes(MbtaModel):
    """A line: a combination of routes shown to riders as one service."""

    color: HexColor
    text_color: HexColor
    sort_order: int
    short_name: str
    long_name: str


class RouteAttributes(MbtaModel):
    """A path a vehicle travels during service."""

    route_type: RouteType = Field(alias="type")
    short_name: str
    long_name: str
    color: HexColor
    # Legible color for text drawn against ``color``
    text_color: HexColor
    sort_order: int
    fare_class: str
    direction_names: Optional[List[Optional[str]]] = None
    direction_destinations: Optional[List[Optional[str]]] = None
    description: str


class RoutePatternTypicality(IntEnum):
    """How common a route pattern is within its route."""

    UNDEFINED = 0
    TYPICAL = 1
    DEVIATION = 2
    HIGHLY_ATYPICAL = 3
    DIVERSION = 4


class RoutePatternAttributes(MbtaModel):
    """A variation of service run within a single route."""

    direction_id: int
    name: str
    sort_order: int
    time_desc: Optional[str] = None
    typicality: RoutePatternTypicality


Line = Resource[LineAttributes]
Lines = List[Line]

Route = Resource[RouteAttributes]
Routes = List[Route]

RoutePattern = Resource[RoutePatternAttributes]
RoutePatterns = List[RoutePattern]
