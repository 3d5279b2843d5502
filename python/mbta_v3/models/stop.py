"""Data models for stops, trips, shapes and vehicles."""

from enum import Enum, IntEnum
from typing import List, Optional

from .datetimes import MbtaDateTime
from .geometry import Coordinate, EncodedPolyline
from .shared import MbtaModel, Resource, RouteType, WheelchairAccessible


class LocationType(IntEnum):
    STOP = 0
    STATION = 1
    ENTRANCE_EXIT = 2
    GENERIC_NODE = 3


class StopAttributes(MbtaModel):
    """A physical location where transit can pick up or drop off passengers."""

    wheelchair_boarding: WheelchairAccessible
    vehicle_type: Optional[RouteType] = None
    platform_name: Optional[str] = None
    platform_code: Optional[str] = None
    on_street: Optional[str] = None
    name: str
    municipality: Optional[str] = None
    longitude: float
    latitude: float
    description: Optional[str] = None
    at_street: Optional[str] = None
    address: Optional[str] = None
    location_type: LocationType

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class BikesAllowed(IntEnum):
    NO_INFO = 0
    ALLOWED = 1
    NOT_ALLOWED = 2


class TripAttributes(MbtaModel):
    """The journey of a particular vehicle through a given set of stops."""

    wheelchair_accessible: WheelchairAccessible
    # Rider-facing trip name, e.g. a commuter rail train number
    name: str
    headsign: str
    direction_id: int
    block_id: str
    bikes_allowed: BikesAllowed


class ShapeAttributes(MbtaModel):
    """The path vehicles travel on a trip, as an encoded polyline."""

    polyline: EncodedPolyline

    @property
    def points(self):
        return self.polyline.points


class OccupancyStatus(str, Enum):
    """Degree of passenger occupancy (GTFS-realtime values)."""

    EMPTY = "EMPTY"
    MANY_SEATS_AVAILABLE = "MANY_SEATS_AVAILABLE"
    FEW_SEATS_AVAILABLE = "FEW_SEATS_AVAILABLE"
    STANDING_ROOM_ONLY = "STANDING_ROOM_ONLY"
    CRUSHED_STANDING_ROOM_ONLY = "CRUSHED_STANDING_ROOM_ONLY"
    FULL = "FULL"
    NOT_ACCEPTING_PASSENGERS = "NOT_ACCEPTING_PASSENGERS"
    NO_DATA_AVAILABLE = "NO_DATA_AVAILABLE"
    NOT_BOARDABLE = "NOT_BOARDABLE"


class CurrentStatus(str, Enum):
    """Status of a vehicle relative to its next stop."""

    INCOMING_AT = "INCOMING_AT"
    STOPPED_AT = "STOPPED_AT"
    IN_TRANSIT_TO = "IN_TRANSIT_TO"


class VehicleAttributes(MbtaModel):
    """Current state of a vehicle on a trip."""

    updated_at: MbtaDateTime
    # Meters per second
    speed: Optional[float] = None
    occupancy_status: Optional[OccupancyStatus] = None
    longitude: float
    latitude: float
    label: str
    direction_id: Optional[int] = None
    current_stop_sequence: Optional[int] = None
    current_status: CurrentStatus
    # Degrees clockwise from true north
    bearing: Optional[int] = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


Stop = Resource[StopAttributes]
Stops = List[Stop]

Trip = Resource[TripAttributes]
Trips = List[Trip]

Shape = Resource[ShapeAttributes]
Shapes = List[Shape]

Vehicle = Resource[VehicleAttributes]
Vehicles = List[Vehicle]
