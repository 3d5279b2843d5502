"""Typed models for V3 API resources."""

from typing import Dict, Type

from .alert import (
    Activity,
    ActivePeriod,
    Alert,
    AlertAttributes,
    Alerts,
    Cause,
    Effect,
    InformedEntity,
    Lifecycle,
)
from .datetimes import MbtaDate, MbtaDateTime, parse_date, parse_datetime
from .facility import (
    Facilities,
    Facility,
    FacilityAttributes,
    FacilityType,
    LiveFacilities,
    LiveFacility,
    LiveFacilityAttributes,
    LiveFacilityProperty,
)
from .geometry import Coordinate, EncodedPolyline, Polyline, decode_polyline
from .route import (
    Line,
    LineAttributes,
    Lines,
    Route,
    RouteAttributes,
    RoutePattern,
    RoutePatternAttributes,
    RoutePatterns,
    RoutePatternTypicality,
    Routes,
)
from .schedule import (
    Day,
    Prediction,
    PredictionAttributes,
    Predictions,
    Schedule,
    ScheduleAttributes,
    ScheduleRelationship,
    Schedules,
    ScheduleTypicality,
    Service,
    ServiceAttributes,
    Services,
    VehiclePresence,
)
from .shared import (
    APIVersion,
    Links,
    MbtaModel,
    Relationship,
    RelationshipAtom,
    Resource,
    Response,
    RouteType,
    WheelchairAccessible,
)
from .stop import (
    BikesAllowed,
    CurrentStatus,
    LocationType,
    OccupancyStatus,
    Shape,
    ShapeAttributes,
    Shapes,
    Stop,
    StopAttributes,
    Stops,
    Trip,
    TripAttributes,
    Trips,
    Vehicle,
    VehicleAttributes,
    Vehicles,
)

# JSON:API ``type`` -> attributes model, used to type side-loaded resources
RESOURCE_TYPES: Dict[str, Type[MbtaModel]] = {
    "alert": AlertAttributes,
    "facility": FacilityAttributes,
    "line": LineAttributes,
    "live_facility": LiveFacilityAttributes,
    "prediction": PredictionAttributes,
    "route": RouteAttributes,
    "route_pattern": RoutePatternAttributes,
    "schedule": ScheduleAttributes,
    "service": ServiceAttributes,
    "shape": ShapeAttributes,
    "stop": StopAttributes,
    "trip": TripAttributes,
    "vehicle": VehicleAttributes,
}
