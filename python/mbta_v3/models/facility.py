"""Data models for facilities and their live status."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from .datetimes import MbtaDateTime
from .shared import MbtaModel, Resource


class FacilityType(str, Enum):
    BIKE_STORAGE = "BIKE_STORAGE"
    BRIDGE_PLATE = "BRIDGE_PLATE"
    ELECTRIC_CAR_CHARGERS = "ELECTRIC_CAR_CHARGERS"
    ELEVATED_SUBPLATFORM = "ELEVATED_SUBPLATFORM"
    ELEVATOR = "ELEVATOR"
    ESCALATOR = "ESCALATOR"
    FARE_MEDIA_ASSISTANCE_FACILITY = "FARE_MEDIA_ASSISTANCE_FACILITY"
    FARE_MEDIA_ASSISTANT = "FARE_MEDIA_ASSISTANT"
    FARE_VENDING_MACHINE = "FARE_VENDING_MACHINE"
    FARE_VENDING_RETAILER = "FARE_VENDING_RETAILER"
    FULLY_ELEVATED_PLATFORM = "FULLY_ELEVATED_PLATFORM"
    OTHER = "OTHER"
    PARKING_AREA = "PARKING_AREA"
    PARKING_MEDIA = "PARKING_MEDIA"
    PICK_DROP = "PICK_DROP"
    PORTABLE_BOARDING_LIFT = "PORTABLE_BOARDING_LIFT"
    RAMP = "RAMP"
    TAXI_STAND = "TAXI_STAND"
    TICKET_WINDOW = "TICKET_WINDOW"


class FacilityAttributes(MbtaModel):
    """An amenity at a stop such as an elevator, escalator, parking lot or bike storage."""

    facility_type: Optional[FacilityType] = Field(default=None, alias="type")
    short_name: Optional[str] = None
    # Free-form name/value pairs; values are strings or numbers
    properties: List[Dict[str, Any]] = Field(default_factory=list)
    long_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class LiveFacilityProperty(MbtaModel):
    name: str
    value: Union[int, float, str, None]


class LiveFacilityAttributes(MbtaModel):
    """Live data about a facility, e.g. free parking spaces."""

    updated_at: MbtaDateTime
    properties: List[LiveFacilityProperty]


Facility = Resource[FacilityAttributes]
Facilities = List[Facility]

LiveFacility = Resource[LiveFacilityAttributes]
LiveFacilities = List[LiveFacility]
