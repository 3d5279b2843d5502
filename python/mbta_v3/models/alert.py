"""Data models for alerts."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .datetimes import MbtaDateTime
from .shared import MbtaModel, Resource, RouteType


class Lifecycle(str, Enum):
    """Whether an alert is new or old, in effect or upcoming."""

    NEW = "NEW"
    ONGOING = "ONGOING"
    ONGOING_UPCOMING = "ONGOING_UPCOMING"
    UPCOMING = "UPCOMING"


class Effect(str, Enum):
    """The effect of a problem on the affected entity."""

    ACCESS_ISSUE = "ACCESS_ISSUE"
    ADDITIONAL_SERVICE = "ADDITIONAL_SERVICE"
    AMBER_ALERT = "AMBER_ALERT"
    BIKE_ISSUE = "BIKE_ISSUE"
    CANCELLATION = "CANCELLATION"
    DELAY = "DELAY"
    DETOUR = "DETOUR"
    DOCK_CLOSURE = "DOCK_CLOSURE"
    DOCK_ISSUE = "DOCK_ISSUE"
    ELEVATOR_CLOSURE = "ELEVATOR_CLOSURE"
    ESCALATOR_CLOSURE = "ESCALATOR_CLOSURE"
    EXTRA_SERVICE = "EXTRA_SERVICE"
    FACILITY_ISSUE = "FACILITY_ISSUE"
    MODIFIED_SERVICE = "MODIFIED_SERVICE"
    NO_SERVICE = "NO_SERVICE"
    OTHER_EFFECT = "OTHER_EFFECT"
    PARKING_CLOSURE = "PARKING_CLOSURE"
    PARKING_ISSUE = "PARKING_ISSUE"
    POLICY_CHANGE = "POLICY_CHANGE"
    SCHEDULE_CHANGE = "SCHEDULE_CHANGE"
    SERVICE_CHANGE = "SERVICE_CHANGE"
    SHUTTLE = "SHUTTLE"
    SNOW_ROUTE = "SNOW_ROUTE"
    STATION_CLOSURE = "STATION_CLOSURE"
    STATION_ISSUE = "STATION_ISSUE"
    STOP_CLOSURE = "STOP_CLOSURE"
    STOP_MOVE = "STOP_MOVE"
    STOP_MOVED = "STOP_MOVED"
    SUMMARY = "SUMMARY"
    SUSPENSION = "SUSPENSION"
    TRACK_CHANGE = "TRACK_CHANGE"
    UNKNOWN_EFFECT = "UNKNOWN_EFFECT"


class Cause(str, Enum):
    """What is causing an alert."""

    ACCIDENT = "ACCIDENT"
    AMTRAK = "AMTRAK"
    AN_EARLIER_MECHANICAL_PROBLEM = "AN_EARLIER_MECHANICAL_PROBLEM"
    AN_EARLIER_SIGNAL_PROBLEM = "AN_EARLIER_SIGNAL_PROBLEM"
    AUTOS_IMPEDING_SERVICE = "AUTOS_IMPEDING_SERVICE"
    COAST_GUARD_RESTRICTION = "COAST_GUARD_RESTRICTION"
    CONGESTION = "CONGESTION"
    CONSTRUCTION = "CONSTRUCTION"
    CROSSING_MALFUNCTION = "CROSSING_MALFUNCTION"
    DEMONSTRATION = "DEMONSTRATION"
    DISABLED_BUS = "DISABLED_BUS"
    DISABLED_TRAIN = "DISABLED_TRAIN"
    DRAWBRIDGE_BEING_RAISED = "DRAWBRIDGE_BEING_RAISED"
    ELECTRICAL_WORK = "ELECTRICAL_WORK"
    FIRE = "FIRE"
    FOG = "FOG"
    FREIGHT_TRAIN_INTERFERENCE = "FREIGHT_TRAIN_INTERFERENCE"
    HAZMAT_CONDITION = "HAZMAT_CONDITION"
    HEAVY_RIDERSHIP = "HEAVY_RIDERSHIP"
    HIGH_WINDS = "HIGH_WINDS"
    HOLIDAY = "HOLIDAY"
    HURRICANE = "HURRICANE"
    ICE_IN_HARBOR = "ICE_IN_HARBOR"
    MAINTENANCE = "MAINTENANCE"
    MECHANICAL_PROBLEM = "MECHANICAL_PROBLEM"
    MEDICAL_EMERGENCY = "MEDICAL_EMERGENCY"
    PARADE = "PARADE"
    POLICE_ACTION = "POLICE_ACTION"
    POWER_PROBLEM = "POWER_PROBLEM"
    SEVERE_WEATHER = "SEVERE_WEATHER"
    SIGNAL_PROBLEM = "SIGNAL_PROBLEM"
    SLIPPERY_RAIL = "SLIPPERY_RAIL"
    SNOW = "SNOW"
    SPECIAL_EVENT = "SPECIAL_EVENT"
    SPEED_RESTRICTION = "SPEED_RESTRICTION"
    SWITCH_PROBLEM = "SWITCH_PROBLEM"
    TIE_REPLACEMENT = "TIE_REPLACEMENT"
    TRACK_PROBLEM = "TRACK_PROBLEM"
    TRACK_WORK = "TRACK_WORK"
    TRAFFIC = "TRAFFIC"
    UNRULY_PASSENGER = "UNRULY_PASSENGER"
    UNKNOWN_CAUSE = "UNKNOWN_CAUSE"
    WEATHER = "WEATHER"


class Activity(str, Enum):
    """A rider activity affected by an alert."""

    BOARD = "BOARD"
    BRINGING_BIKE = "BRINGING_BIKE"
    EXIT = "EXIT"
    PARK_CAR = "PARK_CAR"
    RIDE = "RIDE"
    STORE_BIKE = "STORE_BIKE"
    USING_ESCALATOR = "USING_ESCALATOR"
    USING_WHEELCHAIR = "USING_WHEELCHAIR"


class ActivePeriod(MbtaModel):
    """When an alert is in effect; ``end`` is None for open-ended alerts."""

    start: MbtaDateTime
    end: Optional[MbtaDateTime] = None


class InformedEntity(MbtaModel):
    """An entity affected by an alert.

    The affected entity is the intersection of the set fields, not the
    union: with both ``stop`` and ``route`` set the alert only affects that
    route at that stop.
    """

    trip: Optional[str] = None
    stop: Optional[str] = None
    route_type: Optional[RouteType] = None
    route: Optional[str] = None
    facility: Optional[str] = None
    direction_id: Optional[int] = None
    activities: List[Activity]


class AlertAttributes(MbtaModel):
    """Attributes of an active or upcoming system alert."""

    url: Optional[str] = None
    created_at: MbtaDateTime
    updated_at: MbtaDateTime
    timeframe: Optional[str] = None
    header: str
    short_header: str
    # 0 (least severe) to 10 (most severe)
    severity: int = Field(ge=0, le=10)
    service_effect: str
    lifecycle: Lifecycle
    effect: Effect
    description: Optional[str] = None
    cause: Cause
    banner: Optional[str] = None
    active_period: List[ActivePeriod]
    informed_entity: List[InformedEntity]


Alert = Resource[AlertAttributes]
Alerts = List[Alert]
