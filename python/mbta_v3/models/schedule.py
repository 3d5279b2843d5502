"""Data models for schedules, predictions and services."""

from enum import Enum, IntEnum
from typing import List, Optional

from .datetimes import MbtaDate, MbtaDateTime
from .shared import MbtaModel, Resource


class VehiclePresence(IntEnum):
    """How a vehicle picks up or drops off at a scheduled stop."""

    REGULARLY_SCHEDULED = 0
    NOT_AVAILABLE = 1
    MUST_PHONE_AGENCY = 2
    MUST_COORDINATE_WITH_DRIVER = 3


class ScheduleAttributes(MbtaModel):
    """Scheduled arrival and departure of a trip at one stop.

    ``arrival_time`` is None at the first stop of a trip and
    ``departure_time`` is None at the last one.
    """

    # True if the times are exact, False if they are estimates
    timepoint: bool
    stop_sequence: int
    stop_headsign: Optional[str] = None
    pickup_type: VehiclePresence
    drop_off_type: VehiclePresence
    direction_id: int
    departure_time: Optional[MbtaDateTime] = None
    arrival_time: Optional[MbtaDateTime] = None


class ScheduleRelationship(str, Enum):
    """How a predicted stop relates to the schedule."""

    ADDED = "ADDED"
    CANCELLED = "CANCELLED"
    NO_DATA = "NO_DATA"
    SKIPPED = "SKIPPED"
    UNSCHEDULED = "UNSCHEDULED"


class PredictionAttributes(MbtaModel):
    """Predicted arrival and departure of a trip at one stop."""

    stop_sequence: Optional[int] = None
    status: Optional[str] = None
    direction_id: int
    departure_time: Optional[MbtaDateTime] = None
    arrival_time: Optional[MbtaDateTime] = None
    # None when the predicted stop was scheduled
    schedule_relationship: Optional[ScheduleRelationship] = None


class ScheduleTypicality(IntEnum):
    UNDEFINED = 0
    TYPICAL = 1
    EXTRA = 2
    REDUCED = 3
    DISRUPTED = 4
    ATYPICAL = 5


class Day(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class ServiceAttributes(MbtaModel):
    """The set of dates on which trips run."""

    valid_days: List[Day]
    start_date: MbtaDate
    end_date: MbtaDate
    schedule_typicality: ScheduleTypicality
    schedule_type: Optional[str] = None
    schedule_name: Optional[str] = None
    removed_dates: List[MbtaDate]
    removed_dates_notes: List[Optional[str]]
    added_dates: List[MbtaDate]
    added_dates_notes: List[Optional[str]]
    rating_start_date: Optional[MbtaDate] = None
    rating_end_date: Optional[MbtaDate] = None
    rating_description: Optional[str] = None
    description: Optional[str] = None


Schedule = Resource[ScheduleAttributes]
Schedules = List[Schedule]

Prediction = Resource[PredictionAttributes]
Predictions = List[Prediction]

Service = Resource[ServiceAttributes]
Services = List[Service]
