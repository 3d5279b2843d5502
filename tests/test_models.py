"""
Decode the recorded API responses and check the typed models.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, List

import pytest
from pydantic import ValidationError

from conftest import load_fixture, single, to_body
from mbta_v3.colors import Color, WHITE
from mbta_v3.errors import DecodeError
from mbta_v3.models import (
    AlertAttributes,
    CurrentStatus,
    Day,
    Effect,
    FacilityAttributes,
    FacilityType,
    LineAttributes,
    LiveFacilityAttributes,
    LocationType,
    OccupancyStatus,
    PredictionAttributes,
    Resource,
    RouteAttributes,
    RoutePatternAttributes,
    RoutePatternTypicality,
    RouteType,
    ScheduleAttributes,
    ScheduleRelationship,
    ServiceAttributes,
    ShapeAttributes,
    StopAttributes,
    TripAttributes,
    VehicleAttributes,
    VehiclePresence,
    WheelchairAccessible,
)
from mbta_v3.parsing import decode_response

EDT = timezone(timedelta(hours=-4))

FIXTURE_TYPES = [
    ("alerts", AlertAttributes),
    ("facilities", FacilityAttributes),
    ("lines", LineAttributes),
    ("live_facilities", LiveFacilityAttributes),
    ("predictions", PredictionAttributes),
    ("routes", RouteAttributes),
    ("route_patterns", RoutePatternAttributes),
    ("schedules", ScheduleAttributes),
    ("services", ServiceAttributes),
    ("shapes", ShapeAttributes),
    ("stops", StopAttributes),
    ("trips", TripAttributes),
    ("vehicles", VehicleAttributes),
]


def decode_list(name: str, attributes: Any, payload=None):
    payload = payload if payload is not None else load_fixture(name)
    return decode_response(to_body(payload), List[Resource[attributes]])


def _drop_nulls(value):
    # Absent optional fields and explicit nulls decode the same way
    if isinstance(value, dict):
        return {k: _drop_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_nulls(v) for v in value]
    return value


@pytest.mark.parametrize("name,attributes", FIXTURE_TYPES)
def test_fixture_round_trip(name, attributes):
    payload = load_fixture(name)
    response = decode_list(name, attributes, payload)

    assert len(response.data) == len(payload["data"])
    assert response.jsonapi.version == "1.0"
    for resource, raw in zip(response.data, payload["data"]):
        assert resource.id == raw["id"]
        assert resource.resource_type == raw["type"]
        dumped = resource.attributes.model_dump(mode="json", by_alias=True)
        # Unknown attributes are dropped; every known one comes back unchanged
        expected = {k: raw["attributes"].get(k) for k in dumped}
        assert _drop_nulls(dumped) == _drop_nulls(expected)


def test_alert_fields():
    alerts = decode_list("alerts", AlertAttributes).data
    first = alerts[0].attributes

    assert first.effect is Effect.SUSPENSION
    assert first.severity == 7
    assert first.created_at == datetime(2022, 8, 5, 10, 12, 44, tzinfo=EDT)
    assert first.active_period[0].end == datetime(2022, 9, 18, 20, 59, tzinfo=EDT)
    assert first.informed_entity[0].route_type is RouteType.HEAVY_RAIL
    assert first.informed_entity[0].trip is None
    assert first.informed_entity[1].direction_id == 0
    assert not hasattr(first, "duration_certainty")

    assert alerts[1].attributes.active_period[0].end is None
    assert alerts[2].attributes.active_period[0].end is None
    assert alerts[2].related_id("facility") == "804"
    assert alerts[0].related_id("facility") is None


def test_route_colors_and_types():
    routes = decode_list("routes", RouteAttributes).data

    red = routes[0].attributes
    assert red.color == Color(0xDA, 0x29, 0x1C)
    assert red.text_color == WHITE
    assert red.route_type is RouteType.HEAVY_RAIL
    assert routes[1].attributes.route_type is RouteType.BUS
    assert routes[1].attributes.text_color == Color(0, 0, 0)
    assert routes[2].attributes.direction_names == ["Outbound", None]
    assert routes[0].related_id("line") == "line-Red"


def test_route_pattern_typicality():
    patterns = decode_list("route_patterns", RoutePatternAttributes).data
    assert patterns[0].attributes.typicality is RoutePatternTypicality.TYPICAL
    assert patterns[1].attributes.typicality is RoutePatternTypicality.HIGHLY_ATYPICAL
    assert patterns[1].related_id("representative_trip") == "52461327"


def test_stop_and_vehicle_positions():
    stops = decode_list("stops", StopAttributes).data
    station = stops[0].attributes
    assert station.location_type is LocationType.STATION
    assert station.wheelchair_boarding is WheelchairAccessible.ACCESSIBLE
    assert station.coordinate == (42.352271, -71.055242)
    assert stops[1].related_id("parent_station") == "place-sstat"
    assert stops[0].related_id("parent_station") is None

    vehicles = decode_list("vehicles", VehicleAttributes).data
    assert vehicles[0].attributes.bearing == 325
    assert vehicles[0].attributes.current_status is CurrentStatus.IN_TRANSIT_TO
    assert vehicles[1].attributes.bearing is None
    assert vehicles[1].attributes.occupancy_status is OccupancyStatus.MANY_SEATS_AVAILABLE
    assert vehicles[1].attributes.speed == pytest.approx(6.7)


def test_schedule_open_ended_times():
    schedules = decode_list("schedules", ScheduleAttributes).data
    first, last = schedules[0].attributes, schedules[1].attributes

    assert first.timepoint is True
    assert first.arrival_time is None
    assert first.departure_time == datetime(2022, 11, 2, 8, 15, tzinfo=EDT)
    assert first.drop_off_type is VehiclePresence.NOT_AVAILABLE
    assert last.departure_time is None
    assert schedules[0].related_ids("prediction") == []


def test_prediction_relationship():
    predictions = decode_list("predictions", PredictionAttributes).data
    assert predictions[0].attributes.schedule_relationship is None
    assert predictions[1].attributes.schedule_relationship is ScheduleRelationship.ADDED
    assert predictions[1].attributes.stop_sequence is None
    assert predictions[0].related_id("vehicle") == "R-5477B0B2"
    assert predictions[1].related_id("vehicle") is None


def test_service_calendar():
    service = decode_list("services", ServiceAttributes).data[0].attributes
    assert service.valid_days == [Day.MONDAY, Day.TUESDAY, Day.WEDNESDAY, Day.THURSDAY, Day.FRIDAY]
    assert service.start_date == date(2022, 8, 29)
    assert service.removed_dates[1] == date(2022, 11, 11)
    assert service.removed_dates_notes[2] is None
    assert service.added_dates == []


def test_facility_properties():
    facilities = decode_list("facilities", FacilityAttributes).data
    garage = facilities[0].attributes
    assert garage.facility_type is FacilityType.PARKING_AREA
    assert garage.properties[0] == {"name": "capacity", "value": 2733}
    assert facilities[1].attributes.latitude is None

    live = decode_list("live_facilities", LiveFacilityAttributes).data[0].attributes
    values = {p.name: p.value for p in live.properties}
    assert values["utilization"] == 1294
    assert values["occupancy-rate"] == pytest.approx(47.3)
    assert values["status"] == "open"
    assert values["note"] is None


def test_shape_points():
    shapes = decode_list("shapes", ShapeAttributes).data
    points = shapes[0].attributes.points
    flat = [value for point in points for value in point]
    assert flat == pytest.approx([38.5, -120.2, 40.7, -120.95, 43.252, -126.453])
    assert shapes[0].attributes.polyline.encoded == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
    assert len(shapes[1].attributes.points) == 1


def test_single_resource_envelope():
    response = decode_response(to_body(single("routes", 1)), Resource[RouteAttributes])
    assert response.data.id == "77"
    assert response.data.attributes.short_name == "77"
    assert response.links is None


def test_pagination_links():
    response = decode_list("alerts", AlertAttributes)
    assert response.links.next.endswith("page[offset]=3&page[limit]=3")
    assert response.links.prev is None


def test_included_resources_are_typed():
    response = decode_list("predictions", PredictionAttributes)

    kinds = [r.resource_type for r in response.included]
    assert kinds == ["trip", "vehicle", "occupancy"]
    assert isinstance(response.included[0].attributes, TripAttributes)
    assert response.included[0].attributes.headsign == "Alewife"
    assert isinstance(response.included[1].attributes, VehicleAttributes)
    # Kinds without a model keep their raw attributes
    assert response.included[2].attributes == {"percentage": 12}


def test_models_are_frozen():
    route = decode_list("routes", RouteAttributes).data[0]
    with pytest.raises(ValidationError):
        route.attributes.long_name = "Blue Line"


def test_resources_hash_by_identity():
    first = decode_list("routes", RouteAttributes).data
    again = decode_list("routes", RouteAttributes).data

    assert hash(first[0]) == hash(again[0])
    assert first[0] == again[0]
    assert len({*first, *again}) == 3
    by_route = {route: route.attributes.long_name for route in first}
    assert by_route[again[1]] == "Arlington Heights - Harvard Station"


# Decode failures


def test_missing_required_attribute():
    payload = load_fixture("alerts")
    del payload["data"][0]["attributes"]["header"]

    with pytest.raises(DecodeError) as excinfo:
        decode_list("alerts", AlertAttributes, payload)
    assert excinfo.value.field == "data.0.attributes.header"
    assert excinfo.value.phase == "decode"
    assert "data.0.attributes.header" in str(excinfo.value)


def test_unknown_enum_value():
    payload = load_fixture("alerts")
    payload["data"][1]["attributes"]["effect"] = "TELEPORTATION"

    with pytest.raises(DecodeError) as excinfo:
        decode_list("alerts", AlertAttributes, payload)
    assert excinfo.value.field == "data.1.attributes.effect"


def test_severity_out_of_range():
    payload = load_fixture("alerts")
    payload["data"][0]["attributes"]["severity"] = 11

    with pytest.raises(DecodeError) as excinfo:
        decode_list("alerts", AlertAttributes, payload)
    assert excinfo.value.field == "data.0.attributes.severity"


@pytest.mark.parametrize("bad", ["", "DA291", "ZZ291C", "#DA291CC"])
def test_bad_route_color(bad):
    payload = load_fixture("routes")
    payload["data"][0]["attributes"]["color"] = bad

    with pytest.raises(DecodeError) as excinfo:
        decode_list("routes", RouteAttributes, payload)
    assert excinfo.value.field == "data.0.attributes.color"


def test_bad_timestamp():
    payload = load_fixture("vehicles")
    payload["data"][0]["attributes"]["updated_at"] = "2022-11-02 08:17:43"

    with pytest.raises(DecodeError) as excinfo:
        decode_list("vehicles", VehicleAttributes, payload)
    assert excinfo.value.field == "data.0.attributes.updated_at"
    assert "YYYY-MM-DDTHH:MM:SS" in str(excinfo.value)


def test_bad_service_date():
    payload = load_fixture("services")
    payload["data"][0]["attributes"]["start_date"] = "08/29/2022"

    with pytest.raises(DecodeError) as excinfo:
        decode_list("services", ServiceAttributes, payload)
    assert excinfo.value.field == "data.0.attributes.start_date"


def test_bad_polyline():
    payload = load_fixture("shapes")
    payload["data"][0]["attributes"]["polyline"] = "_p~iF~ps|"

    with pytest.raises(DecodeError) as excinfo:
        decode_list("shapes", ShapeAttributes, payload)
    assert excinfo.value.field == "data.0.attributes.polyline"


def test_bad_included_resource():
    payload = load_fixture("predictions")
    del payload["included"][1]["attributes"]["label"]

    with pytest.raises(DecodeError) as excinfo:
        decode_list("predictions", PredictionAttributes, payload)
    assert excinfo.value.field == "included.1.attributes.label"


def test_missing_jsonapi_member():
    payload = load_fixture("lines")
    del payload["jsonapi"]

    with pytest.raises(DecodeError) as excinfo:
        decode_list("lines", LineAttributes, payload)
    assert excinfo.value.field == "jsonapi"


def test_malformed_json():
    with pytest.raises(DecodeError) as excinfo:
        decode_response(b'{"data": [', List[Resource[LineAttributes]])
    assert excinfo.value.field is None
    assert "malformed JSON" in str(excinfo.value)
