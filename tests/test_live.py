"""
Live checks against api-v3.mbta.com.

Skipped unless MBTA_LIVE_TESTS is set; MBTA_API_KEY is used if present.
"""

import os

import pytest

from mbta_v3 import Client

pytestmark = pytest.mark.skipif(not os.getenv("MBTA_LIVE_TESTS"), reason="set MBTA_LIVE_TESTS=1 to hit the live API")


@pytest.fixture(scope="module")
def client():
    return Client.from_env()


def test_alerts(client):
    response = client.alerts({"page[limit]": 3})
    assert len(response.data) <= 3
    for alert in response.data:
        assert alert.id
        assert alert.attributes.header


def test_routes(client):
    routes = client.routes({"filter[type]": "0,1"}).data
    assert {r.id for r in routes} >= {"Red", "Orange", "Blue"}


def test_stop(client):
    stop = client.stop("place-sstat").data
    assert stop.attributes.name == "South Station"


def test_shapes(client):
    shapes = client.shapes({"filter[route]": "Red"}).data
    assert shapes
    assert all(len(s.attributes.points) >= 2 for s in shapes)


def test_predictions_with_included(client):
    response = client.predictions({"filter[stop]": "place-sstat", "include": "trip", "page[limit]": 5})
    for trip in response.included or []:
        assert trip.resource_type == "trip"
