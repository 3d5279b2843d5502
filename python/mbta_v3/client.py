"""
Synchronous client for the MBTA V3 API.

Each endpoint method checks its query parameters against the endpoint's
allow-list, issues exactly one GET and decodes the body into typed models.
A Client only holds immutable configuration, so one instance can be shared
between threads.
"""

from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple
import os

from . import config
from .errors import InvalidQueryParam
from .models import (
    AlertAttributes,
    FacilityAttributes,
    LineAttributes,
    LiveFacilityAttributes,
    PredictionAttributes,
    Resource,
    Response,
    RouteAttributes,
    RoutePatternAttributes,
    ScheduleAttributes,
    ServiceAttributes,
    ShapeAttributes,
    StopAttributes,
    TripAttributes,
    VehicleAttributes,
)
from .parsing import decode_response
from .transport import fetch

QueryParams = Optional[Mapping[str, Any]]


def check_query_params(params: QueryParams, allowed: FrozenSet[str]) -> Dict[str, str]:
    """Validate query parameter names and stringify their values.

    Raises:
        InvalidQueryParam: For the first name not in ``allowed``
    """
    checked: Dict[str, str] = {}
    for name, value in (params or {}).items():
        if name not in allowed:
            raise InvalidQueryParam(name, value)
        checked[name] = str(value)
    return checked


class Client:
    """Client for the V3 API; see the ``without_key``/``with_key`` constructors."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = config.BASE_URL,
        timeout: Tuple[float, float] = (config.TIMEOUT_CONNECT, config.TIMEOUT_READ),
    ):
        self._api_key = api_key or None
        self._base_url = base_url
        self._timeout = timeout

    @classmethod
    def without_key(cls) -> "Client":
        """Unauthenticated client; requests are rate limited by IP address."""
        return cls()

    @classmethod
    def with_key(cls, api_key: str) -> "Client":
        return cls(api_key=api_key)

    @classmethod
    def with_url(cls, base_url: str) -> "Client":
        """Client against another base URL, e.g. a mock server."""
        return cls(base_url=base_url)

    @classmethod
    def from_env(cls) -> "Client":
        """Client keyed from the MBTA_API_KEY environment variable, if set."""
        return cls(api_key=os.getenv(config.API_KEY_ENV))

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> Tuple[float, float]:
        return self._timeout

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Client):
            return NotImplemented
        return (self._api_key, self._base_url, self._timeout) == (other._api_key, other._base_url, other._timeout)

    def __hash__(self) -> int:
        return hash((self._api_key, self._base_url, self._timeout))

    def __repr__(self) -> str:
        key = "set" if self._api_key else "none"
        return f"Client(base_url={self._base_url!r}, api_key={key})"

    def _get(self, path: str, params: Dict[str, str], data_type: Any) -> Response:
        body = fetch(self._base_url, path, params, api_key=self._api_key, timeout=self._timeout)
        return decode_response(body, data_type)

    def _list(self, endpoint: str, attributes: Any, params: QueryParams) -> Response:
        allowed = config.PAGINATION_PARAMS | config.ENDPOINT_FILTERS[endpoint]
        checked = check_query_params(params, allowed)
        return self._get(endpoint, checked, List[Resource[attributes]])

    def _single(self, endpoint: str, attributes: Any, resource_id: str, params: QueryParams) -> Response:
        checked = check_query_params(params, config.SINGLE_PARAMS)
        return self._get(f"{endpoint}/{resource_id}", checked, Resource[attributes])

    # List endpoints

    def alerts(self, params: QueryParams = None) -> Response:
        """Active and upcoming system alerts."""
        return self._list("alerts", AlertAttributes, params)

    def facilities(self, params: QueryParams = None) -> Response:
        return self._list("facilities", FacilityAttributes, params)

    def lines(self, params: QueryParams = None) -> Response:
        return self._list("lines", LineAttributes, params)

    def live_facilities(self, params: QueryParams = None) -> Response:
        return self._list("live_facilities", LiveFacilityAttributes, params)

    def predictions(self, params: QueryParams = None) -> Response:
        """Predicted arrivals and departures; the API requires a stop, route, trip or location filter."""
        return self._list("predictions", PredictionAttributes, params)

    def routes(self, params: QueryParams = None) -> Response:
        return self._list("routes", RouteAttributes, params)

    def route_patterns(self, params: QueryParams = None) -> Response:
        return self._list("route_patterns", RoutePatternAttributes, params)

    def schedules(self, params: QueryParams = None) -> Response:
        """Scheduled stop times; the API requires a route, stop or trip filter."""
        return self._list("schedules", ScheduleAttributes, params)

    def services(self, params: QueryParams = None) -> Response:
        return self._list("services", ServiceAttributes, params)

    def shapes(self, params: QueryParams = None) -> Response:
        """Shapes of a route; the API requires ``filter[route]``."""
        return self._list("shapes", ShapeAttributes, params)

    def stops(self, params: QueryParams = None) -> Response:
        return self._list("stops", StopAttributes, params)

    def trips(self, params: QueryParams = None) -> Response:
        return self._list("trips", TripAttributes, params)

    def vehicles(self, params: QueryParams = None) -> Response:
        return self._list("vehicles", VehicleAttributes, params)

    # Single-resource endpoints

    def alert(self, alert_id: str, params: QueryParams = None) -> Response:
        return self._single("alerts", AlertAttributes, alert_id, params)

    def facility(self, facility_id: str, params: QueryParams = None) -> Response:
        return self._single("facilities", FacilityAttributes, facility_id, params)

    def line(self, line_id: str, params: QueryParams = None) -> Response:
        return self._single("lines", LineAttributes, line_id, params)

    def live_facility(self, facility_id: str, params: QueryParams = None) -> Response:
        return self._single("live_facilities", LiveFacilityAttributes, facility_id, params)

    def route(self, route_id: str, params: QueryParams = None) -> Response:
        return self._single("routes", RouteAttributes, route_id, params)

    def route_pattern(self, route_pattern_id: str, params: QueryParams = None) -> Response:
        return self._single("route_patterns", RoutePatternAttributes, route_pattern_id, params)

    def service(self, service_id: str, params: QueryParams = None) -> Response:
        return self._single("services", ServiceAttributes, service_id, params)

    def shape(self, shape_id: str, params: QueryParams = None) -> Response:
        return self._single("shapes", ShapeAttributes, shape_id, params)

    def stop(self, stop_id: str, params: QueryParams = None) -> Response:
        return self._single("stops", StopAttributes, stop_id, params)

    def trip(self, trip_id: str, params: QueryParams = None) -> Response:
        return self._single("trips", TripAttributes, trip_id, params)

    def vehicle(self, vehicle_id: str, params: QueryParams = None) -> Response:
        return self._single("vehicles", VehicleAttributes, vehicle_id, params)
