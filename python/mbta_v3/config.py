import os

# Base URL for all V3 API endpoints
DEFAULT_BASE_URL = "https://api-v3.mbta.com"
BASE_URL = os.getenv("MBTA_BASE_URL", DEFAULT_BASE_URL)

# API key is optional (requests without one are rate limited by IP address)
API_KEY_ENV = "MBTA_API_KEY"

# Header the API reads the key from
API_KEY_HEADER = "x-api-key"

# Timeouts
TIMEOUT_CONNECT = 3.0
TIMEOUT_READ = 10.0

USER_AGENT = "mbta-v3-python/0.4.0"

# Query parameters every list endpoint accepts
PAGINATION_PARAMS = frozenset({"page[offset]", "page[limit]", "sort", "include"})

# Per-endpoint filters, as documented at https://api-v3.mbta.com/docs/swagger
ENDPOINT_FILTERS = {
    "alerts": frozenset({
        "filter[activity]", "filter[route_type]", "filter[direction_id]",
        "filter[route]", "filter[stop]", "filter[trip]", "filter[facility]",
        "filter[id]", "filter[banner]", "filter[datetime]",
        "filter[lifecycle]", "filter[severity]",
    }),
    "facilities": frozenset({"filter[stop]", "filter[type]"}),
    "lines": frozenset({"filter[id]"}),
    "live_facilities": frozenset({"filter[id]"}),
    "predictions": frozenset({
        "filter[latitude]", "filter[longitude]", "filter[radius]",
        "filter[direction_id]", "filter[route_type]", "filter[stop]",
        "filter[route]", "filter[trip]", "filter[route_pattern]",
    }),
    "routes": frozenset({
        "filter[stop]", "filter[type]", "filter[direction_id]",
        "filter[date]", "filter[id]",
    }),
    "route_patterns": frozenset({
        "filter[id]", "filter[route]", "filter[direction_id]", "filter[stop]",
    }),
    "schedules": frozenset({
        "filter[date]", "filter[direction_id]", "filter[route_type]",
        "filter[min_time]", "filter[max_time]", "filter[route]",
        "filter[stop]", "filter[trip]", "filter[stop_sequence]",
    }),
    "services": frozenset({"filter[id]", "filter[route]"}),
    "shapes": frozenset({"filter[route]"}),
    "stops": frozenset({
        "filter[date]", "filter[direction_id]", "filter[latitude]",
        "filter[longitude]", "filter[radius]", "filter[id]",
        "filter[route_type]", "filter[route]", "filter[service]",
        "filter[location_type]",
    }),
    "trips": frozenset({
        "filter[date]", "filter[direction_id]", "filter[route]",
        "filter[route_pattern]", "filter[id]", "filter[name]",
    }),
    "vehicles": frozenset({
        "filter[id]", "filter[trip]", "filter[label]", "filter[route]",
        "filter[direction_id]", "filter[route_type]",
    }),
}

# Single-resource endpoints only take an include list
SINGLE_PARAMS = frozenset({"include"})
