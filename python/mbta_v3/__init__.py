"""MBTA V3 API - typed Python client.

This package fetches schedules, predictions, vehicles, routes, stops,
shapes, alerts and the other resources of the MBTA V3 API and decodes
them into immutable, typed models. Map plotting lives in
``mbta_v3.render`` and needs the ``map`` extra.
"""

from .client import Client
from .colors import Color
from .errors import (
    APIError,
    APIErrorResponse,
    ClientError,
    DecodeError,
    InvalidQueryParam,
    RequestTimeout,
    ResponseError,
    TransportError,
)
from .models import Resource, Response

__version__ = "0.4.0"
__all__ = [
    "APIError",
    "APIErrorResponse",
    "Client",
    "ClientError",
    "Color",
    "DecodeError",
    "InvalidQueryParam",
    "RequestTimeout",
    "Resource",
    "Response",
    "ResponseError",
    "TransportError",
    "client",
    "colors",
    "config",
    "errors",
    "models",
    "parsing",
    "transport",
]
