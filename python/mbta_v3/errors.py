"""
Errors raised by the MBTA V3 client.

Every error carries the phase it happened in: ``request`` for bad
arguments caught before anything is sent, ``transport`` for network and
HTTP status failures, ``decode`` for bodies that do not match the models.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from .models.shared import APIVersion


class APIError(BaseModel):
    """One entry of the API's JSON error document."""

    model_config = ConfigDict(frozen=True)

    status: str
    code: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    source: Optional[Dict[str, str]] = None

    def __str__(self) -> str:
        parts = [f"code: {self.code}", f"status: {self.status}"]
        if self.detail:
            parts.append(f"detail: {self.detail}")
        if self.source:
            parts.append(f"source: {self.source}")
        return "{" + ", ".join(parts) + "}"


class APIErrorResponse(BaseModel):
    """Error document returned by the API with a non-2xx status."""

    model_config = ConfigDict(frozen=True)

    errors: List[APIError]
    jsonapi: Optional[APIVersion] = None

    def __str__(self) -> str:
        return "; ".join(str(e) for e in self.errors)


class ClientError(Exception):
    """Base exception for the client."""

    phase = "client"

    def __init__(self, detail: str, error_code: Optional[str] = None):
        self.detail = detail
        self.error_code = error_code or self.__class__.__name__
        super().__init__(detail)


class InvalidQueryParam(ClientError):
    """A query parameter is not on the endpoint's allow-list."""

    phase = "request"

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            detail=f"invalid query parameter: `{name}={value}`",
            error_code="INVALID_QUERY_PARAM",
        )


class TransportError(ClientError):
    """The request could not be completed (DNS, connection, TLS...)."""

    phase = "transport"

    def __init__(self, url: str, detail: str, error_code: str = "TRANSPORT_ERROR"):
        self.url = url
        super().__init__(detail=f"HTTP transport error for {url}: {detail}", error_code=error_code)


class RequestTimeout(TransportError):
    """The request timed out while connecting or reading."""

    def __init__(self, url: str, detail: str):
        super().__init__(url, detail, error_code="REQUEST_TIMEOUT")


class ResponseError(TransportError):
    """The API answered with a non-success status code."""

    def __init__(
        self,
        url: str,
        status_code: int,
        errors: Optional[APIErrorResponse] = None,
        body: str = "",
    ):
        self.status_code = status_code
        self.errors = errors
        self.body = body
        summary = str(errors) if errors is not None else (body.strip() or "no body")
        super().__init__(url, f"status {status_code}: {summary}", error_code="RESPONSE_ERROR")

    @classmethod
    def from_body(cls, url: str, status_code: int, body: bytes) -> "ResponseError":
        """Build the error, decoding the API's error document when the body holds one."""
        text = body.decode("utf-8", errors="replace")
        try:
            errors: Optional[APIErrorResponse] = APIErrorResponse.model_validate_json(body)
        except ValidationError:
            errors = None
        return cls(url, status_code, errors=errors, body=text)


class DecodeError(ClientError):
    """The response body could not be decoded into the expected models."""

    phase = "decode"

    def __init__(self, detail: str, field: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None):
        self.field = field
        self.errors = errors or []
        message = f"failed to decode response: {detail}"
        if field:
            message = f"failed to decode field `{field}`: {detail}"
        super().__init__(detail=message, error_code="DECODE_ERROR")

    @classmethod
    def from_validation_error(cls, exc: ValidationError, prefix: Tuple[Any, ...] = ()) -> "DecodeError":
        """Name the first offending field of a pydantic validation failure.

        Args:
            exc: The pydantic error
            prefix: Location of the validated value inside the whole body
        """
        errors = exc.errors(include_url=False)
        if not errors:
            return cls(str(exc))
        first = errors[0]
        field = ".".join(str(part) for part in prefix + tuple(first["loc"])) or None
        return cls(first["msg"], field=field, errors=errors)
