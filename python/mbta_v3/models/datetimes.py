"""Date and datetime field types for the formats the API emits.

Timestamps (alerts, vehicles, predictions, schedules, live facilities) use
``YYYY-MM-DDTHH:MM:SS±HH:MM``; service calendars use bare ``YYYY-MM-DD``
dates. Each field picks the matching type so a mismatch fails with the
expected format in the message.
"""

from datetime import date, datetime
from typing import Annotated, Any
import re

from pydantic import BeforeValidator, PlainSerializer

DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
DATE_FORMAT = "%Y-%m-%d"

# strptime alone also takes "Z", "-0400" and unpadded fields
_DATETIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}[+-][0-9]{2}:[0-9]{2}")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_datetime(value: Any) -> datetime:
    """Parse an offset-aware timestamp such as ``2022-05-08T13:18:08-04:00``."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"datetime must be a string, got {type(value).__name__}")
    error = ValueError(f"invalid datetime {value!r}: expected YYYY-MM-DDTHH:MM:SS±HH:MM")
    if not _DATETIME_RE.fullmatch(value):
        raise error
    try:
        return datetime.strptime(value, DATETIME_FORMAT)
    except ValueError:
        raise error from None


def format_datetime(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def parse_date(value: Any) -> date:
    """Parse a calendar date such as ``2022-05-08``."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"date must be a string, got {type(value).__name__}")
    error = ValueError(f"invalid date {value!r}: expected YYYY-MM-DD")
    if not _DATE_RE.fullmatch(value):
        raise error
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise error from None


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


MbtaDateTime = Annotated[
    datetime,
    BeforeValidator(parse_datetime),
    PlainSerializer(format_datetime, return_type=str, when_used="json"),
]

MbtaDate = Annotated[
    date,
    BeforeValidator(parse_date),
    PlainSerializer(format_date, return_type=str, when_used="json"),
]
