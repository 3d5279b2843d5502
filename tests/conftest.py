import json
from pathlib import Path
from unittest.mock import patch

import pytest
import requests

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    """Load tests/fixtures/<name>.json as a dict."""
    with open(FIXTURES / f"{name}.json", encoding="utf-8") as f:
        return json.load(f)


def to_body(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


def single(name: str, index: int = 0) -> dict:
    """Turn a list fixture into a single-resource envelope."""
    payload = load_fixture(name)
    return {"data": payload["data"][index], "jsonapi": payload["jsonapi"]}


def make_response(status_code: int = 200, body: bytes = b"", url: str = "https://api-v3.mbta.com/") -> requests.Response:
    """Build a requests.Response without touching the network."""
    r = requests.Response()
    r.status_code = status_code
    r._content = body
    r.url = url
    r.headers["Content-Type"] = "application/vnd.api+json"
    return r


@pytest.fixture
def mock_send():
    """Patch requests.Session.send; the mock gets (session, prepared_request, **kwargs)."""
    with patch.object(requests.Session, "send", autospec=True) as send:
        yield send


@pytest.fixture
def respond(mock_send):
    """Make every request answer with the given status and body."""

    def _respond(payload=None, status_code: int = 200, raw: bytes = None):
        body = raw if raw is not None else to_body(payload)
        mock_send.return_value = make_response(status_code, body)
        return mock_send

    return _respond


def sent_request(mock_send) -> requests.PreparedRequest:
    """The single PreparedRequest handed to Session.send."""
    assert mock_send.call_count == 1
    return mock_send.call_args[0][1]
