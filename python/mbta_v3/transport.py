from typing import Mapping, Optional, Tuple
import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import API_KEY_HEADER, TIMEOUT_CONNECT, TIMEOUT_READ, USER_AGENT
from .errors import RequestTimeout, ResponseError, TransportError

logger = logging.getLogger(__name__)


def build_requests_session(api_key: Optional[str]) -> requests.Session:
    """Build a requests session for a single API call.

    Args:
        api_key: Optional API key (sent once in the x-api-key header if provided)

    Returns:
        Configured requests.Session
    """
    sess = requests.Session()
    headers = {
        "Accept": "application/vnd.api+json",
        "Accept-Encoding": "gzip, deflate",
        "User-Agent": USER_AGENT,
    }
    if api_key:
        headers[API_KEY_HEADER] = api_key

    sess.headers.update(headers)
    # One attempt per call: no retries, no backoff
    retry = Retry(total=0, read=False, redirect=None)
    adapter = HTTPAdapter(max_retries=retry)
    sess.mount("https://", adapter)
    sess.mount("http://", adapter)
    return sess


def fetch(
    base_url: str,
    path: str,
    params: Optional[Mapping[str, str]] = None,
    api_key: Optional[str] = None,
    timeout: Tuple[float, float] = (TIMEOUT_CONNECT, TIMEOUT_READ),
) -> bytes:
    """Issue one GET against the API and return the raw body.

    Args:
        base_url: API base URL, e.g. https://api-v3.mbta.com
        path: Endpoint path relative to base_url, e.g. "alerts" or "stops/place-sstat"
        params: Query parameters, already checked against the endpoint's allow-list
        api_key: Optional API key
        timeout: (connect, read) timeouts in seconds

    Returns:
        Response body bytes for a 2xx response

    Raises:
        RequestTimeout: If connecting or reading timed out
        ResponseError: If the API answered with a non-2xx status
        TransportError: For any other network failure
    """
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"

    with build_requests_session(api_key) as sess:
        try:
            logger.debug(f"Fetching {url} (params: {dict(params or {})})")
            r = sess.get(url, params=params, timeout=timeout)
        except requests.Timeout as e:
            logger.warning(f"Timeout fetching {url}: {e}")
            raise RequestTimeout(url, str(e)) from e
        except requests.RequestException as e:
            logger.error(f"Request error fetching {url}: {e}")
            raise TransportError(url, str(e)) from e

    if not 200 <= r.status_code < 300:
        logger.error(f"HTTP error {r.status_code} from {url}")
        raise ResponseError.from_body(url, r.status_code, r.content)

    logger.debug(f"Successfully fetched {len(r.content)} bytes from {url}")
    return r.content
