"""
Minimal JSON-over-HTTP helpers.

One attempt per call: no retries, no back-off.  Callers map FetchError to
their own failure state.
"""

import json
import logging
from typing import Any, Mapping, Optional

import requests

from appsui.exceptions import NetworkError, PayloadDecodeError

__all__ = ["get_json", "post_json"]

logger = logging.getLogger(__name__)


def _decode(resp: requests.Response, url: str) -> Any:
    if resp.status_code // 100 != 2:
        raise NetworkError(f"HTTP {resp.status_code} for {url}: {resp.text[:200]}")
    try:
        return resp.json()
    except ValueError as exc:
        raise PayloadDecodeError(f"Invalid JSON response from {url}: {exc}") from exc


def get_json(
    url: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    timeout: float = 15.0,
) -> Any:
    """
    GET *url* and return the decoded JSON body.

    Raises:
        NetworkError:       transport failure or non-2xx status.
        PayloadDecodeError: body is not JSON.
    """
    logger.debug("GET %s params=%s", url, dict(params or {}))
    try:
        resp = requests.get(url, params=dict(params or {}), timeout=timeout)
    except requests.RequestException as exc:
        raise NetworkError(f"GET {url} failed: {exc}") from exc
    return _decode(resp, url)


def post_json(
    url: str,
    body: Any,
    *,
    timeout: float = 15.0,
) -> Any:
    """
    POST *body* as JSON to *url* and return the decoded JSON response.

    Raises:
        NetworkError:       transport failure or non-2xx status.
        PayloadDecodeError: response body is not JSON.
    """
    logger.debug("POST %s", url)
    try:
        resp = requests.post(
            url,
            data=json.dumps(body),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise NetworkError(f"POST {url} failed: {exc}") from exc
    return _decode(resp, url)
