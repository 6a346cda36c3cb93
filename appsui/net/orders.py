"""Order submission — posts an encoded order and returns the echoed body."""

import logging

from appsui.exceptions import PayloadDecodeError
from appsui.net.client import post_json

__all__ = ["submit_order"]

logger = logging.getLogger(__name__)


def submit_order(
    payload: dict,
    *,
    url: str = "https://reqres.in/api/cupcakes",
    timeout: float = 15.0,
) -> dict:
    """
    POST *payload* and return the server's echo of it.

    Raises:
        NetworkError:       transport failure or non-2xx status.
        PayloadDecodeError: response is not a JSON object.
    """
    body = post_json(url, payload, timeout=timeout)
    if not isinstance(body, dict):
        raise PayloadDecodeError(f"Expected a JSON object from {url}, got {type(body).__name__}")
    logger.info("Order accepted by %s", url)
    return body
