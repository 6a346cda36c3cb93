"""
Nearby-places lookup via the Wikipedia geosearch API.

The response shape used here is::

    {"query": {"pages": {"<pageid>": {"pageid": 1, "title": "…",
                                      "terms": {"description": ["…"]}}}}}
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from appsui.exceptions import PayloadDecodeError
from appsui.net.client import get_json

__all__ = ["Page", "fetch_nearby", "parse_pages", "geosearch_params"]

logger = logging.getLogger(__name__)

_SEARCH_RADIUS_M = 10000
_RESULT_LIMIT    = 50


@dataclass(frozen=True)
class Page:
    """One nearby Wikipedia page."""
    pageid: int
    title:  str
    terms:  Optional[dict] = field(default=None, compare=False, hash=False)

    @property
    def description(self) -> str:
        descriptions = (self.terms or {}).get("description") or []
        return descriptions[0] if descriptions else "No further information"

    def __lt__(self, other: "Page") -> bool:
        return self.title < other.title


def geosearch_params(latitude: float, longitude: float) -> dict:
    """Query string for pages within 10 km of a coordinate."""
    return {
        "ggscoord":   f"{latitude}|{longitude}",
        "action":     "query",
        "prop":       "coordinates|pageimages|pageterms",
        "colimit":    _RESULT_LIMIT,
        "piprop":     "thumbnail",
        "pithumbsize": 500,
        "pilimit":    _RESULT_LIMIT,
        "wbptterms":  "description",
        "generator":  "geosearch",
        "ggsradius":  _SEARCH_RADIUS_M,
        "ggslimit":   _RESULT_LIMIT,
        "format":     "json",
    }


def parse_pages(payload: object) -> list[Page]:
    """
    Decode a geosearch response into pages sorted by title.

    Raises:
        PayloadDecodeError: payload does not have the expected shape.
    """
    try:
        pages = payload["query"]["pages"]  # type: ignore[index]
        result = [
            Page(pageid=int(p["pageid"]), title=str(p["title"]), terms=p.get("terms"))
            for p in pages.values()
        ]
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise PayloadDecodeError(f"Unexpected geosearch payload: {exc}") from exc
    return sorted(result)


def fetch_nearby(
    latitude: float,
    longitude: float,
    *,
    url: str = "https://en.wikipedia.org/w/api.php",
    timeout: float = 15.0,
) -> list[Page]:
    """
    Fetch pages near a coordinate.

    Raises:
        FetchError: network or decoding failure (single attempt).
    """
    payload = get_json(url, params=geosearch_params(latitude, longitude), timeout=timeout)
    pages = parse_pages(payload)
    logger.info("Found %d nearby page(s) for %.3f,%.3f", len(pages), latitude, longitude)
    return pages
