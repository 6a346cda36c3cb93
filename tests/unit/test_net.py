"""
Unit tests for appsui/net/ — requests is patched, nothing leaves the machine.

Coverage plan
─────────────
client.py     → 5 tests  (GET / POST success, transport error, HTTP error,
                          invalid JSON)
wikipedia.py  → 5 tests  (query params, parse + sort, description fallback,
                          bad payload, fetch_nearby wiring)
orders.py     → 2 tests  (echo returned, non-object response rejected)
─────────────────────────────────────────────────────────────────
Total         = 12 tests
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests


def _response(status=200, body=None, text=None):
    resp = MagicMock()
    resp.status_code = status
    resp.text = text if text is not None else json.dumps(body)
    if text is not None:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = body
    return resp


# ─────────────────────────────────────────────────────────────────────────────
# 1. JSON client
# ─────────────────────────────────────────────────────────────────────────────

class TestClient:

    def test_get_json_returns_body(self):
        from appsui.net.client import get_json
        with patch("appsui.net.client.requests.get", return_value=_response(body={"a": 1})) as get:
            assert get_json("https://x", params={"q": 1}, timeout=3) == {"a": 1}
        get.assert_called_once_with("https://x", params={"q": 1}, timeout=3)

    def test_post_json_sends_json_body(self):
        from appsui.net.client import post_json
        with patch("appsui.net.client.requests.post", return_value=_response(body={"ok": True})) as post:
            assert post_json("https://x", {"n": 2}) == {"ok": True}
        kwargs = post.call_args.kwargs
        assert json.loads(kwargs["data"]) == {"n": 2}
        assert kwargs["headers"]["Content-Type"] == "application/json"

    def test_transport_error_becomes_network_error(self):
        from appsui.exceptions import NetworkError
        from appsui.net.client import get_json
        with patch("appsui.net.client.requests.get", side_effect=requests.ConnectionError("down")):
            with pytest.raises(NetworkError):
                get_json("https://x")

    def test_http_error_status(self):
        from appsui.exceptions import NetworkError
        from appsui.net.client import post_json
        with patch("appsui.net.client.requests.post", return_value=_response(status=500, text="oops")):
            with pytest.raises(NetworkError, match="500"):
                post_json("https://x", {})

    def test_invalid_json(self):
        from appsui.exceptions import PayloadDecodeError
        from appsui.net.client import get_json
        with patch("appsui.net.client.requests.get", return_value=_response(text="<html>")):
            with pytest.raises(PayloadDecodeError):
                get_json("https://x")


# ─────────────────────────────────────────────────────────────────────────────
# 2. Wikipedia geosearch
# ─────────────────────────────────────────────────────────────────────────────

_PAYLOAD = {
    "query": {
        "pages": {
            "2": {"pageid": 2, "title": "Tower Bridge", "terms": {"description": ["bridge in London"]}},
            "1": {"pageid": 1, "title": "Big Ben"},
        }
    }
}


class TestWikipedia:

    def test_geosearch_params(self):
        from appsui.net.wikipedia import geosearch_params
        params = geosearch_params(51.5, -0.12)
        assert params["ggscoord"] == "51.5|-0.12"
        assert params["generator"] == "geosearch"
        assert params["ggsradius"] == 10000
        assert params["format"] == "json"

    def test_parse_pages_sorted_by_title(self):
        from appsui.net.wikipedia import parse_pages
        pages = parse_pages(_PAYLOAD)
        assert [p.title for p in pages] == ["Big Ben", "Tower Bridge"]

    def test_description_fallback(self):
        from appsui.net.wikipedia import parse_pages
        big_ben, bridge = parse_pages(_PAYLOAD)
        assert big_ben.description == "No further information"
        assert bridge.description == "bridge in London"

    def test_bad_payload(self):
        from appsui.exceptions import PayloadDecodeError
        from appsui.net.wikipedia import parse_pages
        with pytest.raises(PayloadDecodeError):
            parse_pages({"batchcomplete": ""})

    def test_fetch_nearby(self):
        from appsui.net.wikipedia import fetch_nearby
        with patch("appsui.net.client.requests.get", return_value=_response(body=_PAYLOAD)) as get:
            pages = fetch_nearby(51.5, -0.12, url="https://wiki.test/api.php", timeout=2)
        assert len(pages) == 2
        assert get.call_args.args[0] == "https://wiki.test/api.php"


# ─────────────────────────────────────────────────────────────────────────────
# 3. Orders
# ─────────────────────────────────────────────────────────────────────────────

class TestOrders:

    def test_submit_order_returns_echo(self):
        from appsui.net.orders import submit_order
        echo = {"type": 1, "quantity": 3, "id": "7"}
        with patch("appsui.net.client.requests.post", return_value=_response(status=201, body=echo)):
            assert submit_order({"type": 1, "quantity": 3}, url="https://orders.test") == echo

    def test_submit_order_rejects_non_object(self):
        from appsui.exceptions import PayloadDecodeError
        from appsui.net.orders import submit_order
        with patch("appsui.net.client.requests.post", return_value=_response(body=[1, 2])):
            with pytest.raises(PayloadDecodeError):
                submit_order({}, url="https://orders.test")
