"""
net — the two remote collaborators (nearby places, order submission).

Public API
──────────
get_json / post_json — single-attempt JSON HTTP helpers (requests)
Page, fetch_nearby   — Wikipedia geosearch
submit_order         — cupcake order POST
"""

from appsui.net.client import get_json, post_json
from appsui.net.orders import submit_order
from appsui.net.wikipedia import Page, fetch_nearby

__all__ = ["get_json", "post_json", "Page", "fetch_nearby", "submit_order"]
