"""
bundle — read-only JSON resources shipped with the package.

Public API
──────────
load_json        — parse a bundled file
decode_resource  — parse + convert, raising BundleError subclasses
parse_date       — bundled YYYY-MM-DD dates
"""

from appsui.bundle.loader import DATA_DIR, decode_resource, load_json, parse_date

__all__ = ["DATA_DIR", "decode_resource", "load_json", "parse_date"]
