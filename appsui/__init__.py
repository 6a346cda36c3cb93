"""
appsui — local record stores and screen state for a collection of small apps.

Public API
──────────
store       — LocalCollectionStore and its backends
viewmodels  — one view-model per screen
net         — nearby-places lookup and order submission
bundle      — read-only bundled JSON resources
gui         — optional PyQt6 glue (``gui`` extra)
cli         — ``appsui`` command
"""

__version__ = "0.1.0"
