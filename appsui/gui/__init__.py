"""
gui — PyQt6 glue for the view-models (install the ``gui`` extra).

Public API
──────────
StoreSignalBridge  — store change notifications as a Qt signal
FetchWorker        — one network fetch on a QThread
"""

from appsui.gui.bridge import StoreSignalBridge
from appsui.gui.worker import FetchWorker

__all__ = ["StoreSignalBridge", "FetchWorker"]
