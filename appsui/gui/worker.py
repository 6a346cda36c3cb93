"""
FetchWorker — runs one network fetch in a background thread.

Usage::

    self._thread = QThread()
    self._worker = FetchWorker(lambda: fetch_nearby(lat, lon))
    self._worker.moveToThread(self._thread)
    self._thread.started.connect(self._worker.run)
    self._worker.finished.connect(self._thread.quit)
    self._worker.failed.connect(self._thread.quit)
    self._worker.finished.connect(self._on_pages)
    self._thread.start()

Signals
───────
finished(object) — whatever the fetch callable returned
failed(str)      — human-readable error message
"""

import logging
from typing import Any, Callable

from PyQt6.QtCore import QObject, pyqtSignal

from appsui.exceptions import FetchError

__all__ = ["FetchWorker"]

logger = logging.getLogger(__name__)


class FetchWorker(QObject):
    """
    Wraps a single-attempt fetch for execution in a QThread.

    All interaction with the GUI must go through signals — never touch
    Qt widgets from inside run().
    """

    finished = pyqtSignal(object)   # fetch result
    failed   = pyqtSignal(str)      # error message

    def __init__(self, fetch: Callable[[], Any]) -> None:
        super().__init__()
        self._fetch = fetch

    def run(self) -> None:
        """Entry point — connect QThread.started to this slot."""
        try:
            result = self._fetch()
        except FetchError as exc:
            logger.warning("FetchWorker.run() failed: %s", exc)
            self.failed.emit(str(exc))
            return
        self.finished.emit(result)
