"""
StoreSignalBridge — re-emits LocalCollectionStore changes as a Qt signal.

Usage::

    bridge = StoreSignalBridge(view_model.people)
    bridge.changed.connect(list_widget.refresh)
    ...
    bridge.detach()   # when the page goes away
"""

import logging

from PyQt6.QtCore import QObject, pyqtSignal

__all__ = ["StoreSignalBridge"]

logger = logging.getLogger(__name__)


class StoreSignalBridge(QObject):
    """
    Subscribes to a store (anything with ``subscribe(callback)``) and emits
    ``changed(list)`` with the new snapshot after every mutation.
    """

    changed = pyqtSignal(list)   # snapshot of the collection

    def __init__(self, store, parent: QObject = None) -> None:
        super().__init__(parent)
        self._unsubscribe = store.subscribe(self._on_change)

    def _on_change(self, snapshot: list) -> None:
        self.changed.emit(list(snapshot))

    def detach(self) -> None:
        """Stop forwarding changes; safe to call more than once."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.debug("Store bridge detached")
