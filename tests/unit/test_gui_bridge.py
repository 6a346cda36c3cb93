"""
Unit tests for appsui/gui/ — requires PyQt6 + offscreen display.

Run with: QT_QPA_PLATFORM=offscreen pytest tests/unit/test_gui_bridge.py

Coverage plan
─────────────
StoreSignalBridge  → 3 tests (forwards snapshots, detach, favourites store)
FetchWorker        → 2 tests (finished on success, failed on FetchError)
─────────────────────────────────
Total              = 5 tests
"""

import os
import sys

import pytest

# Ensure offscreen rendering when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

PyQt6 = pytest.importorskip("PyQt6", reason="PyQt6 not installed")


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="module")
def app():
    """Single QCoreApplication for the module."""
    from PyQt6.QtCore import QCoreApplication
    _app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield _app


@pytest.fixture
def config(tmp_path):
    from appsui.config import AppConfig
    return AppConfig(documents_dir=str(tmp_path / "Documents"))


# ─────────────────────────────────────────────────────────────────────────────
# 1. StoreSignalBridge
# ─────────────────────────────────────────────────────────────────────────────

class TestStoreSignalBridge:

    def test_forwards_snapshot(self, app, config):
        from appsui.gui.bridge import StoreSignalBridge
        from appsui.viewmodels.prospects import Prospect, ProspectsViewModel
        vm = ProspectsViewModel(config)
        bridge = StoreSignalBridge(vm.people)
        received = []
        bridge.changed.connect(received.append)
        p = Prospect(name="A")
        vm.add(p)
        assert received == [[p]]

    def test_detach_stops_forwarding(self, app, config):
        from appsui.gui.bridge import StoreSignalBridge
        from appsui.viewmodels.prospects import Prospect, ProspectsViewModel
        vm = ProspectsViewModel(config)
        bridge = StoreSignalBridge(vm.people)
        received = []
        bridge.changed.connect(received.append)
        bridge.detach()
        bridge.detach()
        vm.add(Prospect(name="A"))
        assert received == []

    def test_works_with_favorites_store(self, app, tmp_path):
        from appsui.gui.bridge import StoreSignalBridge
        from appsui.store import FavoritesStore, FileBackend
        favorites = FavoritesStore(FileBackend(tmp_path / "Favorites"))
        bridge = StoreSignalBridge(favorites)
        received = []
        bridge.changed.connect(received.append)
        favorites.add("niseko")
        assert received == [["niseko"]]


# ─────────────────────────────────────────────────────────────────────────────
# 2. FetchWorker
# ─────────────────────────────────────────────────────────────────────────────

class TestFetchWorker:

    def test_emits_finished_with_result(self, app):
        from appsui.gui.worker import FetchWorker
        worker = FetchWorker(lambda: ["page"])
        results, errors = [], []
        worker.finished.connect(results.append)
        worker.failed.connect(errors.append)
        worker.run()
        assert results == [["page"]]
        assert errors == []

    def test_emits_failed_on_fetch_error(self, app):
        from appsui.exceptions import NetworkError
        from appsui.gui.worker import FetchWorker

        def boom():
            raise NetworkError("offline")

        worker = FetchWorker(boom)
        errors = []
        worker.failed.connect(errors.append)
        worker.run()
        assert errors == ["offline"]
