from __future__ import annotations

import os
import time
from pathlib import Path

import pytest
from PyQt6.QtWidgets import QApplication

from mdlive.services.document_state import DocumentState
from mdlive.services.file_service import FileService
from mdlive.services.markdown_renderer import MarkdownRenderer

# Headless runs (CI) have no display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


@pytest.fixture()
def pump(qapp):
    """Process Qt events until 'predicate()' is true or the timeout expires."""

    def _pump(predicate, timeout: float = 5.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            qapp.processEvents()
            if predicate():
                return True
            time.sleep(0.01)
        qapp.processEvents()
        return bool(predicate())

    return _pump


# --- Other common fixtures ---


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def state(renderer: MarkdownRenderer) -> DocumentState:
    return DocumentState(renderer)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def ini_path(tmp_path: Path) -> Path:
    return tmp_path / "config.ini"
