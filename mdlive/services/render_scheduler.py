from __future__ import annotations

from typing import Callable

from loguru import logger
from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal, pyqtSlot

from mdlive.domain.interfaces import IMarkdownRenderer
from mdlive.utils.constants import ASYNC_RENDER_THRESHOLD


class RenderWorkerSignals(QObject):
    """Signals emitted by background preview rendering workers."""

    finished = pyqtSignal(int, str)


class RenderWorker(QRunnable):
    """Render markdown HTML in a worker thread to keep the editor responsive."""

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        text: str,
        request_id: int,
        latest_request_id: Callable[[], int],
    ):
        super().__init__()
        self.renderer = renderer
        self.text = text
        self.request_id = request_id
        self.latest_request_id = latest_request_id
        self.signals = RenderWorkerSignals()

    def run(self) -> None:
        # Superseded while queued: report back without rendering.
        if self.request_id != self.latest_request_id():
            self.signals.finished.emit(self.request_id, "")
            return
        # The renderer never raises, so every worker reports back.
        html = self.renderer.to_html(self.text)
        self.signals.finished.emit(self.request_id, html)


class RenderScheduler(QObject):
    """
    Turns render requests into ``rendered(request_id, html)`` signals.

    Short documents are rendered inline. Longer ones go to a single-threaded
    pool. Only the most recently requested render is ever delivered: queued
    jobs that have been superseded skip rendering, and results of superseded
    jobs are discarded, so a slow render of old text can never overwrite a
    newer preview.
    """

    rendered = pyqtSignal(int, str)

    def __init__(
        self,
        renderer: IMarkdownRenderer,
        *,
        async_threshold: int = ASYNC_RENDER_THRESHOLD,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.renderer = renderer
        self.async_threshold = async_threshold
        self._pool = QThreadPool(self)
        self._pool.setMaxThreadCount(1)
        self._request_id = 0
        self._active_workers: list[RenderWorker] = []

    @property
    def latest_request_id(self) -> int:
        return self._request_id

    def request(self, text: str) -> int:
        self._request_id += 1
        request_id = self._request_id

        if len(text) < self.async_threshold:
            self.rendered.emit(request_id, self.renderer.to_html(text))
            return request_id

        worker = RenderWorker(self.renderer, text, request_id, lambda: self._request_id)
        worker.signals.finished.connect(self._on_worker_finished)
        self._active_workers.append(worker)
        logger.debug("Queued background render #{} ({} chars)", request_id, len(text))
        self._pool.start(worker)
        return request_id

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)

    @pyqtSlot(int, str)
    def _on_worker_finished(self, request_id: int, html: str) -> None:
        """Apply finished background render if it is still the active request."""
        self._active_workers = [w for w in self._active_workers if w.request_id != request_id]
        if request_id != self._request_id:
            logger.debug("Dropping stale render #{} (latest #{})", request_id, self._request_id)
            return
        self.rendered.emit(request_id, html)
