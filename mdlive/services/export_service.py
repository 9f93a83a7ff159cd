from __future__ import annotations

from itertools import count
from pathlib import Path

from loguru import logger
from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal, pyqtSlot

from mdlive.domain.errors import ExportError
from mdlive.domain.interfaces import ExportCallback, IFileService


class ExportWorkerSignals(QObject):
    """Signals emitted by background export workers."""

    finished = pyqtSignal(int, str, str)


class ExportWorker(QRunnable):
    """Write serialized document bytes in a worker thread."""

    def __init__(self, job_id: int, files: IFileService, path: Path, data: bytes):
        super().__init__()
        self.job_id = job_id
        self.files = files
        self.path = path
        self.data = data
        self.signals = ExportWorkerSignals()

    def run(self) -> None:
        try:
            self.files.write_bytes_atomic(self.path, self.data)
            self.signals.finished.emit(self.job_id, str(self.path), "")
        except Exception as exc:
            self.signals.finished.emit(self.job_id, str(self.path), str(exc) or type(exc).__name__)


class ExportService(QObject):
    """
    Storage collaborator: writes the bytes it is given to a chosen destination.

    Exports run to completion or failure; there is no retry, cancellation or
    timeout. Callbacks are delivered on the thread that owns this object (the UI
    thread), once per export.
    """

    def __init__(self, files: IFileService, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.files = files
        self._pool = QThreadPool(self)
        self._pool.setMaxThreadCount(1)
        self._ids = count(1)
        self._pending: dict[int, tuple[ExportWorker, ExportCallback]] = {}

    def export(self, path: Path, data: bytes) -> None:
        try:
            self.files.write_bytes_atomic(path, data)
        except ExportError:
            raise
        except OSError as e:
            raise ExportError(f"Failed to write {path}: {e}") from e
        logger.info("Exported {} bytes to {}", len(data), path)

    def export_async(self, path: Path, data: bytes, on_done: ExportCallback) -> None:
        job_id = next(self._ids)
        worker = ExportWorker(job_id, self.files, path, data)
        worker.signals.finished.connect(self._on_worker_finished)
        self._pending[job_id] = (worker, on_done)
        logger.debug("Queued export #{} to {}", job_id, path)
        self._pool.start(worker)

    def wait_for_done(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)

    @pyqtSlot(int, str, str)
    def _on_worker_finished(self, job_id: int, path: str, error_text: str) -> None:
        entry = self._pending.pop(job_id, None)
        if entry is None:
            return
        _worker, on_done = entry
        if error_text:
            logger.warning("Export #{} to {} failed: {}", job_id, path, error_text)
        else:
            logger.info("Export #{} written to {}", job_id, path)
        on_done(Path(path), error_text)
