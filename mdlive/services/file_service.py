from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from mdlive.domain.errors import ExportError
from mdlive.domain.interfaces import IFileService


class FileService(IFileService):
    """Atomic reads/writes for document files."""

    def read_text(self, path: Path) -> str:
        # Decode bytes directly so line endings come back exactly as written
        return path.read_bytes().decode("utf-8")

    def write_bytes_atomic(self, path: Path, data: bytes) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise ExportError(f"Cannot open for write: {path}")
        if sf.write(data) != len(data):
            sf.cancelWriting()
            sf.commit()
            raise ExportError(f"Short write to: {path}")
        if not sf.commit():
            raise ExportError(f"Commit failed for: {path}")
