from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from PyQt6.QtWidgets import QFileDialog

from mdlive.services.ui.ports.dialogs import IFileDialogService

_FIRST_PATTERN_RE = re.compile(r"\*(\.[A-Za-z0-9]+)")


def with_default_suffix(path: Path, selected_filter: str) -> Path:
    """Append the selected filter's first extension when the user typed none."""
    if path.suffix:
        return path
    m = _FIRST_PATTERN_RE.search(selected_filter or "")
    return path.with_suffix(m.group(1)) if m else path


class QtFileDialogService(IFileDialogService):
    """Qt-backed implementation of file dialogs."""

    def get_save_file(
        self,
        parent: Any | None,
        caption: str,
        start_path: str | None,
        filter_str: str,
    ) -> Path | None:
        path_str, selected = QFileDialog.getSaveFileName(
            parent,
            caption,
            start_path or "",
            filter_str,
        )
        if not path_str:
            return None
        return with_default_suffix(Path(path_str), selected)
