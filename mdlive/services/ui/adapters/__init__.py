from __future__ import annotations

from .null_display import NullDisplayTransfer
from .qt_dialogs import QtFileDialogService
from .qt_display import QtDisplayTransfer
from .qt_messages import QtMessageService

__all__ = [
    "NullDisplayTransfer",
    "QtDisplayTransfer",
    "QtFileDialogService",
    "QtMessageService",
]
