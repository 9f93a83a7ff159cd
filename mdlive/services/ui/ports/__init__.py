from __future__ import annotations

from .dialogs import IFileDialogService
from .display import DisplayCallback, IDisplayTransfer
from .messages import IMessageService

__all__ = [
    "DisplayCallback",
    "IDisplayTransfer",
    "IFileDialogService",
    "IMessageService",
]
