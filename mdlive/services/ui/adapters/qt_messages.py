from __future__ import annotations

from typing import Any

from loguru import logger
from PyQt6.QtWidgets import QMessageBox

from mdlive.services.ui.ports.messages import IMessageService


class QtMessageService(IMessageService):
    """Qt-backed message boxes; errors are logged as they are shown."""

    def error(self, parent: Any | None, title: str, text: str) -> None:
        logger.error("{}: {}", title, text)
        QMessageBox.critical(parent, title, text)
