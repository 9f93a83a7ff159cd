from __future__ import annotations

from loguru import logger
from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QGuiApplication, QScreen
from PyQt6.QtWidgets import QWidget

from mdlive.domain.models import DisplayStatus
from mdlive.services.ui.ports.display import DisplayCallback, IDisplayTransfer


class QtDisplayTransfer(IDisplayTransfer):
    """
    Moves a top-level window between the screens Qt knows about.

    With a single screen the capability is UNSUPPORTED. The window counts as
    being on the secondary display whenever it sits on a non-primary screen;
    switching from there sends it back to the primary one.
    """

    def __init__(self, window: QWidget) -> None:
        self._window = window

    @property
    def is_on_secondary(self) -> bool:
        current = self._current_screen()
        return current is not None and current != QGuiApplication.primaryScreen()

    def status(self) -> DisplayStatus:
        if len(QGuiApplication.screens()) < 2:
            return DisplayStatus.UNSUPPORTED
        return DisplayStatus.ACTIVE if self.is_on_secondary else DisplayStatus.AVAILABLE

    def request_switch(self, on_done: DisplayCallback) -> None:
        target = self._target_screen()
        if target is None:
            QTimer.singleShot(0, lambda: on_done(False, "No other display is available."))
            return

        handle = self._window.windowHandle()
        if handle is not None:
            handle.setScreen(target)
        self._window.move(target.availableGeometry().topLeft())
        logger.info("Moved window to screen {!r}", target.name())

        # Deliver after the move has been processed by the event loop
        QTimer.singleShot(0, lambda: on_done(True, f"Moved to {target.name()}"))

    # ---------- helpers ----------

    def _current_screen(self) -> QScreen | None:
        return self._window.screen()

    def _target_screen(self) -> QScreen | None:
        screens = QGuiApplication.screens()
        if len(screens) < 2:
            return None
        primary = QGuiApplication.primaryScreen()
        if self.is_on_secondary:
            return primary
        for screen in screens:
            if screen != primary:
                return screen
        return None
