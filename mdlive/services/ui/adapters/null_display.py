from __future__ import annotations

from mdlive.domain.models import DisplayStatus
from mdlive.services.ui.ports.display import DisplayCallback, IDisplayTransfer


class NullDisplayTransfer(IDisplayTransfer):
    """Used when the host has no way to move the window between screens."""

    @property
    def is_on_secondary(self) -> bool:
        return False

    def status(self) -> DisplayStatus:
        return DisplayStatus.UNSUPPORTED

    def request_switch(self, on_done: DisplayCallback) -> None:
        on_done(False, "Moving to another display is not supported here.")
