from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from mdlive.domain.models import DisplayStatus

# on_done(switched, message)
DisplayCallback = Callable[[bool, str], None]


@runtime_checkable
class IDisplayTransfer(Protocol):
    """
    Host capability to move the running window to another physical screen.

    The adapter owns the "is on secondary display" state; callers only read it.
    """

    @property
    def is_on_secondary(self) -> bool: ...

    def status(self) -> DisplayStatus: ...

    def request_switch(self, on_done: DisplayCallback) -> None:
        """Fire-and-forget. 'on_done' is called once when the switch finished or failed."""
        ...
