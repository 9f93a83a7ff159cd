from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from mdlive.utils.constants import DEFAULT_SEED_TEXT


class PaneOrder(Enum):
    """Which pane comes first when editor and preview are shown side by side."""

    EDITOR_FIRST = auto()
    PREVIEW_FIRST = auto()

    def flipped(self) -> PaneOrder:
        if self is PaneOrder.EDITOR_FIRST:
            return PaneOrder.PREVIEW_FIRST
        return PaneOrder.EDITOR_FIRST


class ChangeKind(Enum):
    TEXT = auto()
    PANE_ORDER = auto()


class DisplayStatus(Enum):
    """Availability of the move-to-other-display capability."""

    UNSUPPORTED = auto()
    AVAILABLE = auto()
    ACTIVE = auto()


@dataclass
class Document:
    text: str = DEFAULT_SEED_TEXT
    pane_order: PaneOrder = PaneOrder.EDITOR_FIRST


@dataclass(frozen=True)
class DocumentChange:
    kind: ChangeKind
    version: int
