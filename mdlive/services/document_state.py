from __future__ import annotations

from typing import Callable

from loguru import logger

from mdlive.domain.interfaces import IMarkdownRenderer
from mdlive.domain.models import ChangeKind, Document, DocumentChange, PaneOrder
from mdlive.utils.constants import DEFAULT_SEED_TEXT

DocumentObserver = Callable[[DocumentChange], None]


class DocumentState:
    """
    Single source of truth for the open document.

    Holds the Markdown text and the pane order, and is the only place either is
    mutated. Viewers either subscribe for change notifications or poll
    ``version``. Reads hand out string snapshots, never references into the
    document.

    Mutations are expected on the UI thread only; none of the operations here
    can fail.
    """

    def __init__(self, renderer: IMarkdownRenderer, text: str = DEFAULT_SEED_TEXT) -> None:
        self._renderer = renderer
        self._doc = Document(text=text)
        self._version = 0
        self._observers: list[DocumentObserver] = []

    # ---------- queries ----------

    @property
    def version(self) -> int:
        return self._version

    def get_text(self) -> str:
        return self._doc.text

    def get_pane_order(self) -> PaneOrder:
        return self._doc.pane_order

    def render(self) -> str:
        return self._renderer.to_html(self._doc.text)

    get_html = render

    def serialize(self) -> bytes:
        return self._doc.text.encode("utf-8")

    # ---------- mutations ----------

    def set_text(self, new_text: str) -> None:
        self._doc.text = new_text
        self._notify(ChangeKind.TEXT)

    def toggle_column_order(self) -> None:
        self._doc.pane_order = self._doc.pane_order.flipped()
        self._notify(ChangeKind.PANE_ORDER)

    # ---------- observers ----------

    def subscribe(self, observer: DocumentObserver) -> Callable[[], None]:
        """Register an observer; returns a callable that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, kind: ChangeKind) -> None:
        self._version += 1
        change = DocumentChange(kind=kind, version=self._version)
        logger.debug("Document changed: {} v{}", kind.name, self._version)
        # Copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            try:
                observer(change)
            except Exception:
                logger.exception("Document observer {!r} failed", observer)
