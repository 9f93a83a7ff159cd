from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger

from mdlive.domain.interfaces import IExportService
from mdlive.domain.models import ChangeKind, DisplayStatus, DocumentChange, PaneOrder
from mdlive.services.document_state import DocumentState
from mdlive.services.ui.ports.dialogs import IFileDialogService
from mdlive.services.ui.ports.display import IDisplayTransfer
from mdlive.services.ui.ports.messages import IMessageService
from mdlive.utils.constants import DEFAULT_EXPORT_NAME, EXPORT_FILTER, STATUS_TIMEOUT_MS


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    # editor/preview
    def set_editor_text(self, text: str) -> None: ...
    def set_preview_html(self, html: str) -> None: ...

    # arrangement
    def apply_pane_order(self, order: PaneOrder) -> None: ...
    def set_display_status(self, status: DisplayStatus) -> None: ...

    # status
    def show_status(self, text: str, msec: int = STATUS_TIMEOUT_MS) -> None: ...


class IRenderScheduler(Protocol):
    @property
    def latest_request_id(self) -> int: ...

    def request(self, text: str) -> int: ...


class MainPresenter:
    """
    Coordinates the document, the preview, export and display switching.

    Qt-free: the view, dialogs, messages, export and display collaborators are
    all ports, so the synchronization rules can be exercised without widgets.
    When a render scheduler is supplied its ``rendered`` results must be routed
    to :meth:`on_rendered`; otherwise previews are rendered inline.
    """

    def __init__(
        self,
        view: IMainView,
        state: DocumentState,
        dialogs: IFileDialogService,
        messages: IMessageService,
        export: IExportService,
        display: IDisplayTransfer,
        *,
        scheduler: IRenderScheduler | None = None,
        default_export_name: str = DEFAULT_EXPORT_NAME,
    ) -> None:
        self.view = view
        self.state = state
        self.dialogs = dialogs
        self.messages = messages
        self.export = export
        self.display = display
        self.scheduler = scheduler
        self.default_export_name = default_export_name
        self._unsubscribe = state.subscribe(self._on_document_changed)

    def start(self) -> None:
        self.view.set_editor_text(self.state.get_text())
        self.view.apply_pane_order(self.state.get_pane_order())
        self.render_preview()
        self.refresh_display_status()

    def close(self) -> None:
        self._unsubscribe()

    # ---------- editor / preview ----------

    def on_editor_text_changed(self, text: str) -> None:
        self.state.set_text(text)

    def render_preview(self) -> None:
        if self.scheduler is None:
            self.view.set_preview_html(self.state.render())
            return
        self.scheduler.request(self.state.get_text())

    def on_rendered(self, request_id: int, html: str) -> None:
        if self.scheduler is not None and request_id != self.scheduler.latest_request_id:
            return
        self.view.set_preview_html(html)

    def toggle_column_order(self) -> None:
        self.state.toggle_column_order()

    def _on_document_changed(self, change: DocumentChange) -> None:
        if change.kind is ChangeKind.TEXT:
            self.render_preview()
        elif change.kind is ChangeKind.PANE_ORDER:
            self.view.apply_pane_order(self.state.get_pane_order())

    # ---------- export ----------

    def save_via_dialog(self) -> None:
        out = self.dialogs.get_save_file(
            self.view, "Save Markdown", self.default_export_name, EXPORT_FILTER
        )
        if out is None:
            self.view.show_status("Save cancelled", STATUS_TIMEOUT_MS)
            return
        data = self.state.serialize()
        logger.info("Saving {} bytes to {}", len(data), out)
        self.export.export_async(out, data, self._on_export_done)

    def _on_export_done(self, path: Path, error_text: str) -> None:
        if error_text:
            self.messages.error(self.view, "Save Error", f"Failed to save file:\n{error_text}")
            return
        self.view.show_status(f"Saved: {path}", STATUS_TIMEOUT_MS)

    # ---------- display target ----------

    def refresh_display_status(self) -> None:
        self.view.set_display_status(self.display.status())

    def request_display_switch(self) -> None:
        if self.display.status() is DisplayStatus.UNSUPPORTED:
            self.view.show_status("No other display available", STATUS_TIMEOUT_MS)
            self.refresh_display_status()
            return
        self.display.request_switch(self._on_display_switched)

    def _on_display_switched(self, switched: bool, message: str) -> None:
        if not switched:
            logger.warning("Display switch failed: {}", message)
        self.view.show_status(message, STATUS_TIMEOUT_MS)
        self.refresh_display_status()
