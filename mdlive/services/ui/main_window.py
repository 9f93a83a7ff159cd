from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QGuiApplication, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow,
    QSplitter,
    QStackedWidget,
    QStatusBar,
    QTabWidget,
    QTextBrowser,
    QTextEdit,
    QToolBar,
)

from mdlive.domain.models import DisplayStatus, PaneOrder
from mdlive.services.ui.presenters.main_presenter import MainPresenter
from mdlive.utils.constants import APP_NAME, STATUS_TIMEOUT_MS, WIDE_BREAKPOINT_PX


class MainWindow(QMainWindow):
    """
    Thin PyQt window: an editor pane and a preview pane.

    Wide windows show both panes side by side in a splitter, in the current pane
    order. Narrow windows page between them with tabs, editor first. All logic
    lives in the attached MainPresenter.
    """

    def __init__(
        self,
        *,
        app_title: str = APP_NAME,
        wide_breakpoint_px: int = WIDE_BREAKPOINT_PX,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(1100, 700)

        self.presenter: MainPresenter | None = None
        self.wide_breakpoint_px = wide_breakpoint_px
        self._pane_order = PaneOrder.EDITOR_FIRST
        self._wide: bool | None = None

        # Widgets
        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))

        self.preview = QTextBrowser(self)
        self.preview.setOpenExternalLinks(True)

        self.splitter = QSplitter(Qt.Orientation.Horizontal, self)
        self.splitter.setChildrenCollapsible(False)
        self.tabs = QTabWidget(self)

        self.stack = QStackedWidget(self)
        self.stack.addWidget(self.splitter)
        self.stack.addWidget(self.tabs)
        self.setCentralWidget(self.stack)

        # UI
        self._build_actions()
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))

        self._update_layout_mode()

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_save = QAction("Save…", self, shortcut=QKeySequence.StandardKey.Save)
        self.act_save.setStatusTip("Save Markdown to a file")

        self.act_swap = QAction("Swap Panes", self)
        self.act_swap.setStatusTip("Swap editor and preview when shown side by side")

        self.act_display = QAction("Move to Other Display", self, checkable=True)
        self.act_display.setEnabled(False)

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        tb.addAction(self.act_save)
        tb.addSeparator()
        tb.addAction(self.act_swap)
        tb.addAction(self.act_display)
        self.addToolBar(tb)

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self.presenter = presenter
        self.editor.textChanged.connect(self._on_text_changed)
        self.act_save.triggered.connect(lambda chk=False: presenter.save_via_dialog())
        self.act_swap.triggered.connect(lambda chk=False: presenter.toggle_column_order())
        self.act_display.triggered.connect(lambda chk=False: presenter.request_display_switch())

        app = QGuiApplication.instance()
        if app is not None:
            app.screenAdded.connect(self._on_screen_changed)
            app.screenRemoved.connect(self._on_screen_changed)

    # ---------- IMainView ----------
    def set_editor_text(self, text: str) -> None:
        self.editor.blockSignals(True)
        try:
            self.editor.setPlainText(text)
        finally:
            self.editor.blockSignals(False)

    def set_preview_html(self, html: str) -> None:
        bar = self.preview.verticalScrollBar()
        pos = bar.value()
        self.preview.setHtml(html)
        bar.setValue(min(pos, bar.maximum()))

    def apply_pane_order(self, order: PaneOrder) -> None:
        self._pane_order = order
        if self._wide:
            self._fill_splitter()

    def set_display_status(self, status: DisplayStatus) -> None:
        self.act_display.setEnabled(status is not DisplayStatus.UNSUPPORTED)
        self.act_display.setChecked(status is DisplayStatus.ACTIVE)

    def show_status(self, text: str, msec: int = STATUS_TIMEOUT_MS) -> None:
        self.statusBar().showMessage(text, msec)

    # ---------- Layout ----------
    def is_wide(self) -> bool:
        return bool(self._wide)

    def _update_layout_mode(self) -> None:
        wide = self.width() >= self.wide_breakpoint_px
        if wide == self._wide:
            return
        self._wide = wide
        if wide:
            # clear() only removes the pages; the widgets move to the splitter
            self.tabs.clear()
            self._fill_splitter()
            self.stack.setCurrentWidget(self.splitter)
        else:
            self.tabs.addTab(self.editor, "Editor")
            self.tabs.addTab(self.preview, "Preview")
            self.stack.setCurrentWidget(self.tabs)

    def _fill_splitter(self) -> None:
        if self._pane_order is PaneOrder.EDITOR_FIRST:
            first, second = self.editor, self.preview
        else:
            first, second = self.preview, self.editor
        self.splitter.insertWidget(0, first)
        self.splitter.insertWidget(1, second)
        first.show()
        second.show()
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)

    def pane_widgets(self) -> list:
        """Editor/preview in on-screen order for the current layout."""
        if self._wide:
            return [self.splitter.widget(i) for i in range(self.splitter.count())]
        return [self.tabs.widget(i) for i in range(self.tabs.count())]

    # ---------- Events ----------
    def _on_text_changed(self):
        if self.presenter is not None:
            self.presenter.on_editor_text_changed(self.editor.toPlainText())

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._update_layout_mode()

    def showEvent(self, event):
        super().showEvent(event)
        handle = self.windowHandle()
        if handle is not None and self.presenter is not None:
            try:
                handle.screenChanged.disconnect(self._on_screen_changed)
            except TypeError:
                pass
            handle.screenChanged.connect(self._on_screen_changed)

    def _on_screen_changed(self, _screen):
        if self.presenter is not None:
            self.presenter.refresh_display_status()

    def closeEvent(self, event):
        if self.presenter is not None:
            self.presenter.close()
        super().closeEvent(event)
