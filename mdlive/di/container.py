from __future__ import annotations


from mdlive.domain.interfaces import IExportService, IFileService, IMarkdownRenderer
from mdlive.services.config.app_config import AppConfig, build_app_config
from mdlive.services.document_state import DocumentState
from mdlive.services.export_service import ExportService
from mdlive.services.file_service import FileService
from mdlive.services.markdown_renderer import MarkdownRenderer
from mdlive.services.render_scheduler import RenderScheduler
from mdlive.services.ui.adapters import QtDisplayTransfer, QtFileDialogService, QtMessageService
from mdlive.services.ui.main_window import MainWindow
from mdlive.services.ui.ports import IDisplayTransfer, IFileDialogService, IMessageService
from mdlive.services.ui.presenters.main_presenter import MainPresenter
from mdlive.utils.constants import APP_NAME


class Container:
    """
    Lightweight DI container:
      - Wires default services from configuration if not provided
      - Owns the single DocumentState for the session
      - Builds the MainWindow with its presenter, scheduler and display adapter
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        export: IExportService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()

        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(
            cache_size=self.config.render_cache_size()
        )
        self.file_service: IFileService = files or FileService()
        self.export_service: IExportService = export or ExportService(self.file_service)
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.state = DocumentState(self.renderer, text=self.config.seed_text())

    # ---------- UI factories ----------

    def build_render_scheduler(self) -> RenderScheduler:
        return RenderScheduler(
            self.renderer, async_threshold=self.config.async_render_threshold()
        )

    def build_main_presenter(
        self,
        view: MainWindow,
        *,
        display: IDisplayTransfer | None = None,
        scheduler: RenderScheduler | None = None,
    ) -> MainPresenter:
        presenter = MainPresenter(
            view=view,
            state=self.state,
            dialogs=self.dialogs,
            messages=self.messages,
            export=self.export_service,
            display=display or QtDisplayTransfer(view),
            scheduler=scheduler,
            default_export_name=self.config.default_export_name(),
        )
        if scheduler is not None:
            scheduler.rendered.connect(presenter.on_rendered)
        return presenter

    def build_main_window(self, *, app_title: str = APP_NAME) -> MainWindow:
        """
        Create the Qt MainWindow, attach a presenter bound to the shared document,
        and push the initial document into the view.
        """
        window = MainWindow(
            app_title=app_title,
            wide_breakpoint_px=self.config.wide_breakpoint_px(),
        )
        scheduler = self.build_render_scheduler()
        scheduler.setParent(window)
        presenter = self.build_main_presenter(window, scheduler=scheduler)
        window.attach_presenter(presenter)
        presenter.start()
        return window
