from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from loguru import logger
from PyQt6.QtWidgets import QApplication

from mdlive.di.container import Container
from mdlive.services.config.app_config import build_app_config
from mdlive.utils.constants import APP_NAME, APP_ORG
from mdlive.utils.log import setup_logging


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.

    An optional first argument names an INI config file to load.
    """
    config = build_app_config(explicit_ini=Path(argv[1]) if len(argv) > 1 else None)
    setup_logging(config.log_level())
    logger.info("{} {} starting (config: {})", APP_NAME, config.get_version(), config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    QApplication.setApplicationVersion(config.get_version())
    app = QApplication(list(argv))

    container = Container(config=config)
    win = container.build_main_window(app_title=APP_NAME)
    win.show()

    return app.exec()
