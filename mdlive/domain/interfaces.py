from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol

ExportCallback = Callable[[Path, str], None]


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to full HTML string (including CSS)."""

    def to_html(self, markdown_text: str) -> str: ...


class IFileService(Protocol):
    """Read/write files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_bytes_atomic(self, path: Path, data: bytes) -> None: ...


class IExportService(Protocol):
    """Write serialized documents to a destination chosen by the user."""

    def export(self, path: Path, data: bytes) -> None: ...

    def export_async(self, path: Path, data: bytes, on_done: ExportCallback) -> None:
        """
        Write off the UI thread. 'on_done(path, error_text)' is called exactly once,
        on the UI thread, with an empty error_text on success.
        """
        ...


class IConfigService(Protocol):
    """Read-only access to INI-style configuration values."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...
