"""Domain layer: interfaces, errors and simple models (dataclasses/enums)."""

from .errors import ExportError, MarkdownEditorError, RenderError
from .interfaces import IExportService, IFileService, IMarkdownRenderer
from .models import ChangeKind, DisplayStatus, Document, DocumentChange, PaneOrder

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "IExportService",
    "Document",
    "DocumentChange",
    "ChangeKind",
    "PaneOrder",
    "DisplayStatus",
    "MarkdownEditorError",
    "RenderError",
    "ExportError",
]
