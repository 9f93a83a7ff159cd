"""Concrete service implementations: rendering, document state, storage."""

from .document_state import DocumentState
from .file_service import FileService
from .markdown_renderer import MarkdownRenderer

__all__ = ["DocumentState", "FileService", "MarkdownRenderer"]
