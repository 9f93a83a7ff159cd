from __future__ import annotations


class MarkdownEditorError(Exception):
    """Base class for errors raised by the editor's services."""


class RenderError(MarkdownEditorError):
    """The Markdown library could not convert a document.

    Never leaves the renderer: it is caught there and the document is shown
    as literal text instead.
    """


class ExportError(MarkdownEditorError, OSError):
    """Writing the document to its destination failed."""
