# mdlive/services/markdown_renderer.py
from __future__ import annotations

import html as html_lib
from functools import lru_cache

from loguru import logger
from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from mdlive.domain.errors import RenderError
from mdlive.domain.interfaces import IMarkdownRenderer
from mdlive.utils.constants import CSS_PREVIEW, HTML_TEMPLATE, RENDER_CACHE_SIZE


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to a complete HTML document for the preview pane.

    Parsing follows CommonMark (markdown-it-py's ``commonmark`` preset) with
    GFM tables, ``~~strikethrough~~`` and ``- [x]`` task lists switched on.

    The conversion is a pure function of the input text, so results are memoized
    in a bounded LRU cache keyed on the exact text. The parser keeps no state
    between ``render`` calls, so one instance is shared by the UI thread and the
    background render workers.

    Rendering is total: if markdown-it fails on some input, the document is
    shown as escaped literal text instead of raising.
    """

    PRESET = "commonmark"
    EXTRA_RULES = ("table", "strikethrough")

    def __init__(self, cache_size: int = RENDER_CACHE_SIZE) -> None:
        self.cache_size = max(0, cache_size)
        self._md = MarkdownIt(self.PRESET).enable(list(self.EXTRA_RULES))
        self._md.use(tasklists_plugin)
        self._cached = lru_cache(maxsize=self.cache_size)(self._render_uncached)

    def to_html(self, markdown_text: str) -> str:
        return self._cached(markdown_text)

    render = to_html

    def cache_info(self):
        return self._cached.cache_info()

    def clear_cache(self) -> None:
        self._cached.cache_clear()

    # -------------------- helpers --------------------

    def _render_uncached(self, markdown_text: str) -> str:
        try:
            body = self._convert(markdown_text)
        except RenderError as e:
            logger.warning("Markdown conversion failed, showing literal text: {}", e)
            body = self._literal_body(markdown_text)
        return HTML_TEMPLATE.format(css=CSS_PREVIEW, body=body)

    def _convert(self, markdown_text: str) -> str:
        try:
            return self._md.render(markdown_text)
        except Exception as e:
            raise RenderError(f"{type(e).__name__}: {e}") from e

    @staticmethod
    def _literal_body(markdown_text: str) -> str:
        if not markdown_text:
            return ""
        return f'<pre class="literal">{html_lib.escape(markdown_text)}</pre>'
