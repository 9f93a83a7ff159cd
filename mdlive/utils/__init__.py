"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    ASYNC_RENDER_THRESHOLD,
    CSS_PREVIEW,
    DEFAULT_EXPORT_NAME,
    DEFAULT_SEED_TEXT,
    EXPORT_FILTER,
    HTML_TEMPLATE,
    RENDER_CACHE_SIZE,
    STATUS_TIMEOUT_MS,
    WIDE_BREAKPOINT_PX,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "ASYNC_RENDER_THRESHOLD",
    "CSS_PREVIEW",
    "DEFAULT_EXPORT_NAME",
    "DEFAULT_SEED_TEXT",
    "EXPORT_FILTER",
    "HTML_TEMPLATE",
    "RENDER_CACHE_SIZE",
    "STATUS_TIMEOUT_MS",
    "WIDE_BREAKPOINT_PX",
]
