APP_ORG = "MarkdownLiveEditor"
APP_NAME = "Markdown Editor"

DEFAULT_SEED_TEXT = "# Hello Markdown"
DEFAULT_EXPORT_NAME = "untitled.md"
EXPORT_FILTER = "Markdown (*.md *.markdown);;Text (*.txt);;All files (*)"

# Width at which editor and preview stop being paged and sit side by side
WIDE_BREAKPOINT_PX = 600

RENDER_CACHE_SIZE = 64
# Documents at least this long are rendered on a worker thread
ASYNC_RENDER_THRESHOLD = 20_000

STATUS_TIMEOUT_MS = 3000

CSS_PREVIEW = """
:root { --bg:#ffffff; --fg:#111; --muted:#555; --code:#f4f6f8; --border:#ddd; --link:#0b6bfd; }
@media (prefers-color-scheme: dark) {
  :root { --bg:#0f1115; --fg:#e7e9ee; --muted:#a0a4ae; --code:#1a1d24; --border:#2a2f3a; --link:#7aa2ff; }
}
html,body { background:var(--bg); color:var(--fg); }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1rem; line-height: 1.5; }
pre { padding:.75rem; overflow:auto; background:var(--code); white-space:pre-wrap; }
code { background:var(--code); padding:.1rem .25rem; }
blockquote { border-left:4px solid var(--border); margin:1em 0; padding:.25em .75em; color:var(--muted); }
th, td { border:1px solid var(--border); padding:.4rem .6rem; }
a { color:var(--link); }
del { color:var(--muted); }
ul,ol { padding-left:1.5rem; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""
