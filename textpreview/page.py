"""Standalone HTML page around a rendered preview fragment."""

from pygments.formatters import HtmlFormatter

from textpreview.markup import escape_html

PAGE = """<!doctype html>
<html>
  <head>
    <meta charset="utf-8">
    <title>%(title)s</title>
    <style>
%(base_css)s
%(highlight_css)s
    </style>
  </head>
  <body>
    <div class="preview-content" data-format="%(format)s">
%(body)s
    </div>
  </body>
</html>
"""

BASE_CSS = """
body { font-family: system-ui, sans-serif; margin: 1rem; }
pre { white-space: pre-wrap; }
.plain-text, .original-json, .empty-json { font-family: monospace; }
.csv-table { border-collapse: collapse; }
.csv-table td { border: 1px solid #ccc; padding: 0.2rem 0.5rem; }
.csv-table .header-cell { font-weight: bold; background: #f0f0f0; }
.parse-error, .json-error { border: 1px solid #e0a800; padding: 0.5rem; }
.json-error { border-color: #d33; }
.error-header, .error-message { color: #d33; }
.empty-csv, .empty-json { color: #888; }
"""


def standalone_page(body: str, tag, title: str = "Preview", style: str = "default") -> str:
    """Return full HTML document with body and highlight style definitions."""
    highlight_css = HtmlFormatter(style=style).get_style_defs(".highlight")
    return PAGE % {
        "title": escape_html(title),
        "base_css": BASE_CSS,
        "highlight_css": highlight_css,
        "format": escape_html(tag.value),
        "body": body,
    }
