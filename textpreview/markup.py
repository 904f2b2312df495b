"""HTML escaping and error block templates shared by all renderers."""

from html import escape

PARSE_ERROR = """
<div class="parse-error">
  <div class="error-icon">⚠️</div>
  <div class="error-content">
    <h4>%s parse error</h4>
    <p>%s</p>
    <small>Content is shown as plain text</small>
  </div>
</div>
"""

JSON_ERROR = """
<div class="json-error">
  <div class="error-header">❌ JSON parse error:</div>
  <div class="error-message">%s</div>
  <pre class="original-json">%s</pre>
</div>
"""


def escape_html(text) -> str:
    """Return text with ``& < > " '`` replaced by entities.

    Anything but ``str`` gives an empty string.
    """
    if not isinstance(text, str):
        return ""
    return escape(text, quote=True)


def error_message(exc: BaseException) -> str:
    """Return readable message of exception, class name when it is empty."""
    try:
        message = str(exc)
    except Exception:
        message = ""
    return message or exc.__class__.__name__


def parse_error_html(title: str, message: str) -> str:
    """Return generic error block for failed format."""
    return PARSE_ERROR % (escape_html(title), escape_html(message))


def json_error_html(message: str, original: str) -> str:
    """Return JSON error block with the original text below the message."""
    return JSON_ERROR % (escape_html(message), escape_html(original))
