"""Format dispatch renderer producing HTML previews."""

from dataclasses import dataclass
from json import dumps, loads
from math import isfinite

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name

from textpreview.errors import InvalidJsonError
from textpreview.formats import FormatTag
from textpreview.jsonfilter import JsonPathFilter
from textpreview.log import get_logger
from textpreview.markup import (
    error_message,
    escape_html,
    json_error_html,
    parse_error_html,
)

logger = get_logger(__name__)

# elements which could load resources or run code in the preview
STRIPPED_TAGS = ["script", "style", "link", "meta"]

LEXERS = {
    FormatTag.CSS: "css",
    FormatTag.JAVASCRIPT: "javascript",
    FormatTag.JSON: "json",
    FormatTag.XML: "xml",
}

JSON_INDENT = 2

PLAIN = """<pre class="plain-text">%s</pre>"""
CODE_BLOCK = """<pre><code class="highlight language-%s">%s</code></pre>"""
HTML_BLOCK = """<div class="code-block html-preview">%s</div>"""
EMPTY_JSON = """<pre class="empty-json">{} // Empty JSON</pre>"""
EMPTY_CSV = """<div class="empty-csv">No CSV data</div>"""


@dataclass(frozen=True)
class RenderError:
    """Failed rendering attempt, shown in place of the preview."""

    tag: FormatTag
    message: str
    original: str | None = None

    def to_html(self) -> str:
        """Return error block, JSON errors carry the original text."""
        if self.original is not None:
            return json_error_html(self.message, self.original)
        return parse_error_html(self.tag.display_name, self.message)


@dataclass(frozen=True)
class RenderOutcome:
    """Result of one render call."""

    tag: FormatTag
    html: str
    error: RenderError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the format renderer succeeded."""
        return self.error is None


def _reject_constant(name):
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_float(literal):
    # out of range numbers serialize as null
    value = float(literal)
    return value if isfinite(value) else None


def _parse_int(literal):
    try:
        return int(literal)
    except ValueError:
        # longer than the interpreter integer string conversion limit
        return _parse_float(literal)


def _as_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class FormatRenderer:
    """Render text as HTML preview of the selected format.

    Every format has its own independent method. Any exception raised by
    a method is turned into an error block, so ``render`` always returns
    markup.
    """

    def __init__(self, json_path: str = "") -> None:
        self.json_path = json_path or ""
        self.markdown = MarkdownIt("gfm-like", {"breaks": True, "html": True})
        self.formatter = HtmlFormatter(nowrap=True)
        self.strategies = {
            FormatTag.PLAIN: self.render_plain,
            FormatTag.MARKDOWN: self.render_markdown,
            FormatTag.HTML: self.render_html,
            FormatTag.CSS: self.render_code,
            FormatTag.JAVASCRIPT: self.render_code,
            FormatTag.JSON: self.render_json,
            FormatTag.XML: self.render_code,
            FormatTag.CSV: self.render_csv,
        }

    def render(self, tag, text) -> str:
        """Return HTML preview of text, error block when rendering failed."""
        return self.render_outcome(tag, text).html

    def render_outcome(self, tag, text) -> RenderOutcome:
        """Render text and return the outcome with optional error."""
        tag = FormatTag.coerce(tag)
        strategy = self.strategies.get(tag, self.render_plain)
        try:
            html = strategy(_as_text(text), tag)
        except InvalidJsonError as e:
            logger.debug("json_invalid", error=e.message)
            error = RenderError(tag, e.message, e.original)
        except Exception as e:
            message = error_message(e)
            logger.warning("render_failed", format=tag.value, error=message)
            error = RenderError(tag, message)
        else:
            return RenderOutcome(tag, html)
        return RenderOutcome(tag, error.to_html(), error)

    def render_plain(self, text, tag=FormatTag.PLAIN):
        """Return escaped text in a fixed-width block."""
        return PLAIN % escape_html(text)

    def render_markdown(self, text, tag=FormatTag.MARKDOWN):
        """Convert Markdown to HTML, raw HTML is passed through."""
        return self.markdown.render(text)

    def render_html(self, text, tag=FormatTag.HTML):
        """Return markup without script, style, link and meta elements."""
        soup = BeautifulSoup(text, "html.parser")
        for element in soup.find_all(STRIPPED_TAGS):
            if not element.decomposed:
                element.decompose()
        return HTML_BLOCK % soup.decode()

    def render_code(self, text, tag):
        """Return text highlighted with lexer of the format."""
        lexer = get_lexer_by_name(LEXERS[tag], stripnl=False)
        return CODE_BLOCK % (tag.value, highlight(text, lexer, self.formatter))

    def render_json(self, text, tag=FormatTag.JSON):
        """Return reformatted and highlighted JSON.

        Empty document is shown as placeholder, invalid document raises
        InvalidJsonError with the original text.
        """
        if not text.strip():
            return EMPTY_JSON
        pretty = self.pretty_json(text)
        return self.render_code(pretty, FormatTag.JSON)

    def pretty_json(self, text: str) -> str:
        """Return text reserialized with two space indentation."""
        try:
            data = loads(
                text,
                parse_constant=_reject_constant,
                parse_float=_parse_float,
                parse_int=_parse_int,
            )
        except (ValueError, RecursionError) as e:
            raise InvalidJsonError(str(e), text) from e
        if self.json_path:
            data = JsonPathFilter(self.json_path).apply(data)
        try:
            return dumps(data, indent=JSON_INDENT, ensure_ascii=False)
        except RecursionError as e:
            raise InvalidJsonError(str(e), text) from e

    def render_csv(self, text, tag=FormatTag.CSV):
        """Return table with first line as header row.

        Cells are split on every comma, quoting is not recognized.
        """
        lines = [line for line in text.split("\n") if line.strip()]
        if not lines:
            return EMPTY_CSV
        rows = []
        for index, line in enumerate(lines):
            cell_class = "header-cell" if index == 0 else "data-cell"
            cells = "".join(
                f'<td class="{cell_class}">{escape_html(cell.strip())}</td>'
                for cell in line.split(",")
            )
            rows.append(f"<tr>{cells}</tr>")
        return '<table class="csv-table">' + "".join(rows) + "</table>"


_RENDERER = FormatRenderer()


def render(tag, text) -> str:
    """Return HTML preview of text rendered as format tag."""
    return _RENDERER.render(tag, text)
