"""Format tags and file name based format detection."""

from enum import Enum
from ntpath import basename


class FormatTag(Enum):
    """Preview format of an editor document."""

    PLAIN = "plain"
    MARKDOWN = "markdown"
    HTML = "html"
    CSS = "css"
    JAVASCRIPT = "javascript"
    JSON = "json"
    XML = "xml"
    CSV = "csv"

    @property
    def display_name(self) -> str:
        """Return human readable format name."""
        return FORMATS[self]["title"]

    @property
    def extension(self) -> str:
        """Return canonical file extension, without the dot."""
        return FORMATS[self]["ext"]

    @classmethod
    def coerce(cls, value) -> "FormatTag":
        """Return tag for value, PLAIN for anything not recognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.PLAIN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.PLAIN


FORMATS = {
    FormatTag.PLAIN: {"title": "Plain text", "ext": "txt"},
    FormatTag.MARKDOWN: {"title": "Markdown", "ext": "md"},
    FormatTag.HTML: {"title": "HTML", "ext": "html"},
    FormatTag.CSS: {"title": "CSS", "ext": "css"},
    FormatTag.JAVASCRIPT: {"title": "JavaScript", "ext": "js"},
    FormatTag.JSON: {"title": "JSON", "ext": "json"},
    FormatTag.XML: {"title": "XML", "ext": "xml"},
    FormatTag.CSV: {"title": "CSV", "ext": "csv"},
}

EXTS = {
    ".txt": FormatTag.PLAIN,
    ".md": FormatTag.MARKDOWN,
    ".html": FormatTag.HTML,
    ".css": FormatTag.CSS,
    ".js": FormatTag.JAVASCRIPT,
    ".json": FormatTag.JSON,
    ".xml": FormatTag.XML,
    ".csv": FormatTag.CSV,
}


def detect(file_name) -> FormatTag:
    """Return format tag for file name extension.

    The extension is everything after the last dot of the last path
    component, so ``.json`` is JSON. Both ``/`` and ``\\`` are treated
    as separators. Missing or unknown extension gives ``FormatTag.PLAIN``.
    """
    if not isinstance(file_name, str):
        return FormatTag.PLAIN
    _, dot, ext = basename(file_name).rpartition(".")
    if not dot:
        return FormatTag.PLAIN
    return EXTS.get(dot + ext.lower(), FormatTag.PLAIN)


def default_filename(tag) -> str:
    """Return file name offered when saving an unnamed document."""
    return f"document.{FormatTag.coerce(tag).extension}"
