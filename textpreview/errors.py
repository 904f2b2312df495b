"""Textpreview error hierarchy.

    TextPreviewError
    ├── InvalidJsonError        # raised by the JSON renderer, never escapes render()
    └── SourceReadError         # CLI could not read the document
"""


class TextPreviewError(Exception):
    """Base class for all textpreview errors."""


class InvalidJsonError(TextPreviewError):
    """JSON document could not be parsed."""

    def __init__(self, message: str, original: str) -> None:
        super().__init__(message)
        self.message = message
        self.original = original


class SourceReadError(TextPreviewError):
    """Document file could not be read."""
