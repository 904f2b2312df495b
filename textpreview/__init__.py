"""Live HTML previews of plain text documents in several formats."""

from textpreview.formats import FormatTag, default_filename, detect
from textpreview.renderer import (
    FormatRenderer,
    RenderError,
    RenderOutcome,
    render,
)

__version__ = "1.0.0"

__all__ = [
    "FormatRenderer",
    "FormatTag",
    "RenderError",
    "RenderOutcome",
    "default_filename",
    "detect",
    "render",
]
