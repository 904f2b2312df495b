"""Tests for preview settings and the standalone page."""

import pytest
from pydantic import ValidationError

from textpreview.formats import FormatTag
from textpreview.page import standalone_page
from textpreview.settings import PreviewSettings


def test_defaults(monkeypatch):
    """Settings have usable defaults."""
    monkeypatch.delenv("TEXTPREVIEW_HIGHLIGHT_STYLE", raising=False)
    monkeypatch.delenv("TEXTPREVIEW_PAGE_TITLE", raising=False)
    settings = PreviewSettings()
    assert settings.highlight_style == "default"
    assert settings.page_title == "Preview"


def test_environment(monkeypatch):
    """Settings are read from TEXTPREVIEW_ variables."""
    monkeypatch.setenv("TEXTPREVIEW_HIGHLIGHT_STYLE", "monokai")
    monkeypatch.setenv("TEXTPREVIEW_VERBOSE", "1")
    settings = PreviewSettings()
    assert settings.highlight_style == "monokai"
    assert settings.verbose is True


def test_unknown_style():
    """Only Pygments styles are accepted."""
    with pytest.raises(ValidationError):
        PreviewSettings(highlight_style="no-such-style")


def test_standalone_page():
    """Page wraps the fragment and escapes the title."""
    page = standalone_page("<p>body</p>", FormatTag.HTML, title="<Preview>")
    assert "<title>&lt;Preview&gt;</title>" in page
    assert "<p>body</p>" in page
    assert 'data-format="html"' in page
    assert ".highlight" in page
