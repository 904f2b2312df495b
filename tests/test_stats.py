"""Tests for document counters."""

from textpreview.stats import TextStats


def test_empty_text():
    """Empty document still has one line."""
    assert TextStats.from_text("") == TextStats(0, 1, 0, 0)


def test_counts():
    """Count characters, lines, words and the last line."""
    stats = TextStats.from_text("hello world\nfoo")
    assert stats.characters == 15
    assert stats.lines == 2
    assert stats.words == 3
    assert stats.last_line_length == 3


def test_blank_text_has_no_words():
    """Whitespace only document has no words."""
    stats = TextStats.from_text("  \n\t\n")
    assert stats.words == 0
    assert stats.lines == 3
    assert stats.last_line_length == 0
