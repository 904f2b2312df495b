"""Tests for the command line front end."""

import pytest
from click.testing import CliRunner

from textpreview.cli import main


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.delenv("TEXTPREVIEW_HIGHLIGHT_STYLE", raising=False)
    return CliRunner()


def test_formats(runner):
    """List every format."""
    result = runner.invoke(main, ["formats"])
    assert result.exit_code == 0
    lines = result.output.strip().split("\n")
    assert len(lines) == 8
    assert "javascript\tJavaScript\t.js" in lines


def test_detect(runner):
    """Print detected format per file name."""
    result = runner.invoke(main, ["detect", "a.md", "b.xyz", "C.JSON"])
    assert result.exit_code == 0
    assert result.output == "a.md\tmarkdown\nb.xyz\tplain\nC.JSON\tjson\n"


def test_render_detects_format(runner, tmp_path):
    """Format comes from the file extension."""
    source = tmp_path / "table.csv"
    source.write_text("a,b\n1,2\n", encoding="utf-8")
    result = runner.invoke(main, ["render", str(source)])
    assert result.exit_code == 0
    assert '<table class="csv-table">' in result.output


def test_render_format_option(runner, tmp_path):
    """Explicit format overrides detection."""
    source = tmp_path / "notes.txt"
    source.write_text("{bad", encoding="utf-8")
    result = runner.invoke(main, ["render", str(source), "--format", "JSON"])
    assert result.exit_code == 0
    assert 'class="json-error"' in result.output


def test_render_json_path(runner, tmp_path):
    """JSONPath option prunes JSON preview."""
    source = tmp_path / "data.json"
    source.write_text('{"keep": 1, "drop": 2}', encoding="utf-8")
    result = runner.invoke(main, ["render", str(source), "--json-path", "$.keep"])
    assert result.exit_code == 0
    assert "keep" in result.output
    assert "drop" not in result.output


def test_render_standalone_output(runner, tmp_path):
    """Standalone page is written to output file."""
    source = tmp_path / "site.css"
    source.write_text("p { color: red; }", encoding="utf-8")
    output = tmp_path / "preview.html"
    result = runner.invoke(
        main, ["render", str(source), "--standalone", "-o", str(output)]
    )
    assert result.exit_code == 0
    page = output.read_text(encoding="utf-8")
    assert page.startswith("<!doctype html>")
    assert 'data-format="css"' in page
    assert ".highlight" in page
    assert "language-css" in page


def test_render_missing_file(runner, tmp_path):
    """Unreadable document is reported."""
    result = runner.invoke(main, ["render", str(tmp_path / "missing.md")])
    assert result.exit_code == 1
    assert "Cannot read" in result.output


def test_render_invalid_utf8(runner, tmp_path):
    """Undecodable bytes are replaced."""
    source = tmp_path / "notes.txt"
    source.write_bytes(b"ok \xff")
    result = runner.invoke(main, ["render", str(source)])
    assert result.exit_code == 0
    assert "ok �" in result.output


def test_stats(runner, tmp_path):
    """Print document counters."""
    source = tmp_path / "notes.txt"
    source.write_text("hello world\nfoo", encoding="utf-8")
    result = runner.invoke(main, ["stats", str(source)])
    assert result.exit_code == 0
    assert "characters\t15\n" in result.output
    assert "words\t3\n" in result.output


def test_invalid_style_setting(runner, monkeypatch):
    """Unknown highlight style in environment is a usage error."""
    monkeypatch.setenv("TEXTPREVIEW_HIGHLIGHT_STYLE", "no-such-style")
    result = runner.invoke(main, ["formats"])
    assert result.exit_code == 2
    assert "Invalid settings" in result.output
