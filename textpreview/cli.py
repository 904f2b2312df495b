"""Command line front end: detect, render and count editor documents."""

from pathlib import Path

import click
from pydantic import ValidationError

from textpreview.errors import SourceReadError
from textpreview.formats import FORMATS, FormatTag, detect
from textpreview.log import configure_logging, get_logger
from textpreview.page import standalone_page
from textpreview.renderer import FormatRenderer
from textpreview.settings import PreviewSettings
from textpreview.stats import TextStats

logger = get_logger(__name__)

FORMAT_CHOICES = [tag.value for tag in FormatTag]


def read_source(path: Path) -> str:
    """Return document text, undecodable bytes are replaced."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceReadError(f"Cannot read {path}: {e.strerror or e}") from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug events.")
@click.option("--json-logs", is_flag=True, help="Log events as JSON.")
@click.pass_context
def main(ctx, verbose, json_logs):
    """Preview plain text documents as HTML."""
    try:
        settings = PreviewSettings()
    except ValidationError as e:
        raise click.UsageError(f"Invalid settings: {e}") from e
    configure_logging(
        verbose=verbose or settings.verbose,
        json_logs=json_logs or settings.json_logs,
    )
    ctx.obj = settings


@main.command("formats")
def formats_cmd():
    """List supported formats."""
    for tag, info in FORMATS.items():
        click.echo(f"{tag.value}\t{info['title']}\t.{info['ext']}")


@main.command("detect")
@click.argument("files", nargs=-1, required=True)
def detect_cmd(files):
    """Print format detected from each file name."""
    for file_name in files:
        click.echo(f"{file_name}\t{detect(file_name).value}")


@main.command("render")
@click.argument("source", type=click.Path(path_type=Path))
@click.option(
    "-f",
    "--format",
    "format_",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    help="Format to render, detected from file name when missing.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write preview to file instead of stdout.",
)
@click.option("--standalone", is_flag=True, help="Write full HTML page.")
@click.option("--json-path", default="", help="JSONPath filter for JSON documents.")
@click.pass_obj
def render_cmd(settings, source, format_, output, standalone, json_path):
    """Render SOURCE as HTML preview."""
    try:
        text = read_source(source)
    except SourceReadError as e:
        raise click.ClickException(str(e)) from e

    tag = FormatTag.coerce(format_) if format_ else detect(source.name)
    outcome = FormatRenderer(json_path=json_path).render_outcome(tag, text)
    if not outcome.ok:
        logger.info("preview_degraded", source=str(source), format=tag.value)

    html = outcome.html
    if standalone:
        html = standalone_page(
            html, tag, title=settings.page_title, style=settings.highlight_style
        )
    if output is None:
        click.echo(html)
    else:
        output.write_text(html, encoding="utf-8")
        logger.debug("preview_written", output=str(output), format=tag.value)


@main.command("stats")
@click.argument("source", type=click.Path(path_type=Path))
def stats_cmd(source):
    """Print document counters."""
    try:
        text = read_source(source)
    except SourceReadError as e:
        raise click.ClickException(str(e)) from e
    stats = TextStats.from_text(text)
    click.echo(f"characters\t{stats.characters}")
    click.echo(f"lines\t{stats.lines}")
    click.echo(f"words\t{stats.words}")
    click.echo(f"last line\t{stats.last_line_length}")
