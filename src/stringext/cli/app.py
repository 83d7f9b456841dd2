"""Root CLI application with the text and markup commands."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from stringext.cli.config_cmd import config_app
from stringext.cli.youtube import youtube_app
from stringext.core.config import load_config
from stringext.core.errors import StringExtError
from stringext.markup.shorten import shorten_html
from stringext.markup.strip import strip_html
from stringext.utils.text import (
    get_paragraph,
    get_sentence,
    highlight_keywords,
    invert_case,
    remove_diacritics,
    truncate_at_word,
    word_count,
)

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name="stringext",
    help="Text and HTML helpers: stripping, word-safe shortening, highlighting and more.",
    no_args_is_help=True,
)

# Register sub-command groups
app.add_typer(youtube_app)
app.add_typer(config_app)


def read_text(text: str) -> str:
    """Return the argument, or stdin when it is '-'."""
    if text == "-":
        return sys.stdin.read()
    return text


def emit(result: Optional[str]) -> None:
    """Print a result verbatim (no rich markup or highlighting)."""
    console.print(result or "", markup=False, highlight=False, emoji=False, soft_wrap=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Text and HTML helpers."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def strip(
    text: str = typer.Argument(..., help="HTML text, or '-' for stdin"),
    paragraphs: bool = typer.Option(True, "--paragraphs/--no-paragraphs", help="Keep <p> tags"),
    italic: bool = typer.Option(True, "--italic/--no-italic", help="Keep <i> and <em> tags"),
    underline: bool = typer.Option(True, "--underline/--no-underline", help="Keep <u> tags"),
    bold: bool = typer.Option(True, "--bold/--no-bold", help="Keep <b> and <strong> tags"),
    line_break: bool = typer.Option(True, "--line-break/--no-line-break", help="Keep <br> tags"),
    keep: Optional[List[str]] = typer.Option(None, "--keep", "-k", help="Other tag names to keep"),
    strip_all: bool = typer.Option(False, "--all", help="Strip every tag"),
) -> None:
    """Strip HTML tags, keeping basic formatting unless told otherwise."""
    if strip_all:
        paragraphs = italic = underline = bold = line_break = False
        keep = None
    emit(strip_html(
        read_text(text),
        keep_paragraphs=paragraphs,
        keep_italic=italic,
        keep_underline=underline,
        keep_bold=bold,
        keep_line_break=line_break,
        extra_tags=keep,
    ))


@app.command()
def shorten(
    text: str = typer.Argument(..., help="HTML text, or '-' for stdin"),
    length: Optional[int] = typer.Option(None, "--length", "-l", help="Approximate output length"),
    ellipsis: Optional[str] = typer.Option(None, "--ellipsis", "-e", help="Text appended when shortened"),
) -> None:
    """Shorten HTML at a word boundary and close any open tags."""
    cfg = load_config()
    try:
        result = shorten_html(
            read_text(text),
            length=length if length is not None else cfg.shorten.length,
            ellipsis=ellipsis if ellipsis is not None else cfg.shorten.ellipsis,
            config=cfg.repair.to_repair_config(),
        )
    except StringExtError as exc:
        err_console.print(f"[red]Failed:[/red] {escape(str(exc))}")
        raise typer.Exit(1)

    emit(result.text)
    if result.was_truncated:
        err_console.print("[dim]truncated[/dim]")


@app.command()
def truncate(
    text: str = typer.Argument(..., help="Plain text, or '-' for stdin"),
    length: Optional[int] = typer.Option(None, "--length", "-l", help="Maximum length before the suffix"),
) -> None:
    """Truncate plain text at the last word boundary."""
    cfg = load_config()
    emit(truncate_at_word(
        read_text(text),
        length if length is not None else cfg.truncate.length,
        suffix=cfg.truncate.suffix,
    ))


@app.command()
def count(text: str = typer.Argument(..., help="Text, or '-' for stdin")) -> None:
    """Count the words in a text."""
    emit(str(word_count(read_text(text))))


@app.command()
def sentence(
    text: str = typer.Argument(..., help="HTML text, or '-' for stdin"),
    index: int = typer.Argument(..., help="0-based sentence index"),
) -> None:
    """Print one sentence of the HTML-stripped text."""
    emit(get_sentence(read_text(text), index))


@app.command()
def paragraph(
    text: str = typer.Argument(..., help="HTML text, or '-' for stdin"),
    index: int = typer.Argument(..., help="0-based paragraph index"),
) -> None:
    """Print one <p> paragraph of an HTML text."""
    emit(get_paragraph(read_text(text), index))


@app.command()
def highlight(
    text: str = typer.Argument(..., help="Text, or '-' for stdin"),
    keywords: List[str] = typer.Argument(..., help="Keywords (regular expressions) to highlight"),
    class_name: Optional[str] = typer.Option(None, "--class-name", "-c", help="CSS class of the span"),
    literal: bool = typer.Option(False, "--literal", help="Treat keywords as plain text"),
) -> None:
    """Wrap keywords in <span class="..."> elements."""
    cfg = load_config()
    emit(highlight_keywords(
        read_text(text),
        keywords,
        class_name or cfg.highlight.class_name,
        literal=literal,
    ))


@app.command()
def diacritics(text: str = typer.Argument(..., help="Text, or '-' for stdin")) -> None:
    """Remove accents and other diacritics."""
    emit(remove_diacritics(read_text(text)))


@app.command()
def invert(text: str = typer.Argument(..., help="Text, or '-' for stdin")) -> None:
    """Invert the case of every letter."""
    emit(invert_case(read_text(text)))
