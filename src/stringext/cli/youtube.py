"""YouTube helper CLI commands."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from stringext.core.config import load_config
from stringext.video.youtube import get_youtube_id, youtube_embed, youtube_thumbnail

console = Console()
youtube_app = typer.Typer(name="youtube", help="YouTube video IDs, embeds and thumbnails.")


def _print_or_fail(value: Optional[str], message: str) -> None:
    if value is None:
        console.print(f"[red]{escape(message)}[/red]")
        raise typer.Exit(1)
    console.print(value, markup=False, highlight=False, emoji=False, soft_wrap=True)


@youtube_app.command("id")
def video_id(subject: str = typer.Argument(..., help="URL or string containing a video ID")) -> None:
    """Extract the video ID from a YouTube URL."""
    _print_or_fail(get_youtube_id(subject), f"No video ID found in: {subject}")


@youtube_app.command("embed")
def embed(
    video: str = typer.Argument(..., help="Video ID"),
    width: Optional[int] = typer.Option(None, "--width", help="Iframe width"),
    height: Optional[int] = typer.Option(None, "--height", help="Iframe height"),
    relations: Optional[bool] = typer.Option(
        None, "--rel/--no-rel", help="Show related videos at the end of playback"
    ),
    wmode: Optional[str] = typer.Option(None, "--wmode", help="Player window mode, e.g. transparent"),
) -> None:
    """Print the embed <iframe> for a video."""
    cfg = load_config().youtube
    markup = youtube_embed(
        video,
        width if width is not None else cfg.width,
        height if height is not None else cfg.height,
        show_relations=relations,
        wmode=wmode,
        base_url=cfg.embed_base,
    )
    _print_or_fail(markup, f"Invalid video ID: {video}")


@youtube_app.command("thumbnail")
def thumbnail(
    video: str = typer.Argument(..., help="Video ID"),
    index: int = typer.Option(0, "--index", "-i", help="Thumbnail index (0-3)"),
) -> None:
    """Print the thumbnail URL for a video."""
    cfg = load_config().youtube
    url = youtube_thumbnail(video, index, base_url=cfg.thumbnail_base)
    _print_or_fail(url, f"Invalid video ID or thumbnail index: {video} / {index}")
