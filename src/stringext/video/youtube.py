"""YouTube video ID lookup, embed markup and thumbnail URLs."""

from __future__ import annotations

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

EMBED_BASE = "https://www.youtube.com/embed/"
THUMBNAIL_BASE = "https://i.ytimg.com/vi"
THUMBNAIL_INDEXES = range(0, 4)

_VIDEO_ID_RE = re.compile(r"[\w-]{11}")

# Tried in order; the first match wins
_ID_PATTERNS = (
    re.compile(r"^([\w-]{11})$"),   # bare ID
    re.compile(r"v=([\w-]{11})"),   # watch?v=ID
    re.compile(r"/([\w-]{11})$"),   # youtu.be/ID, /embed/ID
)

_EMBED_TEMPLATE = (
    '<iframe src="{src}" width="{width}" height="{height}" '
    'frameborder="0" allowfullscreen></iframe>'
)


def get_youtube_id(subject: Optional[str]) -> Optional[str]:
    """Find a YouTube video ID in a URL or string, or None."""
    if not subject:
        return None
    for pattern in _ID_PATTERNS:
        match = pattern.search(subject)
        if match:
            return match.group(1)
    return None


def find_youtube_id(subject: Optional[str]) -> tuple[bool, Optional[str]]:
    """Return (found, video_id) for a URL or string."""
    video_id = get_youtube_id(subject)
    return video_id is not None, video_id


def is_youtube_id(video_id: Optional[str]) -> bool:
    return bool(video_id) and _VIDEO_ID_RE.fullmatch(video_id) is not None


def youtube_embed(
    video_id: Optional[str],
    width: int,
    height: int,
    *,
    show_relations: Optional[bool] = None,
    wmode: Optional[str] = None,
    base_url: str = EMBED_BASE,
) -> Optional[str]:
    """Build the embed <iframe> for a video, or None for an invalid ID.

    ``show_relations=False`` turns off related videos at the end of playback.
    ``wmode`` (e.g. ``"transparent"``) is passed through to the player.
    """
    if not is_youtube_id(video_id):
        return None

    src = base_url + video_id
    params: list[str] = []
    if show_relations is not None:
        params.append(f"rel={int(show_relations)}")
    if wmode:
        params.append(f"wmode={wmode}")
    if params:
        src += "?" + "&".join(params)

    return _EMBED_TEMPLATE.format(src=src, width=width, height=height)


def youtube_thumbnail(
    video_id: Optional[str],
    index: int = 0,
    *,
    base_url: str = THUMBNAIL_BASE,
) -> Optional[str]:
    """Thumbnail URL for a video, or None for an invalid ID.

    Index 0 is the 480x360 default thumbnail; 1-3 are 120x90 stills.
    """
    if not is_youtube_id(video_id):
        return None
    if index not in THUMBNAIL_INDEXES:
        logger.warning("Thumbnail index %d out of range 0-3 for video %s", index, video_id)
        return None
    return f"{base_url.rstrip('/')}/{video_id}/{index}.jpg"
