"""Regex-based HTML tag stripping with a tag whitelist.

This is best-effort tag recognition, not an HTML parser. Unbalanced angle
brackets in malformed input may survive stripping.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from stringext.core.models import StripOptions

_ANY_TAG_RE = re.compile(r"<.+?>", re.DOTALL)

# Option flag -> tag names it exempts from stripping
_KEEP_FLAG_TAGS: dict[str, tuple[str, ...]] = {
    "keep_paragraphs": ("p",),
    "keep_italic": ("i", "em"),
    "keep_underline": ("u",),
    "keep_bold": ("b", "strong"),
    "keep_line_break": ("br",),
}


def _build_whitelist_re(names: Iterable[str]) -> re.Pattern:
    alternation = "|".join(f"/?{re.escape(name)}" for name in names)
    return re.compile(rf"<(?!(?:{alternation})\b)[^>]*>", re.DOTALL | re.IGNORECASE)


def strip_html(
    text: Optional[str],
    *,
    keep_paragraphs: bool = True,
    keep_italic: bool = True,
    keep_underline: bool = True,
    keep_bold: bool = True,
    keep_line_break: bool = True,
    extra_tags: Optional[Iterable[str]] = None,
) -> str:
    """Strip HTML tags from text, keeping the whitelisted ones.

    Paragraph, italic, underline, bold and line-break tags are kept unless
    their flag is turned off. ``extra_tags`` names further tags to keep
    (without brackets, e.g. ``"a"``). With nothing to keep every tag goes.
    """
    if text is None:
        return ""

    flags = {
        "keep_paragraphs": keep_paragraphs,
        "keep_italic": keep_italic,
        "keep_underline": keep_underline,
        "keep_bold": keep_bold,
        "keep_line_break": keep_line_break,
    }
    names: list[str] = []
    for flag, enabled in flags.items():
        if enabled:
            names.extend(_KEEP_FLAG_TAGS[flag])
    names.extend(tag.strip() for tag in (extra_tags or ()) if tag and tag.strip())

    pattern = _build_whitelist_re(names) if names else _ANY_TAG_RE
    # a removed tag can join the pieces of another one, e.g. "<p<x>re>"
    while True:
        stripped = pattern.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


def strip_html_with(text: Optional[str], options: StripOptions) -> str:
    """Strip HTML using a StripOptions model (e.g. loaded from config)."""
    return strip_html(
        text,
        keep_paragraphs=options.keep_paragraphs,
        keep_italic=options.keep_italic,
        keep_underline=options.keep_underline,
        keep_bold=options.keep_bold,
        keep_line_break=options.keep_line_break,
        extra_tags=options.extra_tags,
    )


def remove_html_comments(text: Optional[str]) -> str:
    """Remove <!-- ... --> comments, dropping the whitespace around them."""
    if text is None:
        return ""

    parts: list[str] = []
    for segment in text.split("<!--"):
        end = segment.find("-->")
        if end != -1:
            segment = segment[end + 3:]
        segment = segment.strip()
        if segment:
            parts.append(segment)
    return "".join(parts)
