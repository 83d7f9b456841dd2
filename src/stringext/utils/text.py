"""Plain-text formatting helpers."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable, Optional

from stringext.markup.strip import remove_html_comments, strip_html

_WORD_SEPARATORS_RE = re.compile(r"[ .?!]+")
_SENTENCE_END_RE = re.compile(r"[.!?]")


def word_count(text: Optional[str]) -> int:
    """Count words separated by spaces, full stops, question or exclamation marks."""
    if not text:
        return 0
    return sum(1 for word in _WORD_SEPARATORS_RE.split(text) if word)


def first_char_to_upper(text: Optional[str]) -> str:
    if not text:
        return ""
    return text[0].upper() + text[1:]


def highlight_keywords(
    text: Optional[str],
    keywords: Optional[Iterable[str]],
    class_name: str,
    literal: bool = False,
) -> Optional[str]:
    """Wrap each case-insensitive keyword match in <span class="...">.

    Keywords are regular expressions unless ``literal`` is set. They are
    applied in order to the already highlighted text, so a later keyword can
    match inside an earlier highlight span.
    """
    keywords = [k for k in (keywords or ()) if k]
    if not text or not keywords:
        return text

    for keyword in keywords:
        pattern = re.escape(keyword) if literal else keyword
        text = re.sub(
            pattern,
            lambda m: f'<span class="{class_name}">{m.group(0)}</span>',
            text,
            flags=re.IGNORECASE,
        )
    return text


def remove_diacritics(text: Optional[str]) -> str:
    """Remove accents: decompose, drop non-spacing marks, recompose."""
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def get_sentence(text: Optional[str], index: int) -> str:
    """Return sentence ``index`` (0-based) of the HTML-stripped text, or ""."""
    if not text or index < 0:
        return ""

    plain = strip_html(
        text,
        keep_paragraphs=False,
        keep_italic=False,
        keep_underline=False,
        keep_bold=False,
        keep_line_break=False,
    )
    sentences = _SENTENCE_END_RE.split(plain)
    # text after the last terminator is not a sentence when it is blank
    if not sentences[-1].strip():
        sentences.pop()
    if index >= len(sentences):
        return ""
    return sentences[index].strip() + "."


def get_paragraph(text: Optional[str], index: int) -> str:
    """Return paragraph ``index`` (0-based) wrapped in <p>...</p>.

    Comments are removed and everything but paragraph, italic, underline,
    bold, line-break and anchor tags is stripped first.
    """
    empty = "<p></p>"
    if not text or index < 0:
        return empty

    cleaned = strip_html(remove_html_comments(text), extra_tags=["a"])
    paragraphs = [p for p in cleaned.split("<p>") if p]
    if index >= len(paragraphs):
        return empty

    paragraph = paragraphs[index]
    end = paragraph.find("</p>")
    if end == -1:
        return f"<p>{paragraph.strip()}</p>"
    return "<p>" + paragraph[: end + 4]


def truncate_at_word(text: Optional[str], length: int, suffix: str = "...") -> Optional[str]:
    """Truncate text to ``length``, breaking at the last space before it."""
    if text is None or len(text) < length:
        return text
    last_space = text.rfind(" ", 0, length + 1)
    cut = last_space if last_space > 0 else length
    return text[:cut].strip() + suffix


def invert_case(text: Optional[str]) -> str:
    if not text:
        return ""
    return "".join(ch.swapcase() if ch.isalpha() else ch for ch in text)


def substring_before(text: Optional[str], separator: str) -> str:
    """Return the part of text before the first separator, or "" if absent."""
    if not text:
        return ""
    pos = text.find(separator)
    if pos == -1:
        return ""
    return text[:pos]


def substring_after(text: Optional[str], separator: str) -> str:
    """Return the part of text after the first separator, or "" if absent."""
    if not text:
        return ""
    pos = text.find(separator)
    if pos == -1:
        return ""
    return text[pos + len(separator):]
