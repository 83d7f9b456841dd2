"""Word-safe truncation of HTML content that keeps the markup well-formed."""

from __future__ import annotations

import logging
import re
from typing import Optional

from stringext.core.models import RepairConfig, ShortenResult
from stringext.markup.repair import HtmlRepairer, SoupRepairer, extract_body

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_CANONICAL_BREAK = "<br/>"
_OUTPUT_BREAK = "<br />"
_CLOSING_PARAGRAPH = "</p>"


def _cut_at_word(text: str, length: int) -> str:
    """Return text[:length] extended up to the next space (or the end)."""
    next_space = text.find(" ", length)
    if next_space == -1:
        return text
    return text[:next_space]


def _drop_trailing_breaks(candidate: str) -> str:
    candidate = candidate.strip()
    while candidate.endswith(_CANONICAL_BREAK):
        candidate = candidate[: -len(_CANONICAL_BREAK)].strip()
    return candidate


def _append_ellipsis(markup: str, ellipsis: str) -> str:
    if not ellipsis:
        return markup
    if markup.endswith(_CLOSING_PARAGRAPH):
        return markup[: -len(_CLOSING_PARAGRAPH)] + ellipsis + _CLOSING_PARAGRAPH
    return markup + ellipsis


def shorten_html(
    text: Optional[str],
    length: int = 300,
    ellipsis: str = "...",
    *,
    repairer: Optional[HtmlRepairer] = None,
    config: Optional[RepairConfig] = None,
) -> ShortenResult:
    """Shorten HTML to roughly ``length`` characters without splitting words.

    The cut is extended to the next space, trailing line breaks are dropped
    and the fragment is run through the repairer so any tag left open by the
    cut gets closed. The ellipsis goes inside a trailing ``</p>`` when there
    is one, otherwise at the very end.

    ``was_truncated`` compares the input with the cut before repair, so it
    reflects dropped content rather than markup changes. Raises
    HtmlRepairError when the repaired document has no body.
    """
    if text is None:
        text = ""
    if len(text) <= length:
        return ShortenResult(text=text, was_truncated=False)

    normalized = _LINE_BREAK_RE.sub(_CANONICAL_BREAK, text)
    candidate = _drop_trailing_breaks(_cut_at_word(normalized, length))
    was_truncated = len(normalized) > len(candidate)
    if not was_truncated:
        # no space after the limit and nothing trimmed: the cut is the whole input
        return ShortenResult(text=text, was_truncated=False)
    candidate = candidate.replace(_CANONICAL_BREAK, _OUTPUT_BREAK)

    config = config or RepairConfig()
    repairer = repairer or SoupRepairer()
    document = repairer.repair(candidate.encode(config.encoding), config)
    repaired = extract_body(document, config)

    logger.debug(
        "Shortened HTML from %d to %d characters (truncated=%s)",
        len(text), len(repaired), was_truncated,
    )
    return ShortenResult(text=_append_ellipsis(repaired, ellipsis), was_truncated=was_truncated)
