"""Tolerant HTML repair: turn a possibly broken fragment into well-formed markup."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from bs4 import BeautifulSoup, CData
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from stringext.core.errors import HtmlRepairError
from stringext.core.models import RepairConfig

logger = logging.getLogger(__name__)

_XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
_XHTML_DOCTYPE = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">'
)
_HTML_DOCTYPE = "<!DOCTYPE html>"

# Raw-text elements whose content is wrapped in CDATA sections for XHTML
_RAW_TEXT_TAGS = ("script", "style")

# Characters written as numeric references when numeric entities are on
_NUMERIC_REFS = {
    "\xa0": "&#160;",
    "\xad": "&#173;",
}


class HtmlRepairer(Protocol):
    def repair(self, markup: bytes, config: RepairConfig) -> bytes:
        """Return a well-formed <html><body>...</body></html> document."""
        ...


def _substitute(value: str, numeric_entities: bool) -> str:
    value = EntitySubstitution.substitute_xml(value)
    if numeric_entities:
        for char, ref in _NUMERIC_REFS.items():
            value = value.replace(char, ref)
    return value


def build_formatter(config: RepairConfig) -> HTMLFormatter:
    """Formatter matching the repair config (void tags, entity handling)."""
    return HTMLFormatter(
        entity_substitution=lambda value: _substitute(value, config.numeric_entities),
        void_element_close_prefix="/" if config.xhtml else None,
    )


def _wrap_raw_text(soup: BeautifulSoup) -> None:
    """Put script/style text in CDATA sections so it stays well-formed XML."""
    for tag in soup.find_all(_RAW_TEXT_TAGS):
        for text in tag.find_all(string=True):
            if text.strip():
                text.replace_with(CData(text.replace("]]>", "]]]]><![CDATA[>")))


class SoupRepairer:
    """HtmlRepairer backed by BeautifulSoup's html.parser tree builder.

    Unterminated tags are closed at the end of the fragment and end tags
    with no matching start tag are dropped.
    """

    parser = "html.parser"

    def repair(self, markup: bytes, config: RepairConfig) -> bytes:
        soup = BeautifulSoup(markup, self.parser, from_encoding=config.encoding)
        if config.xhtml:
            _wrap_raw_text(soup)

        formatter = build_formatter(config)
        if soup.body is not None:
            # a whole document: keep only what its body holds
            fragment = soup.body.decode_contents(formatter=formatter)
        else:
            fragment = soup.decode(formatter=formatter)

        parts: list[str] = []
        if not config.omit_doctype:
            parts.append(_XHTML_DOCTYPE if config.xhtml else _HTML_DOCTYPE)
        if config.xhtml:
            parts.append(f'<html xmlns="{_XHTML_NAMESPACE}"><head><title></title></head>')
        else:
            parts.append("<html><head></head>")
        parts.append(f"<body>{fragment}</body></html>")

        document = "".join(parts).encode(config.encoding)
        logger.debug("Repaired %d bytes of markup into %d bytes", len(markup), len(document))
        return document


def extract_body(document: bytes, config: RepairConfig) -> str:
    """Return the inner markup of the document's <body> element."""
    soup = BeautifulSoup(document, "html.parser", from_encoding=config.encoding)
    body = soup.find("body")
    if body is None:
        raise HtmlRepairError(
            "Repaired document has no <body> element",
            markup=document.decode(config.encoding, errors="replace"),
        )
    return body.decode_contents(formatter=build_formatter(config))


def repair_fragment(
    markup: str,
    config: Optional[RepairConfig] = None,
    repairer: Optional[HtmlRepairer] = None,
) -> str:
    """Repair an HTML fragment and return it balanced, without the wrapper."""
    config = config or RepairConfig()
    repairer = repairer or SoupRepairer()
    document = repairer.repair(markup.encode(config.encoding), config)
    return extract_body(document, config)
