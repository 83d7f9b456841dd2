"""Exceptions raised by stringext."""

from __future__ import annotations


class StringExtError(Exception):
    """Base class for stringext errors."""


class HtmlRepairError(StringExtError):
    """The HTML repairer produced a document without a <body> element."""

    def __init__(self, message: str, markup: str = "") -> None:
        super().__init__(message)
        self.markup = markup
