from __future__ import annotations

import re
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Tag

_WHITESPACE_RE = re.compile(r"\s+")


class ScorecardExtractionError(ValueError):
    def __init__(self, source_id: str, reason: str):
        super().__init__(f"{source_id}: {reason}")
        self.source_id = source_id
        self.reason = reason


def parse_document(source_id: str, raw_document: Any) -> BeautifulSoup:
    """
    Parse a rendered scorecard page into a BeautifulSoup tree.

    Raises ScorecardExtractionError when the input is not markup at all (not a string,
    blank, or plain text without a single element).
    """
    if not isinstance(raw_document, str):
        raise ScorecardExtractionError(source_id, "Raw document must be a string.")
    if not raw_document.strip():
        raise ScorecardExtractionError(source_id, "Raw document is empty.")

    soup = BeautifulSoup(raw_document, "html.parser")
    if soup.find(True) is None:
        raise ScorecardExtractionError(source_id, "Raw document contains no markup elements.")
    return soup


def element_text(elem: Tag | None) -> str | None:
    """Whitespace-collapsed text of an element; None when missing or blank."""
    if elem is None:
        return None
    text = _WHITESPACE_RE.sub(" ", elem.get_text(" ")).strip()
    return text or None
