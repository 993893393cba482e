from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup

from .document import element_text

_APQP_RE = re.compile(r"APQP:\s*([^\s,]+)")
_PPAP_RE = re.compile(r"PPAP:\s*([^\s,]+)")


@dataclass(frozen=True)
class SupplierIdentity:
    code: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class ProjectStatus:
    apqp: str | None = None
    ppap: str | None = None


def supplier_identity_from_soup(soup: BeautifulSoup, *, selector: str) -> SupplierIdentity:
    """Read "<code>, <name>" from the supplier information link."""
    text = element_text(soup.select_one(selector))
    if text is None or "," not in text:
        return SupplierIdentity()
    code, name = text.split(",", 1)
    return SupplierIdentity(code=code.strip() or None, name=name.strip() or None)


def project_status_from_soup(soup: BeautifulSoup, *, selector: str) -> ProjectStatus:
    text = element_text(soup.select_one(selector))
    if text is None:
        return ProjectStatus()
    apqp = _APQP_RE.search(text)
    ppap = _PPAP_RE.search(text)
    return ProjectStatus(
        apqp=apqp.group(1) if apqp else None,
        ppap=ppap.group(1) if ppap else None,
    )
