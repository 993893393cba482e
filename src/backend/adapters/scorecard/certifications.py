from __future__ import annotations

from bs4 import BeautifulSoup

from common.scorecard.models import NOT_AVAILABLE, Certification

from .document import element_text
from .layout import CertificationTableLayout


def certifications_from_soup(
    soup: BeautifulSoup, *, layout: CertificationTableLayout
) -> list[Certification]:
    table = soup.select_one(layout.selector)
    if table is None:
        return []

    out: list[Certification] = []
    for row in table.find_all("tr"):
        cells = [element_text(cell) for cell in row.find_all("td", recursive=False)]
        if len(cells) < max(layout.min_cells, 4):
            continue
        name = cells[0]
        if not name or name == NOT_AVAILABLE:
            continue
        out.append(
            Certification(
                name=name,
                certified_place=cells[1],
                expiry_date=cells[2],
                status=cells[3],
            )
        )
    return out
