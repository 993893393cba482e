from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from bs4 import BeautifulSoup
from bs4.element import Tag

from common.scorecard.models import PeriodMetric
from common.scorecard.normalize import period_metric

from .document import element_text
from .layout import PerformanceTableLayout


@dataclass(frozen=True)
class PerformanceMetrics:
    qpm: PeriodMetric = field(default_factory=PeriodMetric)
    ppm: PeriodMetric = field(default_factory=PeriodMetric)


def _iter_cell_rows(table: Tag) -> Iterable[list[str | None]]:
    for row in table.find_all("tr"):
        yield [element_text(cell) for cell in row.find_all("td", recursive=False)]


def _cell(cells: list[str | None], idx: int) -> str | None:
    return cells[idx] if idx < len(cells) else None


def performance_from_soup(soup: BeautifulSoup, *, layout: PerformanceTableLayout) -> PerformanceMetrics:
    """
    Read QPM/PPM from the "Supplier Total" row of the sales performance table.

    Rows that are too short, blank, or the header row are skipped. Only the first total
    row is used.
    """
    table = soup.select_one(layout.selector)
    if table is None:
        return PerformanceMetrics()

    for cells in _iter_cell_rows(table):
        if len(cells) < layout.min_cells:
            continue
        label = cells[0]
        if not label or layout.header_label in label:
            continue
        if layout.total_label not in label:
            continue
        return PerformanceMetrics(
            ppm=period_metric(
                _cell(cells, layout.ppm_last_period_col), _cell(cells, layout.ppm_actual_col)
            ),
            qpm=period_metric(
                _cell(cells, layout.qpm_last_period_col), _cell(cells, layout.qpm_actual_col)
            ),
        )
    return PerformanceMetrics()
