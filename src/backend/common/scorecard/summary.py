from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from pydantic import BaseModel

from .models import SupplierRecord, Trend
from .normalize import parse_metric_number

OVER_LIMIT = Decimal("50")


class ScorecardSummary(BaseModel):
    total_suppliers: int = 0
    qpm_over_50: int = 0
    ppm_over_50: int = 0
    qpm_trend_up: int = 0
    qpm_trend_down: int = 0
    qpm_trend: Trend = Trend.NEUTRAL

    @property
    def qpm_trend_text(self) -> str:
        return f"{self.qpm_trend_up} up, {self.qpm_trend_down} down"


def summarize_records(records: Iterable[SupplierRecord]) -> ScorecardSummary:
    """Dashboard KPIs across a batch of supplier records."""
    summary = ScorecardSummary()
    for record in records:
        summary.total_suppliers += 1
        qpm_actual = parse_metric_number(record.qpm.actual)
        ppm_actual = parse_metric_number(record.ppm.actual)
        if qpm_actual is not None and qpm_actual > OVER_LIMIT:
            summary.qpm_over_50 += 1
        if ppm_actual is not None and ppm_actual > OVER_LIMIT:
            summary.ppm_over_50 += 1
        if record.qpm.trend == Trend.UP:
            summary.qpm_trend_up += 1
        elif record.qpm.trend == Trend.DOWN:
            summary.qpm_trend_down += 1

    if summary.qpm_trend_up > summary.qpm_trend_down:
        summary.qpm_trend = Trend.UP
    elif summary.qpm_trend_down > summary.qpm_trend_up:
        summary.qpm_trend = Trend.DOWN
    return summary
