from __future__ import annotations

import logging
import re
from datetime import date
from typing import Iterable

from bs4 import BeautifulSoup

from common.scorecard.models import AuditIndexReading, ScorecardMetrics
from common.scorecard.normalize import parse_iso_date, years_between

from .document import element_text
from .layout import AUDIT_INDEX_FENCES, AuditIndexFence

logger = logging.getLogger(__name__)

EXPIRED_STATUS = "Expired"

# Checked in order; the first match wins.
_STATUS_KEYWORDS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bnot\s+approved\b", re.IGNORECASE), "Not approved"),
    (re.compile(r"\bapproved\s+with\s+conditions\b", re.IGNORECASE), "Approved with conditions"),
    (re.compile(r"\bapproved\b", re.IGNORECASE), "Approved"),
)
_PERCENT_RE = re.compile(r"(\d+(?:\.\d+)?)\s*%")
_DATE_RE = re.compile(r"(?<!\d)(\d{4}-\d{2}-\d{2})(?!\d)")


def _block_pattern(fence: AuditIndexFence, fences: Iterable[AuditIndexFence]) -> re.Pattern[str]:
    next_labels = fence.next_labels or tuple(
        f.label_pattern for f in fences if f.field != fence.field
    )
    stop = "|".join(f"\\b{label}" for label in next_labels)
    stop = f"{stop}|$" if stop else "$"
    return re.compile(rf"\b{fence.label_pattern}(.+?)(?={stop})", re.IGNORECASE | re.DOTALL)


def isolate_block(text: str, fence: AuditIndexFence, fences: Iterable[AuditIndexFence]) -> str | None:
    """Return the text belonging to one audit index block, or None if its label is absent."""
    m = _block_pattern(fence, fences).search(text)
    if m is None:
        return None
    return m.group(1)


def _status_from_block(block: str) -> str | None:
    for pattern, status in _STATUS_KEYWORDS:
        if pattern.search(block):
            return status
    return None


def read_audit_index(block: str, fence: AuditIndexFence, *, today: date) -> AuditIndexReading:
    pct = _PERCENT_RE.search(block)
    found_date = _DATE_RE.search(block)
    reading = AuditIndexReading(
        index=f"{pct.group(1)}%" if pct else None,
        status=_status_from_block(block),
        date=found_date.group(1) if found_date else None,
    )

    if fence.expires_after_years is not None and reading.date is not None:
        audit_date = parse_iso_date(reading.date)
        if audit_date is None:
            logger.debug("Skipping expiry check for %s: invalid date %r", fence.field, reading.date)
        elif years_between(audit_date, today) > fence.expires_after_years:
            reading.status = EXPIRED_STATUS
    return reading


def audit_metrics_from_text(
    text: str,
    *,
    today: date,
    fences: tuple[AuditIndexFence, ...] = AUDIT_INDEX_FENCES,
) -> ScorecardMetrics:
    metrics = ScorecardMetrics()
    for fence in fences:
        block = isolate_block(text, fence, fences)
        if block is None:
            continue
        metrics.set_reading(fence.field, read_audit_index(block, fence, today=today))
    return metrics


def audit_metrics_from_soup(
    soup: BeautifulSoup,
    *,
    selector: str,
    today: date,
    fences: tuple[AuditIndexFence, ...] = AUDIT_INDEX_FENCES,
) -> ScorecardMetrics:
    text = element_text(soup.select_one(selector))
    if text is None:
        return ScorecardMetrics()
    return audit_metrics_from_text(text, today=today, fences=fences)
