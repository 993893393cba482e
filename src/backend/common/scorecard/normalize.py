from __future__ import annotations

import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .models import PeriodMetric, Trend

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25

_NON_NUMERIC_RE = re.compile(r"[^0-9.+\-]")
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_metric_number(value: Any) -> Decimal | None:
    """
    Parse a scorecard display value ("12.5", "1,204", "38 QPM") as a Decimal.

    Everything except digits, sign characters and the decimal point is dropped before
    parsing, so "N/A" and other text-only values come back as None.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    s = _NON_NUMERIC_RE.sub("", str(value))
    if not s:
        return None
    try:
        parsed = Decimal(s)
    except InvalidOperation:
        logger.debug("Unparsable metric value %r", value)
        return None
    if not parsed.is_finite():
        return None
    return parsed


def format_change(delta: Decimal) -> str:
    return f"{delta:+.1f}"


def trend_for_change(delta: Decimal) -> Trend:
    if delta > 0:
        return Trend.UP
    if delta < 0:
        return Trend.DOWN
    return Trend.NEUTRAL


def period_metric(last_period: Optional[str], actual: Optional[str]) -> PeriodMetric:
    metric = PeriodMetric(last_period=last_period, actual=actual)
    last_val = parse_metric_number(last_period)
    actual_val = parse_metric_number(actual)
    if last_val is None or actual_val is None:
        return metric
    delta = actual_val - last_val
    metric.change = format_change(delta)
    metric.trend = trend_for_change(delta)
    return metric


def parse_iso_date(value: Any) -> date | None:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not _ISO_DATE_RE.match(s):
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        logger.debug("Invalid calendar date %r", value)
        return None


def years_between(start: date, end: date) -> float:
    return (end - start).days / DAYS_PER_YEAR
