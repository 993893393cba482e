"""Normalized supplier scorecard records.

Only the record shape and value normalization live here; parsing raw scorecard
markup is an adapter concern (see `adapters.scorecard`).
"""

from .models import (
    NOT_AVAILABLE,
    UNKNOWN_NAME,
    AuditIndexReading,
    Certification,
    PeriodMetric,
    ScorecardMetrics,
    SupplierRecord,
    Trend,
)
from .summary import ScorecardSummary, summarize_records
