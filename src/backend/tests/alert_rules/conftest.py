import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from datetime import date, timedelta

import pytest

from common.alert_rules.config import AlertRulesConfig
from common.alert_rules.context import AlertContext
from common.scorecard.models import (
    AuditIndexReading,
    Certification,
    PeriodMetric,
    ScorecardMetrics,
    SupplierRecord,
)


RECIPIENT = "quality.team@example.com"


@pytest.fixture
def today() -> date:
    return date(2026, 10, 19)


@pytest.fixture
def recipient() -> str:
    return RECIPIENT


@pytest.fixture
def make_record():
    def _make(
        *,
        parma_code: str | None = "12345",
        name: str | None = "Acme Castings AB",
        qpm: tuple[str | None, str | None] = (None, None),
        sw_status: str | None = None,
        sw_date: str | None = None,
        certifications: list[Certification] | None = None,
    ) -> SupplierRecord:
        return SupplierRecord(
            source_id=parma_code or "",
            id=parma_code,
            parma_code=parma_code,
            name=name,
            metrics=ScorecardMetrics(software=AuditIndexReading(status=sw_status, date=sw_date)),
            qpm=PeriodMetric(last_period=qpm[0], actual=qpm[1]),
            certifications=certifications or [],
        )

    return _make


@pytest.fixture
def make_cert(today):
    def _make(*, days_until: int | None = None, expiry_date: str | None = None, name: str = "ISO 9001") -> Certification:
        if expiry_date is None and days_until is not None:
            expiry_date = (today + timedelta(days=days_until)).isoformat()
        return Certification(name=name, certified_place="Gothenburg", expiry_date=expiry_date, status="Valid")

    return _make


@pytest.fixture
def make_ctx(today):
    def _make(*, rules: dict | None = None, recipient: str = RECIPIENT) -> AlertContext:
        return AlertContext(today=today, recipient=recipient, config=AlertRulesConfig(rules=rules or {}))

    return _make
