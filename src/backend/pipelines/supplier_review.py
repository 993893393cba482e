from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, Iterator

from adapters.scorecard.document import ScorecardExtractionError
from adapters.scorecard.extractor import supplier_record_from_html
from common.alert_rules.config import AlertRulesConfig
from common.alert_rules.models import AlertRunReport
from common.alert_rules.runner import AlertRunner
from common.scorecard.models import SupplierRecord
from common.scorecard.summary import ScorecardSummary, summarize_records

logger = logging.getLogger(__name__)

DOCUMENT_GLOB = "supplier_*.html"


@dataclass(frozen=True)
class ExtractionFailureInfo:
    source_id: str
    reason: str


@dataclass(frozen=True)
class SupplierReview:
    records: tuple[SupplierRecord, ...]
    failures: tuple[ExtractionFailureInfo, ...]
    summary: ScorecardSummary
    alerts: AlertRunReport


@dataclass(frozen=True)
class ExtractionBatch:
    records: tuple[SupplierRecord, ...] = ()
    failures: tuple[ExtractionFailureInfo, ...] = ()


def iter_cached_documents(data_dir: Path) -> Iterator[tuple[str, str]]:
    """Yield (source_id, raw_html) for each cached scorecard page, sorted by file name."""
    for path in sorted(data_dir.glob(DOCUMENT_GLOB)):
        source_id = path.stem.removeprefix("supplier_")
        yield source_id, path.read_text(encoding="utf-8", errors="replace")


def extract_documents(documents: Iterable[tuple[str, str]], *, today: date) -> ExtractionBatch:
    records: list[SupplierRecord] = []
    failures: list[ExtractionFailureInfo] = []
    for source_id, raw in documents:
        try:
            records.append(supplier_record_from_html(source_id, raw, today=today))
        except ScorecardExtractionError as exc:
            logger.warning("Excluding %s from review: %s", exc.source_id, exc.reason)
            failures.append(ExtractionFailureInfo(source_id=exc.source_id, reason=exc.reason))
    return ExtractionBatch(records=tuple(records), failures=tuple(failures))


def review_documents(
    documents: Iterable[tuple[str, str]],
    *,
    recipient: str,
    today: date,
    config: AlertRulesConfig | None = None,
) -> SupplierReview:
    """
    Extract every document, then summarize and evaluate alerts over the records that
    extracted. Unparseable documents are reported as failures and take no further part.
    """
    batch = extract_documents(documents, today=today)
    alerts = AlertRunner(config=config).run(batch.records, recipient, today)
    logger.info(
        "Reviewed %d supplier(s), %d failure(s), %d notification(s)",
        len(batch.records),
        len(batch.failures),
        len(alerts.notifications),
    )
    return SupplierReview(
        records=batch.records,
        failures=batch.failures,
        summary=summarize_records(batch.records),
        alerts=alerts,
    )
