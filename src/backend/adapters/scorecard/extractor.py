from __future__ import annotations

import logging
from datetime import date

from common.scorecard.models import SupplierRecord

from .audit_indices import audit_metrics_from_soup
from .certifications import certifications_from_soup
from .document import parse_document
from .layout import AUDIT_INDEX_FENCES, DEFAULT_LAYOUT, AuditIndexFence, ScorecardLayout
from .performance import performance_from_soup
from .supplier_info import project_status_from_soup, supplier_identity_from_soup

logger = logging.getLogger(__name__)


def supplier_record_from_html(
    source_id: str,
    raw_document: str,
    *,
    today: date,
    layout: ScorecardLayout = DEFAULT_LAYOUT,
    fences: tuple[AuditIndexFence, ...] = AUDIT_INDEX_FENCES,
) -> SupplierRecord:
    """
    Convert one rendered supplier scorecard page into a SupplierRecord.

    This function performs *no* I/O; acquiring the page is the caller's job.

    - Every section is optional. A missing section leaves its fields unset (rendered as
      "N/A"/"Unknown") without affecting the others.
    - `today` drives the software index age check so results are reproducible.
    - Raises ScorecardExtractionError only when `raw_document` is not markup at all.
    """
    soup = parse_document(source_id, raw_document)

    identity = supplier_identity_from_soup(soup, selector=layout.supplier_link_selector)
    status = project_status_from_soup(soup, selector=layout.project_status_selector)
    metrics = audit_metrics_from_soup(
        soup, selector=layout.audit_panel_selector, today=today, fences=fences
    )
    performance = performance_from_soup(soup, layout=layout.performance)
    certifications = certifications_from_soup(soup, layout=layout.certifications)

    record = SupplierRecord(
        source_id=source_id,
        id=identity.code,
        parma_code=identity.code,
        name=identity.name,
        apqp=status.apqp,
        ppap=status.ppap,
        metrics=metrics,
        qpm=performance.qpm,
        ppm=performance.ppm,
        certifications=certifications,
    )
    logger.debug(
        "Extracted %s: supplier=%s parma=%s certifications=%d",
        source_id,
        record.display_name,
        record.display_parma_code,
        len(certifications),
    )
    return record
