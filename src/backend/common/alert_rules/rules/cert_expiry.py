from __future__ import annotations

import logging
from typing import List, Optional

from common.scorecard.models import Certification, SupplierRecord
from common.scorecard.normalize import parse_iso_date

from ..config import CertificationExpiryRuleConfig
from ..context import AlertContext
from ..formatting import certification_body, certification_subject
from ..models import AlertKind, Notification, Priority
from ..registry import register_rule
from ..rule import Rule

logger = logging.getLogger(__name__)


def classify_days_until(
    days_until: int, cfg: CertificationExpiryRuleConfig
) -> Optional[tuple[AlertKind, Priority]]:
    if days_until <= 0:
        return AlertKind.CERT_EXPIRED, Priority.CRITICAL
    if days_until <= cfg.expiring_soon_days:
        return AlertKind.CERT_EXPIRING, Priority.MEDIUM
    if days_until <= cfg.notice_days:
        return AlertKind.CERT_NOTICE, Priority.LOW
    return None


@register_rule
class CERT_EXPIRY(Rule):
    rule_id = "CERT-EXPIRY"
    rule_title = "Certification expired or expiring"
    evaluation_order = 40
    config_model = CertificationExpiryRuleConfig

    def evaluate(self, record: SupplierRecord, ctx: AlertContext) -> List[Notification]:
        cfg = ctx.config.get_rule_config(self.rule_id, CertificationExpiryRuleConfig)
        if not cfg.enabled:
            return []

        out: List[Notification] = []
        for cert in record.certifications:
            notification = self._check(record, cert, ctx, cfg)
            if notification is not None:
                out.append(notification)
        return out

    def _check(
        self,
        record: SupplierRecord,
        cert: Certification,
        ctx: AlertContext,
        cfg: CertificationExpiryRuleConfig,
    ) -> Optional[Notification]:
        expiry = parse_iso_date(cert.expiry_date)
        if expiry is None:
            logger.debug("Skipping certification %r: unparsable expiry %r", cert.name, cert.expiry_date)
            return None

        days_until = (expiry - ctx.today).days
        classified = classify_days_until(days_until, cfg)
        if classified is None:
            return None
        kind, priority = classified
        days = abs(days_until)

        parma = record.display_parma_code
        return Notification(
            recipient=ctx.recipient,
            subject=certification_subject(kind, cert.name, parma, days),
            body=certification_body(
                kind=kind,
                priority=priority,
                supplier_name=record.display_name,
                parma_code=parma,
                cert_name=cert.name,
                expiry_date=expiry.isoformat(),
                days=days,
                scorecard_url=ctx.config.scorecard_url,
            ),
            priority=priority,
            kind=kind,
            subject_entity_id=parma,
            rule_id=self.rule_id,
        )
