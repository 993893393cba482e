from __future__ import annotations

from typing import List

from common.scorecard.models import SupplierRecord, display

from ..config import SwIndexExpiredRuleConfig
from ..context import AlertContext
from ..formatting import sw_index_body, sw_index_subject
from ..models import AlertKind, Notification, Priority
from ..registry import register_rule
from ..rule import Rule


@register_rule
class SW_INDEX_EXPIRED(Rule):
    rule_id = "SW-INDEX-EXPIRED"
    rule_title = "Software Index audit expired"
    evaluation_order = 30
    config_model = SwIndexExpiredRuleConfig

    def evaluate(self, record: SupplierRecord, ctx: AlertContext) -> List[Notification]:
        cfg = ctx.config.get_rule_config(self.rule_id, SwIndexExpiredRuleConfig)
        if not cfg.enabled:
            return []
        if record.metrics.sw_status != cfg.expired_status:
            return []

        parma = record.display_parma_code
        return [
            Notification(
                recipient=ctx.recipient,
                subject=sw_index_subject(parma),
                body=sw_index_body(
                    supplier_name=record.display_name,
                    parma_code=parma,
                    sw_date=display(record.metrics.sw_date),
                    scorecard_url=ctx.config.scorecard_url,
                ),
                priority=Priority.CRITICAL,
                kind=AlertKind.SW_INDEX_EXPIRED,
                subject_entity_id=parma,
                rule_id=self.rule_id,
            )
        ]
