from __future__ import annotations

from decimal import Decimal
from typing import List

from common.scorecard.models import SupplierRecord
from common.scorecard.normalize import parse_metric_number

from ..config import QpmBandRuleConfig
from ..context import AlertContext
from ..formatting import qpm_body, qpm_subject
from ..models import AlertKind, Notification, Priority
from ..registry import register_rule
from ..rule import Rule


@register_rule
class QPM_BAND(Rule):
    """Warning inside the [warning_min, warning_max] band, critical above it. Never both."""

    rule_id = "QPM-BAND"
    rule_title = "QPM approaching or over 50"
    evaluation_order = 20
    config_model = QpmBandRuleConfig

    def evaluate(self, record: SupplierRecord, ctx: AlertContext) -> List[Notification]:
        cfg = ctx.config.get_rule_config(self.rule_id, QpmBandRuleConfig)
        if not cfg.enabled:
            return []

        # Both readings must parse, as for the increase rule.
        last_period = parse_metric_number(record.qpm.last_period)
        actual = parse_metric_number(record.qpm.actual)
        if last_period is None or actual is None:
            return []

        if cfg.warning_min <= actual <= cfg.warning_max:
            kind, priority = AlertKind.QPM_WARNING_30_50, Priority.MEDIUM
        elif actual > cfg.warning_max:
            kind, priority = AlertKind.QPM_CRITICAL_OVER_50, Priority.CRITICAL
        else:
            return []

        return [self._notification(record, ctx, kind, priority, last_period, actual)]

    def _notification(
        self,
        record: SupplierRecord,
        ctx: AlertContext,
        kind: AlertKind,
        priority: Priority,
        last_period: Decimal,
        actual: Decimal,
    ) -> Notification:
        parma = record.display_parma_code
        return Notification(
            recipient=ctx.recipient,
            subject=qpm_subject(kind, parma, last_period, actual),
            body=qpm_body(
                priority=priority,
                supplier_name=record.display_name,
                parma_code=parma,
                last_period=last_period,
                actual=actual,
                scorecard_url=ctx.config.scorecard_url,
            ),
            priority=priority,
            kind=kind,
            subject_entity_id=parma,
            rule_id=self.rule_id,
        )
