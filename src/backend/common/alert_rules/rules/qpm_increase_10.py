from __future__ import annotations

from typing import List

from common.scorecard.models import SupplierRecord
from common.scorecard.normalize import parse_metric_number

from ..config import QpmIncreaseRuleConfig
from ..context import AlertContext
from ..formatting import qpm_body, qpm_subject
from ..models import AlertKind, Notification, Priority
from ..registry import register_rule
from ..rule import Rule


@register_rule
class QPM_INCREASE_10(Rule):
    rule_id = "QPM-INCREASE-10"
    rule_title = "QPM increased by 10% or more over last period"
    evaluation_order = 10
    config_model = QpmIncreaseRuleConfig

    def evaluate(self, record: SupplierRecord, ctx: AlertContext) -> List[Notification]:
        cfg = ctx.config.get_rule_config(self.rule_id, QpmIncreaseRuleConfig)
        if not cfg.enabled:
            return []

        last_period = parse_metric_number(record.qpm.last_period)
        actual = parse_metric_number(record.qpm.actual)
        if last_period is None or actual is None or last_period <= 0:
            return []
        if actual < last_period * cfg.increase_ratio:
            return []

        parma = record.display_parma_code
        kind = AlertKind.QPM_INCREASE_10
        return [
            Notification(
                recipient=ctx.recipient,
                subject=qpm_subject(kind, parma, last_period, actual),
                body=qpm_body(
                    priority=Priority.LOW,
                    supplier_name=record.display_name,
                    parma_code=parma,
                    last_period=last_period,
                    actual=actual,
                    scorecard_url=ctx.config.scorecard_url,
                ),
                priority=Priority.LOW,
                kind=kind,
                subject_entity_id=parma,
                rule_id=self.rule_id,
            )
        ]
