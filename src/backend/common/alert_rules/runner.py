from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timezone
from typing import Iterable, List, Optional

from common.scorecard.models import SupplierRecord

from .config import AlertRulesConfig
from .context import AlertContext
from .models import AlertRunReport, Notification, Priority
from .registry import registry

logger = logging.getLogger(__name__)


class AlertRunner:
    def __init__(self, rules: Optional[Iterable] = None, *, config: Optional[AlertRulesConfig] = None):
        self._rules = list(rules) if rules is not None else registry.create_all()
        self._config = config or AlertRulesConfig()

    def evaluate(
        self,
        records: Iterable[SupplierRecord],
        recipient: str,
        today: date,
        *,
        rule_ids: Optional[set[str]] = None,
    ) -> List[Notification]:
        """
        Evaluate every rule against every record.

        Output order is record order, then rule evaluation order within a record. No
        priority sort is applied here.
        """
        ctx = AlertContext(today=today, recipient=recipient, config=self._config)
        notifications: List[Notification] = []
        for record in records:
            for rule in self._rules:
                if rule_ids is not None and rule.rule_id not in rule_ids:
                    continue
                fired = rule.evaluate(record, ctx)
                if fired:
                    logger.debug(
                        "%s fired %d notification(s) for %s",
                        rule.rule_id,
                        len(fired),
                        record.display_parma_code,
                    )
                notifications.extend(fired)
        return notifications

    def run(
        self,
        records: Iterable[SupplierRecord],
        recipient: str,
        today: date,
        *,
        rule_ids: Optional[set[str]] = None,
        generated_at: Optional[datetime] = None,
    ) -> AlertRunReport:
        notifications = self.evaluate(records, recipient, today, rule_ids=rule_ids)

        totals: dict[Priority, int] = {}
        for n in notifications:
            totals[n.priority] = totals.get(n.priority, 0) + 1

        return AlertRunReport(
            run_id=str(uuid.uuid4()),
            generated_at=generated_at or datetime.now(timezone.utc),
            today=today,
            recipient=recipient,
            notifications=notifications,
            totals=totals,
        )
