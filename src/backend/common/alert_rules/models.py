from __future__ import annotations

from datetime import date, datetime
from enum import Enum, IntEnum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class Priority(IntEnum):
    CRITICAL = 1
    MEDIUM = 2
    LOW = 3


class AlertKind(str, Enum):
    QPM_INCREASE_10 = "qpm_increase_10"
    QPM_WARNING_30_50 = "qpm_warning_30_50"
    QPM_CRITICAL_OVER_50 = "qpm_critical_over_50"
    SW_INDEX_EXPIRED = "sw_index_expired"
    CERT_EXPIRED = "cert_expired"
    CERT_EXPIRING = "cert_expiring"
    CERT_NOTICE = "cert_notice"


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    recipient: str
    subject: str
    body: str
    priority: Priority
    kind: AlertKind
    subject_entity_id: str
    rule_id: str = ""


class AlertRunReport(BaseModel):
    run_id: str
    generated_at: datetime
    today: date
    recipient: str

    notifications: List[Notification] = Field(default_factory=list)
    totals: Dict[Priority, int] = Field(default_factory=dict)

    def by_priority(self) -> List[Notification]:
        """Notifications ordered for display (critical first); evaluation order breaks ties."""
        return sorted(self.notifications, key=lambda n: int(n.priority))
