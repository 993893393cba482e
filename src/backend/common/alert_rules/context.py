from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .config import AlertRulesConfig


@dataclass(frozen=True)
class AlertContext:
    today: date
    recipient: str
    config: AlertRulesConfig = field(default_factory=AlertRulesConfig)
