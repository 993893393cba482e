from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T", bound=BaseModel)

DEFAULT_SCORECARD_URL = "https://vsib.srv.volvo.com/vsib/Content/sus/SupplierScorecard.aspx"


class RuleConfigBase(BaseModel):
    enabled: bool = True


class QpmIncreaseRuleConfig(RuleConfigBase):
    # Fires when actual >= last_period * increase_ratio.
    increase_ratio: Decimal = Decimal("1.1")


class QpmBandRuleConfig(RuleConfigBase):
    # warning_min <= actual <= warning_max is a warning; above warning_max is critical.
    warning_min: Decimal = Decimal("30")
    warning_max: Decimal = Decimal("50")


class SwIndexExpiredRuleConfig(RuleConfigBase):
    expired_status: str = "Expired"


class CertificationExpiryRuleConfig(RuleConfigBase):
    expiring_soon_days: int = 90
    notice_days: int = 180


class AlertRulesConfig(BaseModel):
    """Alert configuration for all rules.

    Rules pull their typed config via `get_rule_config`.
    """

    scorecard_url: str = DEFAULT_SCORECARD_URL
    rules: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_rule_config(
        self,
        rule_id: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if rule_id not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.rules.get(rule_id, {})
        return model.model_validate(raw)
