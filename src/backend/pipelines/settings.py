from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from common.alert_rules.config import DEFAULT_SCORECARD_URL, AlertRulesConfig


load_dotenv()


@dataclass(frozen=True)
class ReviewSettings:
    data_dir: Path | None
    recipient: str
    scorecard_url: str
    rules_config_path: Path | None
    log_level: str


def get_review_settings() -> ReviewSettings:
    """
    Load supplier review settings from environment variables (and a local .env file).

    Reads:
      SCORECARD_DATA_DIR, ALERT_RECIPIENT, SCORECARD_URL, ALERT_RULES_CONFIG, LOG_LEVEL
    """
    return ReviewSettings(
        data_dir=_optional_path("SCORECARD_DATA_DIR"),
        recipient=os.getenv("ALERT_RECIPIENT", "").strip(),
        scorecard_url=os.getenv("SCORECARD_URL", "").strip() or DEFAULT_SCORECARD_URL,
        rules_config_path=_optional_path("ALERT_RULES_CONFIG"),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def load_rules_config(path: Path | None, *, scorecard_url: str = DEFAULT_SCORECARD_URL) -> AlertRulesConfig:
    """
    Build the alert rules config. The JSON file holds {"rules": {rule_id: {...}}} and may
    override "scorecard_url"; without a file every rule runs with its defaults.
    """
    if path is None:
        return AlertRulesConfig(scorecard_url=scorecard_url)
    with path.open(encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, dict):
        raise ValueError(f"Alert rules config must be a JSON object: {path}")
    raw.setdefault("scorecard_url", scorecard_url)
    return AlertRulesConfig.model_validate(raw)


def _optional_path(name: str) -> Path | None:
    value = os.getenv(name, "").strip()
    return Path(value).expanduser() if value else None
