from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

NOT_AVAILABLE = "N/A"
UNKNOWN_NAME = "Unknown"


def display(value: Optional[str], default: str = NOT_AVAILABLE) -> str:
    if value is None or not str(value).strip():
        return default
    return str(value)


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"


class PeriodMetric(BaseModel):
    """Last-period vs actual reading for one performance measure (QPM or PPM).

    Values stay as the display strings found in the scorecard. `change` and
    `trend` are only derived when both readings parse as numbers.
    """

    last_period: Optional[str] = None
    actual: Optional[str] = None
    change: Optional[str] = None
    trend: Trend = Trend.NEUTRAL

    def to_display_dict(self) -> Dict[str, str]:
        return {
            "lastPeriod": display(self.last_period),
            "actual": display(self.actual),
            "change": display(self.change),
            "trend": self.trend.value,
        }


class AuditIndexReading(BaseModel):
    index: Optional[str] = None
    status: Optional[str] = None
    date: Optional[str] = None


# Flattened scorecard keys per audit index: (index, status, date).
_METRIC_KEYS: Dict[str, tuple[str, str, str]] = {
    "software": ("swIndex", "swStatus", "swDate"),
    "ee": ("eeIndex", "eeStatus", "eeDate"),
    "sma": ("sma", "smaStatus", "smaDate"),
    "polymer": ("polymerIndex", "polymerStatus", "polymerDate"),
}


class ScorecardMetrics(BaseModel):
    software: AuditIndexReading = Field(default_factory=AuditIndexReading)
    ee: AuditIndexReading = Field(default_factory=AuditIndexReading)
    sma: AuditIndexReading = Field(default_factory=AuditIndexReading)
    polymer: AuditIndexReading = Field(default_factory=AuditIndexReading)
    # Readings for configured audit indices beyond the four above.
    extra: Dict[str, AuditIndexReading] = Field(default_factory=dict)

    @property
    def sw_status(self) -> Optional[str]:
        return self.software.status

    @property
    def sw_date(self) -> Optional[str]:
        return self.software.date

    def set_reading(self, field_name: str, reading: AuditIndexReading) -> None:
        if field_name in _METRIC_KEYS:
            setattr(self, field_name, reading)
        else:
            self.extra[field_name] = reading

    def reading(self, field_name: str) -> AuditIndexReading:
        if field_name in _METRIC_KEYS:
            return getattr(self, field_name)
        return self.extra.get(field_name, AuditIndexReading())

    def to_display_dict(self) -> Dict[str, str]:
        """Flatten into the scorecard metric keys; only populated keys are present."""
        keyed = [(getattr(self, name), keys) for name, keys in _METRIC_KEYS.items()]
        keyed.extend(
            (reading, (f"{name}Index", f"{name}Status", f"{name}Date"))
            for name, reading in self.extra.items()
        )
        out: Dict[str, str] = {}
        for reading, keys in keyed:
            for key, value in zip(keys, (reading.index, reading.status, reading.date)):
                if value is not None:
                    out[key] = value
        return out

    def get(self, key: str) -> str:
        return self.to_display_dict().get(key, NOT_AVAILABLE)


class Certification(BaseModel):
    name: str
    certified_place: Optional[str] = None
    expiry_date: Optional[str] = None
    status: Optional[str] = None

    def to_display_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "certifiedPlace": display(self.certified_place),
            "expiryDate": display(self.expiry_date),
            "status": display(self.status),
        }


class SupplierRecord(BaseModel):
    """Normalized view of one supplier scorecard document."""

    source_id: str = ""
    id: Optional[str] = None
    parma_code: Optional[str] = None
    name: Optional[str] = None

    apqp: Optional[str] = None
    ppap: Optional[str] = None

    metrics: ScorecardMetrics = Field(default_factory=ScorecardMetrics)
    qpm: PeriodMetric = Field(default_factory=PeriodMetric)
    ppm: PeriodMetric = Field(default_factory=PeriodMetric)

    certifications: List[Certification] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return display(self.name, UNKNOWN_NAME)

    @property
    def display_parma_code(self) -> str:
        return display(self.parma_code)

    @property
    def logo_glyph(self) -> str:
        name = (self.name or "").strip()
        if not name or name == UNKNOWN_NAME:
            return "?"
        return name[0].upper()

    def to_display_dict(self) -> Dict[str, Any]:
        return {
            "id": display(self.id),
            "parmaId": self.display_parma_code,
            "name": self.display_name,
            "logo": self.logo_glyph,
            "apqp": display(self.apqp),
            "ppap": display(self.ppap),
            "metrics": self.metrics.to_display_dict(),
            "qpm": self.qpm.to_display_dict(),
            "ppm": self.ppm.to_display_dict(),
            "certifications": [c.to_display_dict() for c in self.certifications],
        }
