from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field


class PerformanceTableLayout(BaseModel):
    selector: str = "#tblSales2"
    min_cells: int = 15
    header_label: str = "Brand/Consignee"
    total_label: str = "Supplier Total"
    # Zero-based cell offsets inside the "Supplier Total" row.
    ppm_last_period_col: int = 2
    ppm_actual_col: int = 3
    qpm_last_period_col: int = 6
    qpm_actual_col: int = 7


class CertificationTableLayout(BaseModel):
    selector: str = "#GridView1"
    min_cells: int = 4


class ScorecardLayout(BaseModel):
    """Anchors used to locate each section of a supplier scorecard page."""

    supplier_link_selector: str = "a[href*='SupplierInformation.aspx']"
    project_status_selector: str = "#lblApqpPpap"
    audit_panel_selector: str = "#IndexAuditPanel"
    performance: PerformanceTableLayout = Field(default_factory=PerformanceTableLayout)
    certifications: CertificationTableLayout = Field(default_factory=CertificationTableLayout)


@dataclass(frozen=True)
class AuditIndexFence:
    """
    One named block inside the audit panel.

    The block text runs from `label_pattern` up to the first of `next_labels` (or the end
    of the panel). An empty `next_labels` means every other known label ends the block.
    """

    field: str
    label_pattern: str
    next_labels: tuple[str, ...] = ()
    expires_after_years: Optional[float] = None


AUDIT_INDEX_FENCES: tuple[AuditIndexFence, ...] = (
    AuditIndexFence(field="software", label_pattern=r"Software\s+Index", expires_after_years=5.0),
    AuditIndexFence(field="ee", label_pattern=r"EE\s+Index"),
    AuditIndexFence(field="sma", label_pattern=r"SMA\s*/\s*Criticality\s+1\s+Index"),
    AuditIndexFence(field="polymer", label_pattern=r"Polymer\s+Index"),
)

DEFAULT_LAYOUT = ScorecardLayout()
