import pytest

from adapters.scorecard.document import ScorecardExtractionError
from adapters.scorecard.extractor import supplier_record_from_html
from adapters.scorecard.layout import AUDIT_INDEX_FENCES, AuditIndexFence
from common.scorecard.models import Trend


def test_extractor_reads_every_section(load_scorecard, today):
    record = supplier_record_from_html("12345", load_scorecard("supplier_12345.html"), today=today)

    assert record.source_id == "12345"
    assert record.id == "12345"
    assert record.parma_code == "12345"
    assert record.name == "Acme Castings AB"
    assert record.logo_glyph == "A"
    assert record.apqp == "Green"
    assert record.ppap == "Approved"

    assert record.metrics.software.index == "85%"
    assert record.metrics.ee.status == "Approved with conditions"
    assert record.metrics.polymer.status == "Not approved"

    assert record.qpm.last_period == "40.0"
    assert record.qpm.actual == "55.0"
    assert record.qpm.change == "+15.0"
    assert record.qpm.trend == Trend.UP

    assert record.ppm.last_period == "42.0"
    assert record.ppm.actual == "38.5"
    assert record.ppm.change == "-3.5"
    assert record.ppm.trend == Trend.DOWN

    names = [c.name for c in record.certifications]
    assert names == ["ISO 9001", "IATF 16949", "ISO 14001", "ISO 45001", "ISO 50001"]


def test_extractor_display_dict_keeps_scorecard_keys(load_scorecard, today):
    record = supplier_record_from_html("12345", load_scorecard("supplier_12345.html"), today=today)
    data = record.to_display_dict()

    assert data["parmaId"] == "12345"
    assert data["metrics"]["swStatus"] == "Expired"
    assert data["metrics"]["swDate"] == "2019-06-01"
    assert data["metrics"]["sma"] == "78%"
    assert data["qpm"] == {"lastPeriod": "40.0", "actual": "55.0", "change": "+15.0", "trend": "up"}
    assert data["certifications"][-1]["certifiedPlace"] == "N/A"


def test_extractor_partial_document_defaults_missing_sections(load_scorecard, today):
    record = supplier_record_from_html("67890", load_scorecard("supplier_67890.html"), today=today)

    assert record.parma_code == "67890"
    assert record.name == "bolt & nut Ltd"
    assert record.logo_glyph == "B"
    assert record.apqp is None
    assert record.certifications == []

    data = record.to_display_dict()
    assert data["apqp"] == "N/A"
    assert data["ppap"] == "N/A"
    assert data["metrics"] == {}
    assert record.metrics.get("swStatus") == "N/A"

    # "n/a" last period: the change cannot be derived.
    assert data["ppm"] == {"lastPeriod": "n/a", "actual": "14.2 ppm", "change": "N/A", "trend": "neutral"}
    assert record.qpm.change == "-2.0"
    assert record.qpm.trend == Trend.DOWN


def test_extractor_markup_without_any_section_yields_defaults(today):
    record = supplier_record_from_html("00001", "<html><body><p>Maintenance</p></body></html>", today=today)
    data = record.to_display_dict()

    assert data["id"] == "N/A"
    assert data["parmaId"] == "N/A"
    assert data["name"] == "Unknown"
    assert data["logo"] == "?"
    assert data["qpm"] == {"lastPeriod": "N/A", "actual": "N/A", "change": "N/A", "trend": "neutral"}
    assert data["ppm"]["trend"] == "neutral"
    assert data["certifications"] == []


def test_extractor_supplier_link_without_comma_keeps_identity_defaults(today):
    html = '<a href="SupplierInformation.aspx?SupplierId=1">Acme Castings AB</a>'
    record = supplier_record_from_html("1", html, today=today)
    assert record.parma_code is None
    assert record.display_name == "Unknown"


def test_extractor_splits_identity_on_first_comma_only(today):
    html = '<a href="SupplierInformation.aspx?SupplierId=1"> 4711 ,  Acme, Inc. </a>'
    record = supplier_record_from_html("1", html, today=today)
    assert record.parma_code == "4711"
    assert record.name == "Acme, Inc."


def test_extractor_is_idempotent(load_scorecard, today):
    raw = load_scorecard("supplier_12345.html")
    first = supplier_record_from_html("12345", raw, today=today)
    second = supplier_record_from_html("12345", raw, today=today)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


@pytest.mark.parametrize("raw", ["", "   \n\t", None, "plain text without any markup"])
def test_extractor_raises_for_unparseable_documents(raw, today):
    with pytest.raises(ScorecardExtractionError) as exc_info:
        supplier_record_from_html("55555", raw, today=today)
    assert exc_info.value.source_id == "55555"


def test_extractor_failure_for_cached_login_page(load_scorecard, today):
    with pytest.raises(ScorecardExtractionError):
        supplier_record_from_html("99999", load_scorecard("supplier_99999.html"), today=today)


def test_extractor_accepts_fences_for_additional_indices(today):
    html = (
        '<div id="IndexAuditPanel">'
        "<span>Software Index 80% Approved 2015-01-01Z</span>"
        "<span>Thermal Index 64% Approved 2025-05-05</span>"
        "</div>"
    )
    fences = AUDIT_INDEX_FENCES + (AuditIndexFence(field="thermal", label_pattern=r"Thermal\s+Index"),)
    record = supplier_record_from_html("1", html, today=today, fences=fences)

    assert record.metrics.sw_status == "Expired"
    assert record.to_display_dict()["metrics"]["thermalIndex"] == "64%"
