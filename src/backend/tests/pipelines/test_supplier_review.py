import json
from datetime import date
from pathlib import Path

from common.alert_rules.config import AlertRulesConfig
from common.alert_rules.models import AlertKind
from pipelines.settings import get_review_settings, load_rules_config
from pipelines.supplier_review import iter_cached_documents, review_documents
from scripts.run_supplier_review import build_review_payload, main


FIXTURES = Path(__file__).parents[1] / "adapters" / "fixtures" / "scorecard"
TODAY = date(2026, 10, 19)
RECIPIENT = "quality.team@example.com"


def test_cached_documents_are_read_in_file_order():
    ids = [source_id for source_id, _raw in iter_cached_documents(FIXTURES)]
    assert ids == ["12345", "67890", "99999"]


def test_review_excludes_unparseable_documents():
    review = review_documents(iter_cached_documents(FIXTURES), recipient=RECIPIENT, today=TODAY)

    assert [r.parma_code for r in review.records] == ["12345", "67890"]
    assert [f.source_id for f in review.failures] == ["99999"]
    assert review.summary.total_suppliers == 2
    assert all(n.subject_entity_id != "99999" for n in review.alerts.notifications)


def test_review_alerts_for_fixture_suppliers():
    review = review_documents(iter_cached_documents(FIXTURES), recipient=RECIPIENT, today=TODAY)

    assert [(n.subject_entity_id, n.kind) for n in review.alerts.notifications] == [
        ("12345", AlertKind.QPM_INCREASE_10),
        ("12345", AlertKind.QPM_CRITICAL_OVER_50),
        ("12345", AlertKind.SW_INDEX_EXPIRED),
        ("12345", AlertKind.CERT_EXPIRING),
        ("12345", AlertKind.CERT_EXPIRED),
        ("12345", AlertKind.CERT_NOTICE),
        ("67890", AlertKind.QPM_WARNING_30_50),
    ]
    summary = review.summary
    assert (summary.qpm_over_50, summary.ppm_over_50) == (1, 0)
    assert (summary.qpm_trend_up, summary.qpm_trend_down) == (1, 1)


def test_review_respects_rules_config():
    config = AlertRulesConfig(rules={"CERT-EXPIRY": {"enabled": False}})
    review = review_documents(
        iter_cached_documents(FIXTURES), recipient=RECIPIENT, today=TODAY, config=config
    )
    kinds = {n.kind for n in review.alerts.notifications}
    assert not kinds & {AlertKind.CERT_EXPIRED, AlertKind.CERT_EXPIRING, AlertKind.CERT_NOTICE}


def test_review_payload_is_json_serializable():
    review = review_documents(iter_cached_documents(FIXTURES), recipient=RECIPIENT, today=TODAY)
    payload = json.loads(json.dumps(build_review_payload(review)))
    assert payload["suppliers"][0]["metrics"]["swStatus"] == "Expired"
    assert payload["notifications"][0]["kind"] == "qpm_increase_10"
    assert payload["notifications"][0]["priority"] == 3
    assert payload["failures"] == [{"source_id": "99999", "reason": "Raw document contains no markup elements."}]


def test_load_rules_config_from_json(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps({"rules": {"QPM-BAND": {"warning_max": "45"}}}))
    config = load_rules_config(path, scorecard_url="https://scorecards.example.test")
    assert config.scorecard_url == "https://scorecards.example.test"
    assert config.rules["QPM-BAND"] == {"warning_max": "45"}


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("SCORECARD_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ALERT_RECIPIENT", " someone@example.com ")
    monkeypatch.delenv("SCORECARD_URL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_review_settings()
    assert settings.data_dir == tmp_path
    assert settings.recipient == "someone@example.com"
    assert settings.scorecard_url.endswith("SupplierScorecard.aspx")
    assert settings.log_level == "DEBUG"


def test_script_writes_json_and_markdown(tmp_path):
    exit_code = main(
        [
            "--data-dir",
            str(FIXTURES),
            "--recipient",
            RECIPIENT,
            "--today",
            TODAY.isoformat(),
            "--output-dir",
            str(tmp_path),
        ]
    )
    assert exit_code == 0
    payload = json.loads((tmp_path / "supplier_review_2026-10-19.json").read_text())
    assert len(payload["notifications"]) == 7
    digest = (tmp_path / "supplier_review_2026-10-19.md").read_text()
    assert digest.index("[P1]") < digest.index("[P2]") < digest.index("[P3]")
