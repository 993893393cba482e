from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def build_review_payload(review) -> dict:
    return {
        "today": review.alerts.today.isoformat(),
        "generated_at": review.alerts.generated_at.isoformat(),
        "recipient": review.alerts.recipient,
        "summary": review.summary.model_dump(mode="json"),
        "suppliers": [record.to_display_dict() for record in review.records],
        "failures": [{"source_id": f.source_id, "reason": f.reason} for f in review.failures],
        "notifications": [n.model_dump(mode="json") for n in review.alerts.notifications],
    }


def _write_markdown(review, out_path: Path) -> None:
    summary = review.summary
    lines = [
        f"# Supplier Review {review.alerts.today.isoformat()}",
        "",
        f"Generated at: {review.alerts.generated_at.isoformat()}",
        "",
        "## Summary",
        f"- Suppliers: {summary.total_suppliers}",
        f"- QPM > 50: {summary.qpm_over_50}",
        f"- PPM > 50: {summary.ppm_over_50}",
        f"- QPM trend: {summary.qpm_trend.value} ({summary.qpm_trend_text})",
    ]
    if review.failures:
        lines.append("")
        lines.append("## Extraction failures")
        for failure in review.failures:
            lines.append(f"- {failure.source_id}: {failure.reason}")
    lines.append("")
    lines.append("## Notifications")
    if not review.alerts.notifications:
        lines.append("- None")
    for n in review.alerts.by_priority():
        lines.append(f"- [P{int(n.priority)}] {n.subject} ({n.kind.value})")
    out_path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def run_supplier_review_from_dir(
    data_dir: Path,
    *,
    recipient: str,
    today: date,
    rules_config_path: Path | None = None,
    scorecard_url: str | None = None,
):
    _ensure_backend_on_path()
    from common.alert_rules.config import DEFAULT_SCORECARD_URL
    from pipelines.settings import load_rules_config
    from pipelines.supplier_review import iter_cached_documents, review_documents

    config = load_rules_config(rules_config_path, scorecard_url=scorecard_url or DEFAULT_SCORECARD_URL)
    return review_documents(
        iter_cached_documents(data_dir),
        recipient=recipient,
        today=today,
        config=config,
    )


def main(argv: list[str] | None = None) -> int:
    _ensure_backend_on_path()
    from pipelines.settings import get_review_settings

    settings = get_review_settings()

    parser = argparse.ArgumentParser(
        description="Extract cached supplier scorecards, evaluate alert rules and write JSON/MD outputs."
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding cached supplier_<PARMA>.html pages (defaults to SCORECARD_DATA_DIR).",
    )
    parser.add_argument(
        "--recipient",
        default=None,
        help="Notification recipient address (defaults to ALERT_RECIPIENT).",
    )
    parser.add_argument(
        "--today",
        default=None,
        help="Evaluation date (YYYY-MM-DD); defaults to the current date.",
    )
    parser.add_argument(
        "--rules-config",
        default=None,
        help="JSON alert rules config (defaults to ALERT_RULES_CONFIG).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Output directory for review files (defaults to the data dir).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    data_dir = Path(args.data_dir).resolve() if args.data_dir else settings.data_dir
    if data_dir is None or not data_dir.is_dir():
        raise SystemExit("A data directory is required (--data-dir or SCORECARD_DATA_DIR).")
    recipient = (args.recipient or settings.recipient).strip()
    if not recipient:
        raise SystemExit("A recipient is required (--recipient or ALERT_RECIPIENT).")
    today = date.fromisoformat(args.today) if args.today else date.today()
    rules_config_path = Path(args.rules_config).resolve() if args.rules_config else settings.rules_config_path

    review = run_supplier_review_from_dir(
        data_dir,
        recipient=recipient,
        today=today,
        rules_config_path=rules_config_path,
        scorecard_url=settings.scorecard_url,
    )

    output_dir = Path(args.output_dir).resolve() if args.output_dir else data_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    base_name = f"supplier_review_{today.isoformat()}"
    out_json = output_dir / f"{base_name}.json"
    out_md = output_dir / f"{base_name}.md"
    out_json.write_text(json.dumps(build_review_payload(review), indent=2), encoding="utf-8")
    _write_markdown(review, out_md)

    print(f"Wrote {out_json}")
    print(f"Wrote {out_md}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
