"""Notification subjects and HTML bodies.

Every function here is pure: the same rule inputs always render the same text.
"""

from __future__ import annotations

import html as html_lib
from decimal import Decimal
from urllib.parse import quote

from .models import AlertKind, Priority

PRIORITY_COLORS = {
    Priority.CRITICAL: "#cc0000",
    Priority.MEDIUM: "#ff9900",
    Priority.LOW: "#0066cc",
}

_CELL_STYLE = "padding: 8px; border: 1px solid #ddd;"


def priority_color(priority: Priority) -> str:
    return PRIORITY_COLORS[Priority(priority)]


def scorecard_link(scorecard_url: str, parma_code: str) -> str:
    return f"{scorecard_url}?SupplierId={quote(parma_code, safe='')}"


def _escape(value: object) -> str:
    return html_lib.escape(str(value))


def _values_table(rows: list[tuple[str, object]]) -> str:
    cells = "".join(
        f'<tr><td style="{_CELL_STYLE}"><strong>{_escape(label)}:</strong></td>'
        f'<td style="{_CELL_STYLE}">{_escape(value)}</td></tr>'
        for label, value in rows
    )
    return f'<table style="border-collapse: collapse; margin: 20px 0;">{cells}</table>'


def _document(
    *,
    heading: str,
    priority: Priority,
    supplier_name: str,
    parma_code: str,
    scorecard_url: str,
    content: str,
) -> str:
    link = html_lib.escape(scorecard_link(scorecard_url, parma_code), quote=True)
    return (
        '<html><body style="font-family: Arial, sans-serif;">'
        f'<h2 style="color: {priority_color(priority)};">{_escape(heading)} - {_escape(supplier_name)}</h2>'
        f'<p>Supplier <a href="{link}"><strong>PARMA {_escape(parma_code)}</strong></a></p>'
        f"{content}"
        "<p>Best regards,<br>QPrism</p>"
        "</body></html>"
    )


def format_change_with_pct(last_period: Decimal, actual: Decimal) -> str:
    change = actual - last_period
    pct = (change / last_period) * 100 if last_period > 0 else Decimal("0")
    return f"{change:+.1f} ({pct:+.1f}%)"


def qpm_subject(kind: AlertKind, parma_code: str, last_period: Decimal, actual: Decimal) -> str:
    if kind == AlertKind.QPM_INCREASE_10:
        return f"QPM Alert: 10% Increase for PARMA {parma_code} ({last_period} -> {actual})"
    if kind == AlertKind.QPM_WARNING_30_50:
        return f"QPM Warning: Approaching 50 for PARMA {parma_code} (QPM {actual})"
    if kind == AlertKind.QPM_CRITICAL_OVER_50:
        return f"CRITICAL: QPM Over 50 for PARMA {parma_code} (QPM {actual})"
    raise ValueError(f"Not a QPM alert kind: {kind}")


def qpm_body(
    *,
    priority: Priority,
    supplier_name: str,
    parma_code: str,
    last_period: Decimal,
    actual: Decimal,
    scorecard_url: str,
) -> str:
    table = _values_table(
        [
            ("Last Period QPM", last_period),
            ("Actual QPM", actual),
            ("Change", format_change_with_pct(last_period, actual)),
        ]
    )
    return _document(
        heading="QPM Alert",
        priority=priority,
        supplier_name=supplier_name,
        parma_code=parma_code,
        scorecard_url=scorecard_url,
        content=table,
    )


def sw_index_subject(parma_code: str) -> str:
    return f"SW Index EXPIRED: PARMA {parma_code}"


def sw_index_body(*, supplier_name: str, parma_code: str, sw_date: str, scorecard_url: str) -> str:
    color = priority_color(Priority.CRITICAL)
    content = (
        f'<p>The Software Index audit has <strong style="color: {color};">EXPIRED</strong> '
        f"(last audit: {_escape(sw_date)}).</p>"
        "<p><strong>Action Required:</strong> Schedule new SW Index audit.</p>"
    )
    return _document(
        heading="SW Index Expired",
        priority=Priority.CRITICAL,
        supplier_name=supplier_name,
        parma_code=parma_code,
        scorecard_url=scorecard_url,
        content=content,
    )


def certification_subject(kind: AlertKind, cert_name: str, parma_code: str, days: int) -> str:
    if kind == AlertKind.CERT_EXPIRED:
        return f"Certification EXPIRED: {cert_name} (PARMA {parma_code}, {days} days ago)"
    if kind == AlertKind.CERT_EXPIRING:
        return f"Certification Expiring Soon: {cert_name} (PARMA {parma_code}, {days} days)"
    if kind == AlertKind.CERT_NOTICE:
        return f"Certification Notice: {cert_name} (PARMA {parma_code}, {days} days)"
    raise ValueError(f"Not a certification alert kind: {kind}")


def certification_body(
    *,
    kind: AlertKind,
    priority: Priority,
    supplier_name: str,
    parma_code: str,
    cert_name: str,
    expiry_date: str,
    days: int,
    scorecard_url: str,
) -> str:
    color = priority_color(priority)
    if kind == AlertKind.CERT_EXPIRED:
        message = f'has <strong style="color: {color};">EXPIRED</strong> ({days} days ago)'
    elif kind == AlertKind.CERT_EXPIRING:
        message = f'expires in <strong style="color: {color};">{days} days</strong>'
    else:
        message = f"expires in <strong>{days} days</strong>"
    content = (
        f"<p>Certification <strong>{_escape(cert_name)}</strong> {message}</p>"
        + _values_table([("Certification", cert_name), ("Expiry Date", expiry_date)])
    )
    return _document(
        heading="Certification Alert",
        priority=priority,
        supplier_name=supplier_name,
        parma_code=parma_code,
        scorecard_url=scorecard_url,
        content=content,
    )
