"""
Generate a simple HTML report of the session ledger.

Usage (venv):
  PYTHONPATH=src python -m pokertracker.reports.generate
or `pokertracker report --out reports`.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..ledger.ledger import SessionLedger
from .charts import save_gain_loss_png
from .table import format_money


def _template_env(template_dir: str) -> Environment:
    return Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_html(ledger: SessionLedger, out_dir: str = "reports", currency: str = "$") -> str:
    """Write `index.html` (plus a chart PNG when there are sessions) and return its path."""
    os.makedirs(out_dir, exist_ok=True)
    records = ledger.list()
    totals = ledger.totals()

    image = None
    if records:
        img_path = save_gain_loss_png(records, os.path.join(out_dir, "images", "gain_loss.png"))
        image = os.path.relpath(img_path, start=os.path.abspath(out_dir))

    template_dir = os.path.join(os.path.dirname(__file__), "templates")
    env = _template_env(template_dir)
    env.filters["money"] = lambda v: format_money(v, currency)
    tpl = env.get_template("report.html.j2")
    html = tpl.render(
        generated_at=datetime.now(timezone.utc).isoformat(),
        sessions=records,
        totals=totals,
        image=image,
    )

    out_html = os.path.join(out_dir, "index.html")
    with open(out_html, "w", encoding="utf-8") as f:
        f.write(html)
    return out_html


def main() -> None:
    from ..config.loader import load_settings
    from ..storage import load_ledger, open_store

    settings = load_settings()
    ledger = load_ledger(open_store(settings), settings.storage.key, settings.storage.preserve_ids)
    out_html = render_html(ledger, os.environ.get("REPORT_DIR", "reports"), settings.currency_symbol)
    print(f"Report written to: {out_html}")


if __name__ == "__main__":
    main()
