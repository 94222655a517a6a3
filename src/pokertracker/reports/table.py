"""
Plain-text rendering of the session table and its footer totals.

Mirrors the tracker's on-screen table: one row per session with money
columns at two decimals, then Total Gain/Loss, Total Games Played,
Total Buy In and Total Cash Out.
"""

from __future__ import annotations

from typing import List, Sequence

from ..ledger.model import LedgerTotals, SessionRecord

HEADERS = ["Game Name", "Buy In", "Cash Out", "Stakes", "Gain/Loss"]
_LEFT_ALIGNED = {"ID", "Game Name", "Stakes"}


def format_money(amount: float, currency: str = "$") -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):.2f}"


def render_table(
    records: Sequence[SessionRecord],
    totals: LedgerTotals,
    currency: str = "$",
    show_ids: bool = False,
) -> str:
    headers = (["ID"] if show_ids else []) + HEADERS
    rows: List[List[str]] = []
    for r in records:
        row = [
            r.game_name,
            format_money(r.buy_in, currency),
            format_money(r.cash_out, currency),
            r.stakes,
            format_money(r.gain_loss, currency),
        ]
        rows.append(([r.id] if show_ids else []) + row)
    footer = [
        ("Total Gain/Loss:", format_money(totals.gain_loss, currency)),
        ("Total Games Played:", str(totals.count)),
        ("Total Buy In:", format_money(totals.buy_in, currency)),
        ("Total Cash Out:", format_money(totals.cash_out, currency)),
    ]
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]
    widths[-1] = max([widths[-1]] + [len(v) for _, v in footer])
    # footer labels span every column but the last, separators included
    label_width = sum(widths[:-1]) + 3 * (len(widths) - 2)

    def _line(cells: Sequence[str]) -> str:
        return " | ".join(
            c.ljust(w) if h in _LEFT_ALIGNED else c.rjust(w) for h, c, w in zip(headers, cells, widths)
        )

    sep = "-+-".join("-" * w for w in widths)
    lines = [_line(headers), sep]
    lines.extend(_line(row) for row in rows)
    lines.append(sep)
    for label, value in footer:
        lines.append(f"{label.rjust(label_width)} | {value.rjust(widths[-1])}")
    return "\n".join(lines)
