"""
Chart utilities for the session ledger.

Renders the running (cumulative) gain/loss across sessions in ledger order.
Saves PNGs to a destination path (ensures parent directories exist).
"""

from __future__ import annotations

import os
from typing import List, Sequence

import matplotlib

# Use a non-interactive backend for headless environments
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ..ledger.model import SessionRecord  # noqa: E402


def cumulative_gain_loss(records: Sequence[SessionRecord]) -> List[float]:
    series: List[float] = []
    running = 0.0
    for r in records:
        running += r.gain_loss
        series.append(running)
    return series


def save_gain_loss_png(records: Sequence[SessionRecord], out_path: str, title: str = "Cumulative gain/loss") -> str:
    """Render the cumulative gain/loss line and save to `out_path` (PNG).

    Returns the absolute path to the saved file.
    """
    if not records:
        raise ValueError("No sessions provided for charting")

    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    xs = list(range(1, len(records) + 1))
    ys = cumulative_gain_loss(records)

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.set_title(title)
    ax.plot(xs, ys, marker="o", color="steelblue", linewidth=1.2)
    ax.axhline(0.0, color="grey", linewidth=0.8, linestyle="--")
    for x, r, y in zip(xs, records, ys):
        ax.scatter([x], [y], color="green" if r.gain_loss >= 0 else "red", zorder=3)
    ax.set_xticks(xs)
    ax.set_xticklabels([r.game_name for r in records], rotation=30, ha="right", fontsize=8)
    ax.set_ylabel("Gain/Loss")
    fig.tight_layout()
    fig.savefig(out_path, dpi=100)
    plt.close(fig)
    return os.path.abspath(out_path)
