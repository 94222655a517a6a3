from __future__ import annotations

import os

import pandas as pd

from ..ledger.ledger import SessionLedger

COLUMNS = ["id", "gameName", "buyIn", "cashOut", "stakes", "gainLoss"]


def ledger_frame(ledger: SessionLedger) -> pd.DataFrame:
    """One row per session, in ledger order, using the persisted column names."""
    rows = [
        {
            "id": r.id,
            "gameName": r.game_name,
            "buyIn": r.buy_in,
            "cashOut": r.cash_out,
            "stakes": r.stakes,
            "gainLoss": r.gain_loss,
        }
        for r in ledger.list()
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def write_csv(ledger: SessionLedger, path: str) -> str:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    ledger_frame(ledger).to_csv(path, index=False)
    return os.path.abspath(path)
