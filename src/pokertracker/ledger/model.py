from __future__ import annotations

from dataclasses import dataclass, replace
import uuid


def new_id() -> str:
    return uuid.uuid4().hex


def calculate_gain_loss(buy_in: float, cash_out: float) -> float:
    return cash_out - buy_in


@dataclass
class SessionRecord:
    """One logged poker game.

    Attributes:
        id: Opaque unique identifier, assigned when the session is added
        game_name: Free-form name of the game (e.g., "Friday Game")
        buy_in: Amount brought to the table
        cash_out: Amount taken off the table
        stakes: Blinds as "small/big" (e.g., "1/2")
        gain_loss: cash_out - buy_in, kept in sync by the ledger
    """

    id: str
    game_name: str
    buy_in: float
    cash_out: float
    stakes: str
    gain_loss: float = 0.0

    def copy(self) -> "SessionRecord":
        return replace(self)


@dataclass(frozen=True)
class LedgerTotals:
    gain_loss: float
    count: int
    buy_in: float
    cash_out: float
