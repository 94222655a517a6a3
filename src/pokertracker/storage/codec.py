"""Wire format for a saved ledger.

The blob is a JSON array of objects shaped
`{id, gameName, buyIn, cashOut, stakes, gainLoss}` in ledger order.
"""
from __future__ import annotations

import json
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..ledger.model import SessionRecord


class PersistedSession(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    game_name: str = Field(alias="gameName")
    buy_in: float = Field(alias="buyIn")
    cash_out: float = Field(alias="cashOut")
    stakes: str
    # Derived; recomputed on load so older blobs without it still parse
    gain_loss: Optional[float] = Field(default=None, alias="gainLoss")

    @classmethod
    def from_record(cls, rec: SessionRecord) -> "PersistedSession":
        return cls(
            id=rec.id,
            game_name=rec.game_name,
            buy_in=rec.buy_in,
            cash_out=rec.cash_out,
            stakes=rec.stakes,
            gain_loss=rec.gain_loss,
        )

    def to_record(self) -> SessionRecord:
        return SessionRecord(
            id=self.id,
            game_name=self.game_name,
            buy_in=self.buy_in,
            cash_out=self.cash_out,
            stakes=self.stakes,
            gain_loss=self.cash_out - self.buy_in,
        )


_SESSIONS = TypeAdapter(List[PersistedSession])


def dump_sessions(records: List[SessionRecord]) -> str:
    return json.dumps([PersistedSession.from_record(r).model_dump(by_alias=True) for r in records])


def parse_sessions(blob: str) -> List[PersistedSession]:
    """Parse a saved blob; raises pydantic.ValidationError on bad JSON or shape."""
    return _SESSIONS.validate_json(blob)
