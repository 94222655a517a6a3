from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from .errors import SessionNotFound
from .model import LedgerTotals, SessionRecord, calculate_gain_loss, new_id
from ..logs.event_log import log_ledger_event
from ..metrics.ledger import get_ledger_gain_loss_gauge, get_ledger_sessions_gauge, get_sessions_recorded_total

# camelCase names match the persisted blob keys
_FIELD_ALIASES = {
    "game_name": "game_name",
    "gameName": "game_name",
    "buy_in": "buy_in",
    "buyIn": "buy_in",
    "cash_out": "cash_out",
    "cashOut": "cash_out",
    "stakes": "stakes",
}


class SessionLedger:
    def __init__(self) -> None:
        self._sessions: List[SessionRecord] = []
        self._recorded = get_sessions_recorded_total()
        self._count_gauge = get_ledger_sessions_gauge()
        self._gain_loss_gauge = get_ledger_gain_loss_gauge()

    @classmethod
    def restore(cls, records: Iterable[SessionRecord]) -> "SessionLedger":
        """Build a ledger from records that already carry ids (ids are kept)."""
        ledger = cls()
        seen = set()
        for rec in records:
            if rec.id in seen:
                raise ValueError(f"Duplicate session id: {rec.id}")
            seen.add(rec.id)
            ledger._sessions.append(
                SessionRecord(
                    id=rec.id,
                    game_name=rec.game_name,
                    buy_in=rec.buy_in,
                    cash_out=rec.cash_out,
                    stakes=rec.stakes,
                    gain_loss=calculate_gain_loss(rec.buy_in, rec.cash_out),
                )
            )
        ledger._publish()
        return ledger

    def _find(self, session_id: str) -> Optional[SessionRecord]:
        for rec in self._sessions:
            if rec.id == session_id:
                return rec
        return None

    def _publish(self) -> None:
        try:
            self._count_gauge.set(len(self._sessions))
            self._gain_loss_gauge.set(self.total_gain_loss())
        except Exception:
            # Metrics optional in tests; ignore if not available
            pass

    def add(self, game_name: str, buy_in: float, cash_out: float, stakes: str) -> str:
        rec = SessionRecord(
            id=new_id(),
            game_name=game_name,
            buy_in=buy_in,
            cash_out=cash_out,
            stakes=stakes,
            gain_loss=calculate_gain_loss(buy_in, cash_out),
        )
        self._sessions.append(rec)
        self._recorded.labels("add").inc()
        self._publish()
        log_ledger_event("session_added", rec.id, game_name=rec.game_name, gain_loss=rec.gain_loss)
        return rec.id

    def update(self, session_id: str, fields: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """Apply the supplied fields to one session.

        Accepts snake_case or camelCase names; a value of None means "not
        supplied". buy_in and cash_out are coerced with float(); a non-numeric
        value raises ValueError. Raises SessionNotFound if the id is unknown.
        Either error leaves the record unchanged.
        """
        supplied: Dict[str, Any] = {}
        for name, value in {**dict(fields or {}), **kwargs}.items():
            attr = _FIELD_ALIASES.get(name)
            if attr is None:
                raise ValueError(f"Unknown or read-only session field: {name}")
            if value is None:
                continue
            if attr in ("buy_in", "cash_out"):
                try:
                    value = float(value)
                except (TypeError, ValueError):
                    raise ValueError(f"Session field {name} must be a number, got {value!r}") from None
            supplied[attr] = value
        rec = self._find(session_id)
        if rec is None:
            raise SessionNotFound(session_id)
        # Work out the new gain/loss before touching the record
        gain_loss = calculate_gain_loss(
            supplied.get("buy_in", rec.buy_in), supplied.get("cash_out", rec.cash_out)
        )
        for attr, value in supplied.items():
            setattr(rec, attr, value)
        rec.gain_loss = gain_loss
        self._recorded.labels("update").inc()
        self._publish()
        log_ledger_event("session_updated", rec.id, game_name=rec.game_name, gain_loss=rec.gain_loss)

    def delete(self, session_id: str) -> bool:
        before = len(self._sessions)
        self._sessions = [rec for rec in self._sessions if rec.id != session_id]
        removed = len(self._sessions) < before
        if removed:
            self._recorded.labels("delete").inc()
            self._publish()
            log_ledger_event("session_deleted", session_id)
        return removed

    def clear(self) -> None:
        self._sessions = []
        self._recorded.labels("clear").inc()
        self._publish()
        log_ledger_event("ledger_cleared", None)

    def list(self) -> List[SessionRecord]:
        return [rec.copy() for rec in self._sessions]

    def get(self, session_id: str) -> SessionRecord:
        rec = self._find(session_id)
        if rec is None:
            raise SessionNotFound(session_id)
        return rec.copy()

    def total_gain_loss(self) -> float:
        return sum((rec.gain_loss for rec in self._sessions), 0)

    def total_count(self) -> int:
        return len(self._sessions)

    def total_buy_in(self) -> float:
        return sum((rec.buy_in for rec in self._sessions), 0)

    def total_cash_out(self) -> float:
        return sum((rec.cash_out for rec in self._sessions), 0)

    def totals(self) -> LedgerTotals:
        return LedgerTotals(
            gain_loss=self.total_gain_loss(),
            count=self.total_count(),
            buy_in=self.total_buy_in(),
            cash_out=self.total_cash_out(),
        )

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[SessionRecord]:
        return iter(self.list())
