"""
Save and load a SessionLedger under a fixed key of a key/value store.

Loading rebuilds the saved records in order with fresh ids unless
`preserve_ids` is set; it does not count as adding sessions. An unreadable
store or a blob that fails to parse is logged and treated as "no saved
data": the ledger comes back empty, never partial.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Protocol

from pydantic import ValidationError

from .codec import dump_sessions, parse_sessions
from .errors import StoreError
from ..ledger.ledger import SessionLedger
from ..ledger.model import new_id
from ..logs.event_log import log_ledger_event
from ..metrics.ledger import get_ledger_load_errors_total

logger = logging.getLogger(__name__)

LEDGER_KEY = "pokerGames"


class BlobStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


def save_ledger(store: BlobStore, ledger: SessionLedger, key: str = LEDGER_KEY) -> None:
    store.set(key, dump_sessions(ledger.list()))


def load_ledger(store: BlobStore, key: str = LEDGER_KEY, preserve_ids: bool = False) -> SessionLedger:
    try:
        blob = store.get(key)
    except StoreError as e:
        get_ledger_load_errors_total().labels("store_error").inc()
        logger.error(f"Failed to load saved games under {key!r}: {e}")
        return SessionLedger()
    if not blob:
        return SessionLedger()
    try:
        saved = parse_sessions(blob)
    except ValidationError as e:
        reason = "parse_error" if any(err.get("type") == "json_invalid" for err in e.errors()) else "invalid_record"
        get_ledger_load_errors_total().labels(reason).inc()
        logger.error(f"Failed to load saved games under {key!r}: {e}")
        return SessionLedger()
    if preserve_ids:
        try:
            ledger = SessionLedger.restore(s.to_record() for s in saved)
        except ValueError as e:
            get_ledger_load_errors_total().labels("duplicate_id").inc()
            logger.error(f"Failed to load saved games under {key!r}: {e}")
            return SessionLedger()
    else:
        # Replayed sessions get fresh ids; loading is not a new add
        ledger = SessionLedger.restore(replace(s.to_record(), id=new_id()) for s in saved)
    log_ledger_event("ledger_loaded", None, extra={"key": key, "sessions": len(ledger)})
    return ledger


def forget_ledger(store: BlobStore, key: str = LEDGER_KEY) -> None:
    store.remove(key)
