from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Optional


def log_ledger_event(
    event_type: str,
    session_id: Optional[str],
    game_name: Optional[str] = None,
    gain_loss: Optional[float] = None,
    ts: Optional[int] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Emit a structured JSON log line for a ledger change.

    Keys: event, session_id, game_name, gain_loss, ts, component, schema_version
    """
    try:
        logger = logging.getLogger("pokertracker.ledger")
        payload: Dict[str, Any] = {
            "event": str(event_type),
            "session_id": str(session_id) if session_id is not None else None,
            "game_name": str(game_name) if game_name is not None else None,
            "gain_loss": float(gain_loss) if gain_loss is not None else None,
            "ts": int(ts if ts is not None else int(time.time() * 1000)),
            "component": "ledger",
            "schema_version": "v1",
        }
        if extra:
            payload["extra"] = extra
        logger.info(json.dumps(payload, separators=(",", ":")))
    except Exception:
        # Logging must never throw
        pass
