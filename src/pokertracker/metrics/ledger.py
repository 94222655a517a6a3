from __future__ import annotations

from typing import Optional
import os
from prometheus_client import Counter, Gauge, REGISTRY

_sessions_recorded: Optional[Counter] = None
_ledger_sessions: Optional[Gauge] = None
_ledger_gain_loss: Optional[Gauge] = None
_ledger_load_errors: Optional[Counter] = None


class _NoOp:
    def labels(self, *args, **kwargs):
        return self
    def inc(self, *args, **kwargs):
        return None
    def set(self, *args, **kwargs):
        return None


def _existing(name: str):
    # Counters register under both `name` and `name_total`; look up either
    try:
        names = getattr(REGISTRY, "_names_to_collectors", {})
        for key in (name, f"{name}_total"):
            coll = names.get(key)
            if coll is not None:
                return coll
    except Exception:
        pass
    return _NoOp()


def _safe_counter(name: str, doc: str, labelnames):
    if os.getenv("DISABLE_PROMETHEUS", "0") == "1":
        return _NoOp()
    try:
        return Counter(name, doc, labelnames)
    except ValueError:
        return _existing(name)


def _safe_gauge(name: str, doc: str):
    if os.getenv("DISABLE_PROMETHEUS", "0") == "1":
        return _NoOp()
    try:
        return Gauge(name, doc)
    except ValueError:
        return _existing(name)


def get_sessions_recorded_total():
    """Counter: ledger mutations, labeled by event (add|update|delete|clear)."""
    global _sessions_recorded
    if _sessions_recorded is None:
        _sessions_recorded = _safe_counter("sessions_recorded_total", "Ledger mutations", ["event"])
    return _sessions_recorded


def get_ledger_sessions_gauge():
    global _ledger_sessions
    if _ledger_sessions is None:
        _ledger_sessions = _safe_gauge("ledger_sessions", "Sessions currently in the ledger")
    return _ledger_sessions


def get_ledger_gain_loss_gauge():
    """Gauge: total gain/loss across the ledger (negative when losing)."""
    global _ledger_gain_loss
    if _ledger_gain_loss is None:
        _ledger_gain_loss = _safe_gauge("ledger_gain_loss_usd", "Total gain/loss across sessions")
    return _ledger_gain_loss


def get_ledger_load_errors_total():
    global _ledger_load_errors
    if _ledger_load_errors is None:
        _ledger_load_errors = _safe_counter("ledger_load_errors_total", "Saved ledgers that failed to load", ["reason"])
    return _ledger_load_errors
