"""Ledger package.

Public API:
- SessionLedger: ordered poker sessions with gain/loss and running totals.
- SessionRecord, LedgerTotals: record and aggregate types.
- SessionNotFound: raised when an update targets a missing session.
"""

from .errors import SessionNotFound  # re-export
from .ledger import SessionLedger  # re-export
from .model import LedgerTotals, SessionRecord, new_id  # re-export
