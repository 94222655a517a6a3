from __future__ import annotations


class SessionNotFound(LookupError):
    """Raised when a session id does not match any record in the ledger."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Game session not found: {session_id}")
