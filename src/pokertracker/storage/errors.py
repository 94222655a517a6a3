from __future__ import annotations


class StoreError(ValueError):
    """Raised when the backing store itself cannot be read."""
