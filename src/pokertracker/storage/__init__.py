"""Storage package.

Public API:
- JsonFileStore, SQLiteStore: key/value stores holding string blobs.
- StoreError: the store itself could not be read.
- open_store: build the store selected by Settings.
- save_ledger, load_ledger, forget_ledger: persist a ledger under one key.
"""

from .json_store import JsonFileStore
from .sqlite_store import SQLiteStore
from .errors import StoreError
from .persistence import LEDGER_KEY, forget_ledger, load_ledger, save_ledger


def open_store(settings):
    """Return the blob store configured in `settings.storage`."""
    backend = settings.storage.backend
    if backend == "sqlite":
        return SQLiteStore(settings.storage.path)
    return JsonFileStore(settings.storage.path)


__all__ = [
    "JsonFileStore",
    "SQLiteStore",
    "StoreError",
    "LEDGER_KEY",
    "open_store",
    "save_ledger",
    "load_ledger",
    "forget_ledger",
]
