from __future__ import annotations

import os
import sqlite3
from typing import Optional

from .errors import StoreError


DDL = """
CREATE TABLE IF NOT EXISTS kv (
  key TEXT PRIMARY KEY,
  value TEXT
);
"""


class SQLiteStore:
    def __init__(self, path: str = "data/pokertracker.sqlite"):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        with sqlite3.connect(self.path) as con:
            con.execute(DDL)

    def get(self, key: str) -> Optional[str]:
        try:
            with sqlite3.connect(self.path) as con:
                row = con.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.DatabaseError as e:
            raise StoreError(f"Store database unreadable: {self.path}: {e}") from e
        return None if row is None else row[0]

    def set(self, key: str, value: str) -> None:
        with sqlite3.connect(self.path) as con:
            con.execute("INSERT OR REPLACE INTO kv(key, value) VALUES (?, ?)", (key, value))

    def remove(self, key: str) -> None:
        with sqlite3.connect(self.path) as con:
            con.execute("DELETE FROM kv WHERE key = ?", (key,))
