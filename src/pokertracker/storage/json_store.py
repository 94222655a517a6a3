from __future__ import annotations

import json
import os
from typing import Dict, Optional

from .errors import StoreError


class JsonFileStore:
    """Key/value store of string blobs kept in a single JSON object file."""

    def __init__(self, path: str = "data/pokertracker.json"):
        self.path = path

    def _read(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Store file is not valid JSON: {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Store file is not a JSON object: {self.path}")
        return data

    def _write(self, data: Dict[str, str]) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
