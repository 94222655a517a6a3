"""
Configuration loader for pokertracker.

What it does:
- Reads static settings from `config/config.yaml` (missing file => defaults).
- Applies `POKERTRACKER_*` environment overrides on top of the YAML values.
- Validates the resulting configuration using Pydantic models.

Where it is used:
- Called by `pokertracker.main` to build a `Settings` object for the CLI.
"""

import logging
import os
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, field_validator


class StorageConfig(BaseModel):
    """Where the ledger blob lives and how it is reloaded."""
    backend: Literal["json", "sqlite"] = "json"
    path: str = "data/pokertracker.json"
    key: str = "pokerGames"
    preserve_ids: bool = True

    @field_validator("key")
    @classmethod
    def not_empty(cls, v):
        if not v:
            raise ValueError("Storage key must not be empty")
        return v


class Settings(BaseModel):
    """Runtime settings assembled from YAML + environment variables."""
    storage: StorageConfig = StorageConfig()
    currency_symbol: str = "$"
    log_level: str = "INFO"
    metrics_port: Optional[int] = None

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v):
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


_ENV_STORAGE = {
    "POKERTRACKER_STORAGE_BACKEND": "backend",
    "POKERTRACKER_STORAGE_PATH": "path",
    "POKERTRACKER_STORAGE_KEY": "key",
    "POKERTRACKER_PRESERVE_IDS": "preserve_ids",
}


def load_settings(path: str = "config/config.yaml") -> Settings:
    """Load YAML config, apply env-var overrides, and return Settings."""
    config: Dict[str, Any] = {}
    if os.path.exists(path):
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}
    storage = dict(config.get("storage") or {})
    for env_name, field in _ENV_STORAGE.items():
        value = os.getenv(env_name)
        if value is not None:
            storage[field] = value
    config["storage"] = storage
    if os.getenv("POKERTRACKER_CURRENCY") is not None:
        config["currency_symbol"] = os.getenv("POKERTRACKER_CURRENCY")
    if os.getenv("POKERTRACKER_LOG_LEVEL") is not None:
        config["log_level"] = os.getenv("POKERTRACKER_LOG_LEVEL")
    if os.getenv("PROMETHEUS_PORT"):
        config["metrics_port"] = os.getenv("PROMETHEUS_PORT")
    return Settings(**config)
