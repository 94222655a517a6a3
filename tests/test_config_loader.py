import pytest
from pydantic import ValidationError

from src.pokertracker.config.loader import load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "POKERTRACKER_STORAGE_BACKEND",
        "POKERTRACKER_STORAGE_PATH",
        "POKERTRACKER_STORAGE_KEY",
        "POKERTRACKER_PRESERVE_IDS",
        "POKERTRACKER_CURRENCY",
        "POKERTRACKER_LOG_LEVEL",
        "PROMETHEUS_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_missing_file_uses_defaults(tmp_path):
    s = load_settings(str(tmp_path / "absent.yaml"))
    assert s.storage.backend == "json"
    assert s.storage.key == "pokerGames"
    assert s.storage.preserve_ids is True
    assert s.currency_symbol == "$"
    assert s.metrics_port is None


def test_yaml_values_and_env_overrides(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "storage:\n  backend: sqlite\n  path: data/x.sqlite\n  preserve_ids: false\ncurrency_symbol: 'EUR '\nlog_level: debug\n"
    )
    s = load_settings(str(cfg))
    assert s.storage.backend == "sqlite"
    assert s.storage.preserve_ids is False
    assert s.currency_symbol == "EUR "
    assert s.log_level == "DEBUG"

    monkeypatch.setenv("POKERTRACKER_STORAGE_PATH", "/tmp/other.sqlite")
    monkeypatch.setenv("POKERTRACKER_PRESERVE_IDS", "true")
    monkeypatch.setenv("PROMETHEUS_PORT", "9105")
    s = load_settings(str(cfg))
    assert s.storage.path == "/tmp/other.sqlite"
    assert s.storage.preserve_ids is True
    assert s.metrics_port == 9105


def test_invalid_backend_and_empty_key(tmp_path, monkeypatch):
    monkeypatch.setenv("POKERTRACKER_STORAGE_BACKEND", "redis")
    with pytest.raises(ValidationError):
        load_settings(str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("POKERTRACKER_STORAGE_BACKEND")
    monkeypatch.setenv("POKERTRACKER_STORAGE_KEY", "")
    with pytest.raises(ValidationError):
        load_settings(str(tmp_path / "absent.yaml"))


def test_unknown_log_level_is_a_validation_error(tmp_path, monkeypatch):
    monkeypatch.setenv("POKERTRACKER_LOG_LEVEL", "VERBOSE")
    with pytest.raises(ValidationError):
        load_settings(str(tmp_path / "absent.yaml"))
    monkeypatch.setenv("POKERTRACKER_LOG_LEVEL", "warning")
    assert load_settings(str(tmp_path / "absent.yaml")).log_level == "WARNING"
