"""Tests for settings and logging configuration."""

import logging

from fintrack.config import DEFAULT_OWNER, Settings, configure_logging, load_settings


def test_defaults(monkeypatch):
    for name in ("FINTRACK_DB_PATH", "FINTRACK_OWNER", "FINTRACK_CURRENCY", "FINTRACK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert load_settings() == Settings(
        db_path=None, owner_id=DEFAULT_OWNER, currency="USD", log_level="WARNING"
    )


def test_environment(monkeypatch):
    monkeypatch.setenv("FINTRACK_DB_PATH", "/tmp/env.db")
    monkeypatch.setenv("FINTRACK_OWNER", "alice")
    monkeypatch.setenv("FINTRACK_CURRENCY", "eur")
    monkeypatch.setenv("FINTRACK_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.db_path == "/tmp/env.db"
    assert settings.owner_id == "alice"
    assert settings.currency == "EUR"
    assert settings.log_level == "DEBUG"


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("FINTRACK_OWNER", "alice")
    monkeypatch.setenv("FINTRACK_CURRENCY", "EUR")

    settings = load_settings(owner_id="bob", currency="gbp")

    assert settings.owner_id == "bob"
    assert settings.currency == "GBP"


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("fintrack")
    previous = logger.level
    try:
        configure_logging("debug")
        assert logger.level == logging.DEBUG

        configure_logging("nonsense")
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(previous)
