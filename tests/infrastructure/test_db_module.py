"""Tests for the infrastructure.db module."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import db as db_module
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import WalletSettings


def test_create_engine_uses_configured_pool(monkeypatch):
    """_create_engine should size the QueuePool from the settings."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)
    settings = WalletSettings(
        db_url="postgresql://wallets",
        db_pool_size=2,
        db_max_overflow=8,
    )

    engine = db_module._create_engine(settings)

    assert engine == "engine"
    assert captured["db_url"] == "postgresql://wallets"
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 2
    assert captured["kwargs"]["max_overflow"] == 8
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True


def test_create_engine_requires_url():
    """A missing database URL should raise a RuntimeError."""
    with pytest.raises(RuntimeError):
        db_module._create_engine(WalletSettings())


def test_get_wallet_engine_reads_env_once(monkeypatch):
    """get_wallet_engine should load settings from .env and memoize."""
    monkeypatch.setattr(db_module, "_wallet_engine", None)
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: MagicMock())
    monkeypatch.setenv("WALLET_DB_URL", "postgresql://wallets")
    monkeypatch.setenv("WALLET_DB_POOL_SIZE", "3")
    monkeypatch.delenv("WALLET_DB_MAX_OVERFLOW", raising=False)
    monkeypatch.delenv("WALLET_CURRENCY_MAP", raising=False)
    monkeypatch.delenv("WALLET_PEG_CURRENCY", raising=False)
    monkeypatch.delenv("WALLET_BASE_CURRENCY", raising=False)
    created = []

    def fake_create_engine(settings):
        created.append((settings.db_url, settings.db_pool_size))
        return f"engine:{settings.db_url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)

    engine_one = db_module.get_wallet_engine()
    engine_two = db_module.get_wallet_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://wallets"
    assert created == [("postgresql://wallets", 3)]


def test_adapter_passes_its_settings(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    settings = WalletSettings(db_url="sqlite://")
    seen = []

    def fake_get_wallet_engine(passed):
        seen.append(passed)
        return "wallet_engine"

    monkeypatch.setattr(db_module, "get_wallet_engine", fake_get_wallet_engine)

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter(settings)

    assert adapter.get_wallet_engine() == "wallet_engine"
    assert seen == [settings]
