"""Database infrastructure for the wallet balances backend.

The engine is built once from ``WalletSettings`` (``WALLET_DB_URL`` plus the
``WALLET_DB_POOL_SIZE`` and ``WALLET_DB_MAX_OVERFLOW`` pool options) and
reused by every repository.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import WalletSettings


def _create_engine(settings: WalletSettings) -> Engine:
    """Create the pooled engine for the wallet database.

    Args:
        settings: Settings carrying the database URL and pool sizes.

    Returns:
        Engine: Engine with pre-ping health checks enabled.

    Raises:
        RuntimeError: If no database URL is configured.
    """
    if not settings.db_url:
        raise RuntimeError("Missing environment variable: WALLET_DB_URL")
    return create_engine(
        settings.db_url,
        poolclass=QueuePool,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        future=True,
    )


_wallet_engine: Optional[Engine] = None


def get_wallet_engine(settings: WalletSettings | None = None) -> Engine:
    """Get a singleton SQLAlchemy engine for the wallet database.

    Args:
        settings: Optional settings; read from the environment when omitted.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _wallet_engine
    if _wallet_engine is None:
        _wallet_engine = _create_engine(settings or WalletSettings.from_env())
    return _wallet_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by the shared engine."""

    def __init__(self, settings: WalletSettings | None = None) -> None:
        self._settings = settings

    def get_wallet_engine(self) -> Engine:
        return get_wallet_engine(self._settings)


__all__ = [
    "get_wallet_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
