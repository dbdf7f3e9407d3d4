"""Database ports for the wallet dashboard.

This module defines the application-layer protocol for accessing the wallet
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the wallet database.

    Application code can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_wallet_engine(self) -> Engine:
        """Get the engine for the wallet database.

        Returns:
            Engine: SQLAlchemy engine connected to the wallet backend.
        """


__all__ = ["DatabaseEnginePort"]
