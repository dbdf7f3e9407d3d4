"""SQLAlchemy repository reading wallet balances."""

import asyncio
from decimal import Decimal
import json
from typing import Any, Mapping

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.wallet_gateway import BalancesSourcePort
from src.infrastructure.logging.logger import get_app_logger


class SqlAlchemyBalancesRepository(BalancesSourcePort):
    """Read the balances JSON column of a user's wallet."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        user_id: str,
        logger=None,
    ) -> None:
        self._db_port = db_port
        self._user_id = user_id
        self._logger = logger or get_app_logger()

    async def fetch_balances(self) -> Mapping[str, Any]:
        """Return raw balances keyed by wallet code.

        The blocking query runs in a worker thread.

        Raises:
            RuntimeError: If the user has no wallet.
        """
        return await asyncio.to_thread(self._fetch_balances)

    def _fetch_balances(self) -> dict[str, Any]:
        query = text(
            """
            SELECT balances
            FROM wallets
            WHERE user_id = :user_id
            LIMIT 1
            """
        )
        engine = self._db_port.get_wallet_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"user_id": self._user_id}).first()
        if not row:
            raise RuntimeError(f"Missing wallet for user: {self._user_id}")
        return self._decode_balances(row.balances)

    def _decode_balances(self, raw) -> dict[str, Any]:
        """Decode JSON or JSONB balances into a plain dict.

        Args:
            raw: Column value, either a decoded mapping or JSON text.

        Returns:
            dict[str, Any]: Balances with Decimal-preserving amounts.
        """
        if raw is None:
            return {}
        if isinstance(raw, (str, bytes)):
            raw = json.loads(raw, parse_float=Decimal)
        if not isinstance(raw, dict):
            self._logger.warning(
                f"Unexpected balances payload for user {self._user_id}"
            )
            return {}
        return dict(raw)


__all__ = ["SqlAlchemyBalancesRepository"]
