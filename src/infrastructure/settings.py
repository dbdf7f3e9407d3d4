"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from datetime import timedelta
import math
import os

import dotenv

from src.domain.constants import (
    DEFAULT_BASE_CURRENCY,
    DEFAULT_CURRENCY_MAPPING,
    DEFAULT_PEG_CURRENCY,
    DEFAULT_QUOTE_DEBOUNCE,
    DEFAULT_QUOTE_TIMEOUT,
    DEFAULT_RATES_MAX_AGE,
)
from src.domain.models import CurrencyMapping
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class WalletSettings:
    """Runtime configuration for the wallet valuation engine.

    Attributes:
        api_url: Base URL of the wallet API.
        api_token: Optional bearer token for the wallet API.
        balances_backend: Balance source identifier (http or sqlalchemy).
        user_id: User whose wallet is read by the sqlalchemy backend.
        quote_debounce: Quiet window before a quote lookup is issued.
        quote_timeout: Maximum wait for a remote quote.
        rates_max_age: Age after which rates are reported stale.
        currency_mapping: Wallet-to-market configuration.
        db_url: SQLAlchemy URL of the wallet database, if configured.
        db_pool_size: Connections kept open by the engine pool.
        db_max_overflow: Extra connections allowed beyond the pool size.
    """

    api_url: str = "http://localhost:8080"
    api_token: str | None = None
    balances_backend: str = "http"
    user_id: str | None = None
    quote_debounce: timedelta = DEFAULT_QUOTE_DEBOUNCE
    quote_timeout: timedelta = DEFAULT_QUOTE_TIMEOUT
    rates_max_age: timedelta = DEFAULT_RATES_MAX_AGE
    currency_mapping: CurrencyMapping = field(default_factory=CurrencyMapping.default)
    db_url: str | None = None
    db_pool_size: int = 5
    db_max_overflow: int = 5

    @classmethod
    def from_env(cls) -> "WalletSettings":
        """Build settings from environment variables.

        Returns:
            WalletSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        api_url = os.getenv("WALLET_API_URL", "http://localhost:8080").strip()
        backend = os.getenv("WALLET_BALANCES_BACKEND", "http").strip().lower()
        debounce_ms = cls._read_number(
            "WALLET_QUOTE_DEBOUNCE_MS",
            DEFAULT_QUOTE_DEBOUNCE.total_seconds() * 1000,
            logger,
        )
        timeout_s = cls._read_number(
            "WALLET_QUOTE_TIMEOUT_SECONDS",
            DEFAULT_QUOTE_TIMEOUT.total_seconds(),
            logger,
        )
        max_age_h = cls._read_number(
            "WALLET_RATES_MAX_AGE_HOURS",
            DEFAULT_RATES_MAX_AGE.total_seconds() / 3600,
            logger,
        )
        return cls(
            api_url=api_url.rstrip("/"),
            api_token=os.getenv("WALLET_API_TOKEN") or None,
            balances_backend=backend,
            user_id=os.getenv("WALLET_USER_ID") or None,
            quote_debounce=timedelta(milliseconds=debounce_ms),
            quote_timeout=timedelta(seconds=timeout_s),
            rates_max_age=timedelta(hours=max_age_h),
            currency_mapping=cls._mapping_from_env(),
            db_url=os.getenv("WALLET_DB_URL") or None,
            db_pool_size=int(cls._read_number("WALLET_DB_POOL_SIZE", 5, logger)),
            db_max_overflow=int(
                cls._read_number("WALLET_DB_MAX_OVERFLOW", 5, logger)
            ),
        )

    @staticmethod
    def _read_number(name: str, default: float, logger) -> float:
        """Read a non-negative number, warning and defaulting when invalid.

        Args:
            name: Environment variable name.
            default: Value used when missing or invalid.
            logger: Logger used for warnings.

        Returns:
            float: Parsed value.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if not math.isfinite(value) or value < 0:
            logger.warning(f"Out-of-range {name}={raw!r}; using {default}")
            return default
        return value

    @staticmethod
    def _mapping_from_env() -> CurrencyMapping:
        """Build the currency mapping from environment overrides.

        ``WALLET_CURRENCY_MAP`` holds ``wallet=market`` pairs separated by
        commas; it replaces the default mapping entirely.

        Raises:
            ValueError: If the map is malformed or the peg is inconsistent.
        """
        raw_map = os.getenv("WALLET_CURRENCY_MAP")
        peg = os.getenv("WALLET_PEG_CURRENCY", DEFAULT_PEG_CURRENCY)
        base = os.getenv("WALLET_BASE_CURRENCY", DEFAULT_BASE_CURRENCY)
        uses_defaults = peg == DEFAULT_PEG_CURRENCY and base == DEFAULT_BASE_CURRENCY
        if not raw_map and uses_defaults:
            return CurrencyMapping.default()
        mapping = dict(DEFAULT_CURRENCY_MAPPING)
        if raw_map:
            mapping = {}
            for pair in raw_map.split(","):
                if not pair.strip():
                    continue
                wallet, sep, market = pair.partition("=")
                if not sep:
                    raise ValueError(f"Invalid WALLET_CURRENCY_MAP entry: {pair!r}")
                mapping[wallet.strip()] = market.strip()
        default_info = CurrencyMapping.default().info
        return CurrencyMapping(
            wallet_to_market=mapping,
            peg_currency=peg,
            base_currency=base,
            info={code: info for code, info in default_info.items() if code in mapping},
        )


__all__ = ["WalletSettings"]
