"""Composition root for wiring infrastructure adapters."""

from typing import Callable

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.wallet_gateway import BalancesSourcePort
from src.application.use_cases.convert_currency import ConvertCurrencyUseCase
from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
)
from src.application.use_cases.quote_debouncer import QuoteDebouncer
from src.application.use_cases.refresh_rates import RefreshRatesUseCase
from src.application.use_cases.submit_transfer import SubmitTransferUseCase
from src.domain.models import QuoteUpdate, RateTable
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.http_gateway import HttpWalletGateway
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import WalletSettings
from src.infrastructure.wallet_repository import SqlAlchemyBalancesRepository


def build_database_adapter(
    settings: WalletSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(settings)


def build_wallet_gateway(
    settings: WalletSettings | None = None,
) -> HttpWalletGateway:
    """Return the HTTP gateway to the wallet API."""
    resolved = settings or WalletSettings.from_env()
    return HttpWalletGateway(
        resolved.api_url,
        token=resolved.api_token,
        timeout=resolved.quote_timeout.total_seconds(),
        logger=get_app_logger(),
    )


def build_balances_source(
    gateway: HttpWalletGateway,
    settings: WalletSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> BalancesSourcePort:
    """Return the configured balances source."""
    resolved = settings or WalletSettings.from_env()
    if resolved.balances_backend == "sqlalchemy":
        if resolved.user_id is None:
            raise RuntimeError(
                "SQLAlchemy balances backend requires a WALLET_USER_ID value."
            )
        return SqlAlchemyBalancesRepository(
            db_port or build_database_adapter(resolved),
            resolved.user_id,
            logger=get_app_logger(),
        )
    return gateway


def build_portfolio_summary_use_case(
    gateway: HttpWalletGateway,
    settings: WalletSettings | None = None,
) -> GetPortfolioSummaryUseCase:
    """Return the portfolio summary use case."""
    resolved = settings or WalletSettings.from_env()
    return GetPortfolioSummaryUseCase(
        balances_port=build_balances_source(gateway, resolved),
        rates_port=gateway,
        mapping=resolved.currency_mapping,
        logger=get_app_logger(),
        rates_max_age=resolved.rates_max_age,
    )


def build_convert_currency_use_case(
    gateway: HttpWalletGateway,
    settings: WalletSettings | None = None,
    rate_table: RateTable | None = None,
) -> ConvertCurrencyUseCase:
    """Return the conversion use case."""
    resolved = settings or WalletSettings.from_env()
    return ConvertCurrencyUseCase(
        quote_port=gateway,
        mapping=resolved.currency_mapping,
        rate_table=rate_table,
        logger=get_app_logger(),
        timeout=resolved.quote_timeout.total_seconds(),
    )


def build_quote_debouncer(
    conversion: ConvertCurrencyUseCase,
    on_quote: Callable[[QuoteUpdate], None],
    settings: WalletSettings | None = None,
) -> QuoteDebouncer:
    """Return a debouncer configured with the quiet window."""
    resolved = settings or WalletSettings.from_env()
    return QuoteDebouncer(
        conversion,
        on_quote,
        quiet_window=resolved.quote_debounce.total_seconds(),
        logger=get_app_logger(),
    )


def build_refresh_rates_use_case(
    gateway: HttpWalletGateway,
    settings: WalletSettings | None = None,
    conversion: ConvertCurrencyUseCase | None = None,
) -> RefreshRatesUseCase:
    """Return the rate refresh use case."""
    resolved = settings or WalletSettings.from_env()
    return RefreshRatesUseCase(
        gateway,
        resolved.currency_mapping.base_currency,
        conversion=conversion,
        logger=get_app_logger(),
    )


def build_submit_transfer_use_case(
    gateway: HttpWalletGateway,
) -> SubmitTransferUseCase:
    """Return the transfer submission use case."""
    return SubmitTransferUseCase(gateway, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_wallet_gateway",
    "build_balances_source",
    "build_portfolio_summary_use_case",
    "build_convert_currency_use_case",
    "build_quote_debouncer",
    "build_refresh_rates_use_case",
    "build_submit_transfer_use_case",
]
