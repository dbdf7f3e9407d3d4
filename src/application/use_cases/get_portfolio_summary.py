"""Use case to value the wallet portfolio in the base currency."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Mapping

from src.application.ports.wallet_gateway import BalancesSourcePort, RatesSourcePort
from src.domain.constants import DEFAULT_FALLBACK_RATES, DEFAULT_RATES_MAX_AGE
from src.domain.models import CurrencyMapping, PortfolioSummary, RateTable
from src.domain.services import (
    build_balance_snapshot,
    compute_allocation_slices,
    resolve_rate_table,
    value_holdings,
)
from src.infrastructure.logging.logger import get_app_logger


class GetPortfolioSummaryUseCase:
    """Compute total value, holdings and allocation for the dashboard."""

    def __init__(
        self,
        balances_port: BalancesSourcePort,
        rates_port: RatesSourcePort,
        mapping: CurrencyMapping,
        logger=None,
        fallback_rates: Mapping[str, Decimal] | None = None,
        rates_max_age: timedelta = DEFAULT_RATES_MAX_AGE,
    ) -> None:
        """Initialize the use case.

        Args:
            balances_port: Port returning the balance snapshot.
            rates_port: Port returning the rate table.
            mapping: Wallet-to-market configuration.
            logger: Optional logger compatible with logging.Logger-like API.
            fallback_rates: Indicative rates used when no live table exists.
            rates_max_age: Age after which the rate table is flagged stale.
        """
        self._balances_port = balances_port
        self._rates_port = rates_port
        self._mapping = mapping
        self._logger = logger or get_app_logger()
        self._fallback_rates = (
            DEFAULT_FALLBACK_RATES if fallback_rates is None else fallback_rates
        )
        self._rates_max_age = rates_max_age

    async def execute(self, now: datetime | None = None) -> PortfolioSummary:
        """Return the portfolio summary.

        Balance fetch errors propagate. Rate fetch errors are logged and the
        indicative fallback rates are used instead.

        Args:
            now: Reference time for the staleness check.

        Returns:
            PortfolioSummary: Valuation, allocation and rate context.
        """
        raw_balances = await self._balances_port.fetch_balances()
        balances = build_balance_snapshot(raw_balances, self._logger)

        base = self._mapping.base_currency
        fetched: RateTable | None
        try:
            fetched = await self._rates_port.fetch_rates(base)
        except Exception as exc:
            self._logger.warning(f"Rate fetch for base {base} failed: {exc!r}")
            fetched = None
        rate_table, using_fallback = resolve_rate_table(
            fetched,
            self._fallback_rates,
            base,
        )
        if using_fallback:
            self._logger.warning(f"Using indicative fallback rates for base {base}")

        holdings = value_holdings(balances, rate_table, self._mapping, self._logger)
        total_value = sum((h.base_value for h in holdings), Decimal("0"))
        slices = compute_allocation_slices(balances)
        rates_stale = using_fallback or rate_table.is_stale(
            self._rates_max_age,
            now,
        )

        self._logger.info(
            f"Portfolio valued: total={total_value} {base}, "
            f"currencies={len(holdings)}, fallback_rates={using_fallback}"
        )

        return PortfolioSummary(
            base_currency=base,
            total_value=total_value,
            holdings=holdings,
            slices=slices,
            rate_table=rate_table,
            using_fallback_rates=using_fallback,
            rates_stale=rates_stale,
        )


__all__ = ["GetPortfolioSummaryUseCase"]
