"""CLI adapter printing the wallet portfolio valuation.

This module wires the GetPortfolioSummaryUseCase to the wallet API gateway
and prints the total value, per-currency holdings and allocation shares.
"""

import asyncio

from src.domain.models import PortfolioSummary
from src.infrastructure.container import (
    build_portfolio_summary_use_case,
    build_wallet_gateway,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import WalletSettings


async def _load_summary(settings: WalletSettings) -> PortfolioSummary:
    async with build_wallet_gateway(settings) as gateway:
        use_case = build_portfolio_summary_use_case(gateway, settings)
        return await use_case.execute()


def _print_summary(summary: PortfolioSummary, settings: WalletSettings) -> None:
    mapping = settings.currency_mapping
    print(f"Total portfolio value: {summary.total_value:,.2f} {summary.base_currency}")
    if summary.using_fallback_rates:
        print("Rates: indicative fallback (live rates unavailable)")
    elif summary.rates_stale:
        print(f"Rates: stale (last updated {summary.rate_table.last_updated})")
    for holding in summary.holdings:
        info = mapping.describe(holding.currency)
        value = (
            f"{holding.base_value:,.2f} {summary.base_currency}"
            if holding.priced
            else "rate unavailable"
        )
        print(f"  {holding.currency} ({info.name}): {holding.amount:,.2f} -> {value}")
    if not summary.slices:
        print("No balance to display")
        return
    print("Allocation:")
    for item in summary.slices:
        print(
            f"  {item.currency}: {item.share * 100:.1f}% "
            f"[{item.start_angle:.1f}, {item.end_angle:.1f}]"
        )


def main() -> None:
    """Fetch balances and rates, then print the portfolio summary."""
    logger = get_app_logger()
    settings = WalletSettings.from_env()
    summary = asyncio.run(_load_summary(settings))
    get_usage_logger().info("portfolio summary requested")
    logger.info(f"Printing summary for {len(summary.holdings)} currencies")
    _print_summary(summary, settings)


if __name__ == "__main__":  # pragma: no cover
    main()
