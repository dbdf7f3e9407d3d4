"""CLI adapter previewing a currency conversion."""

import asyncio
from decimal import Decimal
import os

from src.domain.models import Quote
from src.infrastructure.container import (
    build_convert_currency_use_case,
    build_refresh_rates_use_case,
    build_wallet_gateway,
)
from src.infrastructure.http_gateway import WalletGatewayError
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import WalletSettings
from src.utils.decimal_utils import coerce_decimal


async def _quote(
    settings: WalletSettings,
    from_currency: str,
    to_currency: str,
    amount: Decimal,
    logger,
    refresh: bool = False,
) -> Quote:
    async with build_wallet_gateway(settings) as gateway:
        use_case = build_convert_currency_use_case(gateway, settings)
        try:
            if refresh:
                await build_refresh_rates_use_case(
                    gateway,
                    settings,
                    conversion=use_case,
                ).execute()
            else:
                use_case.update_rates(
                    await gateway.fetch_rates(settings.currency_mapping.base_currency)
                )
        except WalletGatewayError as exc:
            logger.warning(f"Rates unavailable for local fallback: {exc}")
        return await use_case.execute(from_currency, to_currency, amount)


def main() -> None:
    """Print a conversion preview for QUOTE_FROM, QUOTE_TO and QUOTE_AMOUNT.

    Set QUOTE_REFRESH_RATES=1 to force a rate refresh before quoting.
    """
    logger = get_app_logger()
    settings = WalletSettings.from_env()
    from_currency = os.getenv("QUOTE_FROM", "cNGN").strip()
    to_currency = os.getenv("QUOTE_TO", "USDx").strip()
    refresh = os.getenv("QUOTE_REFRESH_RATES", "").strip().lower() in {
        "1",
        "true",
        "yes",
    }
    try:
        amount = coerce_decimal(os.getenv("QUOTE_AMOUNT", "1"))
    except ValueError as exc:
        logger.warning(str(exc))
        return
    if not amount.is_finite():
        logger.warning(f"QUOTE_AMOUNT must be a finite number: {amount}")
        return

    quote = asyncio.run(
        _quote(settings, from_currency, to_currency, amount, logger, refresh)
    )
    get_usage_logger().info(
        f"quote preview {from_currency}->{to_currency} source={quote.source.value}"
    )

    if not quote.is_available:
        print(f"{amount} {from_currency} -> rate unavailable")
        return
    print(f"{amount} {from_currency} = {quote.result:.2f} {to_currency}")
    print(
        f"Exchange rate: 1 {from_currency} = {quote.rate:.6f} {to_currency} "
        f"({quote.source.value})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
