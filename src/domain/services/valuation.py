"""Domain services for portfolio valuation."""

from decimal import Decimal
from logging import Logger
from typing import Mapping

from src.domain.errors import UnknownCurrencyError
from src.domain.models import CurrencyMapping, HoldingValue, RateTable


def value_holdings(
    balances: Mapping[str, Decimal],
    rate_table: RateTable,
    mapping: CurrencyMapping,
    logger: Logger,
) -> list[HoldingValue]:
    """Value each wallet balance in the rate table's base currency.

    Rates are read as units of market currency per 1 base unit, so a
    non-base balance is divided by its rate. Currencies without a usable
    rate, or missing from the mapping, are reported with ``priced=False``
    and a zero base value.

    Args:
        balances: Snapshot of wallet code to amount.
        rate_table: Snapshot of base-relative rates.
        mapping: Wallet-to-market configuration.
        logger: Logger used for warnings.

    Returns:
        list[HoldingValue]: One entry per wallet code, sorted by code.
    """
    holdings: list[HoldingValue] = []
    for currency in sorted(balances):
        amount = balances[currency]
        try:
            market_code = mapping.to_market_code(currency)
        except UnknownCurrencyError:
            logger.warning(f"Excluding unmapped currency {currency} from valuation")
            holdings.append(
                HoldingValue(
                    currency=currency,
                    amount=amount,
                    market_code=None,
                    rate=None,
                    base_value=Decimal("0"),
                    priced=False,
                )
            )
            continue

        if market_code == rate_table.base_currency:
            rate = Decimal("1")
        else:
            rate = rate_table.rate_of(market_code)
        if rate is None:
            logger.warning(
                f"Missing FX rate for {market_code} to {rate_table.base_currency}"
            )
            base_value = Decimal("0")
        elif market_code == rate_table.base_currency:
            base_value = amount
        else:
            base_value = amount / rate

        holdings.append(
            HoldingValue(
                currency=currency,
                amount=amount,
                market_code=market_code,
                rate=rate,
                base_value=base_value,
                priced=rate is not None,
            )
        )
    return holdings


def compute_total_value(
    balances: Mapping[str, Decimal],
    rate_table: RateTable,
    mapping: CurrencyMapping,
    logger: Logger,
) -> Decimal:
    """Return the portfolio value in the rate table's base currency.

    Unpriced currencies contribute nothing. The function is pure; staleness
    of ``rate_table`` is the caller's concern.
    """
    holdings = value_holdings(balances, rate_table, mapping, logger)
    return sum((h.base_value for h in holdings), Decimal("0"))


__all__ = ["value_holdings", "compute_total_value"]
