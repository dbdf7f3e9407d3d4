"""Domain services for exchange-rate lookups and local conversion."""

from decimal import Decimal
from typing import Mapping

from src.domain.models import CurrencyMapping, Quote, QuoteSource, RateTable


def cross_rate(
    from_currency: str,
    to_currency: str,
    rate_table: RateTable,
    mapping: CurrencyMapping,
) -> Decimal | None:
    """Return the rate converting one wallet currency into another.

    Args:
        from_currency: Source wallet code.
        to_currency: Target wallet code.
        rate_table: Snapshot of base-relative rates.
        mapping: Wallet-to-market configuration.

    Returns:
        Decimal | None: ``rate(to) / rate(from)``, 1 when both map to the
        same market code, None when either rate is missing.

    Raises:
        UnknownCurrencyError: If either wallet code is not configured.
    """
    from_market = mapping.to_market_code(from_currency)
    to_market = mapping.to_market_code(to_currency)
    if from_market == to_market:
        return Decimal("1")
    from_rate = rate_table.rate_of(from_market)
    to_rate = rate_table.rate_of(to_market)
    if from_rate is None or to_rate is None:
        return None
    return to_rate / from_rate


def convert_locally(
    from_currency: str,
    to_currency: str,
    amount: Decimal,
    rate_table: RateTable,
    mapping: CurrencyMapping,
) -> Quote:
    """Convert with the local rate table.

    Returns:
        Quote: A fallback quote, or the unavailable sentinel when no
        cross rate can be derived.
    """
    rate = cross_rate(from_currency, to_currency, rate_table, mapping)
    if rate is None:
        return Quote.unavailable()
    return Quote(result=amount * rate, rate=rate, source=QuoteSource.FALLBACK)


def resolve_rate_table(
    fetched: RateTable | None,
    fallback_rates: Mapping[str, Decimal],
    base_currency: str,
) -> tuple[RateTable, bool]:
    """Pick the fetched table, or indicative rates when it is empty.

    Returns:
        tuple[RateTable, bool]: Table to use and whether it is the fallback.
    """
    if fetched is not None and not fetched.is_empty:
        return fetched, False
    return RateTable.from_mapping(base_currency, fallback_rates), True


__all__ = ["cross_rate", "convert_locally", "resolve_rate_table"]
