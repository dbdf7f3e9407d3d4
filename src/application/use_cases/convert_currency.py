"""Use case converting an amount between two wallet currencies."""

import asyncio

from src.application.ports.wallet_gateway import QuotePort
from src.domain.constants import DEFAULT_QUOTE_TIMEOUT
from src.domain.models import CurrencyMapping, Quote, QuoteSource, RateTable
from src.domain.services import convert_locally
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class ConvertCurrencyUseCase:
    """Quote conversions, preferring the remote service over local rates.

    Remote failures never reach the caller: a slow, failing or malformed
    remote quote falls back to the cross rate of the latest rate table, and
    to the zero-rate sentinel when no cross rate exists.
    """

    def __init__(
        self,
        quote_port: QuotePort,
        mapping: CurrencyMapping,
        rate_table: RateTable | None = None,
        logger=None,
        timeout: float = DEFAULT_QUOTE_TIMEOUT.total_seconds(),
    ) -> None:
        """Initialize the use case.

        Args:
            quote_port: Port performing remote quotes between market codes.
            mapping: Wallet-to-market configuration.
            rate_table: Initial rate snapshot for the fallback path.
            logger: Optional logger compatible with logging.Logger-like API.
            timeout: Seconds to wait for a remote quote.
        """
        self._quote_port = quote_port
        self._mapping = mapping
        self._rate_table = rate_table or RateTable.empty(mapping.base_currency)
        self._logger = logger or get_app_logger()
        self._timeout = timeout

    @property
    def rate_table(self) -> RateTable:
        return self._rate_table

    def update_rates(self, rate_table: RateTable) -> None:
        """Replace the fallback snapshot with a newer one."""
        self._rate_table = rate_table

    async def execute(
        self,
        from_currency: str,
        to_currency: str,
        amount,
    ) -> Quote:
        """Return a quote for converting ``amount``.

        Args:
            from_currency: Source wallet code.
            to_currency: Target wallet code.
            amount: Amount in the source currency.

        Returns:
            Quote: Identity, remote, fallback or unavailable quote.

        Raises:
            UnknownCurrencyError: If a wallet code is not configured.
            ValueError: If the amount is not a finite number.
        """
        amount = coerce_decimal(amount)
        if not amount.is_finite():
            raise ValueError(f"Amount must be a finite number: {amount}")
        if amount <= 0 or from_currency == to_currency:
            return Quote.identity(amount)

        from_market = self._mapping.to_market_code(from_currency)
        to_market = self._mapping.to_market_code(to_currency)
        try:
            remote = await asyncio.wait_for(
                self._quote_port.convert(from_market, to_market, amount),
                timeout=self._timeout,
            )
            return self._accept_remote(remote)
        except Exception as exc:
            self._logger.warning(
                f"Remote quote {from_market}->{to_market} failed, "
                f"using local rates: {exc!r}"
            )

        quote = convert_locally(
            from_currency,
            to_currency,
            amount,
            self._rate_table,
            self._mapping,
        )
        if not quote.is_available:
            self._logger.warning(
                f"Conversion unavailable for {from_currency}->{to_currency}"
            )
        return quote

    @staticmethod
    def _accept_remote(remote: Quote) -> Quote:
        """Check the remote payload and tag it as a remote quote.

        Raises:
            ValueError: If the quote carries a non-finite or negative value.
        """
        result = coerce_decimal(remote.result)
        rate = coerce_decimal(remote.rate)
        if not (result.is_finite() and rate.is_finite()):
            raise ValueError(f"Malformed remote quote: {remote!r}")
        if result < 0 or rate <= 0:
            raise ValueError(f"Malformed remote quote: {remote!r}")
        return Quote(result=result, rate=rate, source=QuoteSource.REMOTE)


__all__ = ["ConvertCurrencyUseCase"]
