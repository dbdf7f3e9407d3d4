"""Use case forcing a fresh exchange-rate snapshot."""

from src.application.ports.wallet_gateway import RatesSourcePort
from src.application.use_cases.convert_currency import ConvertCurrencyUseCase
from src.domain.models import RateTable
from src.infrastructure.logging.logger import get_app_logger


class RefreshRatesUseCase:
    """Refresh upstream rates and hand the new table to conversions."""

    def __init__(
        self,
        rates_port: RatesSourcePort,
        base_currency: str,
        conversion: ConvertCurrencyUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            rates_port: Port able to force a rate refresh.
            base_currency: Market code the rates are quoted against.
            conversion: Optional conversion use case whose fallback snapshot
                is replaced after a successful refresh.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._rates_port = rates_port
        self._base_currency = base_currency
        self._conversion = conversion
        self._logger = logger or get_app_logger()

    async def execute(self) -> RateTable:
        """Refresh the rates and return the new snapshot.

        Transport errors are logged and propagate to the caller, which keeps
        its previous snapshot.

        Returns:
            RateTable: Freshly refreshed rates.
        """
        try:
            rate_table = await self._rates_port.refresh_rates(self._base_currency)
        except Exception as exc:
            self._logger.warning(
                f"Rate refresh for base {self._base_currency} failed: {exc!r}"
            )
            raise
        if self._conversion is not None:
            self._conversion.update_rates(rate_table)
        self._logger.info(
            f"Rates refreshed for base {rate_table.base_currency}: "
            f"{len(rate_table.rates)} currencies"
        )
        return rate_table


__all__ = ["RefreshRatesUseCase"]
