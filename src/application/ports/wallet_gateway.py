"""Ports for the wallet collaborators consumed by the valuation engine."""

from decimal import Decimal
from typing import Any, Mapping, Protocol

from src.domain.models import Quote, RateTable, TransferRequest


class BalancesSourcePort(Protocol):
    """Port returning the user's balance snapshot."""

    async def fetch_balances(self) -> Mapping[str, Decimal]:
        """Return wallet code to amount; may raise a transport error."""


class RatesSourcePort(Protocol):
    """Port returning exchange rates against a base currency."""

    async def fetch_rates(self, base_currency: str) -> RateTable:
        """Return the latest rate table; may raise a transport error."""

    async def refresh_rates(self, base_currency: str) -> RateTable:
        """Force the source to refresh its rates and return the new table."""


class QuotePort(Protocol):
    """Port performing a remote conversion quote between market codes."""

    async def convert(
        self,
        from_currency: str,
        to_currency: str,
        amount: Decimal,
    ) -> Quote:
        """Return the remote quote; may raise or be slow."""


class TransferSubmissionPort(Protocol):
    """Port submitting an already validated transfer."""

    async def submit_transfer(self, request: TransferRequest) -> Mapping[str, Any]:
        """Submit the transfer and return the collaborator's receipt."""


__all__ = [
    "BalancesSourcePort",
    "RatesSourcePort",
    "QuotePort",
    "TransferSubmissionPort",
]
