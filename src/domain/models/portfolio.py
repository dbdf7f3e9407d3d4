"""Domain models for portfolio valuation and allocation."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.rates import RateTable


@dataclass(frozen=True)
class HoldingValue:
    """Value of one wallet currency expressed in the base currency.

    Attributes:
        currency: Wallet currency code.
        amount: Balance held in the wallet currency.
        market_code: Market code used for the rate lookup, if configured.
        rate: Units of market currency per base unit, if priced.
        base_value: Amount converted to base; zero when unpriced.
        priced: Whether a usable rate was found.
    """

    currency: str
    amount: Decimal
    market_code: str | None
    rate: Decimal | None
    base_value: Decimal
    priced: bool


@dataclass(frozen=True)
class AllocationSlice:
    """Proportional angular segment of the allocation chart."""

    currency: str
    amount: Decimal
    share: Decimal
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


@dataclass(frozen=True)
class PortfolioSummary:
    """Valuation, allocation and rate context for the dashboard."""

    base_currency: str
    total_value: Decimal
    holdings: list[HoldingValue]
    slices: list[AllocationSlice]
    rate_table: RateTable
    using_fallback_rates: bool
    rates_stale: bool

    @property
    def unpriced_currencies(self) -> list[str]:
        return [h.currency for h in self.holdings if not h.priced]


__all__ = ["HoldingValue", "AllocationSlice", "PortfolioSummary"]
