"""Domain models for conversion quotes."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class QuoteSource(str, Enum):
    """Where a quote came from."""

    IDENTITY = "identity"
    REMOTE = "remote"
    FALLBACK = "fallback"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class Quote:
    """Point-in-time conversion outcome.

    Attributes:
        result: Converted amount in the target currency.
        rate: Effective rate; zero means the value must not be trusted.
        source: Branch that produced the quote.
    """

    result: Decimal
    rate: Decimal
    source: QuoteSource = QuoteSource.REMOTE

    @classmethod
    def identity(cls, amount: Decimal) -> "Quote":
        return cls(result=amount, rate=Decimal("1"), source=QuoteSource.IDENTITY)

    @classmethod
    def unavailable(cls) -> "Quote":
        return cls(
            result=Decimal("0"),
            rate=Decimal("0"),
            source=QuoteSource.UNAVAILABLE,
        )

    @property
    def is_available(self) -> bool:
        """Return False for the zero-rate sentinel."""
        return self.rate > 0


@dataclass(frozen=True)
class QuoteUpdate:
    """Quote delivered by the debouncer for a finalized input."""

    sequence: int
    from_currency: str
    to_currency: str
    amount: Decimal
    quote: Quote


__all__ = ["QuoteSource", "Quote", "QuoteUpdate"]
