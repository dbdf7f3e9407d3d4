"""Domain models for exchange rate snapshots."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from logging import Logger
from types import MappingProxyType
from typing import Any, Mapping

from src.utils.decimal_utils import coerce_decimal, is_finite_positive


@dataclass(frozen=True)
class RateTable:
    """Point-in-time exchange rates against a single base currency.

    Attributes:
        base_currency: Market code every rate is relative to.
        rates: Units of each market currency per 1 unit of base.
        last_updated: When the upstream source refreshed the rates.
    """

    base_currency: str
    rates: Mapping[str, Decimal] = field(default_factory=dict)
    last_updated: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_currency", self.base_currency.upper())
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    @classmethod
    def from_mapping(
        cls,
        base_currency: str,
        raw_rates: Mapping[str, Any] | None,
        last_updated: datetime | None = None,
        logger: Logger | None = None,
    ) -> "RateTable":
        """Build a table from raw collaborator data.

        Non-numeric, non-finite and non-positive rates are dropped so the
        matching currency is treated as unpriced.
        """
        rates: dict[str, Decimal] = {}
        for code, raw in (raw_rates or {}).items():
            market = (code or "").strip().upper()
            try:
                rate = coerce_decimal(raw)
            except ValueError:
                rate = Decimal("0")
            if not market or raw is None or not is_finite_positive(rate):
                if logger is not None:
                    logger.warning(f"Dropping unusable rate for {code}: {raw!r}")
                continue
            rates[market] = rate
        return cls(
            base_currency=base_currency,
            rates=rates,
            last_updated=last_updated,
        )

    @classmethod
    def empty(cls, base_currency: str) -> "RateTable":
        return cls(base_currency=base_currency)

    @property
    def is_empty(self) -> bool:
        return not self.rates

    def rate_of(self, market_code: str) -> Decimal | None:
        """Return the rate for a market code, 1 for the base, else None."""
        code = (market_code or "").upper()
        if code == self.base_currency:
            return Decimal("1")
        rate = self.rates.get(code)
        if rate is None or not is_finite_positive(rate):
            return None
        return rate

    def age(self, now: datetime | None = None) -> timedelta | None:
        if self.last_updated is None:
            return None
        reference = now or datetime.now(timezone.utc)
        updated = self.last_updated
        if updated.tzinfo is None and reference.tzinfo is not None:
            updated = updated.replace(tzinfo=timezone.utc)
        elif updated.tzinfo is not None and reference.tzinfo is None:
            reference = reference.replace(tzinfo=timezone.utc)
        return reference - updated

    def is_stale(
        self,
        max_age: timedelta,
        now: datetime | None = None,
    ) -> bool:
        """Return True when the table has no timestamp or is too old."""
        age = self.age(now)
        return age is None or age > max_age


__all__ = ["RateTable"]
