"""Domain models for wallet currency configuration."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from src.domain.constants import (
    DEFAULT_BASE_CURRENCY,
    DEFAULT_CURRENCY_INFO,
    DEFAULT_CURRENCY_MAPPING,
    DEFAULT_PEG_CURRENCY,
)
from src.domain.errors import UnknownCurrencyError


@dataclass(frozen=True)
class CurrencyInfo:
    """Display metadata for a wallet currency."""

    code: str
    name: str
    symbol: str


@dataclass(frozen=True)
class CurrencyMapping:
    """Immutable wallet-to-market currency configuration.

    Attributes:
        wallet_to_market: Wallet code to market code used for rate lookups.
        peg_currency: Wallet code whose market code is the base currency.
        base_currency: Market code every rate is expressed against.
        info: Optional display metadata keyed by wallet code.
    """

    wallet_to_market: Mapping[str, str]
    peg_currency: str
    base_currency: str
    info: Mapping[str, CurrencyInfo] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned: dict[str, str] = {}
        for wallet_code, market_code in self.wallet_to_market.items():
            wallet = (wallet_code or "").strip()
            market = (market_code or "").strip().upper()
            if not wallet or not market:
                raise ValueError(
                    f"Invalid currency mapping entry: {wallet_code!r} -> "
                    f"{market_code!r}"
                )
            cleaned[wallet] = market
        base = self.base_currency.strip().upper()
        peg = self.peg_currency.strip()
        if peg not in cleaned:
            raise ValueError(f"Peg currency {peg} is not mapped")
        if cleaned[peg] != base:
            raise ValueError(
                f"Peg currency {peg} maps to {cleaned[peg]}, expected {base}"
            )
        object.__setattr__(self, "wallet_to_market", MappingProxyType(cleaned))
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))
        object.__setattr__(self, "base_currency", base)
        object.__setattr__(self, "peg_currency", peg)

    @classmethod
    def default(cls) -> "CurrencyMapping":
        """Return the stock stablecoin configuration."""
        return cls(
            wallet_to_market=DEFAULT_CURRENCY_MAPPING,
            peg_currency=DEFAULT_PEG_CURRENCY,
            base_currency=DEFAULT_BASE_CURRENCY,
            info={
                code: CurrencyInfo(code=code, name=name, symbol=symbol)
                for code, (name, symbol) in DEFAULT_CURRENCY_INFO.items()
            },
        )

    @property
    def wallet_codes(self) -> tuple[str, ...]:
        return tuple(self.wallet_to_market)

    def __contains__(self, wallet_code: object) -> bool:
        return wallet_code in self.wallet_to_market

    def to_market_code(self, wallet_code: str) -> str:
        """Return the market code for a wallet code.

        Raises:
            UnknownCurrencyError: If the code is not configured.
        """
        market = self.wallet_to_market.get((wallet_code or "").strip())
        if market is None:
            raise UnknownCurrencyError(wallet_code)
        return market

    def is_peg(self, wallet_code: str) -> bool:
        return self.to_market_code(wallet_code) == self.base_currency

    def describe(self, wallet_code: str) -> CurrencyInfo:
        """Return display metadata, defaulting to the bare code."""
        return self.info.get(
            wallet_code,
            CurrencyInfo(code=wallet_code, name=wallet_code, symbol=wallet_code),
        )


__all__ = ["CurrencyInfo", "CurrencyMapping"]
