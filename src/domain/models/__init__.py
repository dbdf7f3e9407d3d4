"""Domain models package."""

from .currency import CurrencyInfo, CurrencyMapping
from .portfolio import AllocationSlice, HoldingValue, PortfolioSummary
from .quotes import Quote, QuoteSource, QuoteUpdate
from .rates import RateTable
from .transfers import (
    RejectionReason,
    TransferKind,
    TransferRequest,
    TransferValidation,
)

__all__ = [
    "CurrencyInfo",
    "CurrencyMapping",
    "AllocationSlice",
    "HoldingValue",
    "PortfolioSummary",
    "Quote",
    "QuoteSource",
    "QuoteUpdate",
    "RateTable",
    "RejectionReason",
    "TransferKind",
    "TransferRequest",
    "TransferValidation",
]
