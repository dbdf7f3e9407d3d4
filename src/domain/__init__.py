"""Domain package for currency conversion and valuation rules."""

from .constants import (
    DEFAULT_BASE_CURRENCY,
    DEFAULT_CURRENCY_MAPPING,
    DEFAULT_FALLBACK_RATES,
    DEFAULT_PEG_CURRENCY,
)
from .errors import UnknownCurrencyError
from .models import (
    AllocationSlice,
    CurrencyMapping,
    HoldingValue,
    PortfolioSummary,
    Quote,
    QuoteSource,
    QuoteUpdate,
    RateTable,
    RejectionReason,
    TransferKind,
    TransferRequest,
    TransferValidation,
)
from .policies import is_valid_recipient
from .services import (
    build_balance_snapshot,
    compute_allocation_slices,
    compute_total_value,
    convert_locally,
    cross_rate,
    resolve_rate_table,
    validate_transfer,
    value_holdings,
)

__all__ = [
    "AllocationSlice",
    "CurrencyMapping",
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
    "UnknownCurrencyError",
    "DEFAULT_BASE_CURRENCY",
    "DEFAULT_CURRENCY_MAPPING",
    "DEFAULT_FALLBACK_RATES",
    "DEFAULT_PEG_CURRENCY",
    "build_balance_snapshot",
    "compute_allocation_slices",
    "compute_total_value",
    "convert_locally",
    "cross_rate",
    "resolve_rate_table",
    "validate_transfer",
    "value_holdings",
    "is_valid_recipient",
]
