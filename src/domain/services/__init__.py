"""Domain services package."""

from .allocation import compute_allocation_slices
from .fx import convert_locally, cross_rate, resolve_rate_table
from .normalization import (
    build_balance_snapshot,
    normalize_market_code,
    normalize_wallet_code,
)
from .validation import validate_transfer
from .valuation import compute_total_value, value_holdings

__all__ = [
    "compute_allocation_slices",
    "convert_locally",
    "cross_rate",
    "resolve_rate_table",
    "build_balance_snapshot",
    "normalize_market_code",
    "normalize_wallet_code",
    "validate_transfer",
    "compute_total_value",
    "value_holdings",
]
