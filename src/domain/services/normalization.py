"""Domain normalization helpers."""

from decimal import Decimal
from logging import Logger
from types import MappingProxyType
from typing import Any, Mapping

from src.utils.decimal_utils import coerce_decimal


def normalize_wallet_code(code: str | None) -> str | None:
    """Normalize wallet currency codes.

    Wallet codes are case-sensitive tickers (``cNGN``), so only surrounding
    whitespace is removed.

    Args:
        code: Raw wallet code from a collaborator or user input.

    Returns:
        str | None: Cleaned code, or None when empty.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned or None


def normalize_market_code(code: str | None) -> str | None:
    """Normalize market currency codes.

    Args:
        code: Raw market code from a rate source.

    Returns:
        str | None: Upper-cased code, or None when empty.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


def build_balance_snapshot(
    raw_balances: Mapping[str, Any] | None,
    logger: Logger,
) -> Mapping[str, Decimal]:
    """Build an immutable balance snapshot from raw collaborator data.

    Entries with empty codes, unreadable amounts or negative amounts are
    skipped with a warning.

    Args:
        raw_balances: Mapping of wallet code to raw amount.
        logger: Logger used for warnings.

    Returns:
        Mapping[str, Decimal]: Read-only mapping of wallet code to amount.
    """
    snapshot: dict[str, Decimal] = {}
    for raw_code, raw_amount in (raw_balances or {}).items():
        code = normalize_wallet_code(raw_code)
        if code is None:
            logger.warning("Skipping balance with empty currency code")
            continue
        try:
            amount = coerce_decimal(raw_amount)
        except ValueError:
            logger.warning(f"Skipping unreadable balance for {code}: {raw_amount!r}")
            continue
        if not amount.is_finite() or amount < 0:
            logger.warning(f"Skipping invalid balance for {code}: {amount}")
            continue
        snapshot[code] = amount
    return MappingProxyType(snapshot)


__all__ = [
    "normalize_wallet_code",
    "normalize_market_code",
    "build_balance_snapshot",
]
