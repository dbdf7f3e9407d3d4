"""Domain validation helpers for wallet operations."""

from decimal import Decimal
from typing import Mapping

from src.domain.models import (
    RejectionReason,
    TransferKind,
    TransferRequest,
    TransferValidation,
)
from src.domain.policies import is_valid_recipient
from src.domain.services.normalization import normalize_wallet_code
from src.utils.decimal_utils import coerce_decimal, is_finite_positive


def validate_transfer(
    request: TransferRequest,
    balances: Mapping[str, Decimal],
) -> TransferValidation:
    """Validate a deposit, swap or send against current balances.

    Rules run in order and the first failure wins: positive finite amount,
    distinct target currency, sufficient balance (skipped for deposits),
    non-empty recipient for sends. Rate availability is not checked.

    Args:
        request: Proposed operation.
        balances: Snapshot of wallet code to amount.

    Returns:
        TransferValidation: Accepted, or rejected with a reason and message.
    """
    try:
        amount = coerce_decimal(request.amount)
    except ValueError:
        amount = Decimal("NaN")
    if not is_finite_positive(amount):
        return TransferValidation.reject(
            RejectionReason.INVALID_AMOUNT,
            "Please enter a valid amount",
        )

    from_code = normalize_wallet_code(request.from_currency)
    to_code = normalize_wallet_code(request.to_currency)
    if to_code is not None and to_code == from_code:
        return TransferValidation.reject(
            RejectionReason.SAME_CURRENCY_CONVERSION,
            "Cannot convert to the same currency",
        )

    if request.kind is not TransferKind.DEPOSIT:
        available = balances.get(from_code, Decimal("0"))
        if amount > available:
            return TransferValidation.reject(
                RejectionReason.INSUFFICIENT_BALANCE,
                f"Insufficient {from_code} balance. "
                f"Available: {available:.2f}",
                available=available,
            )

    if request.kind is TransferKind.SEND and not is_valid_recipient(
        request.recipient
    ):
        return TransferValidation.reject(
            RejectionReason.INVALID_RECIPIENT,
            "Please enter recipient wallet address",
        )

    return TransferValidation.accept()


__all__ = ["validate_transfer"]
