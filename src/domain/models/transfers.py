"""Domain models for transfer requests and their validation."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TransferKind(str, Enum):
    """Operation kinds accepted by the wallet API."""

    DEPOSIT = "deposit"
    SWAP = "swap"
    SEND = "send"


class RejectionReason(str, Enum):
    """Why a transfer request was rejected."""

    INVALID_AMOUNT = "invalid_amount"
    SAME_CURRENCY_CONVERSION = "same_currency_conversion"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    INVALID_RECIPIENT = "invalid_recipient"


@dataclass(frozen=True)
class TransferRequest:
    """Proposed wallet operation.

    Attributes:
        from_currency: Wallet code debited (or credited for deposits).
        amount: Requested amount; raw input is accepted and validated.
        to_currency: Target wallet code for conversions, None otherwise.
        kind: Operation kind; None applies the generic debit rules only.
        recipient: Recipient wallet address for sends.
    """

    from_currency: str
    amount: object
    to_currency: str | None = None
    kind: TransferKind | None = None
    recipient: str | None = None


@dataclass(frozen=True)
class TransferValidation:
    """Outcome of validating a transfer request."""

    ok: bool
    reason: RejectionReason | None = None
    message: str | None = None
    available: Decimal | None = None

    @classmethod
    def accept(cls) -> "TransferValidation":
        return cls(ok=True)

    @classmethod
    def reject(
        cls,
        reason: RejectionReason,
        message: str,
        available: Decimal | None = None,
    ) -> "TransferValidation":
        return cls(ok=False, reason=reason, message=message, available=available)


__all__ = [
    "TransferKind",
    "RejectionReason",
    "TransferRequest",
    "TransferValidation",
]
