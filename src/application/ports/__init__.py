"""Application ports package."""

from .database import DatabaseEnginePort
from .wallet_gateway import (
    BalancesSourcePort,
    QuotePort,
    RatesSourcePort,
    TransferSubmissionPort,
)

__all__ = [
    "DatabaseEnginePort",
    "BalancesSourcePort",
    "QuotePort",
    "RatesSourcePort",
    "TransferSubmissionPort",
]
