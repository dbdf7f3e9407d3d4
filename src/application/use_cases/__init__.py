"""Application use cases package."""

from .convert_currency import ConvertCurrencyUseCase
from .get_portfolio_summary import GetPortfolioSummaryUseCase
from .quote_debouncer import QuoteDebouncer
from .refresh_rates import RefreshRatesUseCase
from .submit_transfer import SubmitTransferUseCase

__all__ = [
    "ConvertCurrencyUseCase",
    "GetPortfolioSummaryUseCase",
    "QuoteDebouncer",
    "RefreshRatesUseCase",
    "SubmitTransferUseCase",
]
