"""Domain constants for wallet currencies and valuation."""

from datetime import timedelta
from decimal import Decimal

DEFAULT_BASE_CURRENCY = "USD"

DEFAULT_PEG_CURRENCY = "USDx"

# Wallet code -> market code used as key into the rate table.
DEFAULT_CURRENCY_MAPPING = {
    "cNGN": "NGN",
    "cXAF": "XAF",
    "USDx": "USD",
    "EURx": "EUR",
    "cGHS": "GHS",
    "cKES": "KES",
}

# Display metadata: (name, symbol).
DEFAULT_CURRENCY_INFO = {
    "cNGN": ("Nigerian Naira", "₦"),
    "cXAF": ("CFA Franc", "FCFA"),
    "USDx": ("USD Stablecoin", "$"),
    "EURx": ("EUR Stablecoin", "€"),
    "cGHS": ("Ghanaian Cedi", "₵"),
    "cKES": ("Kenyan Shilling", "KSh"),
}

# Indicative USD-based rates used when no live table is available.
DEFAULT_FALLBACK_RATES = {
    "NGN": Decimal("1550"),
    "XAF": Decimal("606"),
    "EUR": Decimal("0.92"),
    "GHS": Decimal("15.2"),
    "KES": Decimal("129.5"),
}

DEFAULT_QUOTE_DEBOUNCE = timedelta(milliseconds=300)

DEFAULT_QUOTE_TIMEOUT = timedelta(seconds=10)

DEFAULT_RATES_MAX_AGE = timedelta(hours=24)

FULL_CIRCLE_DEGREES = 360.0


__all__ = [
    "DEFAULT_BASE_CURRENCY",
    "DEFAULT_PEG_CURRENCY",
    "DEFAULT_CURRENCY_MAPPING",
    "DEFAULT_CURRENCY_INFO",
    "DEFAULT_FALLBACK_RATES",
    "DEFAULT_QUOTE_DEBOUNCE",
    "DEFAULT_QUOTE_TIMEOUT",
    "DEFAULT_RATES_MAX_AGE",
    "FULL_CIRCLE_DEGREES",
]
