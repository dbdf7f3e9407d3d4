"""Domain errors."""


class UnknownCurrencyError(ValueError):
    """Raised when a wallet code is outside the configured currency set."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"Unknown wallet currency: {currency}")
        self.currency = currency


__all__ = ["UnknownCurrencyError"]
