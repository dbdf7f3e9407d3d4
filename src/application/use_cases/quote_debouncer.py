"""Debounced conversion quotes for input-driven previews."""

import asyncio
from decimal import Decimal
from typing import Callable

from src.application.use_cases.convert_currency import ConvertCurrencyUseCase
from src.domain.constants import DEFAULT_QUOTE_DEBOUNCE
from src.domain.models import QuoteUpdate
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class QuoteDebouncer:
    """Coalesce rapid quote requests into one lookup per quiet window.

    Every ``request`` gets a sequence number and replaces the pending task:
    a task still waiting for its quiet window is cancelled (timer reset) and
    a task already waiting on the remote quote is cancelled too, so at most
    one lookup is in flight. A result is delivered only when its sequence is
    still the latest one issued and the debouncer has not been disposed.
    """

    def __init__(
        self,
        conversion: ConvertCurrencyUseCase,
        on_quote: Callable[[QuoteUpdate], None],
        quiet_window: float = DEFAULT_QUOTE_DEBOUNCE.total_seconds(),
        logger=None,
    ) -> None:
        """Initialize the debouncer.

        Args:
            conversion: Use case producing quotes.
            on_quote: Callback receiving each finalized quote.
            quiet_window: Seconds without new requests before a lookup.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._conversion = conversion
        self._on_quote = on_quote
        self._quiet_window = quiet_window
        self._logger = logger or get_app_logger()
        self._sequence = 0
        self._task: asyncio.Task | None = None
        self._disposed = False

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    @property
    def disposed(self) -> bool:
        return self._disposed

    def request(self, from_currency: str, to_currency: str, amount) -> int:
        """Schedule a quote, superseding any earlier request.

        Must be called from a running event loop.

        Returns:
            int: Sequence number assigned to this request.

        Raises:
            RuntimeError: If the debouncer has been disposed.
        """
        if self._disposed:
            raise RuntimeError("QuoteDebouncer has been disposed")
        self._sequence += 1
        sequence = self._sequence
        self._cancel_pending()
        self._task = asyncio.get_running_loop().create_task(
            self._run(sequence, from_currency, to_currency, amount)
        )
        return sequence

    async def flush(self) -> None:
        """Wait until the latest request has been delivered or dropped."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    def dispose(self) -> None:
        """Cancel pending work and ignore any result still in flight."""
        self._disposed = True
        self._cancel_pending()
        self._task = None

    async def __aenter__(self) -> "QuoteDebouncer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _cancel_pending(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    def _is_current(self, sequence: int) -> bool:
        return not self._disposed and sequence == self._sequence

    async def _run(
        self,
        sequence: int,
        from_currency: str,
        to_currency: str,
        amount,
    ) -> None:
        await asyncio.sleep(self._quiet_window)
        if not self._is_current(sequence):
            return
        try:
            value: Decimal = coerce_decimal(amount)
            quote = await self._conversion.execute(
                from_currency,
                to_currency,
                value,
            )
        except ValueError as exc:
            self._logger.error(
                f"Quote request #{sequence} {from_currency}->{to_currency} "
                f"rejected: {exc}"
            )
            return
        if not self._is_current(sequence):
            self._logger.debug(f"Discarding superseded quote #{sequence}")
            return
        update = QuoteUpdate(
            sequence=sequence,
            from_currency=from_currency,
            to_currency=to_currency,
            amount=value,
            quote=quote,
        )
        try:
            self._on_quote(update)
        except Exception as exc:
            self._logger.error(f"Quote callback failed for #{sequence}: {exc!r}")


__all__ = ["QuoteDebouncer"]
