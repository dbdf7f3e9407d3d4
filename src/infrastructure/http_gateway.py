"""httpx-based gateway to the wallet API."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

import httpx

from src.application.ports.wallet_gateway import (
    BalancesSourcePort,
    QuotePort,
    RatesSourcePort,
    TransferSubmissionPort,
)
from src.domain.models import (
    Quote,
    QuoteSource,
    RateTable,
    TransferKind,
    TransferRequest,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class WalletGatewayError(RuntimeError):
    """Raised on transport failures or malformed wallet API responses."""


_TRANSFER_PATHS = {
    TransferKind.DEPOSIT: "/api/transactions/deposit",
    TransferKind.SWAP: "/api/transactions/swap",
    TransferKind.SEND: "/api/transactions/transfer",
}


class HttpWalletGateway(
    BalancesSourcePort,
    RatesSourcePort,
    QuotePort,
    TransferSubmissionPort,
):
    """Wallet API client covering balances, rates, quotes and transfers.

    Responses use the ``{success, message, data}`` envelope; any other shape
    is treated as malformed. The gateway performs no retries.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        logger=None,
    ) -> None:
        """Initialize the gateway.

        Args:
            base_url: Root URL of the wallet API.
            token: Optional bearer token.
            timeout: Request timeout in seconds.
            client: Optional preconfigured client (tests inject a transport).
            logger: Optional logger compatible with logging.Logger-like API.
        """
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
        )
        self._logger = logger or get_app_logger()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpWalletGateway":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def fetch_balances(self) -> Mapping[str, Any]:
        data = await self._request("GET", "/api/wallets/balances")
        if not isinstance(data, dict):
            raise WalletGatewayError("Malformed balances payload")
        return data

    async def fetch_rates(self, base_currency: str) -> RateTable:
        data = await self._request(
            "GET",
            "/api/fx-rates",
            params={"base": base_currency},
        )
        return self._rate_table_from(data, base_currency)

    async def refresh_rates(self, base_currency: str) -> RateTable:
        """Force the upstream rate cache to refresh and return the new rates."""
        data = await self._request(
            "POST",
            "/api/fx-rates/refresh",
            params={"base": base_currency},
        )
        return self._rate_table_from(data, base_currency)

    def _rate_table_from(self, data, base_currency: str) -> RateTable:
        if not isinstance(data, dict):
            raise WalletGatewayError("Malformed rates payload")
        rates = data.get("rates") or {}
        if not isinstance(rates, dict):
            raise WalletGatewayError("Malformed rates payload")
        return RateTable.from_mapping(
            data.get("base_currency") or base_currency,
            rates,
            last_updated=self._parse_timestamp(data.get("last_updated")),
            logger=self._logger,
        )

    async def convert(
        self,
        from_currency: str,
        to_currency: str,
        amount: Decimal,
    ) -> Quote:
        data = await self._request(
            "POST",
            "/api/fx-rates/convert",
            json={
                "from": from_currency,
                "to": to_currency,
                "amount": float(amount),
            },
        )
        if not isinstance(data, dict) or "result" not in data or "rate" not in data:
            raise WalletGatewayError("Malformed conversion payload")
        try:
            result = coerce_decimal(data["result"])
            rate = coerce_decimal(data["rate"])
        except ValueError as exc:
            raise WalletGatewayError("Malformed conversion payload") from exc
        return Quote(result=result, rate=rate, source=QuoteSource.REMOTE)

    async def submit_transfer(self, request: TransferRequest) -> Mapping[str, Any]:
        kind = request.kind or (
            TransferKind.SWAP if request.to_currency else TransferKind.SEND
        )
        amount = float(coerce_decimal(request.amount))
        if kind is TransferKind.DEPOSIT:
            payload: dict[str, Any] = {
                "currency": request.from_currency,
                "amount": amount,
            }
        elif kind is TransferKind.SWAP:
            payload = {
                "from_currency": request.from_currency,
                "to_currency": request.to_currency,
                "amount": amount,
            }
        else:
            payload = {
                "recipient_wallet_address": request.recipient,
                "from_currency": request.from_currency,
                "amount": amount,
            }
            if request.to_currency:
                payload["to_currency"] = request.to_currency
        data = await self._request("POST", _TRANSFER_PATHS[kind], json=payload)
        return data if isinstance(data, dict) else {}

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        """Send a request and unwrap the response envelope.

        Raises:
            WalletGatewayError: On transport errors, error statuses or
                malformed bodies.
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise WalletGatewayError(f"{method} {path} failed: {exc}") from exc

        try:
            body = response.json() if response.content else {}
        except ValueError as exc:
            raise WalletGatewayError(
                f"Invalid response from server for {method} {path}"
            ) from exc
        if not isinstance(body, dict):
            raise WalletGatewayError(f"Unexpected body for {method} {path}")

        if response.is_error or body.get("success") is False:
            message = body.get("error") or body.get("message") or "Something went wrong"
            raise WalletGatewayError(
                f"{method} {path} returned {response.status_code}: {message}"
            )
        return body.get("data")

    def _parse_timestamp(self, raw) -> datetime | None:
        if not raw:
            return None
        try:
            return datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
        except ValueError:
            self._logger.warning(f"Invalid rates timestamp: {raw!r}")
            return None


__all__ = ["HttpWalletGateway", "WalletGatewayError"]
