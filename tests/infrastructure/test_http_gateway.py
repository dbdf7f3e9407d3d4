"""Tests for the httpx wallet gateway."""

import asyncio
from datetime import datetime, timezone
from decimal import Decimal
import json
from unittest.mock import MagicMock

import httpx
import pytest

from src.domain.models import QuoteSource, TransferKind, TransferRequest
from src.infrastructure.http_gateway import HttpWalletGateway, WalletGatewayError


def _gateway(handler) -> HttpWalletGateway:
    client = httpx.AsyncClient(
        base_url="http://wallet.test",
        transport=httpx.MockTransport(handler),
    )
    return HttpWalletGateway(
        "http://wallet.test",
        client=client,
        logger=MagicMock(),
    )


def _ok(data, message="ok") -> httpx.Response:
    return httpx.Response(200, json={"success": True, "message": message, "data": data})


def test_fetch_balances_unwraps_envelope() -> None:
    """Balances are read from the data field."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        return _ok({"cNGN": 5000, "USDx": 100})

    balances = asyncio.run(_gateway(handler).fetch_balances())

    assert seen["path"] == "/api/wallets/balances"
    assert balances == {"cNGN": 5000, "USDx": 100}


def test_fetch_rates_builds_rate_table() -> None:
    """Rates payloads become RateTable snapshots."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["base"] = request.url.params["base"]
        return _ok(
            {
                "base_currency": "USD",
                "rates": {"NGN": 1550.5, "XAF": 0},
                "last_updated": "2024-01-05T10:00:00Z",
            }
        )

    table = asyncio.run(_gateway(handler).fetch_rates("USD"))

    assert seen["base"] == "USD"
    assert table.base_currency == "USD"
    assert dict(table.rates) == {"NGN": Decimal("1550.5")}
    assert table.last_updated == datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)


def test_convert_posts_market_codes() -> None:
    """Conversions send from/to/amount and parse result and rate."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return _ok({"from": "NGN", "to": "USD", "result": 1.0, "rate": 0.000645})

    quote = asyncio.run(
        _gateway(handler).convert("NGN", "USD", Decimal("1550"))
    )

    assert seen["path"] == "/api/fx-rates/convert"
    assert seen["body"] == {"from": "NGN", "to": "USD", "amount": 1550.0}
    assert quote.result == Decimal("1.0")
    assert quote.rate == Decimal("0.000645")
    assert quote.source is QuoteSource.REMOTE


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, json={"success": False, "error": "Failed to convert"}),
        httpx.Response(200, json={"success": False, "error": "nope"}),
        httpx.Response(200, text="<html>oops</html>"),
        httpx.Response(200, json={"success": True, "data": {"rate": 1}}),
        httpx.Response(200, json=["unexpected"]),
    ],
)
def test_convert_raises_on_bad_responses(response) -> None:
    """Error statuses and malformed bodies raise WalletGatewayError."""
    gateway = _gateway(lambda request: response)

    with pytest.raises(WalletGatewayError):
        asyncio.run(gateway.convert("NGN", "USD", Decimal("1")))


def test_transport_errors_are_wrapped() -> None:
    """Network failures surface as WalletGatewayError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(WalletGatewayError):
        asyncio.run(_gateway(handler).fetch_balances())


@pytest.mark.parametrize(
    ("request_", "path", "body"),
    [
        (
            TransferRequest(
                from_currency="cGHS",
                amount=Decimal("25"),
                kind=TransferKind.DEPOSIT,
            ),
            "/api/transactions/deposit",
            {"currency": "cGHS", "amount": 25.0},
        ),
        (
            TransferRequest(
                from_currency="USDx",
                to_currency="cNGN",
                amount=Decimal("5"),
                kind=TransferKind.SWAP,
            ),
            "/api/transactions/swap",
            {"from_currency": "USDx", "to_currency": "cNGN", "amount": 5.0},
        ),
        (
            TransferRequest(
                from_currency="cNGN",
                to_currency="USDx",
                amount=Decimal("100"),
                kind=TransferKind.SEND,
                recipient="0xabc",
            ),
            "/api/transactions/transfer",
            {
                "recipient_wallet_address": "0xabc",
                "from_currency": "cNGN",
                "amount": 100.0,
                "to_currency": "USDx",
            },
        ),
    ],
)
def test_submit_transfer_routes_by_kind(request_, path, body) -> None:
    """Each transfer kind is posted to its endpoint."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return _ok({"status": "COMPLETED"})

    receipt = asyncio.run(_gateway(handler).submit_transfer(request_))

    assert seen == {"path": path, "body": body}
    assert receipt == {"status": "COMPLETED"}


def test_bearer_token_is_sent() -> None:
    """Configured tokens become Authorization headers."""
    gateway = HttpWalletGateway("http://wallet.test", token="abc", logger=MagicMock())

    assert gateway._client.headers["Authorization"] == "Bearer abc"
    asyncio.run(gateway.aclose())


def test_refresh_rates_posts_and_parses_new_table() -> None:
    """Forced refreshes hit the refresh endpoint and return the new rates."""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["base"] = request.url.params["base"]
        return _ok(
            {
                "base_currency": "USD",
                "rates": {"NGN": 1600, "EUR": "0.91"},
                "last_updated": "2024-01-06T08:30:00+00:00",
            },
            message="Exchange rates refreshed successfully",
        )

    table = asyncio.run(_gateway(handler).refresh_rates("USD"))

    assert seen == {"method": "POST", "path": "/api/fx-rates/refresh", "base": "USD"}
    assert table.rate_of("NGN") == Decimal("1600")
    assert table.rate_of("EUR") == Decimal("0.91")
    assert table.last_updated == datetime(2024, 1, 6, 8, 30, tzinfo=timezone.utc)


def test_refresh_rates_raises_on_server_error() -> None:
    """A failed refresh surfaces as WalletGatewayError."""
    gateway = _gateway(
        lambda request: httpx.Response(
            500,
            json={"success": False, "error": "Failed to refresh rates"},
        )
    )

    with pytest.raises(WalletGatewayError):
        asyncio.run(gateway.refresh_rates("USD"))
