"""Tests for the portfolio_summary_cli adapter."""

from decimal import Decimal
from types import SimpleNamespace

from src.adapters import portfolio_summary_cli
from src.domain.models import (
    AllocationSlice,
    HoldingValue,
    PortfolioSummary,
    RateTable,
)
from src.infrastructure.settings import WalletSettings


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, msg: str) -> None:
        self.messages.append(msg)

    def warning(self, msg: str) -> None:
        self.messages.append(msg)


class _Gateway:
    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


def _patch_cli(monkeypatch, summary: PortfolioSummary) -> _Logger:
    logger = _Logger()

    class _UseCase:
        async def execute(self):
            return summary

    monkeypatch.setattr(
        portfolio_summary_cli,
        "WalletSettings",
        SimpleNamespace(from_env=lambda: WalletSettings()),
    )
    monkeypatch.setattr(
        portfolio_summary_cli,
        "build_wallet_gateway",
        lambda settings: _Gateway(),
    )
    monkeypatch.setattr(
        portfolio_summary_cli,
        "build_portfolio_summary_use_case",
        lambda gateway, settings: _UseCase(),
    )
    monkeypatch.setattr(portfolio_summary_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(portfolio_summary_cli, "get_usage_logger", lambda: logger)
    return logger


def test_main_prints_total_holdings_and_allocation(monkeypatch, capsys) -> None:
    """The CLI prints the valuation and allocation listing."""
    summary = PortfolioSummary(
        base_currency="USD",
        total_value=Decimal("1030"),
        holdings=[
            HoldingValue(
                currency="USDx",
                amount=Decimal("1000"),
                market_code="USD",
                rate=Decimal("1"),
                base_value=Decimal("1000"),
                priced=True,
            ),
            HoldingValue(
                currency="cXYZ",
                amount=Decimal("5"),
                market_code=None,
                rate=None,
                base_value=Decimal("0"),
                priced=False,
            ),
        ],
        slices=[
            AllocationSlice(
                currency="USDx",
                amount=Decimal("1000"),
                share=Decimal("0.995"),
                start_angle=0.0,
                end_angle=358.2,
            ),
            AllocationSlice(
                currency="cXYZ",
                amount=Decimal("5"),
                share=Decimal("0.005"),
                start_angle=358.2,
                end_angle=360.0,
            ),
        ],
        rate_table=RateTable("USD", {"NGN": Decimal("1550")}),
        using_fallback_rates=False,
        rates_stale=False,
    )
    logger = _patch_cli(monkeypatch, summary)

    portfolio_summary_cli.main()

    out = capsys.readouterr().out
    assert "Total portfolio value: 1,030.00 USD" in out
    assert "USDx (USD Stablecoin): 1,000.00 -> 1,000.00 USD" in out
    assert "cXYZ (cXYZ): 5.00 -> rate unavailable" in out
    assert "USDx: 99.5% [0.0, 358.2]" in out
    assert "portfolio summary requested" in logger.messages


def test_main_reports_empty_wallet_and_fallback(monkeypatch, capsys) -> None:
    """Empty wallets print a placeholder and fallback rates are flagged."""
    summary = PortfolioSummary(
        base_currency="USD",
        total_value=Decimal("0"),
        holdings=[],
        slices=[],
        rate_table=RateTable("USD", {}),
        using_fallback_rates=True,
        rates_stale=True,
    )
    _patch_cli(monkeypatch, summary)

    portfolio_summary_cli.main()

    out = capsys.readouterr().out
    assert "Total portfolio value: 0.00 USD" in out
    assert "indicative fallback" in out
    assert "No balance to display" in out
