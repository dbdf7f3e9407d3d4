"""Tests for allocation chart geometry."""

from decimal import Decimal

from src.domain.services import compute_allocation_slices


def test_empty_and_zero_balances_yield_no_slices() -> None:
    """Nothing held means an explicit empty result."""
    assert compute_allocation_slices({}) == []
    assert compute_allocation_slices({"A": Decimal("0"), "B": Decimal("0")}) == []


def test_two_currencies_split_the_circle() -> None:
    """Shares follow amounts and the last slice closes the circle."""
    slices = compute_allocation_slices({"A": Decimal("30"), "B": Decimal("70")})

    assert [s.currency for s in slices] == ["B", "A"]
    assert [s.share for s in slices] == [Decimal("0.7"), Decimal("0.3")]
    assert sum(s.share for s in slices) == 1
    assert slices[0].start_angle == 0.0
    assert abs(slices[0].end_angle - 252.0) < 1e-9
    assert slices[1].start_angle == slices[0].end_angle
    assert slices[-1].end_angle == 360.0


def test_ties_are_ordered_by_currency_code() -> None:
    """Equal amounts sort by code ascending for reproducible output."""
    slices = compute_allocation_slices(
        {"cXAF": Decimal("10"), "EURx": Decimal("10"), "cNGN": Decimal("20")}
    )

    assert [s.currency for s in slices] == ["cNGN", "EURx", "cXAF"]


def test_non_positive_balances_are_discarded() -> None:
    """Zero balances do not produce slices."""
    slices = compute_allocation_slices({"A": Decimal("5"), "B": Decimal("0")})

    assert len(slices) == 1
    assert slices[0].share == 1
    assert slices[0].start_angle == 0.0
    assert slices[0].end_angle == 360.0


def test_angles_are_monotonic_and_close_exactly() -> None:
    """Thirds accumulate rounding error that the final clamp absorbs."""
    slices = compute_allocation_slices(
        {"A": Decimal("1"), "B": Decimal("1"), "C": Decimal("1")}
    )

    for previous, current in zip(slices, slices[1:]):
        assert current.start_angle == previous.end_angle
        assert current.end_angle >= current.start_angle
    assert slices[-1].end_angle == 360.0
    assert abs(sum(s.sweep for s in slices) - 360.0) < 1e-9
