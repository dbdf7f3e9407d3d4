"""Domain services for allocation chart geometry."""

from decimal import Decimal
from typing import Mapping

from src.domain.constants import FULL_CIRCLE_DEGREES
from src.domain.models import AllocationSlice


def compute_allocation_slices(
    balances: Mapping[str, Decimal],
) -> list[AllocationSlice]:
    """Turn balances into ordered pie-chart slices.

    Positive balances are sorted by amount descending, then by currency code
    ascending. Angles start at 0 and accumulate share * 360; the last slice
    always ends at exactly 360 degrees.

    Args:
        balances: Snapshot of wallet code to amount.

    Returns:
        list[AllocationSlice]: Slices, or an empty list when nothing is held.
    """
    positive = [
        (currency, amount)
        for currency, amount in balances.items()
        if amount > 0
    ]
    total = sum((amount for _, amount in positive), Decimal("0"))
    if total == 0:
        return []

    ordered = sorted(positive, key=lambda item: (-item[1], item[0]))
    slices: list[AllocationSlice] = []
    cumulative = Decimal("0")
    start_angle = 0.0
    for index, (currency, amount) in enumerate(ordered):
        share = amount / total
        cumulative += share
        if index == len(ordered) - 1:
            end_angle = FULL_CIRCLE_DEGREES
        else:
            end_angle = min(
                float(cumulative) * FULL_CIRCLE_DEGREES,
                FULL_CIRCLE_DEGREES,
            )
        slices.append(
            AllocationSlice(
                currency=currency,
                amount=amount,
                share=share,
                start_angle=start_angle,
                end_angle=end_angle,
            )
        )
        start_angle = end_angle
    return slices


__all__ = ["compute_allocation_slices"]
