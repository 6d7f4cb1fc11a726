"""Portfolio payoff aggregation."""

from __future__ import annotations

from typing import Iterable

from src.engine.models import PayoffVariant, Position, ValuationSettings
from src.engine.payoff.functions import calc_position_payoff


def calc_total_payoff(
    positions: Iterable[Position],
    underlying_price: float,
    settings: ValuationSettings,
    variant: PayoffVariant = PayoffVariant.FULL,
) -> float:
    """Calculate the total portfolio payoff at one underlying price.

    Formula: Σ(payoff(S) × quantity)

    Quantity is already coerced to >= 1 when the Position is built,
    so it is used as-is here.

    Args:
        positions: Portfolio entries.
        underlying_price: Underlying price S.
        settings: Valuation settings.
        variant: FULL includes option premiums, PAYOFF_ONLY excludes them.

    Returns:
        Total payoff. 0 for an empty portfolio.
    """
    total = 0.0
    for position in positions:
        payoff = calc_position_payoff(position, underlying_price, settings, variant)
        total += payoff * position.quantity
    return total


def calc_total_payoff_only(
    positions: Iterable[Position],
    underlying_price: float,
    settings: ValuationSettings,
) -> float:
    """Total payoff excluding option premiums."""
    return calc_total_payoff(positions, underlying_price, settings, PayoffVariant.PAYOFF_ONLY)
