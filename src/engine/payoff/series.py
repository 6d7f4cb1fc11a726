"""Sampling of the aggregated payoff over a price domain."""

from __future__ import annotations

from typing import Sequence

from src.engine.models import PayoffPoint, PayoffVariant, Position, PriceRange, ValuationSettings
from src.engine.payoff.aggregator import calc_total_payoff

DEFAULT_NUM_POINTS = 100
DEFAULT_TABLE_ROWS = 11


def calc_sample_prices(price_range: PriceRange, num_points: int) -> list[float]:
    """Equally spaced prices from price_range.min to price_range.max inclusive.

    x_i = min + i × (max - min) / (num_points - 1)

    A single point degenerates to [min]; zero or fewer points give [].
    """
    if num_points <= 0:
        return []
    if num_points == 1:
        return [price_range.min]

    step = (price_range.max - price_range.min) / (num_points - 1)
    return [price_range.min + i * step for i in range(num_points)]


def generate_payoff_series(
    positions: Sequence[Position],
    price_range: PriceRange,
    settings: ValuationSettings,
    num_points: int = DEFAULT_NUM_POINTS,
    variant: PayoffVariant = PayoffVariant.FULL,
) -> list[PayoffPoint]:
    """Sample the portfolio payoff curve.

    Args:
        positions: Portfolio entries.
        price_range: Underlying price domain.
        settings: Valuation settings.
        num_points: Number of samples (first at min, last at max).
        variant: FULL includes option premiums, PAYOFF_ONLY excludes them.

    Returns:
        Points ordered by ascending x.
    """
    return [
        PayoffPoint(x=price, y=calc_total_payoff(positions, price, settings, variant))
        for price in calc_sample_prices(price_range, num_points)
    ]


def generate_pnl_table(
    positions: Sequence[Position],
    price_range: PriceRange,
    settings: ValuationSettings,
    rows: int = DEFAULT_TABLE_ROWS,
) -> list[PayoffPoint]:
    """P&L table rows: full payoff at equally spaced prices (10 steps by default)."""
    return generate_payoff_series(positions, price_range, settings, rows, PayoffVariant.FULL)
