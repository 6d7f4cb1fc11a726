"""Kink point detection.

A kink is an underlying price where the payoff slope changes. For the
supported instruments these sit exactly at option strikes; linear
instruments contribute their reference price as a visual marker.
"""

from __future__ import annotations

from typing import Sequence

from src.engine.models import PayoffPoint, PayoffVariant, Position, PriceRange, ValuationSettings
from src.engine.payoff.aggregator import calc_total_payoff


def collect_kink_prices(positions: Sequence[Position], price_range: PriceRange) -> list[float]:
    """Distinct strikes of option and linear positions inside the range, ascending."""
    strikes = {position.strike for position in positions if not position.kind.is_risk_free}
    return sorted(strike for strike in strikes if price_range.contains(strike))


def find_kink_points(
    positions: Sequence[Position],
    price_range: PriceRange,
    settings: ValuationSettings,
) -> list[PayoffPoint]:
    """Evaluate the full portfolio payoff (premiums included) at every kink.

    Args:
        positions: Portfolio entries.
        price_range: Only kinks within [min, max] are returned.
        settings: Valuation settings.

    Returns:
        One point per distinct kink price, ascending by x.
    """
    return [
        PayoffPoint(x=price, y=calc_total_payoff(positions, price, settings, PayoffVariant.FULL))
        for price in collect_kink_prices(positions, price_range)
    ]
