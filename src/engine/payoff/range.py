"""Default underlying price domain for payoff diagrams."""

from __future__ import annotations

from typing import Iterable

from src.engine.models import Position, PriceRange

DEFAULT_PRICE_RANGE = PriceRange(min=0.0, max=200.0)
SPREAD_PADDING_RATIO = 0.5
SINGLE_STRIKE_PADDING = 50.0


def calc_default_range(positions: Iterable[Position]) -> PriceRange:
    """Infer a price domain from the strikes present in the portfolio.

    Strikes are filtered by value (strike > 0), not by kind: a risk-free
    position carrying a positive strike widens the range too, so callers
    keep risk-free strikes at 0.

    padding = (max_strike - min_strike) × 0.5, or 50 when all strikes coincide.
    Result: [max(0, min_strike - padding), max_strike + padding].

    Args:
        positions: Portfolio entries.

    Returns:
        PriceRange. [0, 200] when there are no positive strikes.
    """
    strikes = [position.strike for position in positions if position.strike > 0]
    if not strikes:
        return DEFAULT_PRICE_RANGE

    lo = min(strikes)
    hi = max(strikes)
    spread = hi - lo
    padding = spread * SPREAD_PADDING_RATIO if spread > 0 else SINGLE_STRIKE_PADDING

    return PriceRange(min=max(0.0, lo - padding), max=hi + padding)
