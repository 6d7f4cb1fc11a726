"""Black-Scholes premium assignment for portfolio positions."""

import logging
from typing import Iterable

from src.engine.bs import calc_bs_price_for
from src.engine.models import Position, ValuationSettings

logger = logging.getLogger(__name__)


def reprice_position(position: Position, settings: ValuationSettings) -> bool:
    """Overwrite an option position's cost with its Black-Scholes price.

    Args:
        position: Portfolio entry, mutated in place.
        settings: Valuation settings.

    Returns:
        True if the position was repriced, False for non-option kinds.
    """
    if not position.kind.is_option:
        return False

    position.cost = calc_bs_price_for(position.kind, position.strike, settings)
    logger.debug(
        f"Repriced #{position.id} {position.kind.value} K={position.strike:.2f}: "
        f"cost={position.cost:.4f}"
    )
    return True


def reprice_options(positions: Iterable[Position], settings: ValuationSettings) -> int:
    """Reprice every option position in place.

    Returns:
        Number of positions repriced.
    """
    count = 0
    for position in positions:
        if reprice_position(position, settings):
            count += 1
    return count
