"""Portfolio-level calculations that complement the payoff engine.

- pricing: Black-Scholes premiums for option positions
- risk_free: cash flows of lending/borrowing positions
"""

from src.engine.portfolio.pricing import reprice_options, reprice_position
from src.engine.portfolio.risk_free import calc_future_value, calc_risk_free_summary

__all__ = [
    "reprice_position",
    "reprice_options",
    "calc_future_value",
    "calc_risk_free_summary",
]
