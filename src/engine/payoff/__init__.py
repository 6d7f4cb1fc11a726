"""Payoff valuation engine.

- functions: per-instrument payoff formulas (full / payoff-only)
- aggregator: weighted sum over a portfolio at one price
- range: default price domain from strikes
- series: sampled payoff curve and P&L table
- kinks: slope discontinuities at strikes
- breakeven: zero crossings of a sampled curve
"""

from src.engine.payoff.aggregator import calc_total_payoff, calc_total_payoff_only
from src.engine.payoff.breakeven import find_breakeven_prices
from src.engine.payoff.functions import (
    PAYOFF_FUNCTIONS,
    calc_position_payoff,
    get_payoff_function,
)
from src.engine.payoff.kinks import collect_kink_prices, find_kink_points
from src.engine.payoff.range import DEFAULT_PRICE_RANGE, calc_default_range
from src.engine.payoff.series import (
    DEFAULT_NUM_POINTS,
    DEFAULT_TABLE_ROWS,
    calc_sample_prices,
    generate_payoff_series,
    generate_pnl_table,
)

__all__ = [
    # Formulas
    "PAYOFF_FUNCTIONS",
    "get_payoff_function",
    "calc_position_payoff",
    # Aggregation
    "calc_total_payoff",
    "calc_total_payoff_only",
    # Range
    "DEFAULT_PRICE_RANGE",
    "calc_default_range",
    # Series
    "DEFAULT_NUM_POINTS",
    "DEFAULT_TABLE_ROWS",
    "calc_sample_prices",
    "generate_payoff_series",
    "generate_pnl_table",
    # Kinks and break-evens
    "collect_kink_prices",
    "find_kink_points",
    "find_breakeven_prices",
]
