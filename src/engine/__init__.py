"""Payoff Calculation Engine Layer.

This module computes the profit/loss profile of a portfolio of risk-free,
linear and option instruments as a function of the underlying price at a
future evaluation date. Everything here is a pure function of its inputs;
session state lives in the business layer.

Architecture:
- models/: Position, ValuationSettings, PriceRange, PayoffPoint, enums
- bs/: Normal CDF approximation and Black-Scholes European pricing
- payoff/: Payoff formulas, aggregation, range, sampling, kinks, break-evens
- portfolio/: Option repricing and risk-free cash flow summary
"""

from src.engine.bs import (
    calc_bs_call_price,
    calc_bs_price,
    calc_bs_price_for,
    calc_bs_put_price,
    calc_n,
)
from src.engine.models import (
    BSParams,
    InstrumentGroup,
    InstrumentKind,
    PayoffPoint,
    PayoffVariant,
    Position,
    PriceRange,
    RiskFreeRow,
    RiskFreeSummary,
    ValuationSettings,
)
from src.engine.payoff import (
    calc_default_range,
    calc_position_payoff,
    calc_total_payoff,
    find_breakeven_prices,
    find_kink_points,
    generate_payoff_series,
    generate_pnl_table,
)
from src.engine.portfolio import calc_risk_free_summary, reprice_options, reprice_position

__all__ = [
    # Models
    "BSParams",
    "InstrumentGroup",
    "InstrumentKind",
    "PayoffVariant",
    "Position",
    "ValuationSettings",
    "PriceRange",
    "PayoffPoint",
    "RiskFreeRow",
    "RiskFreeSummary",
    # Black-Scholes
    "calc_n",
    "calc_bs_call_price",
    "calc_bs_put_price",
    "calc_bs_price",
    "calc_bs_price_for",
    # Payoff
    "calc_position_payoff",
    "calc_total_payoff",
    "calc_default_range",
    "generate_payoff_series",
    "generate_pnl_table",
    "find_kink_points",
    "find_breakeven_prices",
    # Portfolio
    "reprice_position",
    "reprice_options",
    "calc_risk_free_summary",
]
