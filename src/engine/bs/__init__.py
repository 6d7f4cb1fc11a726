"""Black-Scholes model calculations module."""

from src.engine.bs.core import (
    calc_bs_call_price,
    calc_bs_price,
    calc_bs_price_for,
    calc_bs_put_price,
    calc_d1,
    calc_d2,
    calc_n,
)

__all__ = [
    # Normal distribution
    "calc_n",
    # Core calculations
    "calc_d1",
    "calc_d2",
    "calc_bs_call_price",
    "calc_bs_put_price",
    "calc_bs_price",
    "calc_bs_price_for",
]
