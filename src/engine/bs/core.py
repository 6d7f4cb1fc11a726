"""Black-Scholes model core calculations.

Provides the fundamental mathematical functions for European option pricing
based on the Black-Scholes model.

All pricing functions use BSParams for input parameters. Degenerate inputs
are priced by boundary rules instead of being rejected, in this order:

1. T <= 0: intrinsic value, max(S-K, 0) / max(K-S, 0)
2. sigma <= 0: discounted forward intrinsic, max(S - K×e^(-rT), 0) / max(K×e^(-rT) - S, 0)
3. Otherwise: closed form with N(d1), N(d2)
"""

from __future__ import annotations

import math

from src.engine.models import BSParams, InstrumentKind, ValuationSettings

# Abramowitz & Stegun 7.1.26 coefficients (|error| < 1.5e-7 for erf)
_AS_A1 = 0.254829592
_AS_A2 = -0.284496736
_AS_A3 = 1.421413741
_AS_A4 = -1.453152027
_AS_A5 = 1.061405429
_AS_P = 0.3275911


def calc_n(d: float) -> float:
    """Calculate cumulative standard normal distribution N(d).

    Rational approximation of erf(|d|/√2), reflected by the sign of d:
    N(d) = 0.5 × (1 + sign(d) × erf(|d|/√2)).

    Saturates to 0 or 1 for large |d| and returns exactly 0.5 at d = 0.

    Args:
        d: Input value

    Returns:
        Cumulative probability N(d) in [0, 1]
    """
    sign = (d > 0) - (d < 0)
    x = abs(d) / math.sqrt(2.0)

    t = 1.0 / (1.0 + _AS_P * x)
    poly = ((((_AS_A5 * t + _AS_A4) * t + _AS_A3) * t + _AS_A2) * t + _AS_A1) * t
    erf = 1.0 - poly * math.exp(-x * x)

    return 0.5 * (1.0 + sign * erf)


def calc_d1(params: BSParams) -> float | None:
    """Calculate d1 in Black-Scholes formula.

    d1 = [ln(S/K) + (r + σ²/2)×T] / (σ×√T)

    Args:
        params: Black-Scholes calculation parameters.

    Returns:
        d1 value, or None if inputs are invalid.
    """
    if (
        params.spot_price <= 0
        or params.strike_price <= 0
        or params.volatility <= 0
        or params.time_to_expiry <= 0
    ):
        return None

    sigma_sqrt_t = params.volatility * math.sqrt(params.time_to_expiry)

    return (
        math.log(params.spot_price / params.strike_price)
        + (params.risk_free_rate + 0.5 * params.volatility**2) * params.time_to_expiry
    ) / sigma_sqrt_t


def calc_d2(params: BSParams, d1: float | None = None) -> float | None:
    """Calculate d2 from BSParams (or from provided d1).

    d2 = d1 - σ×√T

    Args:
        params: Black-Scholes calculation parameters.
        d1: Pre-calculated d1 value (optional, will calculate if not provided).

    Returns:
        d2 value, or None if inputs are invalid.
    """
    if params.volatility <= 0 or params.time_to_expiry <= 0:
        return None

    if d1 is None:
        d1 = calc_d1(params)
    if d1 is None:
        return None

    return d1 - params.volatility * math.sqrt(params.time_to_expiry)


def _boundary_call_price(params: BSParams) -> float | None:
    """Call price from the boundary rules, or None for the closed-form case."""
    if params.time_to_expiry <= 0:
        return max(params.spot_price - params.strike_price, 0.0)
    if params.volatility <= 0:
        return max(params.spot_price - params.strike_price * params.discount_factor, 0.0)
    return None


def _boundary_put_price(params: BSParams) -> float | None:
    """Put price from the boundary rules, or None for the closed-form case."""
    if params.time_to_expiry <= 0:
        return max(params.strike_price - params.spot_price, 0.0)
    if params.volatility <= 0:
        return max(params.strike_price * params.discount_factor - params.spot_price, 0.0)
    return None


def calc_bs_call_price(params: BSParams) -> float:
    """Calculate theoretical call option price using Black-Scholes formula.

    C = S×N(d1) - K×e^(-r×T)×N(d2)

    A non-positive spot or strike has no log-moneyness; it is priced at the
    discounted forward intrinsic value, which is the closed form's limit.

    Args:
        params: Black-Scholes calculation parameters.

    Returns:
        Theoretical call price.
    """
    boundary = _boundary_call_price(params)
    if boundary is not None:
        return boundary

    d1 = calc_d1(params)
    d2 = calc_d2(params, d1)
    if d1 is None or d2 is None:
        return max(params.spot_price - params.strike_price * params.discount_factor, 0.0)

    return params.spot_price * calc_n(d1) - params.strike_price * params.discount_factor * calc_n(d2)


def calc_bs_put_price(params: BSParams) -> float:
    """Calculate theoretical put option price using Black-Scholes formula.

    P = K×e^(-r×T)×N(-d2) - S×N(-d1)

    Args:
        params: Black-Scholes calculation parameters.

    Returns:
        Theoretical put price.
    """
    boundary = _boundary_put_price(params)
    if boundary is not None:
        return boundary

    d1 = calc_d1(params)
    d2 = calc_d2(params, d1)
    if d1 is None or d2 is None:
        return max(params.strike_price * params.discount_factor - params.spot_price, 0.0)

    return params.strike_price * params.discount_factor * calc_n(-d2) - params.spot_price * calc_n(-d1)


def calc_bs_price(params: BSParams) -> float:
    """Calculate option price using BSParams.

    Automatically selects call or put formula based on params.is_call.

    Example:
        >>> params = BSParams(
        ...     spot_price=100, strike_price=100, risk_free_rate=0.05,
        ...     volatility=0.2, time_to_expiry=1.0, is_call=True
        ... )
        >>> round(calc_bs_price(params), 2)
        10.45
    """
    if params.is_call:
        return calc_bs_call_price(params)
    return calc_bs_put_price(params)


def calc_bs_price_for(
    kind: InstrumentKind,
    strike: float,
    settings: ValuationSettings,
) -> float:
    """Price the premium of a position kind at the current settings.

    Call kinds (long or short) are priced as calls, put kinds as puts.
    Non-option kinds carry no premium and yield 0.

    Args:
        kind: Instrument kind of the position.
        strike: Option strike.
        settings: Valuation settings (spot, rate, maturity, volatility).

    Returns:
        Theoretical premium per unit.
    """
    kind = InstrumentKind(kind)
    if not kind.is_option:
        return 0.0
    return calc_bs_price(BSParams.for_position_kind(kind, strike, settings))
