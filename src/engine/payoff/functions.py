"""Per-instrument payoff formulas.

One table keyed by InstrumentKind. Every formula takes an
``include_premium`` flag so the full (profit/loss) and payoff-only
variants share a single definition:

    Kind               Full                      Payoff-only
    long_risk_free     +principal                same
    short_risk_free    -principal                same
    long_underlying    S - strike                same
    short_underlying   strike - S                same
    long_forward       S - strike                same
    short_forward      strike - S                same
    long_call          max(S-K, 0) - cost        max(S-K, 0)
    short_call         cost - max(S-K, 0)        -max(S-K, 0)
    long_put           max(K-S, 0) - cost        max(K-S, 0)
    short_put          cost - max(K-S, 0)        -max(K-S, 0)

Values are per unit, before quantity.
"""

from __future__ import annotations

from typing import Callable

from src.engine.models import InstrumentKind, PayoffVariant, Position, ValuationSettings

PayoffFunction = Callable[[float, Position, ValuationSettings, bool], float]


def _premium(position: Position, include_premium: bool) -> float:
    return position.cost if include_premium else 0.0


def long_risk_free(S: float, position: Position, settings: ValuationSettings, include_premium: bool) -> float:
    # Lending: flat payoff, independent of S
    return position.principal


def short_risk_free(S: float, position: Position, settings: ValuationSettings, include_premium: bool) -> float:
    # Borrowing: flat payoff, independent of S
    return -position.principal


def long_linear(S: float, position: Position, settings: ValuationSettings, include_premium: bool) -> float:
    # Long stock or forward: S - purchase/forward price
    return S - position.strike


def short_linear(S: float, position: Position, settings: ValuationSettings, include_premium: bool) -> float:
    # Short stock or forward: sale/forward price - S
    return position.strike - S


def long_call(S: float, position: Position, settings: ValuationSettings, include_premium: bool) -> float:
    return max(S - position.strike, 0.0) - _premium(position, include_premium)


def short_call(S: float, position: Position, settings: ValuationSettings, include_premium: bool) -> float:
    return _premium(position, include_premium) - max(S - position.strike, 0.0)


def long_put(S: float, position: Position, settings: ValuationSettings, include_premium: bool) -> float:
    return max(position.strike - S, 0.0) - _premium(position, include_premium)


def short_put(S: float, position: Position, settings: ValuationSettings, include_premium: bool) -> float:
    return _premium(position, include_premium) - max(position.strike - S, 0.0)


PAYOFF_FUNCTIONS: dict[InstrumentKind, PayoffFunction] = {
    InstrumentKind.LONG_RISK_FREE: long_risk_free,
    InstrumentKind.SHORT_RISK_FREE: short_risk_free,
    InstrumentKind.LONG_UNDERLYING: long_linear,
    InstrumentKind.SHORT_UNDERLYING: short_linear,
    InstrumentKind.LONG_FORWARD: long_linear,
    InstrumentKind.SHORT_FORWARD: short_linear,
    InstrumentKind.LONG_CALL: long_call,
    InstrumentKind.SHORT_CALL: short_call,
    InstrumentKind.LONG_PUT: long_put,
    InstrumentKind.SHORT_PUT: short_put,
}


def get_payoff_function(kind: InstrumentKind) -> PayoffFunction:
    """Look up the payoff formula for a kind.

    Raises:
        KeyError: If the kind has no formula (contract violation).
    """
    return PAYOFF_FUNCTIONS[kind]


def calc_position_payoff(
    position: Position,
    underlying_price: float,
    settings: ValuationSettings,
    variant: PayoffVariant = PayoffVariant.FULL,
) -> float:
    """Calculate the per-unit payoff of one position.

    Args:
        position: Portfolio entry.
        underlying_price: Underlying price S at the evaluation date.
        settings: Valuation settings.
        variant: FULL includes option premiums, PAYOFF_ONLY excludes them.

    Returns:
        Payoff per unit (quantity not applied).
    """
    payoff_fn = get_payoff_function(position.kind)
    return payoff_fn(underlying_price, position, settings, variant is PayoffVariant.FULL)
