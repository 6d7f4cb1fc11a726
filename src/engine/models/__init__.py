"""Engine layer data models.

Models:
    BSParams: Black-Scholes calculation parameters
    Position: One portfolio entry (kind, strike, cost, principal, quantity)
    ValuationSettings: Spot, rate, time to maturity and volatility
    PriceRange: Underlying price domain
    PayoffPoint: (underlying price, portfolio value) pair
    RiskFreeRow / RiskFreeSummary: Risk-free cash flow view

Enums:
    InstrumentKind: Closed set of building blocks
    InstrumentGroup: Risk-free, linear or option
    PayoffVariant: Full (premium included) or payoff-only
"""

from src.engine.models.bs_params import BSParams
from src.engine.models.enums import InstrumentGroup, InstrumentKind, PayoffVariant
from src.engine.models.position import EDITABLE_FIELDS, Position
from src.engine.models.result import PayoffPoint, PriceRange, RiskFreeRow, RiskFreeSummary
from src.engine.models.settings import ValuationSettings

__all__ = [
    # B-S params
    "BSParams",
    # Enums
    "InstrumentGroup",
    "InstrumentKind",
    "PayoffVariant",
    # Inputs
    "Position",
    "EDITABLE_FIELDS",
    "ValuationSettings",
    # Results
    "PriceRange",
    "PayoffPoint",
    "RiskFreeRow",
    "RiskFreeSummary",
]
