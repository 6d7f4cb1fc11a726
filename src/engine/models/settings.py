"""Valuation settings shared by pricing and aggregation."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Any


@dataclass
class ValuationSettings:
    """Valuation context for a payoff session.

    Read (never mutated) by the engine. Replaced wholesale by the session
    when the user edits the valuation inputs.

    Attributes:
        spot_price: Current price of the underlying (S), expected > 0.
        risk_free_rate: Annualized risk-free rate as decimal (r, e.g. 0.05).
        time_to_maturity: Years to the evaluation date (T). 0 means immediate expiry.
        volatility: Annualized volatility as decimal (sigma). 0 means no randomness.
    """

    spot_price: float = 100.0
    risk_free_rate: float = 0.05
    time_to_maturity: float = 1.0
    volatility: float = 0.20

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValuationSettings:
        """Create settings from a dict, keeping defaults for missing keys."""
        defaults = cls()
        return cls(
            spot_price=float(data.get("spot_price", defaults.spot_price)),
            risk_free_rate=float(data.get("risk_free_rate", defaults.risk_free_rate)),
            time_to_maturity=float(data.get("time_to_maturity", defaults.time_to_maturity)),
            volatility=float(data.get("volatility", defaults.volatility)),
        )

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    def with_updates(self, **changes: float) -> ValuationSettings:
        """Create new settings with some fields replaced.

        Raises:
            TypeError: If a field name is unknown.
        """
        return replace(self, **changes)

    @property
    def discount_factor(self) -> float:
        """e^(-rT)."""
        return math.exp(-self.risk_free_rate * self.time_to_maturity)
