"""Black-Scholes calculation parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.engine.models.enums import InstrumentKind
from src.engine.models.settings import ValuationSettings


@dataclass
class BSParams:
    """Black-Scholes calculation parameters.

    Encapsulates all parameters needed for B-S pricing.
    This provides a clean interface instead of passing 5-6 primitive parameters.

    Attributes:
        spot_price: Current price of underlying asset (S)
        strike_price: Strike price of the option (K)
        risk_free_rate: Annual risk-free interest rate (r)
        volatility: Volatility as decimal (sigma, e.g., 0.25 for 25%)
        time_to_expiry: Time to expiration in years (T)
        is_call: True for call option, False for put option

    Example:
        >>> params = BSParams(
        ...     spot_price=100.0,
        ...     strike_price=105.0,
        ...     risk_free_rate=0.05,
        ...     volatility=0.25,
        ...     time_to_expiry=0.5,
        ...     is_call=True
        ... )
        >>> # price = calc_bs_price(params)
    """

    spot_price: float
    strike_price: float
    risk_free_rate: float
    volatility: float
    time_to_expiry: float
    is_call: bool = True

    @classmethod
    def from_settings(
        cls,
        settings: ValuationSettings,
        strike_price: float,
        is_call: bool = True,
    ) -> BSParams:
        """Create BSParams from the session's valuation settings.

        Args:
            settings: Valuation settings (spot, rate, maturity, volatility)
            strike_price: Option strike
            is_call: True for call option, False for put option

        Returns:
            BSParams instance ready for B-S calculations
        """
        return cls(
            spot_price=settings.spot_price,
            strike_price=strike_price,
            risk_free_rate=settings.risk_free_rate,
            volatility=settings.volatility,
            time_to_expiry=settings.time_to_maturity,
            is_call=is_call,
        )

    @classmethod
    def for_position_kind(
        cls,
        kind: InstrumentKind,
        strike_price: float,
        settings: ValuationSettings,
    ) -> BSParams:
        """Create BSParams for an option kind (call kinds price as calls).

        Raises:
            ValueError: If kind is not an option kind.
        """
        kind = InstrumentKind(kind)
        if not kind.is_option:
            raise ValueError(f"{kind.value} is not an option kind")
        return cls.from_settings(settings, strike_price, is_call=kind.is_call)

    @property
    def discount_factor(self) -> float:
        """e^(-r×T)."""
        return math.exp(-self.risk_free_rate * self.time_to_expiry)
