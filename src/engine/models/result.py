"""Result models for payoff analysis outputs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PriceRange:
    """Underlying price domain of a payoff diagram.

    Attributes:
        min: Lower bound (>= 0).
        max: Upper bound (>= min).
    """

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, price: float) -> bool:
        """Check if price lies within [min, max] (inclusive)."""
        return self.min <= price <= self.max


@dataclass(frozen=True)
class PayoffPoint:
    """Portfolio value y at underlying price x."""

    x: float
    y: float


@dataclass
class RiskFreeRow:
    """Cash flows of one risk-free position.

    Attributes:
        position_id: Id of the source position.
        label: Display label (quantity prefix + kind name).
        value_today: Cash flow today (negative when lending).
        value_at_maturity: Cash flow at maturity, principal compounded at e^(rT).
    """

    position_id: int
    label: str
    value_today: float
    value_at_maturity: float


@dataclass
class RiskFreeSummary:
    """Risk-free positions with their totals."""

    rows: list[RiskFreeRow] = field(default_factory=list)

    @property
    def total_today(self) -> float:
        return sum(row.value_today for row in self.rows)

    @property
    def total_at_maturity(self) -> float:
        return sum(row.value_at_maturity for row in self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows
