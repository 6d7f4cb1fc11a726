"""Position model for payoff calculations."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from src.engine.models.enums import InstrumentKind


def _as_float(value: Any) -> float:
    """Coerce a numeric field, falling back to 0 for missing or invalid input."""
    if value is None:
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    # NaN compares unequal to itself
    return result if result == result else 0.0


def _as_quantity(value: Any) -> int:
    """Coerce quantity to a positive integer multiplier (default 1)."""
    try:
        quantity = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    return quantity if quantity >= 1 else 1


@dataclass
class Position:
    """One entry of a payoff portfolio.

    Numeric fields that do not apply to the position's kind are still kept
    as numbers (strike/cost for risk-free, principal for everything else)
    so payoff arithmetic never sees a missing value.

    Attributes:
        id: Caller-assigned identifier, stable for the record's lifetime.
        kind: Instrument kind.
        strike: Strike price (options) or reference/purchase price (linear).
        cost: Option premium. Ignored by linear and risk-free kinds.
        principal: Notional lent or borrowed (risk-free kinds only).
        quantity: Positive integer multiplier.

    Example:
        >>> pos = Position(id=1, kind="long_call", strike=100, cost=5)
        >>> pos.kind
        <InstrumentKind.LONG_CALL: 'long_call'>
    """

    id: int
    kind: InstrumentKind
    strike: float = 0.0
    cost: float = 0.0
    principal: float = 0.0
    quantity: int = 1

    def __post_init__(self) -> None:
        # Unknown kinds fail here with ValueError
        self.kind = InstrumentKind(self.kind)
        self.strike = _as_float(self.strike)
        self.cost = _as_float(self.cost)
        self.principal = _as_float(self.principal)
        self.quantity = _as_quantity(self.quantity)

    @classmethod
    def from_dict(cls, data: dict[str, Any], position_id: int | None = None) -> Position:
        """Create a Position from a (possibly partial) record.

        Accepts ``kind`` or the legacy ``type`` key for the instrument kind.

        Args:
            data: Record with at least a kind; other fields default.
            position_id: Overrides ``data["id"]`` when given.

        Returns:
            Position instance.

        Raises:
            ValueError: If no kind is given or the kind is unknown.
        """
        kind = data.get("kind", data.get("type"))
        if kind is None:
            raise ValueError(f"Position record has no kind: {data!r}")

        if position_id is None:
            position_id = data.get("id", 0)

        return cls(
            id=position_id,
            kind=kind,
            strike=data.get("strike"),
            cost=data.get("cost"),
            principal=data.get("principal"),
            quantity=data.get("quantity", 1),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (kind as its string value)."""
        data = asdict(self)
        data["kind"] = self.kind.value
        return data

    def set_field(self, field_name: str, value: Any) -> None:
        """Set one editable numeric field with the same coercion as construction.

        Raises:
            ValueError: If the field is not editable.
        """
        if field_name == "quantity":
            self.quantity = _as_quantity(value)
        elif field_name in EDITABLE_FIELDS:
            setattr(self, field_name, _as_float(value))
        else:
            raise ValueError(
                f"Unknown position field '{field_name}', expected one of {EDITABLE_FIELDS}"
            )

    @property
    def label(self) -> str:
        """Display label, e.g. "2x Long Call"."""
        prefix = f"{self.quantity}x " if self.quantity > 1 else ""
        return f"{prefix}{self.kind.display_name}"


EDITABLE_FIELDS = ("strike", "cost", "principal", "quantity")
