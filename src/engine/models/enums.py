"""Engine layer enumerations.

Centralized location for all enums used in the engine layer.
"""

from enum import Enum


class InstrumentGroup(Enum):
    """Behavioral group of an instrument kind."""

    RISK_FREE = "risk_free"  # Valued by principal, flat in S
    LINEAR = "linear"  # S minus/plus a reference price, no premium
    OPTION = "option"  # max(..., 0) kink at a strike, net of premium


class InstrumentKind(str, Enum):
    """Building blocks a payoff portfolio is assembled from.

    Values are the identifiers used by preset templates and portfolio files.
    """

    LONG_RISK_FREE = "long_risk_free"
    SHORT_RISK_FREE = "short_risk_free"
    LONG_UNDERLYING = "long_underlying"
    SHORT_UNDERLYING = "short_underlying"
    LONG_FORWARD = "long_forward"
    SHORT_FORWARD = "short_forward"
    LONG_CALL = "long_call"
    SHORT_CALL = "short_call"
    LONG_PUT = "long_put"
    SHORT_PUT = "short_put"

    @property
    def group(self) -> InstrumentGroup:
        """Behavioral group this kind belongs to."""
        return _KIND_GROUPS[self]

    @property
    def is_risk_free(self) -> bool:
        return self.group is InstrumentGroup.RISK_FREE

    @property
    def is_linear(self) -> bool:
        return self.group is InstrumentGroup.LINEAR

    @property
    def is_option(self) -> bool:
        return self.group is InstrumentGroup.OPTION

    @property
    def is_call(self) -> bool:
        return self in (InstrumentKind.LONG_CALL, InstrumentKind.SHORT_CALL)

    @property
    def is_put(self) -> bool:
        return self in (InstrumentKind.LONG_PUT, InstrumentKind.SHORT_PUT)

    @property
    def is_long(self) -> bool:
        return self.value.startswith("long_")

    @property
    def display_name(self) -> str:
        """Human readable label, e.g. "Long Forward/Future"."""
        return _DISPLAY_NAMES[self]


_KIND_GROUPS = {
    InstrumentKind.LONG_RISK_FREE: InstrumentGroup.RISK_FREE,
    InstrumentKind.SHORT_RISK_FREE: InstrumentGroup.RISK_FREE,
    InstrumentKind.LONG_UNDERLYING: InstrumentGroup.LINEAR,
    InstrumentKind.SHORT_UNDERLYING: InstrumentGroup.LINEAR,
    InstrumentKind.LONG_FORWARD: InstrumentGroup.LINEAR,
    InstrumentKind.SHORT_FORWARD: InstrumentGroup.LINEAR,
    InstrumentKind.LONG_CALL: InstrumentGroup.OPTION,
    InstrumentKind.SHORT_CALL: InstrumentGroup.OPTION,
    InstrumentKind.LONG_PUT: InstrumentGroup.OPTION,
    InstrumentKind.SHORT_PUT: InstrumentGroup.OPTION,
}

_DISPLAY_NAMES = {
    InstrumentKind.LONG_RISK_FREE: "Long Risk-Free",
    InstrumentKind.SHORT_RISK_FREE: "Short Risk-Free",
    InstrumentKind.LONG_UNDERLYING: "Long Underlying",
    InstrumentKind.SHORT_UNDERLYING: "Short Underlying",
    InstrumentKind.LONG_FORWARD: "Long Forward/Future",
    InstrumentKind.SHORT_FORWARD: "Short Forward/Future",
    InstrumentKind.LONG_CALL: "Long Call",
    InstrumentKind.SHORT_CALL: "Short Call",
    InstrumentKind.LONG_PUT: "Long Put",
    InstrumentKind.SHORT_PUT: "Short Put",
}


class PayoffVariant(Enum):
    """Which payoff table to evaluate.

    FULL includes option premiums (profit/loss view).
    PAYOFF_ONLY excludes them (terminal payoff view).
    """

    FULL = "full"
    PAYOFF_ONLY = "payoff_only"
