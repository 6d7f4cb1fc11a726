"""Risk-free (lending/borrowing) cash flow summary."""

from __future__ import annotations

import math
from typing import Iterable

from src.engine.models import InstrumentKind, Position, RiskFreeRow, RiskFreeSummary, ValuationSettings


def calc_future_value(principal: float, settings: ValuationSettings) -> float:
    """Principal compounded continuously to maturity: P × e^(r×T)."""
    return principal * math.exp(settings.risk_free_rate * settings.time_to_maturity)


def calc_risk_free_summary(
    positions: Iterable[Position],
    settings: ValuationSettings,
) -> RiskFreeSummary:
    """Summarize cash flows of risk-free positions.

    Long (lending): pay principal today, receive FV at maturity.
    Short (borrowing): receive principal today, pay FV at maturity.

    Args:
        positions: Portfolio entries. Non risk-free kinds are skipped.
        settings: Valuation settings (rate and maturity).

    Returns:
        RiskFreeSummary with one row per risk-free position.
    """
    rows = []
    for position in positions:
        if not position.kind.is_risk_free:
            continue

        sign = 1.0 if position.kind is InstrumentKind.LONG_RISK_FREE else -1.0
        future_value = calc_future_value(position.principal, settings)

        rows.append(
            RiskFreeRow(
                position_id=position.id,
                label=position.label,
                value_today=-sign * position.principal * position.quantity,
                value_at_maturity=sign * future_value * position.quantity,
            )
        )

    return RiskFreeSummary(rows=rows)
