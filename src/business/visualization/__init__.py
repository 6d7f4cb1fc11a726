"""Payoff visualization module.

Provides Plotly-based payoff diagrams and HTML/image export.
"""

from src.business.visualization.payoff_chart import PayoffChart, YBounds, calc_y_bounds

__all__ = [
    "PayoffChart",
    "YBounds",
    "calc_y_bounds",
]
