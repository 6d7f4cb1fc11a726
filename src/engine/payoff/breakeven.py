"""Break-even detection on a sampled payoff curve."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from src.engine.models import PayoffPoint


def find_breakeven_prices(points: Sequence[PayoffPoint], tolerance: float = 1e-9) -> list[float]:
    """Find underlying prices where the payoff crosses zero.

    Isolated zero samples are returned as-is. A run of consecutive zero
    samples (a flat segment at zero) contributes only its two endpoints,
    where the curve enters and leaves zero. Sign changes between adjacent
    samples are located by linear interpolation, which is exact for
    piecewise-linear payoffs when no kink lies between the two samples.

    Args:
        points: Payoff curve ordered by ascending x.
        tolerance: Values with |y| <= tolerance count as zero, and
            break-evens closer than this are merged.

    Returns:
        Break-even prices, ascending.
    """
    if not points:
        return []

    xs = np.array([p.x for p in points], dtype=float)
    ys = np.array([p.y for p in points], dtype=float)
    signs = np.where(np.abs(ys) <= tolerance, 0, np.sign(ys))

    # Zero runs: indices where a run starts and ends (inclusive)
    is_zero = np.concatenate(([0], (signs == 0).astype(int), [0]))
    edges = np.diff(is_zero)
    run_starts = np.where(edges == 1)[0]
    run_ends = np.where(edges == -1)[0] - 1

    found: list[float] = []
    for start, end in zip(run_starts, run_ends):
        found.append(float(xs[start]))
        if end != start:
            found.append(float(xs[end]))

    crossings = np.where(signs[:-1] * signs[1:] < 0)[0]
    for idx in crossings:
        x1, x2 = xs[idx], xs[idx + 1]
        y1, y2 = ys[idx], ys[idx + 1]
        found.append(float(x1 - y1 * (x2 - x1) / (y2 - y1)))

    found.sort()
    merged: list[float] = []
    for price in found:
        if not merged or price - merged[-1] > tolerance:
            merged.append(price)
    return merged
