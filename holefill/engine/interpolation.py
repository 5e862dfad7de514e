"""Weighted-average kernel shared by all filling strategies."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from holefill.engine.entities import PixelGrid, PixelSample
from holefill.engine.weights import WeightFunction

logger = logging.getLogger(__name__)


def weighted_average(
    hole: PixelSample,
    sources: Sequence[PixelSample],
    weight_fn: WeightFunction,
) -> float | None:
    """Σ w(h,v)·value(v) / Σ w(h,v) over ``sources``; None if the weight sum is not positive."""
    numerator = 0.0
    denominator = 0.0
    for v in sources:
        w = weight_fn(hole, v)
        numerator += w * v.intensity
        denominator += w
    if denominator > 0:
        return numerator / denominator
    return None


def fill_holes(
    grid: PixelGrid,
    holes: Sequence[PixelSample],
    sources: Sequence[PixelSample],
    weight_fn: WeightFunction,
) -> int:
    """Write interpolated values into ``grid`` for every hole.

    Holes whose weight sum is zero keep their sentinel. Returns how many.
    """
    unfilled = 0
    for h in holes:
        value = weighted_average(h, sources, weight_fn)
        if value is None:
            unfilled += 1
            continue
        grid[h.row, h.col].intensity = value

    if unfilled:
        logger.warning(
            "%d of %d hole pixels left unfilled (zero weight sum over %d sources)",
            unfilled, len(holes), len(sources),
        )
    return unfilled
