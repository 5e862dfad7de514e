"""Exact filling — weighted average over the entire boundary set.

Cost is O(|holes| * |boundary|).
"""

from __future__ import annotations

from holefill.engine.entities import PixelGrid, ProcessedImage
from holefill.engine.interpolation import fill_holes
from holefill.engine.registry import StrategyKind, strategy
from holefill.engine.weights import WeightFunction


@strategy(
    kind=StrategyKind.EXACT,
    display_name="ExactAlgorithm",
    aliases={"HoleFillingAlgorithm", "DefaultHoleFillingAlgorithm"},
    description="Weighted average over every boundary pixel",
)
def exact_fill(
    image: ProcessedImage,
    weight_fn: WeightFunction,
    *,
    cluster_target: int | None = None,
) -> PixelGrid:
    fill_holes(image.grid, image.sorted_holes(), image.sorted_boundary(), weight_fn)
    return image.grid
