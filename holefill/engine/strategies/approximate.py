"""Approximate filling — compress the boundary into ~k cluster points, then interpolate.

Clustering walks the boundary adjacency graph:
1. cluster_size = |boundary| // k (at least 1)
2. Start at the smallest remaining (row, col)
3. Step to the first unvisited boundary neighbour in the 8-direction order,
   accumulating coordinates and intensity
4. Emit the running average every cluster_size pixels
5. On a dead end (end of a contour, or a disconnected component) flush the
   partial cluster and jump to the smallest remaining (row, col)
6. Stop once every boundary pixel is visited or k points exist

Walking adjacency groups spatially close pixels into the same point, so the
compressed boundary follows the hole's contour. Interpolation then costs
O(|holes| * k) instead of O(|holes| * |boundary|).
"""

from __future__ import annotations

import logging
import numbers

from holefill.engine.config import DIRECTIONS
from holefill.engine.entities import ApproxBoundaryPoint, PixelGrid, PixelSample, ProcessedImage
from holefill.engine.errors import InvalidClusterTargetError
from holefill.engine.interpolation import fill_holes
from holefill.engine.registry import StrategyKind, strategy
from holefill.engine.weights import WeightFunction

logger = logging.getLogger(__name__)


class _ClusterAccumulator:
    """Running sums for the cluster currently being walked."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.row_sum = 0.0
        self.col_sum = 0.0
        self.intensity_sum = 0.0
        self.members: list[tuple[int, int]] = []

    @property
    def count(self) -> int:
        return len(self.members)

    def add(self, sample: PixelSample) -> None:
        self.row_sum += sample.row
        self.col_sum += sample.col
        self.intensity_sum += sample.intensity
        self.members.append(sample.coords)

    def flush(self) -> ApproxBoundaryPoint:
        n = self.count
        point = ApproxBoundaryPoint(
            self.row_sum / n,
            self.col_sum / n,
            self.intensity_sum / n,
            members=tuple(self.members),
        )
        self.reset()
        return point


def validate_cluster_target(cluster_target: int | None) -> int:
    if (
        cluster_target is None
        or isinstance(cluster_target, bool)
        or not isinstance(cluster_target, numbers.Integral)
        or cluster_target <= 0
    ):
        raise InvalidClusterTargetError(cluster_target)
    return int(cluster_target)


def compress_boundary(image: ProcessedImage, cluster_target: int) -> list[ApproxBoundaryPoint]:
    """Reduce the boundary set to at most ``cluster_target`` averaged points."""
    k = validate_cluster_target(cluster_target)
    grid = image.grid
    total = len(image.boundary)
    if total == 0:
        return []

    cluster_size = max(total // k, 1)
    boundary_coords = image.boundary_coords()
    # Jump order: smallest (row, col) first
    remaining = sorted(boundary_coords)
    next_jump = 0
    visited: set[tuple[int, int]] = set()

    points: list[ApproxBoundaryPoint] = []
    acc = _ClusterAccumulator()

    def take(sample: PixelSample) -> None:
        acc.add(sample)
        visited.add(sample.coords)
        if acc.count >= cluster_size:
            points.append(acc.flush())

    current: PixelSample | None = None
    while len(visited) < total and len(points) < k:
        step = None
        if current is not None:
            step = _next_neighbor(grid, current, boundary_coords, visited)
        if step is None:
            if current is not None and acc.count > 0:
                points.append(acc.flush())
                if len(points) >= k:
                    break
            while remaining[next_jump] in visited:
                next_jump += 1
            step = grid[remaining[next_jump]]
        current = step
        take(current)

    if acc.count > 0:
        points.append(acc.flush())

    logger.debug(
        "Compressed %d boundary pixels into %d points (target=%d, cluster_size=%d)",
        total, len(points), k, cluster_size,
    )
    return points


def _next_neighbor(
    grid: PixelGrid,
    current: PixelSample,
    boundary_coords: set[tuple[int, int]],
    visited: set[tuple[int, int]],
) -> PixelSample | None:
    for dr, dc in DIRECTIONS:
        nr, nc = current.row + dr, current.col + dc
        if not grid.in_bounds(nr, nc):
            continue
        if (nr, nc) in boundary_coords and (nr, nc) not in visited:
            return grid[nr, nc]
    return None


@strategy(
    kind=StrategyKind.APPROXIMATE,
    display_name="ApproximateAlgorithm",
    aliases={"approx"},
    description="Weighted average over a boundary compressed into ~k cluster points",
    needs_cluster_target=True,
)
def approximate_fill(
    image: ProcessedImage,
    weight_fn: WeightFunction,
    *,
    cluster_target: int | None = None,
) -> PixelGrid:
    points = compress_boundary(image, cluster_target)  # type: ignore[arg-type]
    fill_holes(image.grid, image.sorted_holes(), points, weight_fn)
    return image.grid
