"""Pixel value objects and the ProcessedImage aggregate handed to strategies.

PixelSample identity is its coordinates only. Intensity is payload that a
fill pass overwrites, so set membership survives filling.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from holefill.engine.config import HOLE_VALUE


class PixelSample:
    """A single grid position and its (mutable) intensity."""

    __slots__ = ("_row", "_col", "intensity")

    def __init__(self, row: int, col: int, intensity: float) -> None:
        self._row = row
        self._col = col
        self.intensity = intensity

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def coords(self) -> tuple[int, int]:
        return (self._row, self._col)

    @property
    def is_hole(self) -> bool:
        return self.intensity == HOLE_VALUE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelSample):
            return NotImplemented
        return self.coords == other.coords

    def __hash__(self) -> int:
        return hash(self.coords)

    def __repr__(self) -> str:
        return f"PixelSample(row={self._row}, col={self._col}, intensity={self.intensity})"


class ApproxBoundaryPoint(PixelSample):
    """Averaged representative of a cluster of boundary pixels.

    Coordinates are fractional means of the members' coordinates.
    """

    __slots__ = ("members",)

    def __init__(
        self,
        row: float,
        col: float,
        intensity: float,
        members: tuple[tuple[int, int], ...] = (),
    ) -> None:
        super().__init__(row, col, intensity)  # type: ignore[arg-type]
        self.members = members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApproxBoundaryPoint):
            return NotImplemented
        return self.coords == other.coords and self.members == other.members

    def __hash__(self) -> int:
        return hash((self.coords, self.members))

    def __repr__(self) -> str:
        return (
            f"ApproxBoundaryPoint(row={self.row:.2f}, col={self.col:.2f}, "
            f"intensity={self.intensity:.4f}, members={len(self.members)})"
        )


class PixelGrid:
    """Owning 2D container of PixelSample, dimensions fixed at creation."""

    def __init__(self, rows: list[list[PixelSample]]) -> None:
        if not rows or not rows[0]:
            raise ValueError("PixelGrid must have at least one row and one column")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("PixelGrid rows must all have the same length")
        self._rows = rows

    @classmethod
    def from_array(cls, values: NDArray[np.floating]) -> PixelGrid:
        """Build a grid from a 2D intensity array."""
        if values.ndim != 2:
            raise ValueError(f"Expected a 2D intensity array, got shape {values.shape}")
        height, width = values.shape
        return cls([
            [PixelSample(r, c, float(values[r, c])) for c in range(width)]
            for r in range(height)
        ])

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def __getitem__(self, key: tuple[int, int]) -> PixelSample:
        row, col = key
        return self._rows[row][col]

    def __iter__(self) -> Iterator[PixelSample]:
        for row in self._rows:
            yield from row

    def to_array(self) -> NDArray[np.float64]:
        out = np.empty(self.shape, dtype=np.float64)
        for sample in self:
            out[sample.row, sample.col] = sample.intensity
        return out

    def unfilled(self) -> list[PixelSample]:
        """Samples that still carry the hole sentinel."""
        return [s for s in self if s.is_hole]

    def __repr__(self) -> str:
        return f"PixelGrid({self.height}x{self.width})"


@dataclass
class ProcessedImage:
    """Grid plus its hole and boundary classification.

    Created once per run by the preprocessor and consumed by one strategy,
    which fills ``grid`` in place.
    """

    grid: PixelGrid
    holes: frozenset[PixelSample] = field(default_factory=frozenset)
    boundary: frozenset[PixelSample] = field(default_factory=frozenset)
    connectivity: int = 8

    @property
    def shape(self) -> tuple[int, int]:
        return self.grid.shape

    def sorted_holes(self) -> list[PixelSample]:
        return sorted(self.holes, key=lambda s: s.coords)

    def sorted_boundary(self) -> list[PixelSample]:
        return sorted(self.boundary, key=lambda s: s.coords)

    def boundary_coords(self) -> set[tuple[int, int]]:
        return {s.coords for s in self.boundary}
