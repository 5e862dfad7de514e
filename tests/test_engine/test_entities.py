"""Tests for pixel value objects and the grid container."""

import numpy as np
import pytest

from holefill.engine.config import HOLE_VALUE
from holefill.engine.entities import ApproxBoundaryPoint, PixelGrid, PixelSample


def test_identity_is_coordinates_only():
    a = PixelSample(1, 2, 0.3)
    b = PixelSample(1, 2, 0.9)
    assert a == b
    assert hash(a) == hash(b)
    assert a != PixelSample(2, 1, 0.3)


def test_sample_still_found_after_mutation():
    hole = PixelSample(0, 0, HOLE_VALUE)
    holes = {hole}
    hole.intensity = 0.42
    assert hole in holes
    assert PixelSample(0, 0, HOLE_VALUE) in holes


def test_coordinates_are_read_only():
    s = PixelSample(3, 4, 0.5)
    with pytest.raises(AttributeError):
        s.row = 7  # type: ignore[misc]
    assert s.coords == (3, 4)


def test_is_hole():
    assert PixelSample(0, 0, HOLE_VALUE).is_hole
    assert not PixelSample(0, 0, 0.0).is_hole


def test_grid_from_array_shape_and_indexing():
    values = np.arange(6, dtype=float).reshape(2, 3) / 10
    grid = PixelGrid.from_array(values)
    assert grid.shape == (2, 3)
    assert grid[1, 2].intensity == pytest.approx(0.5)
    assert grid[1, 2].coords == (1, 2)
    assert grid.in_bounds(1, 2)
    assert not grid.in_bounds(2, 0)
    assert not grid.in_bounds(0, -1)
    np.testing.assert_allclose(grid.to_array(), values)


def test_grid_iterates_row_major():
    grid = PixelGrid.from_array(np.zeros((2, 2)))
    assert [s.coords for s in grid] == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_grid_unfilled():
    values = np.array([[0.1, HOLE_VALUE], [HOLE_VALUE, 0.4]])
    grid = PixelGrid.from_array(values)
    assert sorted(s.coords for s in grid.unfilled()) == [(0, 1), (1, 0)]


def test_grid_rejects_ragged_rows():
    with pytest.raises(ValueError):
        PixelGrid([[PixelSample(0, 0, 0.0)], []])


def test_approx_point_keeps_members():
    p = ApproxBoundaryPoint(1.5, 2.0, 0.25, members=((1, 2), (2, 2)))
    assert p.row == 1.5
    assert p.members == ((1, 2), (2, 2))
    assert not p.is_hole
