"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from holefill.engine.entities import ProcessedImage
from holefill.engine.preprocessing import build_processed_image


# 3x3 image whose centre is the only hole; ring intensities are distinct
RING_3X3 = np.array(
    [
        [0.10, 0.20, 0.30],
        [0.40, 0.00, 0.60],
        [0.70, 0.80, 0.90],
    ]
)
RING_3X3_MASK = np.array(
    [
        [1.0, 1.0, 1.0],
        [1.0, 0.0, 1.0],
        [1.0, 1.0, 1.0],
    ]
)


def gradient_image(height: int, width: int) -> np.ndarray:
    """Intensities rising left to right, top to bottom, all in [0, 1]."""
    rows = np.linspace(0.0, 0.5, height)[:, None]
    cols = np.linspace(0.0, 0.5, width)[None, :]
    return rows + cols


def square_hole_mask(height: int, width: int, top: int, left: int, size: int) -> np.ndarray:
    mask = np.ones((height, width))
    mask[top : top + size, left : left + size] = 0.0
    return mask


def two_hole_mask(height: int = 12, width: int = 12) -> np.ndarray:
    """Two separate 2x2 holes, giving two disconnected boundary contours."""
    mask = np.ones((height, width))
    mask[2:4, 2:4] = 0.0
    mask[8:10, 8:10] = 0.0
    return mask


@pytest.fixture
def ring_image() -> ProcessedImage:
    return build_processed_image(RING_3X3, RING_3X3_MASK, 8)


@pytest.fixture
def square_hole_image() -> ProcessedImage:
    return build_processed_image(gradient_image(10, 10), square_hole_mask(10, 10, 3, 3, 4), 8)


@pytest.fixture
def two_hole_image() -> ProcessedImage:
    return build_processed_image(gradient_image(12, 12), two_hole_mask(), 8)
