"""Preprocessor — colour samples + mask → ProcessedImage.

Steps:
1. Project image and mask to grayscale in [0, 1]
2. Mark every pixel whose mask intensity is strictly below the threshold as a hole
3. Mark every non-hole pixel with a hole among its first ``connectivity``
   neighbours as a boundary pixel (out-of-grid neighbours are skipped)
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from holefill.engine.config import DIRECTIONS, HOLE_VALUE, VALID_CONNECTIVITY, FillConfig
from holefill.engine.entities import PixelGrid, PixelSample, ProcessedImage
from holefill.engine.errors import DimensionMismatchError, InvalidConnectivityError

logger = logging.getLogger(__name__)


def validate_connectivity(connectivity: int) -> int:
    if isinstance(connectivity, bool) or connectivity not in VALID_CONNECTIVITY:
        raise InvalidConnectivityError(connectivity)
    return int(connectivity)


def to_grayscale(samples: NDArray, config: FillConfig | None = None) -> NDArray[np.float64]:
    """Project channel samples to normalized grayscale.

    Accepts (H, W, 3) or (H, W, 4) arrays (alpha ignored) and (H, W)
    single-channel arrays, all on a 0..255 scale.
    """
    cfg = config or FillConfig()
    arr = np.asarray(samples, dtype=np.float64)

    if arr.ndim == 2:
        return arr / cfg.max_channel_value
    if arr.ndim == 3 and arr.shape[2] in (3, 4):
        gray = (
            arr[:, :, 0] * cfg.red_factor
            + arr[:, :, 1] * cfg.green_factor
            + arr[:, :, 2] * cfg.blue_factor
        )
        return gray / cfg.max_channel_value

    raise ValueError(f"Unsupported sample array shape: {arr.shape}")


def preprocess(
    image: NDArray,
    mask: NDArray,
    connectivity: int,
    config: FillConfig | None = None,
) -> ProcessedImage:
    """Classify every pixel of ``image`` as hole, boundary or interior."""
    cfg = config or FillConfig()
    validate_connectivity(connectivity)
    _check_dimensions(image, mask)

    return build_processed_image(
        to_grayscale(image, cfg),
        to_grayscale(mask, cfg),
        connectivity,
        cfg,
    )


def build_processed_image(
    image_intensity: NDArray[np.floating],
    mask_intensity: NDArray[np.floating],
    connectivity: int,
    config: FillConfig | None = None,
) -> ProcessedImage:
    """Same as :func:`preprocess` for inputs already projected to [0, 1]."""
    cfg = config or FillConfig()
    connectivity = validate_connectivity(connectivity)
    _check_dimensions(image_intensity, mask_intensity)

    is_hole = np.asarray(mask_intensity, dtype=np.float64) < cfg.mask_threshold
    height, width = is_hole.shape
    directions = DIRECTIONS[:connectivity]

    rows: list[list[PixelSample]] = []
    holes: set[PixelSample] = set()
    boundary: set[PixelSample] = set()

    for r in range(height):
        row: list[PixelSample] = []
        for c in range(width):
            if is_hole[r, c]:
                sample = PixelSample(r, c, HOLE_VALUE)
                holes.add(sample)
            else:
                sample = PixelSample(r, c, float(image_intensity[r, c]))
                if _touches_hole(is_hole, r, c, directions):
                    boundary.add(sample)
            row.append(sample)
        rows.append(row)

    logger.debug(
        "Preprocessed %dx%d grid: %d holes, %d boundary pixels (connectivity=%d)",
        height, width, len(holes), len(boundary), connectivity,
    )

    return ProcessedImage(
        grid=PixelGrid(rows),
        holes=frozenset(holes),
        boundary=frozenset(boundary),
        connectivity=connectivity,
    )


def _touches_hole(
    is_hole: NDArray[np.bool_],
    row: int,
    col: int,
    directions: tuple[tuple[int, int], ...],
) -> bool:
    height, width = is_hole.shape
    for dr, dc in directions:
        nr, nc = row + dr, col + dc
        if nr < 0 or nr >= height or nc < 0 or nc >= width:
            continue
        if is_hole[nr, nc]:
            return True
    return False


def _check_dimensions(image: NDArray, mask: NDArray) -> None:
    image_shape = tuple(np.shape(image)[:2])
    mask_shape = tuple(np.shape(mask)[:2])
    if len(image_shape) != 2 or len(mask_shape) != 2:
        raise ValueError(f"Expected 2D sample grids, got {np.shape(image)} and {np.shape(mask)}")
    if image_shape != mask_shape:
        raise DimensionMismatchError(image_shape, mask_shape)
