"""Engine configuration — constants that define the pixel value model."""

from __future__ import annotations

from dataclasses import dataclass

# Sentinel intensity for a pixel whose value is unknown
HOLE_VALUE = -1.0

# Neighbour offsets as (d_row, d_col). The first 4 entries are the
# 4-connected neighbourhood, all 8 are the 8-connected one.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, 0),   # up
    (0, 1),    # right
    (1, 0),    # down
    (0, -1),   # left
    (-1, -1),  # up-left
    (-1, 1),   # up-right
    (1, -1),   # down-left
    (1, 1),    # down-right
)

VALID_CONNECTIVITY = frozenset({4, 8})


@dataclass(frozen=True)
class FillConfig:
    """Controls grayscale projection and mask classification."""

    # Mask pixels strictly below this intensity are holes
    mask_threshold: float = 0.5

    # ITU-R BT.601 luma coefficients
    red_factor: float = 0.299
    green_factor: float = 0.587
    blue_factor: float = 0.114

    # Maximum channel value for 8-bit samples
    max_channel_value: float = 255.0
