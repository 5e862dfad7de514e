"""Pairwise weight functions.

A weight function is any callable ``(u, v) -> float`` returning a
non-negative influence of boundary pixel ``v`` on hole pixel ``u``.
"""

from __future__ import annotations

import math
from typing import Callable

from holefill.engine.entities import PixelSample
from holefill.engine.errors import InvalidParameterError

WeightFunction = Callable[[PixelSample, PixelSample], float]


def euclidean_distance(u: PixelSample, v: PixelSample) -> float:
    return math.hypot(u.row - v.row, u.col - v.col)


def default_weight(z: float, e: float) -> WeightFunction:
    """w(u, v) = 1 / (|u - v|^z + e)."""
    if e <= 0:
        raise InvalidParameterError(f"Epsilon must be strictly positive, got {e}")

    def weight(u: PixelSample, v: PixelSample) -> float:
        d = euclidean_distance(u, v)
        if d == 0.0 and z < 0:
            # 0 ** negative z diverges, so the weight tends to 0
            return 0.0
        return 1.0 / (d**z + e)

    return weight
