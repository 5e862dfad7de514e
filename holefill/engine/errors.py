"""Precondition errors raised by the hole-filling engine.

Every error here is raised before any pixel of an output grid is touched.
They all derive from ``ValueError`` so callers that only care about
"bad input" can catch one type.
"""

from __future__ import annotations


class HoleFillError(ValueError):
    """Base class for fatal hole-filling preconditions."""


class DimensionMismatchError(HoleFillError):
    def __init__(self, image_shape: tuple[int, int], mask_shape: tuple[int, int]) -> None:
        self.image_shape = image_shape
        self.mask_shape = mask_shape
        super().__init__(
            f"Image and mask dimensions differ: image {image_shape[0]}x{image_shape[1]}, "
            f"mask {mask_shape[0]}x{mask_shape[1]}"
        )


class InvalidConnectivityError(HoleFillError):
    def __init__(self, connectivity: object) -> None:
        self.connectivity = connectivity
        super().__init__(f"Invalid connectivity type: {connectivity!r} (expected 4 or 8)")


class MissingWeightFunctionError(HoleFillError):
    def __init__(self) -> None:
        super().__init__("Weight function must not be None")


class InvalidClusterTargetError(HoleFillError):
    def __init__(self, cluster_target: object) -> None:
        self.cluster_target = cluster_target
        super().__init__(f"Cluster target must be a positive integer, got {cluster_target!r}")


class InvalidParameterError(HoleFillError):
    """A numeric tuning parameter is outside its valid range."""
