"""AlgorithmManager — holds tuning parameters and runs the active filling strategy."""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING, Any

from holefill.engine.entities import PixelGrid, ProcessedImage
from holefill.engine.errors import InvalidParameterError, MissingWeightFunctionError
from holefill.engine.preprocessing import validate_connectivity
from holefill.engine.registry import (
    DEFAULT_KIND,
    StrategyKind,
    StrategyRegistry,
    StrategySpec,
    load_strategies,
)
from holefill.engine.strategies.approximate import validate_cluster_target
from holefill.engine.weights import WeightFunction, default_weight

if TYPE_CHECKING:
    from holefill.config import Settings

logger = logging.getLogger(__name__)


class AlgorithmManager:
    """Wires connectivity, z, e, the weight function and the strategy together.

    Unless a custom weight function is installed, the default
    ``1 / (d^z + e)`` weight is rebuilt from the current ``z``/``e`` on every
    access, so parameter changes always take effect.
    """

    def __init__(
        self,
        connectivity: int = 8,
        z: float = 3.0,
        e: float = 0.01,
        *,
        strategy: str | StrategyKind = DEFAULT_KIND,
        weight_function: WeightFunction | None = None,
        cluster_target: int | None = None,
        registry: StrategyRegistry | None = None,
    ) -> None:
        self.connectivity = validate_connectivity(connectivity)
        self.registry = registry or load_strategies()
        self._z = _check_z(z)
        self._e = _check_epsilon(e)
        self._custom_weight: WeightFunction | None = None
        if weight_function is not None:
            self.set_weight_function(weight_function)
        self._cluster_target = cluster_target
        self._strategy: StrategySpec = self.registry.resolve(strategy)

    # --- strategy -------------------------------------------------------

    def select_strategy(self, name: str | StrategyKind) -> StrategySpec:
        """Switch the active strategy. Unknown names fall back to Exact."""
        self._strategy = self.registry.resolve(name)
        logger.debug("Active strategy: %s", self._strategy.display_name)
        return self._strategy

    @property
    def strategy(self) -> StrategySpec:
        return self._strategy

    @property
    def algorithm_name(self) -> str:
        return self._strategy.display_name

    # --- parameters -----------------------------------------------------

    @property
    def z(self) -> float:
        return self._z

    @z.setter
    def z(self, value: float) -> None:
        self._z = _check_z(value)

    @property
    def e(self) -> float:
        return self._e

    @e.setter
    def e(self, value: float) -> None:
        self._e = _check_epsilon(value)

    @property
    def cluster_target(self) -> int:
        """Target point count for Approximate; defaults to the connectivity."""
        if self._cluster_target is None:
            return self.connectivity
        return self._cluster_target

    @cluster_target.setter
    def cluster_target(self, value: int | None) -> None:
        self._cluster_target = value

    # --- weight function ------------------------------------------------

    @property
    def weight_function(self) -> WeightFunction:
        if self._custom_weight is not None:
            return self._custom_weight
        return default_weight(self._z, self._e)

    @weight_function.setter
    def weight_function(self, fn: WeightFunction) -> None:
        self.set_weight_function(fn)

    def set_weight_function(self, fn: WeightFunction | None) -> None:
        if fn is None:
            raise MissingWeightFunctionError()
        if not callable(fn):
            raise InvalidParameterError(f"Weight function must be callable, got {type(fn).__name__}")
        self._custom_weight = fn

    def reset_weight_function(self) -> None:
        """Go back to the default weight derived from the current z/e."""
        self._custom_weight = None

    @property
    def uses_default_weight(self) -> bool:
        return self._custom_weight is None

    # --- execution ------------------------------------------------------

    def run(self, image: ProcessedImage) -> PixelGrid:
        """Fill ``image`` in place with the active strategy and return its grid."""
        spec = self._strategy
        cluster_target = None
        if spec.needs_cluster_target:
            cluster_target = validate_cluster_target(self.cluster_target)
        weight_fn = self.weight_function

        start = time.perf_counter()
        logger.info(
            "%s: %d holes, %d boundary pixels",
            spec.display_name, len(image.holes), len(image.boundary),
        )
        grid = spec.fn(image, weight_fn, cluster_target=cluster_target)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "%s complete in %.0fms (%d unfilled)",
            spec.display_name, elapsed, len(grid.unfilled()),
        )
        return grid


def _check_z(z: float) -> float:
    z = float(z)
    if not math.isfinite(z):
        raise InvalidParameterError(f"Distance exponent must be finite, got {z}")
    return z


def _check_epsilon(e: float) -> float:
    e = float(e)
    if not e > 0:
        raise InvalidParameterError(f"Epsilon must be strictly positive, got {e}")
    return e


def create_manager(settings: Settings | None = None, **overrides: Any) -> AlgorithmManager:
    """Factory function for a manager configured from application settings.

    Keyword overrides (``connectivity``, ``z``, ``e``, ``strategy``,
    ``cluster_target``) replace the matching setting; ``None`` keeps it.
    """
    if settings is None:
        from holefill.config import settings as app_settings

        settings = app_settings

    params: dict[str, Any] = {
        "connectivity": settings.default_connectivity,
        "z": settings.default_z,
        "e": settings.default_e,
        "strategy": settings.default_strategy,
        "cluster_target": settings.default_cluster_target,
    }
    unknown = set(overrides) - set(params)
    if unknown:
        raise TypeError(f"Unknown manager parameters: {sorted(unknown)}")
    params.update({k: v for k, v in overrides.items() if v is not None})

    return AlgorithmManager(**params)
