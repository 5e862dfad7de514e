"""Strategy registry — every filling strategy is a function registered via decorator.

Usage:
    @strategy(kind=StrategyKind.EXACT, display_name="ExactAlgorithm", aliases={"exact"})
    def exact_fill(image: ProcessedImage, weight_fn: WeightFunction, *, cluster_target=None) -> PixelGrid:
        ...

The set of kinds is closed (``StrategyKind``). Name lookup goes through
``StrategyRegistry.resolve``, which falls back to Exact for unknown names.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from holefill.engine.entities import PixelGrid, ProcessedImage
    from holefill.engine.weights import WeightFunction

logger = logging.getLogger(__name__)


class StrategyKind(str, enum.Enum):
    EXACT = "Exact"
    APPROXIMATE = "Approximate"


DEFAULT_KIND = StrategyKind.EXACT


class StrategyFn(Protocol):
    def __call__(
        self,
        image: "ProcessedImage",
        weight_fn: "WeightFunction",
        *,
        cluster_target: int | None = None,
    ) -> "PixelGrid": ...


@dataclass
class StrategySpec:
    kind: StrategyKind
    fn: StrategyFn
    display_name: str
    aliases: set[str] = field(default_factory=set)
    description: str = ""
    needs_cluster_target: bool = False

    def names(self) -> set[str]:
        return {self.kind.value.lower(), self.display_name.lower()} | {a.lower() for a in self.aliases}


class StrategyRegistry:
    """Registry of filling strategies keyed by kind."""

    def __init__(self) -> None:
        self._strategies: dict[StrategyKind, StrategySpec] = {}

    def register(self, spec: StrategySpec) -> None:
        if spec.kind in self._strategies:
            raise ValueError(f"Duplicate strategy: {spec.kind.value}")
        self._strategies[spec.kind] = spec
        logger.debug("Registered strategy %s (%s)", spec.kind.value, spec.display_name)

    def get(self, kind: StrategyKind) -> StrategySpec:
        return self._strategies[kind]

    def resolve(self, name: str | StrategyKind | None) -> StrategySpec:
        """Look up a strategy by kind, name or alias (case-insensitive).

        Unknown names resolve to Exact. This is the intended default, not an error.
        """
        if isinstance(name, StrategyKind) and name in self._strategies:
            return self._strategies[name]

        key = (name.value if isinstance(name, StrategyKind) else (name or "")).strip().lower()
        for spec in self._strategies.values():
            if key in spec.names():
                return spec

        logger.info("Unknown strategy %r, falling back to %s", name, DEFAULT_KIND.value)
        return self.get(DEFAULT_KIND)

    def all(self) -> list[StrategySpec]:
        return [self._strategies[k] for k in StrategyKind if k in self._strategies]

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    return _registry


def strategy(
    *,
    kind: StrategyKind,
    display_name: str,
    aliases: set[str] | None = None,
    description: str = "",
    needs_cluster_target: bool = False,
):
    """Decorator to register a filling strategy function."""

    def decorator(fn: StrategyFn):
        spec = StrategySpec(
            kind=kind,
            fn=fn,
            display_name=display_name,
            aliases=aliases or set(),
            description=description,
            needs_cluster_target=needs_cluster_target,
        )
        _registry.register(spec)
        return fn

    return decorator


def load_strategies() -> StrategyRegistry:
    """Import all strategy modules so @strategy decorators fire."""
    package = importlib.import_module("holefill.engine.strategies")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    return _registry


def evaluate(
    kind: StrategyKind | str,
    image: "ProcessedImage",
    weight_fn: "WeightFunction",
    *,
    cluster_target: int | None = None,
    registry: StrategyRegistry | None = None,
) -> "PixelGrid":
    """Single dispatch point: run strategy ``kind`` on ``image``."""
    reg = registry or load_strategies()
    spec = reg.resolve(kind)
    return spec.fn(image, weight_fn, cluster_target=cluster_target)
