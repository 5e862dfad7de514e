"""Hole-filling engine."""

from holefill.engine.entities import ApproxBoundaryPoint, PixelGrid, PixelSample, ProcessedImage
from holefill.engine.manager import AlgorithmManager, create_manager
from holefill.engine.preprocessing import build_processed_image, preprocess
from holefill.engine.registry import StrategyKind, evaluate, get_registry, load_strategies, strategy

__all__ = [
    "AlgorithmManager",
    "ApproxBoundaryPoint",
    "PixelGrid",
    "PixelSample",
    "ProcessedImage",
    "StrategyKind",
    "build_processed_image",
    "create_manager",
    "evaluate",
    "get_registry",
    "load_strategies",
    "preprocess",
    "strategy",
]
