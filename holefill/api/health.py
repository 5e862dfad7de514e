"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from holefill import __version__
from holefill.engine.registry import DEFAULT_KIND, load_strategies
from holefill.models.responses import HealthResponse, StrategiesResponse, StrategyInfo

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        strategies_registered=load_strategies().count,
    )


@router.get("/strategies", response_model=StrategiesResponse)
async def strategies() -> StrategiesResponse:
    return StrategiesResponse(
        strategies=[
            StrategyInfo(
                name=spec.kind.value,
                display_name=spec.display_name,
                description=spec.description,
                needs_cluster_target=spec.needs_cluster_target,
            )
            for spec in load_strategies().all()
        ],
        default=DEFAULT_KIND.value,
    )
