"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    strategies_registered: int = 0


class StrategyInfo(BaseModel):
    name: str
    display_name: str
    description: str = ""
    needs_cluster_target: bool = False


class StrategiesResponse(BaseModel):
    strategies: list[StrategyInfo] = Field(default_factory=list)
    default: str = "Exact"


class FillResponse(BaseModel):
    image: str = Field(..., description="Base64-encoded grayscale PNG")
    algorithm: str
    holes_total: int = 0
    holes_unfilled: int = 0
    boundary_size: int = 0
    processing_time_ms: float = 0.0
