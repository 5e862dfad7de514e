"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FillRequest(BaseModel):
    """Omitted parameters fall back to the HOLEFILL_DEFAULT_* settings."""

    image: str = Field(..., description="Base64-encoded image (PNG/JPEG, data URL allowed)")
    mask: str = Field(..., description="Base64-encoded mask; pixels darker than 50% gray are holes")
    connectivity: int | None = Field(default=None, description="Pixel connectivity: 4 or 8")
    z: float | None = Field(default=None, description="Distance exponent of the weight function")
    e: float | None = Field(default=None, description="Epsilon of the weight function (> 0)")
    strategy: str | None = Field(default=None, description="Exact or Approximate")
    cluster_target: int | None = Field(
        default=None,
        description="Boundary cluster target for Approximate (default: connectivity)",
    )
