"""POST /api/fill — preprocess, fill and re-encode one image."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from holefill.engine.manager import create_manager
from holefill.engine.preprocessing import preprocess
from holefill.models.requests import FillRequest
from holefill.models.responses import FillResponse
from holefill.utils.imaging import decode_image_b64, encode_png_b64, grid_to_image

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/fill", response_model=FillResponse)
def fill(req: FillRequest) -> FillResponse:
    start = time.perf_counter()

    try:
        manager = create_manager(
            connectivity=req.connectivity,
            z=req.z,
            e=req.e,
            strategy=req.strategy,
            cluster_target=req.cluster_target,
        )
        image = decode_image_b64(req.image)
        mask = decode_image_b64(req.mask)
        processed = preprocess(image, mask, manager.connectivity)
        grid = manager.run(processed)
    except ValueError as e:
        logger.warning("Fill request rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000

    return FillResponse(
        image=encode_png_b64(grid_to_image(grid)),
        algorithm=manager.algorithm_name,
        holes_total=len(processed.holes),
        holes_unfilled=len(grid.unfilled()),
        boundary_size=len(processed.boundary),
        processing_time_ms=round(elapsed, 1),
    )
