"""FastAPI app factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from holefill import __version__
from holefill.config import Settings, configure_logging


def create_app(app_settings: Settings | None = None) -> FastAPI:
    if app_settings is None:
        from holefill.config import settings as app_settings

    configure_logging(app_settings.log_level)

    app = FastAPI(
        title="holefill",
        description="Boundary-weighted hole filling for grayscale images",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    from holefill.api.router import api_router
    from holefill.engine.registry import load_strategies

    load_strategies()
    app.include_router(api_router)

    return app


app = create_app()
