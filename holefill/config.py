"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Algorithm defaults
    default_connectivity: int = 8
    default_z: float = 3.0
    default_e: float = 0.01
    default_strategy: str = "Exact"
    default_cluster_target: int | None = None

    # Output naming: image.png -> image_FILLED.png
    output_suffix: str = "_FILLED"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "HOLEFILL_"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
