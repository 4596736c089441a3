"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from rectgrid.engine.config import PipelineConfig


class Settings(BaseSettings):
    rectgrid_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    rectgrid_unit_dimension: float = 100.0
    rectgrid_empty_scale: float = 1.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def pipeline_config(self) -> PipelineConfig:
        return PipelineConfig(
            unit_dimension=self.rectgrid_unit_dimension,
            empty_scale=self.rectgrid_empty_scale,
        )


settings = Settings()
