"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class GridResponse(BaseModel):
    rows: list[tuple[int, int]] = Field(default_factory=list, description="(top, bottom) per row")
    columns: list[tuple[int, int]] = Field(default_factory=list, description="(left, right) per column")
    cells: list[list[int | None]] = Field(default_factory=list, description="Color index or null")
    owners: list[list[int | None]] = Field(default_factory=list, description="Owning rectangle id or null")
    min_dimension: int | None = None
    scale: float = 1.0
    ascii_grid: str = ""
    processing_time_ms: float = 0.0
