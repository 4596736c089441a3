"""Pipeline configuration — rendering scale and palette sizing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls the constants the transforms depend on."""

    # Pixel size given to the smallest rectangle dimension
    unit_dimension: float = 100.0

    # Number of palette slots; color index = rectangle id mod palette_size
    palette_size: int = 8

    # Scale used when there are no rectangles to measure
    empty_scale: float = 1.0
