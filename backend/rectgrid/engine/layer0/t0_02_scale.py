"""T0.02 — Render Scale.

Smallest rectangle dimension → pixels per coordinate unit. Only the HTML
serializer consumes the scale.
"""

from __future__ import annotations

import logging

from rectgrid.engine.config import PipelineConfig
from rectgrid.engine.context import GridContext
from rectgrid.engine.registry import Layer, transform
from rectgrid.utils.mesh import compute_scale, min_dimension

logger = logging.getLogger(__name__)


@transform(
    id="T0.02",
    layer=Layer.MESH,
    description="Compute minimum dimension and render scale",
)
def render_scale(ctx: GridContext, config: PipelineConfig) -> None:
    ctx.min_dimension = min_dimension(ctx.rectangles)
    if ctx.min_dimension is None:
        logger.info("No rectangles; using fallback scale %.2f", config.empty_scale)
    ctx.scale = compute_scale(ctx.min_dimension, config.unit_dimension, config.empty_scale)
