"""T1.02 — Color Index.

Owner id mod palette size. Colors are a visual hint; distinct rectangles may
share a slot.
"""

from __future__ import annotations

from rectgrid.engine.config import PipelineConfig
from rectgrid.engine.context import GridContext
from rectgrid.engine.registry import Layer, transform
from rectgrid.utils.sweep import color_indices


@transform(
    id="T1.02",
    layer=Layer.ASSIGNMENT,
    dependencies=["T1.01"],
    description="Map cell owners to palette slots",
)
def color_index(ctx: GridContext, config: PipelineConfig) -> None:
    if ctx.owners is None:
        return
    ctx.colors = color_indices(ctx.owners, config.palette_size)
