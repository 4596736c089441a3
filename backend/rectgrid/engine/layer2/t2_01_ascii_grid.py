"""T2.01 — ASCII Grid.

One character per cell: the palette slot digit, or "." when empty. Cells are
not scaled, so narrow and wide columns look alike.
"""

from __future__ import annotations

from rectgrid.engine.config import PipelineConfig
from rectgrid.engine.context import GridContext
from rectgrid.engine.registry import Layer, transform
from rectgrid.utils.text import grid_to_text


@transform(
    id="T2.01",
    layer=Layer.VISUALIZATION,
    dependencies=["T1.02"],
    description="Render the color grid as text",
)
def ascii_grid(ctx: GridContext, config: PipelineConfig) -> None:
    if ctx.colors is None:
        return
    ctx.ascii_grid = grid_to_text(ctx.colors)
