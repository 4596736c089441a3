"""T1.01 — Cell Sweep. ★★★

Assign every (row, column) cell to the rectangle covering it, sweeping rows
top to bottom and columns left to right. Overlaps go to the lowest id.
"""

from __future__ import annotations

from rectgrid.engine.config import PipelineConfig
from rectgrid.engine.context import GridContext
from rectgrid.engine.registry import Layer, transform
from rectgrid.utils.sweep import assign_cells


@transform(
    id="T1.01",
    layer=Layer.ASSIGNMENT,
    dependencies=["T0.01"],
    description="Sweep the mesh and assign owners to cells",
)
def cell_sweep(ctx: GridContext, config: PipelineConfig) -> None:
    ctx.owners = assign_cells(ctx.rows, ctx.columns, ctx.rectangles)
