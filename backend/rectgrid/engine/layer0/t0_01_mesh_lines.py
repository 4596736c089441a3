"""T0.01 — Mesh Lines. ★★★ ALWAYS FIRST

Compress every rectangle edge into two sorted, deduplicated mesh sets and
derive the Rows (from top/bottom) and Columns (from left/right) between
consecutive lines.
"""

from __future__ import annotations

from rectgrid.engine.config import PipelineConfig
from rectgrid.engine.context import GridContext
from rectgrid.engine.registry import Layer, transform
from rectgrid.utils.mesh import build_columns, build_rows


@transform(
    id="T0.01",
    layer=Layer.MESH,
    description="Build rows and columns from distinct edge coordinates",
)
def mesh_lines(ctx: GridContext, config: PipelineConfig) -> None:
    ctx.rows = build_rows(ctx.rectangles)
    ctx.columns = build_columns(ctx.rectangles)
