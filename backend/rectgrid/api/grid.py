"""POST /api/grid and /api/render — run the pipeline on posted rectangles."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from rectgrid.config import Settings
from rectgrid.dependencies import get_settings
from rectgrid.engine.context import EMPTY, GridContext
from rectgrid.engine.pipeline import PipelineError, create_pipeline
from rectgrid.formats.serializer import serialize_html
from rectgrid.models.requests import GridRequest
from rectgrid.models.responses import GridResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _run(req: GridRequest, settings: Settings) -> GridContext:
    ctx = GridContext(rectangles=req.to_rectangles())
    pipeline = create_pipeline(settings.pipeline_config())
    try:
        return pipeline.run(ctx, strict=True)
    except PipelineError as e:
        logger.warning("Grid request failed: %s", e)
        raise HTTPException(status_code=500, detail=e.errors) from e


def _as_lists(grid) -> list[list[int | None]]:
    if grid is None:
        return []
    return [[None if v == EMPTY else int(v) for v in row] for row in grid.tolist()]


@router.post("/grid", response_model=GridResponse)
async def grid(req: GridRequest, settings: Settings = Depends(get_settings)) -> GridResponse:
    start = time.perf_counter()
    ctx = _run(req, settings)
    elapsed = (time.perf_counter() - start) * 1000

    return GridResponse(
        rows=[(r.top, r.bottom) for r in ctx.rows],
        columns=[(c.left, c.right) for c in ctx.columns],
        cells=_as_lists(ctx.colors),
        owners=_as_lists(ctx.owners),
        min_dimension=ctx.min_dimension,
        scale=ctx.scale,
        ascii_grid=ctx.ascii_grid,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/render", response_class=HTMLResponse)
async def render(req: GridRequest, settings: Settings = Depends(get_settings)) -> HTMLResponse:
    ctx = _run(req, settings)
    return HTMLResponse(content=serialize_html(ctx))
