"""RectGrid mesh and cell-assignment engine."""

from rectgrid.engine.registry import transform, Layer, get_registry, register_transforms
from rectgrid.engine.context import EMPTY, Column, GridContext, Rectangle, Row
from rectgrid.engine.pipeline import Pipeline, PipelineError, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "register_transforms",
    "EMPTY",
    "Column",
    "GridContext",
    "Rectangle",
    "Row",
    "Pipeline",
    "PipelineError",
    "create_pipeline",
]
