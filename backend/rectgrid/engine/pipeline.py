"""Pipeline orchestrator — runs transforms in dependency order."""

from __future__ import annotations

import logging
import time

from rectgrid.engine.config import PipelineConfig
from rectgrid.engine.context import GridContext
from rectgrid.engine.registry import Layer, TransformRegistry, get_registry, register_transforms

logger = logging.getLogger(__name__)


class PipelineError(RuntimeError):
    """Raised by a strict run when one or more transforms failed."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        details = "; ".join(f"{tid}: {msg}" for tid, msg in sorted(self.errors.items()))
        super().__init__(f"{len(self.errors)} transform(s) failed: {details}")


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: GridContext, strict: bool = False) -> GridContext:
        """Run the full pipeline on the given context.

        Failed transforms are recorded in ``ctx.errors``. With ``strict`` the
        run raises :class:`PipelineError` once all transforms have been tried.
        """
        start = time.perf_counter()

        ordered = self.registry.resolve_order()

        logger.info(
            "Pipeline: %d transforms queued for %d rectangles",
            len(ordered),
            ctx.num_rectangles,
        )

        for spec in ordered:
            if any(dep in ctx.errors for dep in spec.dependencies):
                ctx.errors[spec.id] = "skipped: a dependency failed"
                logger.warning("  %s SKIPPED: dependency failed", spec.id)
                continue
            t0 = time.perf_counter()
            try:
                spec.fn(ctx, self.config)
                ctx.completed_transforms.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms (grid %d×%d)",
            len(ctx.completed_transforms),
            len(ordered),
            total,
            len(ctx.rows),
            len(ctx.columns),
        )

        if strict and ctx.errors:
            raise PipelineError(ctx.errors)
        return ctx

    def run_layer(self, ctx: GridContext, layer: Layer) -> GridContext:
        """Run only transforms in a specific layer."""
        specs = self.registry.get_layer(layer)
        for spec in specs:
            try:
                spec.fn(ctx, self.config)
                ctx.completed_transforms.add(spec.id)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
        return ctx


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance with all transforms loaded."""
    register_transforms()
    return Pipeline(config=config)
