"""Leaf-node mesh helpers: coordinate compression into rows and columns. No pipeline imports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from rectgrid.engine.context import Column, Rectangle, Row


def mesh_lines(values: Iterable[int]) -> NDArray[np.int64]:
    """Sorted, deduplicated coordinates. Coincident edges collapse into one line."""
    return np.unique(np.fromiter(values, dtype=np.int64))


def intervals(lines: NDArray[np.int64]) -> list[tuple[int, int]]:
    """Pairs of consecutive mesh lines, in ascending order."""
    return [(int(a), int(b)) for a, b in zip(lines[:-1], lines[1:])]


def build_rows(rectangles: Sequence[Rectangle]) -> list[Row]:
    """Partition the vertical extent at every distinct top/bottom edge."""
    lines = mesh_lines(v for r in rectangles for v in (r.top, r.bottom))
    return [Row(top, bottom) for top, bottom in intervals(lines)]


def build_columns(rectangles: Sequence[Rectangle]) -> list[Column]:
    """Partition the horizontal extent at every distinct left/right edge."""
    lines = mesh_lines(v for r in rectangles for v in (r.left, r.right))
    return [Column(left, right) for left, right in intervals(lines)]


def min_dimension(rectangles: Sequence[Rectangle]) -> int | None:
    """Smallest height or width over all rectangles, or None if there are none."""
    if not rectangles:
        return None
    return min(min(r.height, r.width) for r in rectangles)


def compute_scale(
    min_dim: int | None,
    unit_dimension: float = 100.0,
    empty_scale: float = 1.0,
) -> float:
    """Pixels per coordinate unit so the smallest dimension spans ``unit_dimension``."""
    if min_dim is None:
        return empty_scale
    if min_dim <= 0:
        raise ValueError(f"Degenerate rectangle: minimum dimension is {min_dim}")
    return unit_dimension / min_dim
