"""Cell assignment by a coordinate-ordered sweep over the row/column mesh.

Rectangles are opened when the sweep reaches their top (row pass) and left
(column pass) edges and closed once the sweep passes their bottom and right
edges. A cell is owned by the lowest-id rectangle open in both passes.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from rectgrid.engine.context import EMPTY, Column, Rectangle, Row


def assign_cells(
    rows: Sequence[Row],
    columns: Sequence[Column],
    rectangles: Sequence[Rectangle],
) -> NDArray[np.int64]:
    """Return a rows×columns grid of owning rectangle ids (EMPTY where uncovered).

    Rows and columns must be the mesh built from the same rectangles, so every
    top edge starts a row and every left edge starts a column.
    """
    owners = np.full((len(rows), len(columns)), EMPTY, dtype=np.int64)

    # sorted() is stable, ties keep input (id) order
    by_top = sorted(rectangles, key=lambda r: r.top)
    by_left = sorted(rectangles, key=lambda r: r.left)

    top_idx = 0
    open_in_row: dict[int, Rectangle] = {}

    for i, row in enumerate(rows):
        while top_idx < len(by_top) and by_top[top_idx].top == row.top:
            rect = by_top[top_idx]
            open_in_row[rect.id] = rect
            top_idx += 1

        left_idx = 0
        open_in_cell: dict[int, Rectangle] = {}

        for j, column in enumerate(columns):
            while left_idx < len(by_left) and by_left[left_idx].left == column.left:
                rect = by_left[left_idx]
                if rect.id in open_in_row:
                    open_in_cell[rect.id] = rect
                left_idx += 1

            if open_in_cell:
                owners[i, j] = min(open_in_cell)

            open_in_cell = {
                rid: rect for rid, rect in open_in_cell.items() if rect.right > column.right
            }

        open_in_row = {
            rid: rect for rid, rect in open_in_row.items() if rect.bottom > row.bottom
        }

    return owners


def color_indices(owners: NDArray[np.int64], palette_size: int = 8) -> NDArray[np.int64]:
    """Map owner ids to palette slots (id mod palette_size), keeping EMPTY cells."""
    if palette_size <= 0:
        raise ValueError(f"palette_size must be positive, got {palette_size}")
    return np.where(owners == EMPTY, EMPTY, owners % palette_size).astype(np.int64)


def covering_rectangles(row: Row, column: Column, rectangles: Sequence[Rectangle]) -> list[int]:
    """Ids of every rectangle fully containing the cell ``row × column``."""
    return [r.id for r in rectangles if r.contains(row, column)]
