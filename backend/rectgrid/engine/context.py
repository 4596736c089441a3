"""GridContext — the single mutable state object flowing through all transforms.

Input rectangles → GridContext.rectangles
Mesh results → GridContext.rows / columns / scale
Sweep results → GridContext.owners / colors
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

# Marker for a cell no rectangle covers (in both the owners and colors grids)
EMPTY = -1


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned integer rectangle. ``id`` follows input order from 0."""

    id: int
    top: int
    left: int
    bottom: int
    right: int

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def width(self) -> int:
        return self.right - self.left

    def contains(self, row: Row, column: Column) -> bool:
        """True if the cell ``row × column`` lies fully inside this rectangle."""
        return (
            self.top <= row.top
            and row.bottom <= self.bottom
            and self.left <= column.left
            and column.right <= self.right
        )


@dataclass(frozen=True)
class Row:
    top: int
    bottom: int

    @property
    def height(self) -> int:
        return self.bottom - self.top


@dataclass(frozen=True)
class Column:
    left: int
    right: int

    @property
    def width(self) -> int:
        return self.right - self.left


@dataclass
class GridContext:
    """Shared state flowing through the entire pipeline."""

    # Input rectangles, ids 0..N-1 in input order
    rectangles: list[Rectangle] = field(default_factory=list)

    # --- Mesh (populated by Layer 0) ---
    rows: list[Row] = field(default_factory=list)
    columns: list[Column] = field(default_factory=list)
    # Smallest height/width over all rectangles; None without rectangles
    min_dimension: int | None = None
    # Pixels per coordinate unit, consumed by the HTML serializer
    scale: float = 1.0

    # --- Cell assignment (populated by Layer 1) ---
    # owners[i, j] = id of the rectangle owning cell (i, j), or EMPTY
    owners: NDArray[np.int64] | None = None
    # colors[i, j] = palette slot of the owner, or EMPTY
    colors: NDArray[np.int64] | None = None

    # --- Layer 2 visualizations ---
    ascii_grid: str = ""

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_rectangles(self) -> int:
        return len(self.rectangles)

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.rows), len(self.columns))

    @property
    def bounding_box(self) -> tuple[int, int, int, int] | None:
        """(top, left, bottom, right) spanned by the mesh, or None if empty."""
        if not self.rows or not self.columns:
            return None
        return (
            self.rows[0].top,
            self.columns[0].left,
            self.rows[-1].bottom,
            self.columns[-1].right,
        )

    def color_at(self, i: int, j: int) -> int | None:
        if self.colors is None:
            return None
        value = int(self.colors[i, j])
        return None if value == EMPTY else value

    def owner_at(self, i: int, j: int) -> Rectangle | None:
        if self.owners is None:
            return None
        value = int(self.owners[i, j])
        return None if value == EMPTY else self.rectangles[value]


def make_rectangles(bounds: list[tuple[int, int, int, int]]) -> list[Rectangle]:
    """Build rectangles from (top, left, bottom, right) tuples, assigning ids in order."""
    return [
        Rectangle(id=i, top=top, left=left, bottom=bottom, right=right)
        for i, (top, left, bottom, right) in enumerate(bounds)
    ]
