"""Grid to text rendering."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from rectgrid.engine.context import EMPTY


def _cell_char(value: int, empty: str) -> str:
    if value == EMPTY:
        return empty
    # Slots beyond 9 would need more than one character
    return str(value) if value < 10 else chr(ord("a") + value - 10)


def grid_to_text(grid: NDArray[np.int64], empty: str = ".") -> str:
    """Convert a color grid to a text representation."""
    rows = []
    for row in grid:
        rows.append(" ".join(_cell_char(int(cell), empty) for cell in row))
    return "\n".join(rows)
