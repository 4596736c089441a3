"""Shared test fixtures."""

from __future__ import annotations

import pytest

from rectgrid.engine.context import GridContext, make_rectangles
from rectgrid.engine.pipeline import create_pipeline


# Sample inputs in the rectangle list format

SINGLE_TXT = """1
0 0 10 10
"""

SIDE_BY_SIDE_TXT = """2
0 0 10 10
0 10 10 20
"""

EMPTY_TXT = "0\n"

IDENTICAL_TXT = """2
0 0 10 10
0 0 10 10
"""

# Overlapping, nested and disjoint rectangles with shared edges
MIXED_TXT = """5
0 0 30 40
10 10 20 20
5 30 25 60
40 0 50 10
40 10 50 60
"""

# More rectangles than palette slots
MANY_TXT = "10\n" + "\n".join(f"0 {10 * i} 5 {10 * i + 10}" for i in range(10)) + "\n"


@pytest.fixture
def single_txt() -> str:
    return SINGLE_TXT


@pytest.fixture
def side_by_side_txt() -> str:
    return SIDE_BY_SIDE_TXT


@pytest.fixture
def empty_txt() -> str:
    return EMPTY_TXT


@pytest.fixture
def identical_txt() -> str:
    return IDENTICAL_TXT


@pytest.fixture
def mixed_txt() -> str:
    return MIXED_TXT


@pytest.fixture
def many_txt() -> str:
    return MANY_TXT


@pytest.fixture
def mixed_bounds() -> list[tuple[int, int, int, int]]:
    return [
        (0, 0, 30, 40),
        (10, 10, 20, 20),
        (5, 30, 25, 60),
        (40, 0, 50, 10),
        (40, 10, 50, 60),
    ]


@pytest.fixture
def input_file(tmp_path):
    """Write text to an input file and return its path."""

    def _write(text: str, name: str = "rectangles.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def run_grid():
    """Run the full pipeline over (top, left, bottom, right) tuples."""

    def _run(bounds: list[tuple[int, int, int, int]]) -> GridContext:
        ctx = GridContext(rectangles=make_rectangles(bounds))
        return create_pipeline().run(ctx, strict=True)

    return _run
