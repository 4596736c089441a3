"""Rectangle list parser — whitespace-separated integers into a GridContext.

Format: a count N followed by N groups of ``top left bottom right``. Tokens
after the last group are ignored.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from rectgrid.engine.context import GridContext, Rectangle

logger = logging.getLogger(__name__)

_FIELDS = ("top", "left", "bottom", "right")

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Coordinates are stored in int64 grids
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class RectangleFormatError(ValueError):
    """Input text does not follow the rectangle list format."""


def _to_int(token: str, what: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise RectangleFormatError(f"Expected an integer for {what}, got {token!r}")
    value = int(token)
    if not INT64_MIN <= value <= INT64_MAX:
        raise RectangleFormatError(f"Value for {what} is out of range: {token}")
    return value


def parse_rectangles(text: str) -> list[Rectangle]:
    """Parse the rectangle list format. Ids follow input order from 0."""
    tokens = text.split()
    if not tokens:
        raise RectangleFormatError("Input is empty: expected a rectangle count")

    count = _to_int(tokens[0], "rectangle count")
    if count < 0:
        raise RectangleFormatError(f"Rectangle count must not be negative, got {count}")

    needed = 1 + 4 * count
    if len(tokens) < needed:
        raise RectangleFormatError(
            f"Expected {4 * count} coordinates for {count} rectangles, got {len(tokens) - 1}"
        )
    if len(tokens) > needed:
        logger.debug("Ignoring %d trailing tokens", len(tokens) - needed)

    rectangles = []
    for i in range(count):
        base = 1 + 4 * i
        top, left, bottom, right = (
            _to_int(tokens[base + k], f"rectangle {i} {name}") for k, name in enumerate(_FIELDS)
        )
        rectangles.append(Rectangle(id=i, top=top, left=left, bottom=bottom, right=right))
    return rectangles


def parse_input(text: str) -> GridContext:
    """Parse raw input text into a GridContext."""
    ctx = GridContext(rectangles=parse_rectangles(text))
    logger.info("Parsed input: %d rectangles", ctx.num_rectangles)
    return ctx


def load_rectangles(path: str | Path) -> GridContext:
    """Read and parse an input file. Raises OSError or RectangleFormatError."""
    with open(path, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise RectangleFormatError(f"Input is not valid UTF-8 text: {e}") from e
    return parse_input(text)
