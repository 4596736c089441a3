"""Write the HTML table document for a computed grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from pathlib import Path

from rectgrid.engine.context import GridContext

# One background color per palette slot (color index = rectangle id mod 8)
DEFAULT_PALETTE: tuple[str, ...] = (
    "#e6194b",
    "#3cb44b",
    "#ffe119",
    "#4363d8",
    "#f58231",
    "#911eb4",
    "#46f0f0",
    "#f032e6",
)

BORDER_COLOR = "#000"

_FOOTER = """</table>
</body>
</html>"""


def to_pixels(extent: int, scale: float) -> int:
    """Scaled extent rounded half up to whole pixels."""
    return int(math.floor(extent * scale + 0.5))


def _header(palette: Sequence[str], border: str) -> str:
    lines = [
        "<html>",
        "<head>",
        "    <style>",
        f"        tr {{ border: 1px solid {border}; }}",
        f"        td {{ border: 1px solid {border}; }}",
    ]
    for slot, color in enumerate(palette):
        lines.append(f"        td.filled{slot} {{ background-color: {color}; }}")
    lines += [
        "    </style>",
        "</head>",
        "<body>",
        f'<table style="border-collapse: collapse; border: 1px solid {border};">',
    ]
    return "\n".join(lines)


def serialize_html(
    ctx: GridContext,
    palette: Sequence[str] = DEFAULT_PALETTE,
    border: str = BORDER_COLOR,
) -> str:
    """Generate the HTML document: one <tr> per row, one <td> per column."""
    if ctx.colors is not None and ctx.colors.size and int(ctx.colors.max()) >= len(palette):
        raise ValueError(
            f"Palette has {len(palette)} colors but the grid uses slot {int(ctx.colors.max())}"
        )

    lines = [_header(palette, border)]

    for i, row in enumerate(ctx.rows):
        lines.append(f'<tr style="height: {to_pixels(row.height, ctx.scale)}px">')
        for j, column in enumerate(ctx.columns):
            width = to_pixels(column.width, ctx.scale)
            color = ctx.color_at(i, j)
            css_class = f' class="filled{color}"' if color is not None else ""
            lines.append(f'<td style="width: {width}px"{css_class}>&nbsp;</td>')
        lines.append("</tr>")

    lines.append(_FOOTER)
    return "\n".join(lines) + "\n"


def write_html(
    ctx: GridContext,
    path: str | Path,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> None:
    """Serialize and write the document. Raises OSError if the path is unwritable."""
    document = serialize_html(ctx, palette)
    with open(path, "w", encoding="utf-8") as f:
        f.write(document)
