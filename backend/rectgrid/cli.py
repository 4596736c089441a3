"""
RectGrid CLI — renders a rectangle list as an HTML table.

Usage:
  rectgrid rectangles.txt grid.html            # writes the HTML table
  rectgrid rectangles.txt grid.html --ascii    # also prints a text preview
"""

from __future__ import annotations

import argparse
import logging

from rectgrid.config import settings
from rectgrid.engine.pipeline import PipelineError, create_pipeline
from rectgrid.formats.parser import RectangleFormatError, load_rectangles
from rectgrid.formats.serializer import write_html

logger = logging.getLogger(__name__)

USAGE = "Required arguments: <input file (txt)> <output file (html)>"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rectgrid",
        description="Render axis-aligned rectangles as a shaded HTML table",
    )
    parser.add_argument("input", nargs="?", help="Rectangle list (txt)")
    parser.add_argument("output", nargs="?", help="HTML file to write")
    parser.add_argument("--ascii", action="store_true", help="Also print the grid as text")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.rectgrid_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.input is None or args.output is None:
        print(USAGE)
        return

    try:
        ctx = load_rectangles(args.input)
    except (OSError, RectangleFormatError) as e:
        print(f"Unable to read input file {args.input}!")
        print(f"  {e}")
        logger.debug("Read failure", exc_info=True)
        return

    pipeline = create_pipeline(settings.pipeline_config())
    try:
        ctx = pipeline.run(ctx, strict=True)
    except PipelineError as e:
        print(f"Unable to build grid for {args.input}!")
        print(f"  {e}")
        return

    if args.ascii:
        print(ctx.ascii_grid)

    try:
        write_html(ctx, args.output)
    except OSError as e:
        print(f"Unable to write to output file {args.output}!")
        print(f"  {e}")
        logger.debug("Write failure", exc_info=True)
        return

    print(f"  → Saved: {args.output} ({len(ctx.rows)}×{len(ctx.columns)} cells)")


if __name__ == "__main__":
    main()
