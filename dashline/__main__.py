"""Debug console: dash an SVG file (or the sample path) and log every emission.

    python -m dashline drawing.svg --dasharray 4 2 --dashoffset 1 -o dashed.svg
    python -m dashline            # built-in sample path, pattern [1, 2]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dashline.config import settings
from dashline.engine.config import DasherConfig
from dashline.engine.dasher import dash_path
from dashline.engine.errors import DashError
from dashline.engine.pattern import DashPattern
from dashline.engine.pipeline import create_pipeline
from dashline.svg.events import PathBuilder, PathEvent
from dashline.svg.parser import parse_svg
from dashline.svg.serializer import serialize_dashed

logger = logging.getLogger("dashline")


def sample_path() -> list[PathEvent]:
    """Closed five-vertex outline used when no file is given."""
    return (
        PathBuilder()
        .begin((0.0, 0.0))
        .line_to((10.0, 0.0))
        .line_to((10.0, 10.0))
        .line_to((20.0, 10.0))
        .line_to((20.0, 1.5))
        .close()
        .build()
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dashline", description="Dashline: dash pattern to geometry")
    parser.add_argument("input", nargs="?", help="SVG file (omit for the sample path)")
    parser.add_argument("--dasharray", type=float, nargs="+", help="Override dash/gap lengths")
    parser.add_argument("--dashoffset", type=float, default=0.0, help="Offset for --dasharray")
    parser.add_argument("-o", "--output", help="Write the dashed SVG here")
    parser.add_argument("--duplicate-odd", action="store_true", help="Double odd-length dash arrays")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every dash and gap")
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.dashline_log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = DasherConfig.from_settings(settings)
    if args.duplicate_odd:
        config.duplicate_odd_patterns = True

    try:
        override = DashPattern(args.dashoffset, args.dasharray) if args.dasharray else None
    except DashError as e:
        logger.error("%s", e)
        return 2

    if not args.input:
        pattern = override or DashPattern(0.0, [1.0, 2.0])
        for item in dash_path(sample_path(), pattern, config):
            logger.info("Yield %s", item)
        return 0

    ctx = parse_svg(Path(args.input).read_text(encoding="utf-8"))
    ctx = create_pipeline(config).run(ctx, override=override)

    for el in ctx.elements:
        logger.info(
            "%s <%s>: %d dashes, dash %.3f + gap %.3f of %.3f",
            el.id,
            el.tag,
            el.dash_count,
            el.total_dash_length,
            el.total_gap_length,
            el.path_length,
        )
    for element_id, message in ctx.errors.items():
        logger.warning("%s: %s", element_id, message)

    if args.output:
        Path(args.output).write_text(serialize_dashed(ctx), encoding="utf-8")
        logger.info("Wrote %s", args.output)

    return 1 if ctx.errors else 0


if __name__ == "__main__":
    sys.exit(main())
