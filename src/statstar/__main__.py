"""
Command-line interface.

Usage:
    $ python -m statstar physical=12 mental=3 --tooltip physical -o star.svg
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from statstar.engine.pipeline import update_star
from statstar.engine.tooltip import describe_tooltip
from statstar.logging_config import setup_logging
from statstar.model.stats import STAT_ORDER, StatId, StatValues
from statstar.render.base import StarRenderer
from statstar.render.svg import SvgRenderer

logger = logging.getLogger(__name__)


def parse_stat(token: str) -> tuple[str, int]:
    """'physical=12' -> ('physical', 12); raises ArgumentTypeError otherwise."""
    name, sep, raw = token.partition("=")
    name = name.strip().lower()
    if not sep or name not in {s.value for s in STAT_ORDER}:
        raise argparse.ArgumentTypeError(
            f"expected <stat>=<points> with stat one of {', '.join(s.value for s in STAT_ORDER)}, got '{token}'"
        )
    try:
        return name, int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"points for '{name}' must be an integer, got '{raw}'")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statstar",
        description="Render five stat totals as a layered star (SVG).",
    )
    parser.add_argument(
        "stats",
        nargs="*",
        type=parse_stat,
        metavar="STAT=POINTS",
        help="stat totals, e.g. physical=12 (missing stats are 0)",
    )
    parser.add_argument("-o", "--output", help="write the SVG here instead of stdout")
    parser.add_argument(
        "--tooltip",
        choices=[s.value for s in STAT_ORDER],
        help="show the label of one arm",
    )
    parser.add_argument("--no-guides", action="store_true", help="omit the reference circles and spokes")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    stats = StatValues.from_mapping(dict(args.stats))
    scene = update_star(stats)

    renderer: StarRenderer = SvgRenderer(show_guides=not args.no_guides)
    if args.tooltip:
        renderer.show_tooltip(describe_tooltip(scene.point_for(StatId(args.tooltip))))
    document = renderer.render(scene)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(document + "\n")
        logger.info(f"Star written to: {args.output}")
    else:
        sys.stdout.write(document + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
