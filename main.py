"""Command-line entry point: price the fences of a garden grid."""

from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Sequence

from core import Grid
from loader import GridFormatError, load_grid, read_grid
from measurement import Analysis, analyze
from render import format_region, render_regions

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """What to read and how much to report."""

    input_path: str | None = None
    verbose: bool = False
    debug: bool = False
    color: bool = True
    log_level: str = "WARNING"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Split a grid of labels into regions and price their fences"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Grid file, one row per line (default: read standard input)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report area, perimeter and sides of every region",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Print the grid colored by region",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Disable ANSI colors in verbose and debug output",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        input_path=None if args.input in (None, "-") else args.input,
        verbose=args.verbose,
        debug=args.debug,
        color=args.color,
        log_level=args.log_level,
    )


def load_input(config: RunConfig) -> Grid:
    if config.input_path is None:
        return read_grid(sys.stdin)
    return load_grid(config.input_path)


def report(analysis: Analysis, config: RunConfig) -> None:
    if config.debug:
        print(
            render_regions(analysis.grid, analysis.region_map, color=config.color),
            file=sys.stderr,
        )
    print(f"Map has {len(analysis.regions)} contiguous regions", file=sys.stderr)
    if config.verbose:
        for region in analysis.regions:
            print(format_region(region, color=config.color), file=sys.stderr)

    print(f"Part 1 = {analysis.fence_price}")
    print(f"Part 2 = {analysis.discounted_fence_price}")


def main(argv: Sequence[str] | None = None) -> int:
    config = config_from_args(parse_args(argv))
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        grid = load_input(config)
    except GridFormatError as e:
        print(f"Invalid grid: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Cannot read grid: {e}", file=sys.stderr)
        return 1

    logger.info("loaded %dx%d grid", grid.width, grid.height)
    report(analyze(grid), config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
