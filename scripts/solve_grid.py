#!/usr/bin/env python3
"""
Solve a shortest path on an 8-connected grid.

Usage:
    python scripts/solve_grid.py --start 0,0 --finish 4,4
    python scripts/solve_grid.py --width 5 --height 5 --start 0,0 --finish 4,4 --wall 2,1 --wall 2,2
    python scripts/solve_grid.py --start 0,0 --finish 9,9 --frontier heap -v

Cells are given as x,y with x the column and y the row, both from 0.
Straight steps cost 1, diagonal steps cost sqrt(2).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from gridpath import config  # noqa: E402 - must be after sys.path modification and .env loading
from gridpath.graph import GraphError  # noqa: E402
from gridpath.session import GridSession  # noqa: E402


def parse_cell(text: str) -> tuple[int, int]:
    """Parse 'x,y' into a coordinate pair."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}") from None
    return x, y


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the shortest path between two cells of a grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--width",
        type=int,
        default=config.DEFAULT_GRID_WIDTH,
        help=f"Grid width (default: {config.DEFAULT_GRID_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=config.DEFAULT_GRID_HEIGHT,
        help=f"Grid height (default: {config.DEFAULT_GRID_HEIGHT})",
    )
    parser.add_argument(
        "--start",
        type=parse_cell,
        required=True,
        help="Start cell as x,y",
    )
    parser.add_argument(
        "--finish",
        type=parse_cell,
        required=True,
        help="Finish cell as x,y",
    )
    parser.add_argument(
        "--wall",
        type=parse_cell,
        action="append",
        default=[],
        help="Wall cell as x,y (repeatable)",
    )
    parser.add_argument(
        "--frontier",
        choices=config.FRONTIER_STRATEGIES,
        default=config.FRONTIER_STRATEGY,
        help=f"Frontier strategy (default: {config.FRONTIER_STRATEGY})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )

    try:
        session = GridSession(args.width, args.height, frontier=args.frontier)
        for x, y in args.wall:
            if not session.is_wall(x, y):
                session.toggle_wall(x, y)
        session.set_start(*args.start)
        session.set_finish(*args.finish)
        result = session.solve()
    except (GraphError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f"Grid:   {args.width}x{args.height}, {len(args.wall)} walls")
    print(f"Start:  {args.start}")
    print(f"Finish: {args.finish}")
    print("=" * 60)

    if not result.found:
        print("\nNo path.")
        print(f"Visited {result.visited_count} cells")
        return 1

    print("\nPath:")
    for i, (x, y) in enumerate(result.coordinates()):
        marker = " (START)" if i == 0 else " (FINISH)" if (x, y) == args.finish else ""
        print(f"  {i}. ({x}, {y}){marker}")

    print(f"\nDistance: {result.distance:.4f}")
    print(f"Visited {result.visited_count} cells")
    return 0


if __name__ == "__main__":
    sys.exit(main())
