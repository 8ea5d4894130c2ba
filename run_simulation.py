# region Header
"""
run_simulation.py — route planning through a synthetic building layout

Requires:
  pip install numpy matplotlib
"""
# endregion

# region Imports
import argparse
import logging
import sys
from typing import List, Optional

from trail_pathfinder.config import (
    GRID_BOUNDS, GRID_SIZE, MAX_ITERATIONS,
    LAYOUT_AREA, LAYOUT_COUNT, LAYOUT_GUTTER, LAYOUT_MAX_SIZE, LAYOUT_MIN_SIZE,
)
from trail_pathfinder.layout import generate_layout
from trail_pathfinder.models import Point2D
from trail_pathfinder.planner import plan_route
# endregion

# region Argument Parsing
def parse_xz(text: str) -> Point2D:
    try:
        x, z = [float(t) for t in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected 'x,z', got {text!r}")
    return Point2D(x, z)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plan a route through a generated building layout.")
    parser.add_argument("--seed", type=int, default=0, help="Layout RNG seed.")
    parser.add_argument("--count", type=int, default=LAYOUT_COUNT, help="Buildings to place.")
    parser.add_argument("--area", type=float, default=LAYOUT_AREA, help="Side of the square layout area.")
    parser.add_argument("--min-size", type=float, default=LAYOUT_MIN_SIZE)
    parser.add_argument("--max-size", type=float, default=LAYOUT_MAX_SIZE)
    parser.add_argument("--gutter", type=float, default=LAYOUT_GUTTER, help="Street gutter / spacing margin.")
    parser.add_argument("--start", type=parse_xz, default=Point2D(0.0, 0.0), help="Start as 'x,z'.")
    parser.add_argument("--end", type=parse_xz, default=Point2D(40.0, 40.0), help="Goal as 'x,z'.")
    parser.add_argument("--grid-size", type=float, default=GRID_SIZE)
    parser.add_argument("--bounds", type=int, default=GRID_BOUNDS)
    parser.add_argument("--max-iterations", type=int, default=MAX_ITERATIONS)
    parser.add_argument("--plot", action="store_true", help="Show a matplotlib preview.")
    parser.add_argument("--verbose", action="store_true", help="Log planner details.")
    return parser
# endregion

# region Main
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        buildings = generate_layout(args.count, args.area, args.min_size, args.max_size,
                                    args.gutter, rng=args.seed)
        print(f"Placed {len(buildings)}/{args.count} buildings (seed={args.seed})")

        route = plan_route(args.start, args.end, buildings, grid_size=args.grid_size,
                           bounds=args.bounds, max_iterations=args.max_iterations)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    status = "found" if route.found else "fallback (direct line)"
    print(f"Path {status}: {len(route.raw)} raw, {len(route.reduced)} reduced, "
          f"{len(route.curved)} curved | {route.expansions} expansions")
    print(f"Distance: {route.distance_label} | ETA: {route.time_label}")

    if args.plot:
        from trail_pathfinder.viz import show_route
        show_route(buildings, raw=route.raw, route=route.curved,
                   title=f"Route ({len(buildings)} buildings, seed {args.seed})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
# endregion
