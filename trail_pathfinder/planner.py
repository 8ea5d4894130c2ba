# region Imports
import logging
import math
from typing import List, Sequence

from .astar_core import astar, euclid
from .config import (
    CELL_BUFFER_FACTOR,
    CURVE_BUFFER,
    GRID_BOUNDS,
    GRID_SIZE,
    MAX_GRID_BOUNDS,
    MAX_ITERATIONS,
    SEGMENT_BUFFER,
    WALKING_SPEED,
)
from .costs import edge_cost_factory
from .curves import curve_path
from .grid import BlockedGrid, grid_to_world, in_bounds, neighbors_8, world_to_grid
from .metrics import format_distance, format_time, path_length, travel_time
from .models import Obstacle, Path, Point2D, RouteResult, SearchResult
from .obstacles import normalize_obstacles
from .smoothing import reduce_path
# endregion

logger = logging.getLogger(__name__)


# region Validation
def _check_point(name: str, p: Point2D) -> None:
    if not (math.isfinite(p.x) and math.isfinite(p.z)):
        raise ValueError(f"{name} has non-finite coordinates: {p!r}")


def _check_search_params(grid_size: float, bounds: int, max_iterations: int) -> None:
    if not (math.isfinite(grid_size) and grid_size > 0):
        raise ValueError(f"grid_size must be a positive finite number, got {grid_size!r}")
    if not 1 <= bounds <= MAX_GRID_BOUNDS:
        raise ValueError(f"bounds must be in [1, {MAX_GRID_BOUNDS}], got {bounds!r}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations!r}")
# endregion

# region Helpers
def _dedupe(path: Sequence[Point2D]) -> Path:
    out: Path = []
    for p in path:
        if not out or out[-1] != p:
            out.append(p)
    return out


def _fallback(start: Point2D, end: Point2D, expansions: int, reason: str) -> SearchResult:
    logger.warning("No path found (%s) after %d expansions; using direct segment", reason, expansions)
    path = _dedupe([start, end])
    cost = math.hypot(end.x - start.x, end.z - start.z)
    return SearchResult(path=path, cost=cost, expansions=expansions, found=False)
# endregion

# region Grid Search
def search_with_stats(
    start: Point2D,
    end: Point2D,
    obstacles: Sequence[Obstacle],
    grid_size: float = GRID_SIZE,
    bounds: int = GRID_BOUNDS,
    max_iterations: int = MAX_ITERATIONS,
) -> SearchResult:
    _check_point("start", start)
    _check_point("end", end)
    _check_search_params(grid_size, bounds, max_iterations)

    if start == end:
        return SearchResult(path=[start], cost=0.0, expansions=0, found=True)

    obstacles = normalize_obstacles(obstacles)
    s_cell = world_to_grid(start, grid_size)
    t_cell = world_to_grid(end, grid_size)

    if not in_bounds(t_cell, bounds):
        return _fallback(start, end, 0, f"goal cell {t_cell} outside bounds {bounds}")

    grid = BlockedGrid(obstacles, grid_size, bounds, buffer=CELL_BUFFER_FACTOR * grid_size)
    if grid.is_blocked(t_cell):
        return _fallback(start, end, 0, f"goal cell {t_cell} is blocked")

    cells, _, expansions, _ = astar(
        start=s_cell,
        goal=t_cell,
        neighbors_fn=lambda u: neighbors_8(u, bounds),
        edge_cost_fn=edge_cost_factory(grid),
        heuristic_fn=euclid,
        max_expansions=max_iterations,
    )
    if cells is None:
        return _fallback(start, end, expansions, f"blocked ratio {grid.blocked_ratio:.1%}")

    # exact endpoints replace their snapped cells
    points: List[Point2D] = [start] + [grid_to_world(c, grid_size) for c in cells[1:-1]] + [end]
    logger.debug("A* reached goal: %d cells, %d expansions", len(cells), expansions)
    points = _dedupe(points)
    return SearchResult(path=points, cost=path_length(points), expansions=expansions, found=True)


def search(
    start: Point2D,
    end: Point2D,
    obstacles: Sequence[Obstacle],
    grid_size: float = GRID_SIZE,
    bounds: int = GRID_BOUNDS,
    max_iterations: int = MAX_ITERATIONS,
) -> Path:
    return search_with_stats(start, end, obstacles, grid_size, bounds, max_iterations).path
# endregion

# region Full Pipeline
def plan_route(
    start: Point2D,
    end: Point2D,
    obstacles: Sequence[Obstacle],
    grid_size: float = GRID_SIZE,
    bounds: int = GRID_BOUNDS,
    max_iterations: int = MAX_ITERATIONS,
    speed: float = WALKING_SPEED,
) -> RouteResult:
    """search -> reduce -> curve -> metrics."""
    obstacles = normalize_obstacles(obstacles)
    result = search_with_stats(start, end, obstacles, grid_size, bounds, max_iterations)
    # raw cells are only guaranteed CELL_BUFFER_FACTOR * grid_size of clearance
    clearance = CELL_BUFFER_FACTOR * grid_size
    reduced = reduce_path(result.path, obstacles, buffer=min(SEGMENT_BUFFER, clearance))
    curved = curve_path(reduced, obstacles, buffer=min(CURVE_BUFFER, clearance))
    logger.info("Path: %d raw, %d reduced, %d curved (%d expansions)",
                len(result.path), len(reduced), len(curved), result.expansions)

    seconds = travel_time(curved, speed)
    return RouteResult(
        raw=result.path,
        reduced=reduced,
        curved=curved,
        distance=path_length(curved),
        travel_time=seconds,
        time_label=format_time(seconds),
        distance_label=format_distance(curved),
        expansions=result.expansions,
        found=result.found,
    )
# endregion
