# region Imports
import math
from typing import Iterable, Sequence

import numpy as np

from .config import MIN_SEGMENT_STEPS, SEGMENT_BUFFER, SEGMENT_STEPS, WORLD_SCALE
from .models import Circle, Obstacle, Point2D, Point3D, RotatedRect
# endregion

# region Distances
def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b.x - a.x, b.z - a.z)
# endregion

# region Obstacle Predicates
def is_degenerate(obstacle: Obstacle) -> bool:
    """Zero-area obstacles never block anything."""
    if isinstance(obstacle, Circle):
        return not obstacle.radius > 0
    if isinstance(obstacle, RotatedRect):
        return not (obstacle.width > 0 and obstacle.depth > 0)
    raise TypeError(f"Unsupported obstacle type: {type(obstacle).__name__}")


def blocks(point: Point2D, obstacle: Obstacle, buffer: float = 0.0) -> bool:
    if is_degenerate(obstacle):
        return False

    dx = point.x - obstacle.center.x
    dz = point.z - obstacle.center.z
    if isinstance(obstacle, Circle):
        return math.hypot(dx, dz) < obstacle.radius + buffer

    # inverse rotation into the rectangle's local frame
    cos = math.cos(-obstacle.rotation)
    sin = math.sin(-obstacle.rotation)
    local_x = dx * cos - dz * sin
    local_z = dx * sin + dz * cos
    return (abs(local_x) <= obstacle.width / 2 + buffer
            and abs(local_z) <= obstacle.depth / 2 + buffer)


def blocked_by_any(point: Point2D, obstacles: Iterable[Obstacle], buffer: float = 0.0) -> bool:
    return any(blocks(point, obs, buffer) for obs in obstacles)


def blocked_mask(xs, zs, obstacles: Iterable[Obstacle], buffer: float = 0.0) -> np.ndarray:
    """
    Vectorized `blocks` over coordinate arrays (broadcast together).
    Returns a boolean array, True where any obstacle blocks.
    """
    xs = np.asarray(xs, dtype=np.float64)
    zs = np.asarray(zs, dtype=np.float64)
    mask = np.zeros(np.broadcast(xs, zs).shape, dtype=bool)

    for obs in obstacles:
        if is_degenerate(obs):
            continue
        dx = xs - obs.center.x
        dz = zs - obs.center.z
        if isinstance(obs, Circle):
            mask |= np.hypot(dx, dz) < obs.radius + buffer
            continue
        cos = math.cos(-obs.rotation)
        sin = math.sin(-obs.rotation)
        local_x = dx * cos - dz * sin
        local_z = dx * sin + dz * cos
        mask |= ((np.abs(local_x) <= obs.width / 2 + buffer)
                 & (np.abs(local_z) <= obs.depth / 2 + buffer))
    return mask
# endregion

# region Segment Clearance
def min_extent(obstacles: Iterable[Obstacle], buffer: float = 0.0) -> float:
    """Smallest buffered footprint dimension; inf when nothing can block."""
    best = math.inf
    for obs in obstacles:
        if is_degenerate(obs):
            continue
        if isinstance(obs, Circle):
            size = 2.0 * obs.radius
        else:
            size = min(obs.width, obs.depth)
        best = min(best, size + 2.0 * buffer)
    return best


def sample_count(a: Point2D, b: Point2D, obstacles: Sequence[Obstacle],
                 buffer: float = 0.0, steps: int = SEGMENT_STEPS) -> int:
    n = max(int(steps), MIN_SEGMENT_STEPS)
    extent = min_extent(obstacles, buffer)
    if math.isfinite(extent) and extent > 0:
        # keep adjacent samples closer than half the thinnest footprint
        n = max(n, int(math.ceil(distance(a, b) / (extent / 2.0))))
    return n


def segment_clear(
    a: Point2D,
    b: Point2D,
    obstacles: Sequence[Obstacle],
    buffer: float = SEGMENT_BUFFER,
    steps: int = SEGMENT_STEPS,
) -> bool:
    active = [obs for obs in obstacles if not is_degenerate(obs)]
    if not active:
        return True

    n = sample_count(a, b, active, buffer, steps)
    t = np.linspace(0.0, 1.0, n + 1)
    xs = a.x + (b.x - a.x) * t
    zs = a.z + (b.z - a.z) * t
    return not bool(blocked_mask(xs, zs, active, buffer).any())
# endregion

# region Geographic Conversions
def latlng_to_world(point: Point3D, origin: Point3D) -> Point2D:
    return Point2D(
        x=(point.lng - origin.lng) * WORLD_SCALE,
        z=-(point.lat - origin.lat) * WORLD_SCALE,
    )


def world_to_latlng(point: Point2D, origin: Point3D, alt: float = 0.0) -> Point3D:
    return Point3D(
        lat=origin.lat - point.z / WORLD_SCALE,
        lng=origin.lng + point.x / WORLD_SCALE,
        alt=alt,
    )
# endregion
