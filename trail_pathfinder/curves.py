# region Imports
import math
from typing import Sequence

import numpy as np

from .config import (
    CURVE_BUFFER,
    CURVE_CONTROL_RATIO,
    CURVE_MIN_SUBDIVISIONS,
    CURVE_SAMPLE_SPACING,
)
from .geometry import blocked_mask, distance
from .models import Obstacle, Path, Point2D
# endregion

# region Bezier Helpers
def subdivisions(a: Point2D, b: Point2D) -> int:
    return max(CURVE_MIN_SUBDIVISIONS, int(math.floor(distance(a, b) / CURVE_SAMPLE_SPACING)))


def control_points(prev: Point2D, cur: Point2D, nxt: Point2D, after: Point2D,
                   ratio: float = CURVE_CONTROL_RATIO):
    p1 = Point2D(cur.x + (nxt.x - prev.x) * ratio, cur.z + (nxt.z - prev.z) * ratio)
    p2 = Point2D(nxt.x - (after.x - cur.x) * ratio, nxt.z - (after.z - cur.z) * ratio)
    return p1, p2


def cubic_bezier(p0: Point2D, p1: Point2D, p2: Point2D, p3: Point2D, t) -> np.ndarray:
    """Evaluate the curve at parameters t; returns an (N, 2) array of (x, z)."""
    t = np.asarray(t, dtype=np.float64)[:, None]
    mt = 1.0 - t
    ctrl = np.array([[p.x, p.z] for p in (p0, p1, p2, p3)], dtype=np.float64)
    return (mt ** 3 * ctrl[0]
            + 3.0 * mt ** 2 * t * ctrl[1]
            + 3.0 * mt * t ** 2 * ctrl[2]
            + t ** 3 * ctrl[3])
# endregion

# region Curve Synthesis
def curve_path(
    path: Sequence[Point2D],
    obstacles: Sequence[Obstacle],
    buffer: float = CURVE_BUFFER,
) -> Path:
    """
    Inject cubic Bezier samples between consecutive waypoints. Samples that
    land inside an obstacle (plus `buffer`) are dropped, not re-routed.
    """
    if len(path) <= 2:
        return list(path)

    curved: Path = []
    last = len(path) - 1
    for i in range(last):
        cur, nxt = path[i], path[i + 1]
        prev = path[i - 1] if i > 0 else cur
        after = path[i + 2] if i + 2 <= last else nxt
        curved.append(cur)

        n = subdivisions(cur, nxt)
        p1, p2 = control_points(prev, cur, nxt, after)
        samples = cubic_bezier(cur, p1, p2, nxt, np.arange(1, n) / n)
        keep = ~blocked_mask(samples[:, 0], samples[:, 1], obstacles, buffer)
        curved.extend(Point2D(float(x), float(z)) for x, z in samples[keep])

    curved.append(path[last])
    return curved
# endregion
