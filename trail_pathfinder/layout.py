# region Imports
import logging
import math
from typing import List, Optional, Union

import numpy as np

from .config import LAYOUT_ATTEMPTS_PER_OBSTACLE, STREET_SPACING
from .models import LayoutObstacle, Point2D
# endregion

logger = logging.getLogger(__name__)

RngLike = Optional[Union[int, np.random.Generator]]


# region Placement Rules
def crosses_street(center: float, size: float, gutter: float,
                   spacing: float = STREET_SPACING) -> bool:
    """True if [center - size/2, center + size/2], padded by gutter, contains a street line."""
    lo = center - size / 2.0 - gutter
    hi = center + size / 2.0 + gutter
    return math.floor(hi / spacing) * spacing >= lo


def overlaps(candidate: LayoutObstacle, placed: List[LayoutObstacle], gutter: float) -> bool:
    # circular approximation on widths
    for other in placed:
        dist = math.hypot(candidate.center.x - other.center.x, candidate.center.z - other.center.z)
        if dist < (candidate.width + other.width) / 2.0 + gutter:
            return True
    return False
# endregion

# region Generator
def _check_params(count, area_size, min_size, max_size, street_gutter):
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if not (0 < min_size <= max_size):
        raise ValueError(f"need 0 < min_size <= max_size, got {min_size}, {max_size}")
    if area_size < max_size:
        raise ValueError(f"area_size ({area_size}) smaller than max_size ({max_size})")
    if street_gutter < 0:
        raise ValueError(f"street_gutter must be >= 0, got {street_gutter}")


def generate_layout(
    count: int,
    area_size: float,
    min_size: float,
    max_size: float,
    street_gutter: float,
    rng: RngLike = None,
) -> List[LayoutObstacle]:
    """
    Rejection-sample up to `count` rotated building footprints inside the
    square [-area/2, area/2]^2, clear of the street grid and of each other.
    Returns fewer than `count` when attempts run out.

    rng: numpy Generator, integer seed, or None.
    """
    _check_params(count, area_size, min_size, max_size, street_gutter)
    rng = np.random.default_rng(rng)
    half = area_size / 2.0
    placed: List[LayoutObstacle] = []
    attempts = int(count) * LAYOUT_ATTEMPTS_PER_OBSTACLE

    for _ in range(attempts):
        if len(placed) >= count:
            break
        width = rng.uniform(min_size, max_size)
        depth = rng.uniform(min_size, max_size)
        rotation = rng.uniform(0.0, math.pi / 2.0)
        x = rng.uniform(0.0, 1.0) * (area_size - width) - half + width / 2.0
        z = rng.uniform(0.0, 1.0) * (area_size - depth) - half + depth / 2.0

        if crosses_street(x, width, street_gutter) or crosses_street(z, depth, street_gutter):
            continue
        candidate = LayoutObstacle(
            center=Point2D(float(x), float(z)),
            width=float(width),
            depth=float(depth),
            rotation=float(rotation),
        )
        if overlaps(candidate, placed, street_gutter):
            continue
        placed.append(candidate)

    if len(placed) < count:
        logger.debug("Layout under-filled: %d of %d after %d attempts", len(placed), count, attempts)
    return placed
# endregion
