# region Imports
import math
from typing import Iterator, Sequence

import numpy as np

from .geometry import blocked_mask
from .models import Cell, Obstacle, Point2D
# endregion

# region Index Helpers
def world_to_grid(p: Point2D, grid_size: float) -> Cell:
    # round half up on both axes
    return (
        int(math.floor(p.x / grid_size + 0.5)),
        int(math.floor(p.z / grid_size + 0.5)),
    )


def grid_to_world(cell: Cell, grid_size: float) -> Point2D:
    return Point2D(cell[0] * grid_size, cell[1] * grid_size)


def in_bounds(cell: Cell, bounds: int) -> bool:
    return abs(cell[0]) <= bounds and abs(cell[1]) <= bounds
# endregion

# region Blocked Mask
class BlockedGrid:
    """
    Occupancy for the square [-bounds, bounds]^2 of cells, built once per
    search. blocked[gz + bounds, gx + bounds] is True when the cell centre
    lies inside an obstacle inflated by `buffer`.
    """

    def __init__(self, obstacles: Sequence[Obstacle], grid_size: float, bounds: int, buffer: float):
        self.grid_size = grid_size
        self.bounds = bounds
        coords = np.arange(-bounds, bounds + 1, dtype=np.float64) * grid_size
        zz, xx = np.meshgrid(coords, coords, indexing="ij")
        self.blocked = blocked_mask(xx, zz, obstacles, buffer)

    def is_blocked(self, cell: Cell) -> bool:
        gx, gz = cell
        if not in_bounds(cell, self.bounds):
            return True
        return bool(self.blocked[gz + self.bounds, gx + self.bounds])

    @property
    def blocked_ratio(self) -> float:
        return float(self.blocked.mean())
# endregion

# region Neighbor Generation
STEPS_8 = (
    (-1, 0), (1, 0), (0, -1), (0, 1),     # cardinal
    (-1, -1), (1, -1), (-1, 1), (1, 1),   # diagonal
)


def neighbors_8(u: Cell, bounds: int) -> Iterator[Cell]:
    gx, gz = u
    for dx, dz in STEPS_8:
        v = (gx + dx, gz + dz)
        if in_bounds(v, bounds):
            yield v
# endregion
