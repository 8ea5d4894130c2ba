# region Imports
from typing import Callable, Optional

from .config import CARDINAL_COST, DIAGONAL_COST
from .grid import BlockedGrid
from .models import Cell
# endregion

# region Edge Cost Factory
def edge_cost_factory(grid: BlockedGrid) -> Callable[[Cell, Cell], Optional[float]]:
    """
    Step cost between adjacent cells, or None when the move is not allowed.
    Diagonals may not cut a corner: both cardinal cells they pass must be free.
    """

    def edge_cost(u: Cell, v: Cell) -> Optional[float]:
        if grid.is_blocked(v):
            return None

        dx, dz = v[0] - u[0], v[1] - u[1]
        if dx != 0 and dz != 0:
            if grid.is_blocked((u[0] + dx, u[1])) or grid.is_blocked((u[0], u[1] + dz)):
                return None
            return DIAGONAL_COST
        return CARDINAL_COST

    return edge_cost
# endregion
