# region Imports and Typing
from typing import Callable, Dict, Iterable, List, Optional, Tuple
import heapq, math

from .models import Cell, SearchNode
# endregion

# region Heuristic
def euclid(a: Cell, b: Cell) -> float:
    # admissible and consistent for 8-connected moves costing 1 / sqrt(2)
    return math.hypot(a[0] - b[0], a[1] - b[1])
# endregion

# region Path Reconstruction
def reconstruct(nodes: Dict[Cell, SearchNode], goal: Cell) -> List[Cell]:
    path = []
    v: Optional[Cell] = goal
    while v is not None:
        path.append(v)
        v = nodes[v].parent
    path.reverse()
    return path
# endregion

# region A* Algorithm
def astar(
    start: Cell,
    goal: Cell,
    neighbors_fn: Callable[[Cell], Iterable[Cell]],
    edge_cost_fn: Callable[[Cell, Cell], Optional[float]],
    heuristic_fn: Callable[[Cell, Cell], float] = euclid,
    *,
    max_expansions: Optional[int] = None,
):
    """
    Returns:
      path (list of cells, or None), total_cost, expansions, expanded_order

    Nodes live in an arena keyed by cell; parents are cell keys. Open entries
    are (f, h, counter, cell) so ties on f fall back to h, then insertion
    order. Stale heap entries are skipped via the closed set.
    """
    if start == goal:
        return [start], 0.0, 0, [start]

    counter = 0
    h0 = heuristic_fn(start, goal)
    nodes: Dict[Cell, SearchNode] = {start: SearchNode(start, 0.0, h0, h0, None)}
    openh: List[Tuple[float, float, int, Cell]] = [(h0, h0, counter, start)]
    closed = set()
    expansions = 0
    expanded_order = []

    while openh:
        _, _, _, u = heapq.heappop(openh)
        if u in closed:
            continue
        closed.add(u)
        expanded_order.append(u)
        expansions += 1

        if u == goal:
            return reconstruct(nodes, u), nodes[u].g, expansions, expanded_order

        # region Expansion Limits
        if max_expansions is not None and expansions >= max_expansions:
            return None, float("inf"), expansions, expanded_order
        # endregion

        gu = nodes[u].g
        # region Neighbor Loop
        for v in neighbors_fn(u):
            if v in closed:
                continue
            c = edge_cost_fn(u, v)
            if c is None:
                continue
            alt = gu + c
            node = nodes.get(v)
            if node is None:
                hv = heuristic_fn(v, goal)
                nodes[v] = SearchNode(v, alt, hv, alt + hv, u)
            elif alt < node.g - 1e-12:
                hv = node.h
                node.g, node.f, node.parent = alt, alt + hv, u
            else:
                continue
            counter += 1
            heapq.heappush(openh, (alt + hv, hv, counter, v))
        # endregion

    return None, float("inf"), expansions, expanded_order
# endregion
