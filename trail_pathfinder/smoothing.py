# region Imports
from typing import Sequence

from .config import SEGMENT_BUFFER, SEGMENT_STEPS
from .geometry import segment_clear
from .models import Obstacle, Path, Point2D
# endregion

# region Line-of-sight Reduction
def reduce_path(
    path: Sequence[Point2D],
    obstacles: Sequence[Obstacle],
    buffer: float = SEGMENT_BUFFER,
    steps: int = SEGMENT_STEPS,
) -> Path:
    """
    Greedy visibility reduction: from the current point jump to the farthest
    later point with a clear segment. The result is a subsequence of `path`
    keeping its first and last points.
    """
    if len(path) <= 2:
        return list(path)

    reduced: Path = [path[0]]
    current = 0
    last = len(path) - 1
    while current < last:
        farthest = current + 1
        for i in range(last, current + 1, -1):
            if segment_clear(path[current], path[i], obstacles, buffer, steps):
                farthest = i
                break
        reduced.append(path[farthest])
        current = farthest
    return reduced
# endregion
