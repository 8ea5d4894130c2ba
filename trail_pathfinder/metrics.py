# metrics.py
import math
from typing import Sequence

import numpy as np

from .config import CM_PER_METER, WALKING_SPEED
from .models import Point2D


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def path_length(path: Sequence[Point2D]) -> float:
    if len(path) < 2:
        return 0.0
    pts = np.array([[p.x, p.z] for p in path], dtype=np.float64)
    d = np.diff(pts, axis=0)
    return float(np.hypot(d[:, 0], d[:, 1]).sum())


def travel_time(path: Sequence[Point2D], speed: float = WALKING_SPEED) -> float:
    """Seconds to walk `path` at a constant `speed` (units / sec)."""
    if not speed > 0:
        raise ValueError(f"speed must be positive, got {speed!r}")
    return path_length(path) / speed


def format_time(seconds: float) -> str:
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"seconds must be finite and non-negative, got {seconds!r}")
    total = _round_half_up(seconds)
    if total < 60:
        return f"{total} sec"
    if total < 3600:
        minutes, secs = divmod(total, 60)
        return f"{minutes} min {secs} sec"
    hours, rem = divmod(total, 3600)
    return f"{hours} hr {rem // 60} min"


def format_distance(path: Sequence[Point2D]) -> str:
    # 1 unit ~ 1 cm
    cm = path_length(path)
    if cm < CM_PER_METER:
        return f"{_round_half_up(cm)} cm"
    return f"{cm / CM_PER_METER:.1f} m"
