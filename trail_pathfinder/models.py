# models.py
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Point2D:
    x: float
    z: float


@dataclass(frozen=True)
class Point3D:
    lat: float
    lng: float
    alt: float = 0.0   # passthrough only, never used for collision or cost


@dataclass(frozen=True)
class RotatedRect:
    center: Point2D
    width: float
    depth: float
    rotation: float = 0.0   # radians about center


@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: float


@dataclass(frozen=True)
class LayoutObstacle(RotatedRect):
    footprint: str = "building"


Obstacle = Union[RotatedRect, Circle]
Path = List[Point2D]


@dataclass
class SearchNode:
    cell: Cell
    g: float
    h: float
    f: float
    parent: Optional[Cell] = None   # key into the search arena


@dataclass
class SearchResult:
    path: Path
    cost: float        # world length of `path`
    expansions: int
    found: bool


@dataclass
class RouteResult:
    raw: Path
    reduced: Path
    curved: Path
    distance: float
    travel_time: float
    time_label: str
    distance_label: str
    expansions: int = 0
    found: bool = True
