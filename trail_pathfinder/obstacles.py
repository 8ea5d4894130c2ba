# region Imports
import logging
import math
from typing import Any, Dict, Iterable, List, Mapping

from .config import DEFAULT_THREAT_RADIUS, THREAT_RADII
from .geometry import is_degenerate, latlng_to_world
from .models import Circle, LayoutObstacle, Obstacle, Point2D, Point3D, RotatedRect
# endregion

logger = logging.getLogger(__name__)


# region Validation
def _finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return value


def validate_obstacle(obstacle: Obstacle) -> None:
    if isinstance(obstacle, Circle):
        fields = {"radius": obstacle.radius}
    elif isinstance(obstacle, RotatedRect):
        fields = {"width": obstacle.width, "depth": obstacle.depth, "rotation": obstacle.rotation}
    else:
        raise ValueError(f"Unsupported obstacle type: {type(obstacle).__name__}")
    fields["center.x"] = obstacle.center.x
    fields["center.z"] = obstacle.center.z
    for name, value in fields.items():
        _finite(name, value)


def normalize_obstacles(obstacles: Iterable[Obstacle]) -> List[Obstacle]:
    """
    Fail fast on malformed obstacles; drop degenerate (zero-area) ones.
    """
    kept: List[Obstacle] = []
    for obs in obstacles:
        validate_obstacle(obs)
        if is_degenerate(obs):
            logger.warning("Dropping degenerate obstacle %r", obs)
            continue
        kept.append(obs)
    return kept
# endregion

# region Derived Obstacles
def threat_radius(level) -> float:
    return THREAT_RADII.get(str(level or "").lower(), DEFAULT_THREAT_RADIUS)


def threat_obstacles(records: Iterable[Mapping[str, Any]], origin: Point3D) -> List[Circle]:
    """Point-of-interest records (latitude/longitude/threatLevel) -> circles."""
    out: List[Circle] = []
    for rec in records:
        pos = latlng_to_world(
            Point3D(lat=float(rec["latitude"]), lng=float(rec["longitude"])), origin
        )
        out.append(Circle(center=pos, radius=threat_radius(rec.get("threatLevel"))))
    return out


def terrain_obstacles(footprints: Iterable[Mapping[str, Any]]) -> List[Circle]:
    """Terrain footprints {x, z, width, depth} -> enclosing-radius circles."""
    return [
        Circle(
            center=Point2D(float(fp["x"]), float(fp["z"])),
            radius=max(float(fp["width"]), float(fp["depth"])) / 2.0,
        )
        for fp in footprints
    ]
# endregion

# region Dict Codec
def obstacle_from_dict(data: Mapping[str, Any]) -> Obstacle:
    kind = str(data.get("type", "rect")).lower()
    center = Point2D(_finite("x", data["x"]), _finite("z", data["z"]))
    if kind == "circle":
        return Circle(center=center, radius=_finite("radius", data["radius"]))
    if kind in ("rect", "building"):
        cls = LayoutObstacle if kind == "building" else RotatedRect
        return cls(
            center=center,
            width=_finite("width", data["width"]),
            depth=_finite("depth", data["depth"]),
            rotation=_finite("rotation", data.get("rotation", 0.0)),
        )
    raise ValueError(f"Unknown obstacle type {kind!r} (expected 'rect', 'building' or 'circle')")


def obstacle_to_dict(obstacle: Obstacle) -> Dict[str, Any]:
    base = {"x": obstacle.center.x, "z": obstacle.center.z}
    if isinstance(obstacle, Circle):
        return {"type": "circle", **base, "radius": obstacle.radius}
    kind = "building" if isinstance(obstacle, LayoutObstacle) else "rect"
    return {
        "type": kind,
        **base,
        "width": obstacle.width,
        "depth": obstacle.depth,
        "rotation": obstacle.rotation,
    }
# endregion
