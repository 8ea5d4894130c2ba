"""
trail_pathfinder - 2D obstacle-aware route planning

Grid A* search, line-of-sight reduction, Bezier curve smoothing, travel
metrics and a procedural building layout generator.

Key exports:
- search / plan_route: grid search and the full pipeline
- reduce_path, curve_path: post-processing stages
- generate_layout: synthetic rotated-rectangle obstacles
"""
from .curves import curve_path
from .geometry import blocks, latlng_to_world, segment_clear, world_to_latlng
from .layout import generate_layout
from .metrics import format_distance, format_time, path_length, travel_time
from .models import Circle, LayoutObstacle, Point2D, Point3D, RotatedRect
from .planner import plan_route, search, search_with_stats
from .smoothing import reduce_path

__all__ = [
    "Circle", "LayoutObstacle", "Point2D", "Point3D", "RotatedRect",
    "blocks", "segment_clear", "latlng_to_world", "world_to_latlng",
    "search", "search_with_stats", "plan_route",
    "reduce_path", "curve_path", "generate_layout",
    "path_length", "travel_time", "format_time", "format_distance",
]
