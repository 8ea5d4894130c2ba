# region Imports
import math
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle as CirclePatch
from matplotlib.patches import Patch, Polygon

from .models import Circle, Obstacle, Point2D, RotatedRect
# endregion

# region Footprints
def rect_corners(rect: RotatedRect):
    hw, hd = rect.width / 2.0, rect.depth / 2.0
    cos, sin = math.cos(rect.rotation), math.sin(rect.rotation)
    out = []
    for lx, lz in ((-hw, -hd), (hw, -hd), (hw, hd), (-hw, hd)):
        out.append((rect.center.x + lx * cos - lz * sin,
                    rect.center.z + lx * sin + lz * cos))
    return out


def _obstacle_patch(obs: Obstacle):
    if isinstance(obs, Circle):
        return CirclePatch((obs.center.x, obs.center.z), obs.radius,
                           facecolor="#dd6b20", edgecolor="black", alpha=0.6)
    return Polygon(rect_corners(obs), closed=True,
                   facecolor="#9333ea", edgecolor="black", alpha=0.6)
# endregion

# region Visualization Function
def show_route(
    obstacles: Sequence[Obstacle],
    raw: Optional[Sequence[Point2D]] = None,
    route: Optional[Sequence[Point2D]] = None,
    title: str = "Route preview",
    ax=None,
    show: bool = True,
):
    """
    Draw obstacles, the raw grid path and the curved route in the x/z plane.
    Returns the matplotlib Figure.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    for obs in obstacles:
        ax.add_patch(_obstacle_patch(obs))

    # region Path Overlay
    if raw:
        ax.plot([p.x for p in raw], [p.z for p in raw], color="gray",
                linewidth=1.0, linestyle="--", marker=".", label="Grid path")
    ends = route or raw
    if route:
        ax.plot([p.x for p in route], [p.z for p in route], color="cyan", linewidth=2.5, label="Route")
    if ends:
        ax.scatter(ends[0].x, ends[0].z, s=100, edgecolors="black", facecolors="white", zorder=3)
        ax.scatter(ends[-1].x, ends[-1].z, s=100, edgecolors="black", facecolors="yellow", zorder=3)
    # endregion

    # region Legend / Layout
    legend_elements = [
        Line2D([0], [0], color="cyan", lw=2, label="Route"),
        Line2D([0], [0], color="gray", lw=1, linestyle="--", label="Grid path"),
        Line2D([0], [0], marker="o", color="w", label="Start",
               markerfacecolor="white", markeredgecolor="black", markersize=9),
        Line2D([0], [0], marker="o", color="w", label="Goal",
               markerfacecolor="yellow", markeredgecolor="black", markersize=9),
        Patch(facecolor="#9333ea", alpha=0.6, label="Building"),
        Patch(facecolor="#dd6b20", alpha=0.6, label="Threat / terrain"),
    ]
    ax.legend(handles=legend_elements, loc="lower right", fontsize=8, framealpha=0.85)
    ax.set_aspect("equal")
    ax.autoscale_view()
    # z grows toward the viewer, draw it downward like a map
    if not ax.yaxis_inverted():
        ax.invert_yaxis()
    ax.set_xlabel("x")
    ax.set_ylabel("z")
    ax.set_title(title)
    fig.tight_layout()
    if show:
        plt.show()
    # endregion
    return fig
# endregion
