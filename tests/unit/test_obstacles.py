"""
Unit tests for obstacle normalization, derived obstacles and the dict codec.
"""

import logging
import math

import pytest

from trail_pathfinder.models import Circle, LayoutObstacle, Point2D, RotatedRect
from trail_pathfinder.obstacles import (
    normalize_obstacles,
    obstacle_from_dict,
    obstacle_to_dict,
    terrain_obstacles,
    threat_obstacles,
    threat_radius,
)


class TestNormalize:

    def test_drops_degenerate_with_warning(self, central_block, caplog):
        dot = Circle(center=Point2D(1.0, 1.0), radius=0.0)
        with caplog.at_level(logging.WARNING, logger="trail_pathfinder.obstacles"):
            kept = normalize_obstacles([central_block, dot])
        assert kept == [central_block]
        assert "degenerate" in caplog.text

    def test_rejects_nan(self):
        bad = RotatedRect(center=Point2D(float("nan"), 0.0), width=1.0, depth=1.0)
        with pytest.raises(ValueError, match="finite"):
            normalize_obstacles([bad])

    def test_rejects_infinite_radius(self):
        with pytest.raises(ValueError):
            normalize_obstacles([Circle(center=Point2D(0.0, 0.0), radius=math.inf)])

    def test_rejects_unknown_type(self):
        with pytest.raises(ValueError, match="Unsupported"):
            normalize_obstacles(["not an obstacle"])


class TestDerivedObstacles:

    @pytest.mark.parametrize("level,radius", [
        ("high", 5.0), ("HIGH", 5.0), ("medium", 3.5), ("low", 2.0), (None, 2.0),
    ])
    def test_threat_radius(self, level, radius):
        assert threat_radius(level) == radius

    def test_threat_obstacles(self, threat_records, geo_origin):
        circles = threat_obstacles(threat_records, geo_origin)
        assert [c.radius for c in circles] == [5.0, 3.5, 2.0, 2.0]
        assert circles[0].center.x == pytest.approx(20.0, abs=1e-6)
        assert circles[0].center.z == pytest.approx(-10.0, abs=1e-6)
        assert circles[1].center.x == pytest.approx(-10.0, abs=1e-6)

    def test_terrain_obstacles(self):
        circles = terrain_obstacles([{"x": 3, "z": -4, "width": 6, "depth": 10}])
        assert circles == [Circle(center=Point2D(3.0, -4.0), radius=5.0)]


class TestDictCodec:

    def test_rect_from_dict(self):
        obs = obstacle_from_dict({"type": "rect", "x": 1, "z": 2, "width": 3, "depth": 4, "rotation": 0.5})
        assert obs == RotatedRect(center=Point2D(1.0, 2.0), width=3.0, depth=4.0, rotation=0.5)

    def test_type_defaults_to_rect(self):
        obs = obstacle_from_dict({"x": 0, "z": 0, "width": 1, "depth": 1})
        assert isinstance(obs, RotatedRect)
        assert obs.rotation == 0.0

    def test_circle_from_dict(self):
        obs = obstacle_from_dict({"type": "circle", "x": 1, "z": 2, "radius": 3})
        assert obs == Circle(center=Point2D(1.0, 2.0), radius=3.0)

    def test_building_round_trip(self):
        b = LayoutObstacle(center=Point2D(1.5, -2.5), width=4.0, depth=5.0, rotation=0.25)
        data = obstacle_to_dict(b)
        assert data["type"] == "building"
        assert obstacle_from_dict(data) == b

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown obstacle type"):
            obstacle_from_dict({"type": "triangle", "x": 0, "z": 0})

    def test_missing_field(self):
        with pytest.raises(KeyError):
            obstacle_from_dict({"type": "circle", "x": 0, "z": 0})

    def test_non_finite_field(self):
        with pytest.raises(ValueError):
            obstacle_from_dict({"type": "circle", "x": 0, "z": 0, "radius": "nan"})
