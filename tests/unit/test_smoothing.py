"""
Unit tests for line-of-sight reduction and Bezier curve synthesis.
"""

import numpy as np
import pytest

from trail_pathfinder.curves import control_points, cubic_bezier, curve_path, subdivisions
from trail_pathfinder.geometry import blocks, segment_clear
from trail_pathfinder.models import Circle, Point2D
from trail_pathfinder.planner import search
from trail_pathfinder.smoothing import reduce_path


def _line(n):
    return [Point2D(float(i), 0.0) for i in range(n)]


class TestReducePath:

    def test_collinear_collapses(self):
        path = _line(11)
        assert reduce_path(path, []) == [path[0], path[-1]]

    def test_short_paths_are_copied(self):
        path = _line(2)
        out = reduce_path(path, [])
        assert out == path
        assert out is not path

    def test_does_not_mutate_input(self):
        path = _line(6)
        snapshot = list(path)
        reduce_path(path, [])
        assert path == snapshot

    def test_keeps_corner_around_obstacle(self):
        path = [Point2D(0.0, 0.0), Point2D(5.0, 5.0), Point2D(10.0, 0.0)]
        wall = Circle(center=Point2D(5.0, 0.0), radius=2.0)
        assert reduce_path(path, [wall]) == path

    def test_properties_on_searched_path(self, origin, central_block):
        raw = search(origin, Point2D(10.0, 10.0), [central_block])
        reduced = reduce_path(raw, [central_block])
        assert len(reduced) <= len(raw)
        assert reduced[0] == raw[0]
        assert reduced[-1] == raw[-1]
        it = iter(raw)
        assert all(p in it for p in reduced)
        for a, b in zip(reduced, reduced[1:]):
            assert segment_clear(a, b, [central_block], buffer=1.5)


class TestBezier:

    def test_endpoints(self):
        p0, p1, p2, p3 = Point2D(0, 0), Point2D(1, 2), Point2D(3, 2), Point2D(4, 0)
        pts = cubic_bezier(p0, p1, p2, p3, [0.0, 1.0])
        assert np.allclose(pts, [[0.0, 0.0], [4.0, 0.0]])

    def test_collinear_midpoint(self):
        pts = cubic_bezier(Point2D(0, 0), Point2D(1, 0), Point2D(2, 0), Point2D(3, 0), [0.5])
        assert np.allclose(pts, [[1.5, 0.0]])

    def test_control_points_fall_back_to_endpoints(self):
        cur, nxt = Point2D(0.0, 0.0), Point2D(10.0, 0.0)
        p1, p2 = control_points(cur, cur, nxt, nxt)
        assert p1 == Point2D(3.0, 0.0)
        assert p2 == Point2D(7.0, 0.0)

    @pytest.mark.parametrize("length,n", [(1.0, 5), (7.4, 5), (9.0, 6), (30.0, 20)])
    def test_subdivisions(self, length, n):
        assert subdivisions(Point2D(0.0, 0.0), Point2D(length, 0.0)) == n


class TestCurvePath:

    @pytest.fixture
    def elbow(self):
        return [Point2D(0.0, 0.0), Point2D(10.0, 0.0), Point2D(10.0, 10.0)]

    def test_sample_count(self, elbow):
        out = curve_path(elbow, [])
        # 3 waypoints + 5 interior samples per 10-unit segment
        assert len(out) == 13
        assert out[0] == elbow[0]
        assert out[-1] == elbow[-1]
        assert out[6] == elbow[1]

    def test_short_paths_are_copied(self):
        path = [Point2D(0.0, 0.0), Point2D(3.0, 4.0)]
        out = curve_path(path, [])
        assert out == path
        assert out is not path

    def test_all_samples_blocked(self, elbow):
        blob = Circle(center=Point2D(5.0, 5.0), radius=100.0)
        assert curve_path(elbow, [blob]) == elbow

    def test_blocked_samples_are_dropped(self, elbow):
        pebble = Circle(center=Point2D(8.0, -1.0), radius=0.5)
        free = curve_path(elbow, [])
        out = curve_path(elbow, [pebble])
        assert len(out) < len(free)
        for p in out:
            if p not in elbow:
                assert not blocks(p, pebble, buffer=1.0)

    def test_curve_bends_toward_next_leg(self, elbow):
        out = curve_path(elbow, [])
        # second leg starts pulled in by the first waypoint's direction
        second_leg = out[7:12]
        assert all(p.x > 10.0 for p in second_leg[:2])
