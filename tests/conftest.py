"""
Pytest configuration and fixtures for trail_pathfinder tests.

Fixtures provide common geometry:
- Obstacles (central block, threat circles)
- Points of interest records
- Seeded random generators
"""

import os
import sys
import math
from pathlib import Path

import numpy as np
import pytest

# Ensure project root is in path (run_simulation.py lives there)
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Headless matplotlib
os.environ.setdefault("MPLBACKEND", "Agg")

from trail_pathfinder.models import Circle, Point2D, Point3D, RotatedRect


# =============================================================================
# Geometry Fixtures
# =============================================================================

@pytest.fixture
def origin():
    return Point2D(0.0, 0.0)


@pytest.fixture
def central_block():
    """4x4 axis-aligned block between (0,0) and (10,10)."""
    return RotatedRect(center=Point2D(5.0, 5.0), width=4.0, depth=4.0, rotation=0.0)


@pytest.fixture
def mixed_obstacles():
    return [
        RotatedRect(center=Point2D(12.0, -3.0), width=6.0, depth=3.0, rotation=math.pi / 6),
        RotatedRect(center=Point2D(-8.0, 7.0), width=2.5, depth=9.0, rotation=1.1),
        Circle(center=Point2D(3.0, 14.0), radius=3.5),
        Circle(center=Point2D(-10.0, -10.0), radius=5.0),
    ]


@pytest.fixture
def geo_origin():
    return Point3D(lat=40.0, lng=-90.0, alt=0.0)


@pytest.fixture
def threat_records():
    return [
        {"latitude": 40.0001, "longitude": -89.9998, "threatLevel": "high"},
        {"latitude": 40.0, "longitude": -90.0001, "threatLevel": "medium"},
        {"latitude": 39.9999, "longitude": -90.0, "threatLevel": "low"},
        {"latitude": 39.9998, "longitude": -89.9999},
    ]


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
