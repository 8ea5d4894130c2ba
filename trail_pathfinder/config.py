# config.py
import math

# Search grid
GRID_SIZE = 1.0
GRID_BOUNDS = 100          # |gx|, |gz| <= GRID_BOUNDS
MAX_GRID_BOUNDS = 1000     # occupancy mask is (2 * bounds + 1)^2 cells
MAX_ITERATIONS = 5000
CELL_BUFFER_FACTOR = 1.5   # cell blocked within 1.5 * grid_size of an obstacle

CARDINAL_COST = 1.0
DIAGONAL_COST = math.sqrt(2.0)

# Line-of-sight / curve validation
SEGMENT_BUFFER = 1.5
SEGMENT_STEPS = 30
MIN_SEGMENT_STEPS = 20
CURVE_BUFFER = 1.0
CURVE_CONTROL_RATIO = 0.3
CURVE_SAMPLE_SPACING = 1.5
CURVE_MIN_SUBDIVISIONS = 5

# Travel (1 unit ~ 1 cm at miniature scale)
WALKING_SPEED = 0.5        # units / sec
CM_PER_METER = 100.0

# Geographic boundary: local units per degree
WORLD_SCALE = 100_000.0

THREAT_RADII = {"high": 5.0, "medium": 3.5}
DEFAULT_THREAT_RADIUS = 2.0

# Layout generator
STREET_SPACING = 20.0
LAYOUT_ATTEMPTS_PER_OBSTACLE = 5
LAYOUT_COUNT = 25
LAYOUT_AREA = 100.0
LAYOUT_MIN_SIZE = 4.0
LAYOUT_MAX_SIZE = 10.0
LAYOUT_GUTTER = 2.0
