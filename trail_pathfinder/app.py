# app.py — Slim Flask API around the route planning pipeline
# deps: pip install flask numpy

from __future__ import annotations
from typing import Any, Dict, List, Optional

from flask import Flask, request, jsonify

from .config import (
    GRID_BOUNDS, GRID_SIZE, MAX_ITERATIONS, WALKING_SPEED,
    LAYOUT_AREA, LAYOUT_COUNT, LAYOUT_GUTTER, LAYOUT_MAX_SIZE, LAYOUT_MIN_SIZE,
)
from .geometry import latlng_to_world, world_to_latlng
from .layout import generate_layout
from .models import Point2D, Point3D
from .obstacles import obstacle_from_dict, obstacle_to_dict
from .planner import plan_route

app = Flask(__name__)

# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"]  = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    return resp

# ======= request parsing =======
def _opt(data: Dict[str, Any], key: str, cast, default):
    v = data.get(key, None)
    return default if v in (None, "", "null") else cast(v)

def _parse_origin(data: Dict[str, Any]) -> Optional[Point3D]:
    o = data.get("origin")
    if not o:
        return None
    return Point3D(lat=float(o["lat"]), lng=float(o["lng"]), alt=float(o.get("alt", 0.0)))

def _parse_point(p: Dict[str, Any], origin: Optional[Point3D]) -> Point2D:
    if origin is not None:
        return latlng_to_world(Point3D(lat=float(p["lat"]), lng=float(p["lng"])), origin)
    return Point2D(float(p["x"]), float(p["z"]))

def _xz(path) -> List[Dict[str, float]]:
    return [{"x": p.x, "z": p.z} for p in path]

@app.errorhandler(ValueError)
@app.errorhandler(KeyError)
@app.errorhandler(TypeError)
def _bad_request(e):
    return jsonify({"error": f"{type(e).__name__}: {e}"}), 400

# ======= endpoints =======
@app.route("/", methods=["GET"])
def root():
    return {"ok": True, "route": "/route/solve (POST JSON)", "layout": "/layout/generate (POST JSON)"}

@app.route("/route/solve", methods=["POST"])
def route_solve():
    """
    JSON body:
    {
      "start": {"x":..,"z":..} | {"lat":..,"lng":..},
      "end":   {"x":..,"z":..} | {"lat":..,"lng":..},
      "origin": {"lat":..,"lng":..,"alt":..},   // optional, switches points to lat/lng
      "obstacles": [{"type":"rect","x","z","width","depth","rotation"}, {"type":"circle","x","z","radius"}],
      "grid_size": 1.0,
      "bounds": 100,
      "max_iterations": 5000,
      "speed": 0.5
    }
    """
    data = request.get_json(force=True, silent=True) or {}
    if "start" not in data or "end" not in data:
        return jsonify({"error": "start and end are required"}), 400

    origin    = _parse_origin(data)
    start     = _parse_point(data["start"], origin)
    end       = _parse_point(data["end"], origin)
    obstacles = [obstacle_from_dict(o) for o in data.get("obstacles") or []]

    route = plan_route(
        start, end, obstacles,
        grid_size=_opt(data, "grid_size", float, GRID_SIZE),
        bounds=_opt(data, "bounds", int, GRID_BOUNDS),
        max_iterations=_opt(data, "max_iterations", int, MAX_ITERATIONS),
        speed=_opt(data, "speed", float, WALKING_SPEED),
    )

    resp = {
        "raw": _xz(route.raw),
        "path": _xz(route.curved),
        "distance": route.distance,
        "distance_label": route.distance_label,
        "travel_time_sec": route.travel_time,
        "travel_time": route.time_label,
        "expansions": route.expansions,
        "found": route.found,
    }
    if origin is not None:
        resp["positions"] = [
            {"lat": q.lat, "lng": q.lng, "alt": q.alt}
            for q in (world_to_latlng(p, origin) for p in route.curved)
        ]
    return jsonify(resp)

@app.route("/layout/generate", methods=["POST"])
def layout_generate():
    data = request.get_json(force=True, silent=True) or {}
    obstacles = generate_layout(
        count=_opt(data, "count", int, LAYOUT_COUNT),
        area_size=_opt(data, "area_size", float, LAYOUT_AREA),
        min_size=_opt(data, "min_size", float, LAYOUT_MIN_SIZE),
        max_size=_opt(data, "max_size", float, LAYOUT_MAX_SIZE),
        street_gutter=_opt(data, "street_gutter", float, LAYOUT_GUTTER),
        rng=_opt(data, "seed", int, None),
    )
    return jsonify({"obstacles": [obstacle_to_dict(o) for o in obstacles]})


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8081, threaded=True)
