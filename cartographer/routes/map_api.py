"""
project: Cartographer
module: map_api.py
License: MIT

Map generation API routes.

The layout engine only emits structured geometry; these endpoints hand that
geometry (room rectangles, door rectangles/directions, room type tags and the
cell classification grid) to whatever renderer sits on the other side.
"""

from flask import Blueprint, current_app, jsonify, request

from cartographer.dungeon import MapConfigError, MapSettings, generate_map
from cartographer.dungeon.config import DOOR_TYPE_MODES
from cartographer.dungeon.constants import DIMENSION_RANGES, ROOM_TYPE_SIZES, SIZES
from cartographer.dungeon.door_types import APPEND_DOORWAY, DOOR_TYPES, LOCKABLE
from cartographer.logging_utils import get_logger

bp_map = Blueprint("map", __name__)
log = get_logger("cartographer.api")


def _check_limits(settings: MapSettings):
    max_rooms = current_app.config["MAP_MAX_ROOMS"]
    max_grid = current_app.config["MAP_MAX_GRID"]
    if len(settings.rooms) > max_rooms:
        return f"too many rooms requested ({len(settings.rooms)} > {max_rooms})"
    if settings.grid_width > max_grid or settings.grid_height > max_grid:
        return f"grid larger than {max_grid}x{max_grid}"
    return None


@bp_map.route("/api/map/generate", methods=["POST"])
def generate():
    """
    Generate a layout from map settings.
    Request: { 'gridWidth': int, 'gridHeight': int, 'rooms': [{'size', 'type', 'isHorizontal'}],
               'seed': int?, 'doorTypes': str? }
    Response: { 'gridWidth', 'gridHeight', 'seed', 'rooms': [...], 'grid': [[...]], 'metrics': {...} }
    """
    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "expected a JSON body"}), 400
    try:
        settings = MapSettings.from_dict(payload)
    except MapConfigError as exc:
        log.warn(event="map_rejected", reason=str(exc))
        return jsonify({"error": str(exc)}), 400
    problem = _check_limits(settings)
    if problem:
        log.warn(event="map_rejected", reason=problem)
        return jsonify({"error": problem}), 400
    include_grid = request.args.get("grid", "1") not in ("0", "false", "no")
    layout = generate_map(settings)
    return jsonify(layout.to_dict(include_grid=include_grid))


@bp_map.route("/api/map/config")
def map_config():
    """Size classes, room types and door types accepted by /api/map/generate."""
    return jsonify(
        {
            "sizes": [{"name": s, "min": DIMENSION_RANGES[s][0], "max": DIMENSION_RANGES[s][1]} for s in SIZES],
            "roomTypes": ROOM_TYPE_SIZES,
            "doorTypes": [
                {"name": t, "lockable": t in LOCKABLE, "doorway": t in APPEND_DOORWAY} for t in DOOR_TYPES
            ],
            "doorTypeModes": list(DOOR_TYPE_MODES),
            "limits": {
                "maxRooms": current_app.config["MAP_MAX_ROOMS"],
                "maxGrid": current_app.config["MAP_MAX_GRID"],
            },
        }
    )
