"""
project: Cartographer
module: __init__.py
License: MIT

Flask application factory for the map generation service.

Configuration is sourced from environment variables (optionally loaded from
a `.env` file) with reasonable defaults for development. A local `instance/`
directory holds the rotating log file written by `cartographer.server`.
"""

import os

from dotenv import load_dotenv
from flask import Flask, jsonify

__version__ = "0.4.0"

# Load .env if present so CARTOGRAPHER_* limits can be supplied without
# exporting shell variables during development.
load_dotenv()


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def create_app(config=None):
    """Build a Flask app with the map API blueprint registered.

    `config` (a mapping) is applied last so tests can override limits.
    """
    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # In some constrained environments this might fail; ignore
        pass

    app.config.update(
        # Caller-side bounds on a single generation request
        MAP_MAX_ROOMS=_env_int("CARTOGRAPHER_MAX_ROOMS", 100),
        MAP_MAX_GRID=_env_int("CARTOGRAPHER_MAX_GRID", 200),
    )
    if config:
        app.config.update(config)

    from cartographer.routes.map_api import bp_map

    app.register_blueprint(bp_map)

    @app.errorhandler(404)
    def _not_found(_e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(405)
    def _method_not_allowed(_e):
        return jsonify({"error": "method not allowed"}), 405

    return app
