"""
project: Cartographer
module: server.py
License: MIT

Development server bootstrap. The stdlib logging tree (Flask and werkzeug
request logs) goes to the console and to ``<instance>/app.log``; generation
events use ``cartographer.logging_utils`` and are not routed through it.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from cartographer import create_app

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = "app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUPS = 3

# CARTOGRAPHER_LOG_LEVEL names mapped onto stdlib levels
_STDLIB_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    app = create_app()
    log_path = _configure_logging(app.instance_path)
    print(f"[INFO] Map server on http://{host}:{port} (log file {log_path})")
    try:
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(log_dir: str) -> str:
    """Point the root logger at the console and a rotating file in ``log_dir``.

    Safe to call repeatedly: previously installed handlers are closed first.
    Returns the log file path.
    """
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, LOG_FILE)
    level = _STDLIB_LEVELS.get(os.getenv("CARTOGRAPHER_LOG_LEVEL", "info").lower(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = [
        RotatingFileHandler(log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"),
        logging.StreamHandler(),
    ]
    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    return log_path
