"""Structured line logging for generation events.

Each call prints one record to stdout (errors go to stderr) as key=value
pairs, or as a compact JSON object when ``CARTOGRAPHER_LOG_JSON`` is set.
The level threshold comes from ``CARTOGRAPHER_LOG_LEVEL`` and is read on
every call, so tests and the CLI can change it at runtime.

    from cartographer.logging_utils import get_logger
    log = get_logger("cartographer.dungeon").bind(seed=42)
    log.info(event="map_generated", placed=7)

Fields whose value is None are omitted. ``level`` and ``ts`` are reserved.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
DEFAULT_LEVEL = "info"


def current_level() -> int:
    name = os.getenv("CARTOGRAPHER_LOG_LEVEL", DEFAULT_LEVEL).lower()
    return LEVELS.get(name, LEVELS[DEFAULT_LEVEL])


def json_mode() -> bool:
    return os.getenv("CARTOGRAPHER_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _render(value: Any) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    # Keep every record on one whitespace-separated line
    return str(value).replace(" ", "_")


def format_record(level: str, fields: Dict[str, Any]) -> str:
    present = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if json_mode():
        return json.dumps({**present, "level": level, "ts": ts}, separators=(",", ":"), default=str)
    head = [f"level={level}", f"ts={ts}"]
    return " ".join(head + [f"{k}={_render(v)}" for k, v in present.items()])


class _Logger:
    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **context) -> "_Logger":
        """A logger that adds ``context`` to every record it writes."""
        return _Logger(self.name, {**self.context, **context})

    def enabled(self, lvl: str) -> bool:
        return LEVELS[lvl] >= current_level()

    def _log(self, lvl: str, fields: Dict[str, Any]):
        if not self.enabled(lvl):
            return
        record = {"logger": self.name, **self.context, **fields}
        stream = sys.stderr if lvl == "error" else sys.stdout
        print(format_record(lvl, record), file=stream)

    def debug(self, **fields):
        self._log("debug", fields)

    def info(self, **fields):
        self._log("info", fields)

    def warn(self, **fields):
        self._log("warn", fields)

    def error(self, **fields):
        self._log("error", fields)


_loggers: Dict[str, _Logger] = {}


def get_logger(name: str = "cartographer") -> _Logger:
    return _loggers.setdefault(name, _Logger(name))


log = get_logger()
