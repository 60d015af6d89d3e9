"""Minimal structured logging helper.

Emits key=value records (or JSON) carrying a timestamp and level, so maze
generation runs can be grepped or parsed without configuring handlers.

Usage:
    from labyrinth.logging_utils import get_logger
    log = get_logger("labyrinth.maze")
    log.info(event="level_created", seed=42, rows=10, columns=10)

Non-numeric values are str()'d with spaces replaced by underscores.
Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("LABYRINTH_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("LABYRINTH_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def _format(level: str, **fields):
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "labyrinth"

    def enabled_for(self, lvl: str) -> bool:
        return LEVELS[lvl] >= CURRENT_LEVEL

    def _log(self, lvl: str, **fields):
        if not self.enabled_for(lvl):
            return
        fields.setdefault("logger", self.name)
        print(_format(lvl, **fields), file=sys.stdout if lvl != "error" else sys.stderr)

    def debug(self, **fields):
        self._log("debug", **fields)

    def info(self, **fields):
        self._log("info", **fields)

    def warn(self, **fields):
        self._log("warn", **fields)

    def error(self, **fields):
        self._log("error", **fields)


_LOGGER_CACHE = {}


def get_logger(name: str):
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("labyrinth")
