"""Maze generation configuration.

Precedence (lowest to highest): dataclass defaults / explicit arguments,
environment variables, Flask ``current_app.config`` when an application
context is active. Seeds are only ever passed explicitly.
"""
from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv
from flask import current_app, has_app_context

_FALSEY = {"0", "false", "no", "off", ""}


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSEY
    return bool(value)


def _as_int(value) -> int:
    return int(value)


def _as_float(value) -> float:
    return float(value)


def _as_str(value) -> Optional[str]:
    value = str(value).strip()
    return value or None


# config key -> (attribute, converter)
OVERRIDES = {
    "MAZE_ROWS": ("rows", _as_int),
    "MAZE_COLUMNS": ("columns", _as_int),
    "MAZE_ALGORITHM": ("algorithm", _as_str),
    "MAZE_ENABLE_GENERATION_METRICS": ("enable_metrics", _as_bool),
    "MAZE_ROOM_CHANCE": ("room_chance", _as_float),
}


@dataclass
class MazeConfig:
    rows: int = 10
    columns: int = 10
    algorithm: Optional[str] = None
    seed: Optional[int] = None
    enable_metrics: bool = True
    room_chance: float = 0.0

    def resolve(self, environ=None) -> "MazeConfig":
        """Return a copy with environment then Flask app config overrides applied."""
        environ = os.environ if environ is None else environ
        changes = {}
        for key, (attr, convert) in OVERRIDES.items():
            if key in environ:
                changes[attr] = _convert(key, convert, environ[key])
        if has_app_context():
            cfg = current_app.config
            for key, (attr, convert) in OVERRIDES.items():
                if key in cfg:
                    changes[attr] = _convert(key, convert, cfg[key])
        return replace(self, **changes)


def _convert(key, convert, raw):
    try:
        return convert(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid value for {key}: {raw!r}") from e


def load_env_file(path: str) -> bool:
    """Load ``path`` into the environment without clobbering existing variables."""
    return load_dotenv(path, override=False)


__all__ = ["MazeConfig", "OVERRIDES", "load_env_file"]
