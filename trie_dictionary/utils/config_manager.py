# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_distance": 2,  # edit distance threshold for suggestions
    "log_level": "WARNING",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _coerce(key, val):
    """Convert `val` to the type of the default for `key`; ValueError if it won't fit."""
    if key == "max_distance":
        if isinstance(val, bool):
            raise ValueError(f"max_distance must be an int, got {val!r}")
        if isinstance(val, float) and not val.is_integer():
            raise ValueError(f"max_distance must be a whole number, got {val!r}")
        try:
            out = int(val)
        except (TypeError, ValueError):
            raise ValueError(f"max_distance must be an int, got {val!r}") from None
        if out < 0:
            raise ValueError(f"max_distance must be >= 0, got {out}")
        return out
    if key == "log_level":
        level = str(val).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {val!r}")
        return level
    return type(DEFAULTS[key])(val)


class Config:
    def __init__(self, path=None, **overrides):
        self.path = path
        self.data = dict(DEFAULTS)
        if path:
            self._load()
        for k, v in overrides.items():
            self.set(k, v)

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("could not read config %s: %s (using defaults)", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object (using defaults)", self.path)
            return
        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("ignoring unknown config key %r", k)
                continue
            try:
                self.data[k] = _coerce(k, v)
            except ValueError as e:
                logger.warning("bad value for %r in %s: %s (keeping default)", k, self.path, e)

    def save(self):
        if not self.path:
            raise ValueError("Config has no path to save to")
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce(key, val)

    def as_dict(self):
        return dict(self.data)

    @property
    def max_distance(self) -> int:
        return self.data["max_distance"]
