# config_manager.py - JSON config manager

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULTS = {
    "dictionary": "/usr/share/dict/words",
    "min_word_length": 5,
    "separator": " ",
    "limit": 0,  # 0 = no limit
    "sort": False,
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_UNSET = object()


def _coerce(key, default, val):
    """Convert `val` (often a str from the CLI) to the type of the default."""
    if isinstance(default, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"{key} expects true/false, got {val!r}")
    if isinstance(default, int):
        try:
            n = int(val)
        except (TypeError, ValueError):
            raise ValueError(f"{key} expects an integer, got {val!r}") from None
        if key == "min_word_length" and n < 1:
            raise ValueError("min_word_length must be at least 1")
        if key == "limit" and n < 0:
            raise ValueError("limit must not be negative")
        return n
    return type(default)(val)


class Config:
    def __init__(self, path="anagrammator.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self.overrides = {}  # per-run values (CLI flags), never saved
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(stored, dict):
            logger.warning("Ignoring config %s: expected a JSON object", self.path)
            return
        for k, v in stored.items():
            if k not in DEFAULTS:
                logger.warning("Unknown config option %r in %s", k, self.path)
                continue
            try:
                self.data[k] = _coerce(k, DEFAULTS[k], v)
            except ValueError as e:
                logger.warning("Bad value for %r in %s: %s", k, self.path, e)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        if key in self.overrides:
            return self.overrides[key]
        return self.data[key]

    def items(self):
        return {**self.data, **self.overrides}.items()

    def override(self, key, val):
        """Use `val` for this run without touching the saved file."""
        if key not in self.data:
            raise KeyError(key)
        self.overrides[key] = _coerce(key, DEFAULTS[key], val)

    def snapshot(self, key):
        """Saved value and per-run override of `key`, for restore()."""
        return self.data[key], self.overrides.get(key, _UNSET)

    def restore(self, key, snap):
        """Undo set() calls made since snapshot(); the override comes back unsaved."""
        saved, override = snap
        self.data[key] = saved
        if override is _UNSET:
            self.overrides.pop(key, None)
        else:
            self.overrides[key] = override
        self.save()

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(key)
        self.data[key] = _coerce(key, DEFAULTS[key], val)
        self.overrides.pop(key, None)
        self.save()
        return self.data[key]
