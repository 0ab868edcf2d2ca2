# config_manager.py - JSON config manager

import copy
import json
import os

from fuzzy_matcher.core.protocols import ConfigData
from fuzzy_matcher.utils.logger_utils import get_logger

DEFAULTS: ConfigData = {
    "tolerance": 1,        # default max edit distance for queries
    "max_results": 25,     # rows shown per query in the CLI
    "encoding": "utf-8",   # word list encoding
    "skip_blank": True,    # ignore empty lines in word lists
    "log_path": os.path.join("logs", "fuzzy_matcher.log"),
    "console_log": False,  # echo log lines to the terminal
}

# options that must be >= 0
NON_NEGATIVE = ("tolerance", "max_results")


def _check_value(key, val):
    """Return a description of what is wrong with val for key, or None."""
    kind = type(DEFAULTS[key])
    # bool is an int subclass, compare exact types
    if type(val) is not kind:
        return f"{key} must be {kind.__name__}, got {type(val).__name__}"
    if key in NON_NEGATIVE and val < 0:
        return f"{key} must be >= 0, got {val}"
    return None


class Config:
    def __init__(self, path="fuzzy_matcher.json", autosave=False):
        self.path = path
        self.autosave = autosave
        self.data: ConfigData = copy.deepcopy(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                get_logger().warning(f"config {self.path} unreadable, using defaults ({e})")
                return
            if not isinstance(loaded, dict):
                get_logger().warning(f"config {self.path} is not a JSON object, using defaults")
                return
            for key, val in loaded.items():
                if key not in DEFAULTS:
                    continue
                problem = _check_value(key, val)
                if problem:
                    get_logger().warning(f"config {self.path}: {problem}, keeping default {DEFAULTS[key]!r}")
                    continue
                self.data[key] = val
        elif self.autosave:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            val = val.strip().lower() in ("1", "true", "yes", "on")
        val = kind(val)
        problem = _check_value(key, val)
        if problem:
            raise ValueError(problem)
        self.data[key] = val
        self.save()
