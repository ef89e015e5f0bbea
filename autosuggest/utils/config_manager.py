# config_manager.py - JSON config manager

import json
import os

from autosuggest.utils.logger_utils import Log

DEFAULTS = {
    "max_suggestions": 5,
    "rank_by": "frequency",    # or "alphabetical"
    "seed_file": "",           # extra word list loaded on top of the built-in one
    "activity_limit": 50,
    "log_path": "logs/autosuggest.log",
    "log_echo": False,
}


class Config:
    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        # what goes to disk; persist=False overrides only live in self.data
        self._saved = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                Log.warning(f"[Config] could not read {self.path}, using defaults: {e}")
                return
            if not isinstance(loaded, dict):
                Log.warning(f"[Config] {self.path} is not a JSON object, using defaults")
                return
            self._saved.update({k: v for k, v in loaded.items() if k in DEFAULTS})
            self.data.update(self._saved)
        else:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self._saved, f, indent=2)

    def get(self, key):
        return self.data[key]

    def as_dict(self):
        return dict(self.data)

    def show(self):
        return "\n".join(f"{k:15} = {v}" for k, v in self.data.items())

    def set(self, key, val, persist=True):
        """Set an option, coercing `val` to the type of its default. Saved unless persist=False."""
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            lowered = val.strip().lower()
            if lowered not in ("true", "false", "1", "0", "yes", "no", "on", "off"):
                raise ValueError(f"{key} expects a boolean, got {val!r}")
            val = lowered in ("true", "1", "yes", "on")
        self.data[key] = kind(val)
        if persist:
            self._saved[key] = self.data[key]
            self.save()
        Log.info(f"[Config] {key} = {self.data[key]!r}")
