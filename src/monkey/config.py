# src/monkey/config.py
"""
Persistent user configuration.

Settings live in ``~/.monkey/config.json`` (or the file named by the
``MONKEY_CONFIG`` environment variable). A missing or unreadable file is not
an error: the defaults apply and the file is only written on ``save()``.
"""
import json
import os
from pathlib import Path

DEBUG_LEVELS = ("none", "minimal", "normal", "debug")

DEFAULTS = {
    "debug_level": "none",
    "repl_prompt": ">> ",
    "show_null_results": False,
}


def default_config_path():
    override = os.environ.get("MONKEY_CONFIG")
    if override:
        return Path(override)
    return Path.home() / ".monkey" / "config.json"


class Config:
    def __init__(self, path=None):
        self.path = Path(path) if path else default_config_path()
        self._values = dict(DEFAULTS)
        self.load()

    def load(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return
        if not isinstance(data, dict):
            return
        for key, value in data.items():
            if key in DEFAULTS:
                self._values[key] = value

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._values, f, indent=2, sort_keys=True)

    def reset(self):
        self._values = dict(DEFAULTS)

    def get(self, key, default=None):
        return self._values.get(key, default)

    def set(self, key, value):
        if key not in DEFAULTS:
            raise ValueError(f"Unknown config key '{key}' (expected one of: {', '.join(sorted(DEFAULTS))})")
        if key == "debug_level" and value not in DEBUG_LEVELS:
            raise ValueError(f"Invalid debug level '{value}' (expected one of: {', '.join(DEBUG_LEVELS)})")
        if isinstance(DEFAULTS[key], bool) and isinstance(value, str):
            value = value.strip().lower() in ("1", "true", "yes", "on")
        self._values[key] = value

    def items(self):
        return self._values.items()

    @property
    def debug_level(self):
        env_level = os.environ.get("MONKEY_DEBUG")
        if env_level in DEBUG_LEVELS:
            return env_level
        level = self._values.get("debug_level", "none")
        return level if level in DEBUG_LEVELS else "none"

    @debug_level.setter
    def debug_level(self, level):
        self.set("debug_level", level)

    @property
    def enable_debug_logs(self):
        return self.debug_level != "none"

    @property
    def repl_prompt(self):
        return self._values.get("repl_prompt", DEFAULTS["repl_prompt"])

    @property
    def show_null_results(self):
        return bool(self._values.get("show_null_results"))

    def should_log(self, level):
        """True when messages at ``level`` pass the configured threshold."""
        if level not in DEBUG_LEVELS or level == "none":
            return False
        current = self.debug_level
        if current == "none":
            return False
        return DEBUG_LEVELS.index(level) <= DEBUG_LEVELS.index(current)


config = Config()
