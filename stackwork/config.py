"""Configuration management — JSON-based, stored in ~/.config/stackwork/."""
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "debug_logging": False,
    "stack_capacity": None,  # bound on each algorithm's private stack; null = unbounded
}

CONFIG_DIR = Path.home() / ".config" / "stackwork"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    def __init__(self, path: Path = None):
        self.path = Path(path) if path is not None else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if self.path.exists():
            try:
                with open(self.path, "r") as f:
                    stored = json.load(f)
            except (ValueError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self.path, e)
                return
            if not isinstance(stored, dict):
                logger.warning("Ignoring config %s: expected a JSON object, got %s",
                               self.path, type(stored).__name__)
                return
            self._data.update(stored)

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def debug_logging(self):
        return bool(self._data.get("debug_logging", False))

    @debug_logging.setter
    def debug_logging(self, val):
        self._data["debug_logging"] = bool(val)
        self.save()

    @property
    def stack_capacity(self):
        value = self._data.get("stack_capacity")
        if value is None:
            return None
        if not _is_capacity(value):
            logger.warning("Invalid stack_capacity %r, using unbounded", value)
            return None
        return value

    @stack_capacity.setter
    def stack_capacity(self, val):
        if val is not None and not _is_capacity(val):
            raise ValueError(f"stack_capacity must be a non-negative int or None, got {val!r}")
        self._data["stack_capacity"] = val
        self.save()


def _is_capacity(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
