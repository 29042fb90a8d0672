# config_manager.py - JSON config manager for suggestion settings

import json
import logging
import os
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich import box

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "stop_words": [],
    "max_combined_words": 3,
    "max_word_to_ignore_length": 1,
    "keyword": "",
}

# keys passed straight through to core.build()
BUILD_KEYS = ("stop_words", "max_combined_words", "max_word_to_ignore_length")


class ConfigError(ValueError):
    """Unknown option or a value that can't be coerced to the option's type."""


def _coerce(key: str, default: Any, val: Any) -> Any:
    # JSON null means "use the default"
    if val is None:
        return list(default) if isinstance(default, list) else default
    if isinstance(default, list):
        if isinstance(val, str):
            return [w.strip() for w in val.split(",") if w.strip()]
        if isinstance(val, (list, tuple)):
            return [str(w) for w in val]
        raise ConfigError(f"{key}: expected a list or comma-separated string, got {val!r}")
    if isinstance(default, int):
        try:
            return int(val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"{key}: expected an integer, got {val!r}") from e
    if not isinstance(val, str):
        raise ConfigError(f"{key}: expected a string, got {val!r}")
    return val


class Config:
    """
    Settings for building a SuggestionGenerator.
    path=None keeps everything in memory; with a path the JSON file is
    merged over the defaults and save() writes it back.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULTS.items()}
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for k, v in loaded.items():
            if k not in self.data:
                logger.warning("config %s: ignoring unknown option %r", self.path, k)
                continue
            self.data[k] = _coerce(k, DEFAULTS[k], v)
        logger.debug("loaded config from %s", self.path)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)
        logger.debug("saved config to %s", self.path)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        self.data[key] = _coerce(key, DEFAULTS[key], val)

    def as_build_kwargs(self) -> Dict[str, Any]:
        return {k: self.data[k] for k in BUILD_KEYS}

    def show(self, console: Optional[Console] = None):
        console = console or Console()
        table = Table(title="Config", box=box.SIMPLE, show_edge=False)
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            shown = ", ".join(v) if isinstance(v, list) else str(v)
            table.add_row(k, shown or "-")
        console.print(table)
