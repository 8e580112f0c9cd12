"""Persistent JSON config helpers.

Stores defaults for the filesystem reader.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "frozendir"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReaderSettings:
    """Options for reading a real directory into memory.

    ``follow_symlinks`` reads links as their targets instead of rejecting
    them. ``include_metadata`` attaches stat timestamps to files.
    ``sort_entries`` orders children by name instead of listing order.
    """

    follow_symlinks: bool = False
    include_metadata: bool = False
    sort_entries: bool = False


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so that a read-only
    config location never breaks callers.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("Could not save config %s: %s", CONFIG_PATH, exc)


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else falls back."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def load_reader_settings() -> ReaderSettings:
    """Return persisted reader defaults."""
    data = load_config()
    defaults = ReaderSettings()
    return ReaderSettings(
        follow_symlinks=_load_bool(data, "follow_symlinks", defaults.follow_symlinks),
        include_metadata=_load_bool(data, "include_metadata", defaults.include_metadata),
        sort_entries=_load_bool(data, "sort_entries", defaults.sort_entries),
    )


def save_reader_settings(settings: ReaderSettings) -> None:
    """Persist reader defaults, keeping unrelated keys."""
    config = load_config()
    config["follow_symlinks"] = bool(settings.follow_symlinks)
    config["include_metadata"] = bool(settings.include_metadata)
    config["sort_entries"] = bool(settings.sort_entries)
    save_config(config)


__all__ = [
    "ReaderSettings",
    "load_config",
    "save_config",
    "load_reader_settings",
    "save_reader_settings",
]
