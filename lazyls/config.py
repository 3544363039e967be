"""Persistent JSON config helpers.

Stores the hidden-entry preference and the default theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored so a read-only config
    directory never breaks a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_show_hidden() -> bool:
    """Load persisted hidden-entry visibility, defaulting to ``False``."""
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted theme name, or ``None`` when unset or invalid."""
    value = load_config().get("theme")
    if isinstance(value, str) and value.strip():
        return value
    return None


def save_theme_name(name: str) -> None:
    config = load_config()
    config["theme"] = name
    save_config(config)
