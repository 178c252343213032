"""Persistent JSON config helpers.

Stores scanner worker count, UI theme, and preview highlight style.
All access is defensive: malformed or missing config falls back safely.
Scan results are never written here.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..scan_model import DEFAULT_WORKER_COUNT

APP_NAME = "lazydu"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_STYLE = "monokai"


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

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_worker_count() -> int:
    """Return the persisted scanner worker count.

    Booleans, non-integers and values below 1 fall back to the default.
    """
    value = load_config().get("workers")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_WORKER_COUNT
    return value


def _load_name(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def load_theme_name() -> str | None:
    """Return the persisted UI theme name, if any."""
    return _load_name("theme")


def load_style_name() -> str:
    """Return the persisted Pygments style for file previews."""
    return _load_name("style") or DEFAULT_STYLE


def save_preferences(
    *,
    workers: int | None = None,
    theme: str | None = None,
    style: str | None = None,
) -> None:
    """Persist whichever preferences are given, keeping the others as stored."""
    config = load_config()
    if workers is not None and workers >= 1:
        config["workers"] = int(workers)
    if theme:
        config["theme"] = str(theme)
    if style:
        config["style"] = str(style)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_STYLE",
    "load_config",
    "save_config",
    "load_worker_count",
    "load_theme_name",
    "save_preferences",
    "load_style_name",
]
