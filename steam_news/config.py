"""Configuration primitives and static data for the Steam News Fetcher.

This module centralises endpoint templates, network options, default
settings and the settings path so other layers can import them without
triggering side effects from the Tk application.

Updates: v0.1 - 2026-10-17 - Extracted endpoints and defaults into a standalone module.
Updates: v0.1.1 - 2026-10-17 - Added environment overrides loaded via python-dotenv.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from .utils import read_optional_env, read_optional_float_env

load_dotenv()

# --- Steam endpoints ---------------------------------------------------------------------------

DEFAULT_API_URL_TEMPLATE = (
    "https://api.steampowered.com/ISteamNews/GetNewsForApp/v2/?appid={app_id}"
)
DEFAULT_STORE_URL_TEMPLATE = "https://store.steampowered.com/news/app/{app_id}"


def _template_from_env(name: str, fallback: str) -> str:
    value = read_optional_env(name)
    if value is None or "{app_id}" not in value:
        return fallback
    return value


API_URL_TEMPLATE = _template_from_env("STEAM_NEWS_API_URL", DEFAULT_API_URL_TEMPLATE)
STORE_URL_TEMPLATE = _template_from_env("STEAM_NEWS_STORE_URL", DEFAULT_STORE_URL_TEMPLATE)

# ``None`` keeps the requests default (wait indefinitely).
REQUEST_TIMEOUT_SECONDS: Optional[float] = read_optional_float_env("STEAM_NEWS_TIMEOUT")

# --- Report rendering --------------------------------------------------------------------------

CONTENT_PREVIEW_CHARS = 200
CONTENT_ELLIPSIS = "..."
NO_NEWS_SENTINEL = "No news found for this app."

# --- Save dialog -------------------------------------------------------------------------------

SAVE_DIALOG_TITLE = "Save JSON"
SAVE_DEFAULT_EXTENSION = ".json"
SAVE_FILE_TYPES: list[tuple[str, str]] = [("JSON Files", "*.json")]

# --- Settings persistence ----------------------------------------------------------------------

_LOCAL_APPDATA = os.getenv("LOCALAPPDATA")
_XDG_CONFIG_HOME = os.getenv("XDG_CONFIG_HOME")

if os.name == "nt":
    base_dir = (
        Path(_LOCAL_APPDATA)
        if _LOCAL_APPDATA
        else Path.home() / "AppData" / "Local"
    )
else:
    base_dir = (
        Path(_XDG_CONFIG_HOME)
        if _XDG_CONFIG_HOME
        else Path.home() / ".config"
    )
_DEFAULT_SETTINGS_FILE = base_dir / "SteamNewsFetcher" / "settings.json"

SETTINGS_PATH = Path(os.getenv("STEAM_NEWS_SETTINGS", str(_DEFAULT_SETTINGS_FILE)))

DEFAULT_SETTINGS: Dict[str, Any] = {
    "last_app_id": "",
    "window_geometry": "600x400",
    "debug_mode": False,
    "log_visible": False,
}

# Environment variables reported at startup when set.
ENV_OVERRIDE_NAMES: tuple[str, ...] = (
    "STEAM_NEWS_API_URL",
    "STEAM_NEWS_STORE_URL",
    "STEAM_NEWS_TIMEOUT",
    "STEAM_NEWS_SETTINGS",
)


def merge_settings(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Apply overrides on top of the default settings."""

    merged = DEFAULT_SETTINGS.copy()
    merged.update({key: value for key, value in overrides.items() if key in merged})
    return merged


__all__ = [
    "API_URL_TEMPLATE",
    "CONTENT_ELLIPSIS",
    "CONTENT_PREVIEW_CHARS",
    "DEFAULT_API_URL_TEMPLATE",
    "DEFAULT_SETTINGS",
    "DEFAULT_STORE_URL_TEMPLATE",
    "ENV_OVERRIDE_NAMES",
    "NO_NEWS_SENTINEL",
    "REQUEST_TIMEOUT_SECONDS",
    "SAVE_DEFAULT_EXTENSION",
    "SAVE_DIALOG_TITLE",
    "SAVE_FILE_TYPES",
    "SETTINGS_PATH",
    "STORE_URL_TEMPLATE",
    "merge_settings",
]
