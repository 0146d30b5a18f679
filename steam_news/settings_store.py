"""Persistent settings helpers for the Steam News Fetcher.

Updates: v0.1 - 2026-10-17 - Moved settings load/save out of the application window.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .config import SETTINGS_PATH, merge_settings

logger = logging.getLogger(__name__)


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load application settings from disk, falling back to defaults."""

    target = path or SETTINGS_PATH
    try:
        if target.exists():
            with target.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
            if isinstance(data, dict):
                return merge_settings(data)
    except Exception as exc:  # pragma: no cover - IO issues
        logger.warning("Unable to load settings: %s", exc)
    return merge_settings({})


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Persist application settings to disk."""

    target = path or SETTINGS_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as handle:
            json.dump(settings, handle, indent=2)
    except Exception as exc:  # pragma: no cover - IO issues
        logger.warning("Unable to save settings: %s", exc)


__all__ = ["load_settings", "save_settings"]
