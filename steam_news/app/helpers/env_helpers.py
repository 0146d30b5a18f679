"""Environment reporting for the startup log.

Updates: v0.1 - 2026-10-17 - Report STEAM_NEWS_* overrides at startup.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional

_MAX_REPORTED_CHARS = 80


def shorten_env_value(value: Optional[str]) -> Optional[str]:
    """Clip long override values (URL templates) to one log-friendly line."""
    if not value:
        return None
    if len(value) > _MAX_REPORTED_CHARS:
        return value[: _MAX_REPORTED_CHARS - 3] + "…"
    return value


def collect_env_overrides(names: Iterable[str]) -> Dict[str, str]:
    """Return the set overrides among ``names``, clipped for logging."""
    overrides: Dict[str, str] = {}
    for name in names:
        value = shorten_env_value(os.getenv(name))
        if value is not None:
            overrides[name] = value
    return overrides


__all__ = ["shorten_env_value", "collect_env_overrides"]
