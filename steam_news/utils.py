"""Utility helpers shared across Steam News Fetcher modules.

Updates: v0.1 - 2026-10-17 - Seeded module with environment helpers.
"""

from __future__ import annotations

import os
from typing import Optional


def read_optional_env(name: str) -> Optional[str]:
    """Return trimmed environment variable or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def read_optional_float_env(name: str) -> Optional[float]:
    """Return a positive float from the environment, ``None`` otherwise."""

    raw = read_optional_env(name)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if value <= 0:
        return None
    return value


def is_ascii_digits(value: str) -> bool:
    """True for a non-empty string made only of ``0``-``9``."""

    return bool(value) and all("0" <= ch <= "9" for ch in value)


__all__ = ["read_optional_env", "read_optional_float_env", "is_ascii_digits"]
