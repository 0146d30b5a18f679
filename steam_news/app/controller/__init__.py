"""Controller package re-exports.

Updates: v0.1 - 2026-10-17 - Introduced fetch, save and link controllers.
"""
from __future__ import annotations

from .fetch_controller import FetchController
from .link_controller import LinkController
from .save_controller import SaveController

__all__ = [
    "FetchController",
    "LinkController",
    "SaveController",
]
