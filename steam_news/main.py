"""Application entrypoint wiring for the Steam News Fetcher.

The Tk window is imported lazily so the metadata (and the rest of the
package) stays importable on interpreters built without Tkinter.

Updates: v0.1 - 2026-10-17 - Added metadata and main routine.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from .models import AppMetadata

logger = logging.getLogger(__name__)

APP_VERSION = "0.1"
APP_METADATA = AppMetadata(
    name="Steam News Fetcher",
    version=f"v{APP_VERSION}",
    author="Steam News Fetcher contributors",
    description=(
        "Tkinter desktop utility that shows Steam news for an app id, saves the "
        "report to disk and opens the related API and store pages."
    ),
)


def main(settings_path: Optional[str] = None) -> None:
    """Launch the Steam News Fetcher Tk application."""

    logger.debug("Bootstrapping %s %s", APP_METADATA.name, APP_METADATA.version)

    application = importlib.import_module("steam_news.application")

    app = application.SteamNewsApp(
        settings_path=Path(settings_path) if settings_path else None
    )
    app.mainloop()


__all__ = ["APP_METADATA", "APP_VERSION", "main"]
