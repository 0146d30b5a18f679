"""Save controller: writes the displayed report to a user-chosen file.

Updates: v0.1 - 2026-10-17 - Moved report saving off the Tk main thread.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from ...errors import SteamNewsError, UnexpectedError, ValidationError
from ...models import Notification
from ...pipeline import ensure_report_savable, save_report

if TYPE_CHECKING:  # Avoid circular import at runtime
    from ...application import SteamNewsApp

logger = logging.getLogger(__name__)


class SaveController:
    """Persist whatever text the report view currently shows."""

    def __init__(self, app: "SteamNewsApp") -> None:
        self.app = app

    def save(self) -> bool:
        """Prompt for a destination and start the write.

        Returns ``True`` when a write was started.
        """
        report = self.app.get_report_text()
        try:
            ensure_report_savable(report)
        except ValidationError as exc:
            self.app.notify(exc.to_notification())
            return False

        destination = self.app.ask_save_path()
        if not destination:
            logger.debug("Save cancelled by user.")
            return False

        self.app.set_status("Saving report…")
        threading.Thread(
            target=self._worker, args=(report, destination), daemon=True
        ).start()
        return True

    def _worker(self, report: str, destination: str) -> None:
        try:
            saved_path = save_report(report, destination)
        except SteamNewsError as exc:
            self.app.after(0, lambda error=exc: self._handle_error(error))
            return
        except Exception as exc:
            logger.exception("Failed to save report:")
            wrapped = UnexpectedError(str(exc) or exc.__class__.__name__)
            self.app.after(0, lambda: self._handle_error(wrapped))
            return
        self.app.after(0, lambda: self._handle_saved(saved_path))

    def _handle_saved(self, saved_path: Path) -> None:
        self.app.set_status(f"Saved to {saved_path}")
        self.app.notify(
            Notification.info(
                "Save Complete", f"File saved successfully to: {saved_path}"
            )
        )

    def _handle_error(self, error: SteamNewsError) -> None:
        self.app.set_status("Save failed.")
        self.app.notify(error.to_notification())


__all__ = ["SaveController"]
