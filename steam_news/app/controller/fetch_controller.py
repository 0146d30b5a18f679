"""Fetch controller: runs the news pipeline off the Tk main thread.

Updates: v0.1 - 2026-10-17 - Extracted the fetch workflow from the window class.
Updates: v0.1.1 - 2026-10-17 - Drop results from superseded requests.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

from ...errors import SteamNewsError, UnexpectedError, ValidationError
from ...models import NewsReport
from ...pipeline import NewsFetchPipeline, validate_app_id

if TYPE_CHECKING:  # Avoid circular import at runtime
    from ...application import SteamNewsApp

logger = logging.getLogger(__name__)


class FetchController:
    """Manage the fetch lifecycle and hand results back to the app.

    Each accepted request gets a generation number. Only the newest
    generation may touch the display; older results and errors are logged
    and dropped, so the latest request wins regardless of completion order.
    """

    def __init__(self, app: "SteamNewsApp", pipeline: NewsFetchPipeline) -> None:
        self.app = app
        self.pipeline = pipeline
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def fetch(self, raw_app_id: Optional[str] = None) -> Optional[int]:
        """Validate the input and start a background fetch.

        Returns the request generation, or ``None`` when validation failed.
        """
        raw = self.app.get_app_id_input() if raw_app_id is None else raw_app_id
        try:
            app_id = validate_app_id(raw)
        except ValidationError as exc:
            logger.info("Rejected app id %r: %s", raw, exc.message)
            self.app.notify(exc.to_notification())
            return None

        self._generation += 1
        generation = self._generation
        self.app.settings["last_app_id"] = app_id
        self.app.set_status(f"Fetching news for app {app_id}…")

        threading.Thread(
            target=self._worker, args=(generation, app_id), daemon=True
        ).start()
        return generation

    def _worker(self, generation: int, app_id: str) -> None:
        """Run the pipeline in a thread, then callback on the UI thread."""
        logger.info("Fetching news for app %s (request #%d)", app_id, generation)
        try:
            report = self.pipeline.fetch_news(app_id)
        except SteamNewsError as exc:
            self.app.after(0, lambda error=exc: self._handle_error(generation, error))
            return
        except Exception as exc:
            logger.exception("Failed to fetch news:")
            wrapped = UnexpectedError(str(exc) or exc.__class__.__name__)
            self.app.after(0, lambda: self._handle_error(generation, wrapped))
            return

        self.app.after(0, lambda: self._handle_result(generation, report))

    def _is_current(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug(
                "Discarding outcome of request #%d; #%d is newer.",
                generation,
                self._generation,
            )
            return False
        return True

    def _handle_result(self, generation: int, report: NewsReport) -> None:
        if not self._is_current(generation):
            return
        logger.info(
            "Showing %d news items for app %s from %s",
            report.item_count,
            report.app_id,
            report.request_url,
        )
        self.app.show_report(report.text)
        if report.item_count:
            self.app.set_status(
                f"Loaded {report.item_count} news items for app {report.app_id}."
            )
        else:
            self.app.set_status(f"No news for app {report.app_id}.")

    def _handle_error(self, generation: int, error: SteamNewsError) -> None:
        if not self._is_current(generation):
            return
        logger.error("News fetch failed: %s", error.message)
        self.app.set_status("Fetch failed.")
        self.app.notify(error.to_notification())


__all__ = ["FetchController"]
