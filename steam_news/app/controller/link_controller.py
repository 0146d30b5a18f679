"""Link controller: opens the API and store pages for the entered app id.

Updates: v0.1 - 2026-10-17 - Added API and store link actions.
"""

from __future__ import annotations

import logging
import webbrowser
from typing import TYPE_CHECKING, Callable

from ...errors import ValidationError
from ...models import Notification
from ...pipeline import build_request_url, build_store_url, validate_app_id

if TYPE_CHECKING:  # Avoid circular import at runtime
    from ...application import SteamNewsApp

logger = logging.getLogger(__name__)


class LinkController:
    def __init__(
        self,
        app: "SteamNewsApp",
        opener: Callable[[str], bool] = webbrowser.open_new_tab,
    ) -> None:
        self.app = app
        self._opener = opener

    def open_api_link(self) -> bool:
        return self._open(build_request_url)

    def open_store_link(self) -> bool:
        return self._open(build_store_url)

    def _open(self, build_url: Callable[[str], str]) -> bool:
        try:
            app_id = validate_app_id(self.app.get_app_id_input())
        except ValidationError as exc:
            self.app.notify(exc.to_notification())
            return False

        url = build_url(app_id)
        try:
            opened = self._opener(url)
        except Exception as exc:
            logger.warning("Unable to open %s: %s", url, exc)
            self._notify_failure(str(exc) or exc.__class__.__name__)
            return False
        if not opened:
            logger.warning("No browser accepted %s", url)
            self._notify_failure("no web browser is available")
            return False

        logger.info("Opened %s", url)
        return True

    def _notify_failure(self, detail: str) -> None:
        self.app.notify(
            Notification(severity="error", title="Error", message=f"Unable to open link: {detail}")
        )


__all__ = ["LinkController"]
