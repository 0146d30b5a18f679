"""Domain models backing the Steam News Fetcher application.

This module collects the dataclasses passed between the fetch pipeline and
the Tk presentation layer, plus the logging handler that forwards records to
the in-window log panel. Nothing here imports Tkinter so the pipeline and its
tests can load the models headless.

Updates: v0.1 - 2026-10-17 - Introduced news item, response and report models.
Updates: v0.1.1 - 2026-10-17 - Added Notification contract and TkQueueHandler.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping, Tuple

NO_TITLE_PLACEHOLDER = "No Title Available"
NO_CONTENT_PLACEHOLDER = "No Content Available"

Severity = Literal["error", "info"]


def _coerce_text(value: Any, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


@dataclass(frozen=True)
class AppMetadata:
    name: str
    version: str
    author: str
    description: str


@dataclass(frozen=True)
class NewsItem:
    title: str = NO_TITLE_PLACEHOLDER
    contents: str = NO_CONTENT_PLACEHOLDER
    url: str = ""

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "NewsItem":
        """Build an item, defaulting each missing or null field on its own."""
        return cls(
            title=_coerce_text(payload.get("title"), NO_TITLE_PLACEHOLDER),
            contents=_coerce_text(payload.get("contents"), NO_CONTENT_PLACEHOLDER),
            url=_coerce_text(payload.get("url"), ""),
        )


@dataclass(frozen=True)
class NewsResponse:
    items: Tuple[NewsItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    @classmethod
    def from_payload(cls, payload: Any) -> "NewsResponse":
        """Extract ``appnews.newsitems`` from decoded JSON.

        Any structural mismatch yields an empty response rather than an error.
        """
        if not isinstance(payload, Mapping):
            return cls()
        appnews = payload.get("appnews")
        if not isinstance(appnews, Mapping):
            return cls()
        entries = appnews.get("newsitems")
        if not isinstance(entries, list):
            return cls()

        items = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                logging.getLogger(__name__).debug(
                    "Skipping malformed news entry of type %s", type(entry).__name__
                )
                continue
            items.append(NewsItem.from_dict(entry))
        return cls(items=tuple(items))


@dataclass(frozen=True)
class NewsReport:
    app_id: str
    request_url: str
    response: NewsResponse
    text: str

    @property
    def item_count(self) -> int:
        return len(self.response)


@dataclass(frozen=True)
class Notification:
    severity: Severity
    title: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    @classmethod
    def info(cls, title: str, message: str) -> "Notification":
        return cls(severity="info", title=title, message=message)


class TkQueueHandler(logging.Handler):
    """Logging handler that forwards formatted records to a Tk callback."""

    def __init__(self, callback: Callable[[int, str], None]) -> None:
        super().__init__()
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self._callback(record.levelno, message)
        except Exception:  # pragma: no cover - guard against issues
            self.handleError(record)


__all__ = [
    "AppMetadata",
    "NewsItem",
    "NewsResponse",
    "NewsReport",
    "Notification",
    "Severity",
    "TkQueueHandler",
    "NO_TITLE_PLACEHOLDER",
    "NO_CONTENT_PLACEHOLDER",
]
