"""Error taxonomy for the Steam News Fetcher.

Every failure the pipeline can report is a :class:`SteamNewsError`. Each
subclass carries the alert title and severity the presentation layer shows,
so controllers only ever need :meth:`SteamNewsError.to_notification`.

Updates: v0.1 - 2026-10-17 - Introduced pipeline error classes.
"""

from __future__ import annotations

from typing import Optional

from .models import Notification, Severity


class SteamNewsError(Exception):
    """Base class for user-facing pipeline failures."""

    title: str = "Error"
    severity: Severity = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_notification(self) -> Notification:
        return Notification(severity=self.severity, title=self.title, message=self.message)


class ValidationError(SteamNewsError):
    """Input rejected before any I/O (bad app id, nothing to save)."""


class HttpError(SteamNewsError):
    """The news endpoint answered with a non-2xx status."""

    title = "HTTP Error"

    def __init__(self, code: int) -> None:
        super().__init__(f"Failed to fetch news. Code: {code}")
        self.code = code


class NewsConnectionError(SteamNewsError):
    """Transport failure: DNS, refused connection, timeout."""

    title = "Connection Error"

    def __init__(self, message: str = "Unable to connect to the server.") -> None:
        super().__init__(message)


class ParseError(SteamNewsError):
    """The response body is not valid JSON."""

    title = "Parse Error"

    def __init__(self, detail: Optional[str] = None) -> None:
        message = "Unable to parse the news response."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.detail = detail


class ReportIOError(SteamNewsError):
    """Writing the report to disk failed."""

    title = "File Error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Error writing the file: {detail}")
        self.detail = detail


class UnexpectedError(SteamNewsError):
    """Catch-all for failures outside the known taxonomy."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"An unexpected error occurred: {detail}")
        self.detail = detail


__all__ = [
    "SteamNewsError",
    "ValidationError",
    "HttpError",
    "NewsConnectionError",
    "ParseError",
    "ReportIOError",
    "UnexpectedError",
]
