"""Fetch, parse and render pipeline for Steam app news.

The pure helpers (validation, URL building, parsing, rendering, saving) are
module functions so controllers and tests can call them directly.
:class:`NewsFetchPipeline` owns the injected HTTP session and composes the
helpers into one fetch call. Every step raises a
:class:`~steam_news.errors.SteamNewsError` subclass on failure; nothing is
retried.

Updates: v0.1 - 2026-10-17 - Introduced pipeline with session injection.
Updates: v0.1.1 - 2026-10-17 - Added store link builder and report saving.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

import requests

from .config import (
    API_URL_TEMPLATE,
    CONTENT_ELLIPSIS,
    CONTENT_PREVIEW_CHARS,
    NO_NEWS_SENTINEL,
    REQUEST_TIMEOUT_SECONDS,
    STORE_URL_TEMPLATE,
)
from .errors import (
    HttpError,
    NewsConnectionError,
    ParseError,
    ReportIOError,
    SteamNewsError,
    UnexpectedError,
    ValidationError,
)
from .models import NewsReport, NewsResponse
from .utils import is_ascii_digits

logger = logging.getLogger(__name__)

INVALID_APP_ID_MESSAGE = "App ID must be a number."
NOTHING_TO_SAVE_MESSAGE = "No news to save."


def _describe(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


def validate_app_id(raw: str) -> str:
    """Return ``raw`` unchanged when it is a non-empty run of digits."""

    if not isinstance(raw, str) or not is_ascii_digits(raw):
        raise ValidationError(INVALID_APP_ID_MESSAGE)
    return raw


def build_request_url(app_id: str) -> str:
    return API_URL_TEMPLATE.format(app_id=app_id)


def build_store_url(app_id: str) -> str:
    return STORE_URL_TEMPLATE.format(app_id=app_id)


def parse_news(body: str) -> NewsResponse:
    """Decode a GetNewsForApp body.

    Only a body that is not JSON at all is an error; a missing
    ``appnews.newsitems`` path gives an empty response.
    """

    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ParseError(_describe(exc)) from exc
    return NewsResponse.from_payload(payload)


def render_report(response: NewsResponse) -> str:
    # The ellipsis is added even when the contents fit in the preview.
    if response.is_empty:
        return NO_NEWS_SENTINEL
    blocks = []
    for item in response.items:
        block = f"{item.title}\n{item.contents[:CONTENT_PREVIEW_CHARS]}{CONTENT_ELLIPSIS}\n"
        if item.url:
            block += f"Link: {item.url}\n"
        blocks.append(block + "\n")
    return "".join(blocks)


def ensure_report_savable(report: str) -> str:
    if not isinstance(report, str) or not report.strip():
        raise ValidationError(NOTHING_TO_SAVE_MESSAGE)
    return report


def save_report(report: str, destination: Union[str, Path]) -> Path:
    """Write ``report`` verbatim as UTF-8 and return the absolute path.

    Blank reports and text that cannot be encoded (lone surrogates) are
    rejected before the file is touched. The write is not atomic; an OS
    failure may leave a partial file behind.
    """

    ensure_report_savable(report)
    path = Path(destination)
    try:
        data = report.encode("utf-8")
    except UnicodeEncodeError as exc:
        logger.warning("Report for %s is not encodable as UTF-8: %s", path, exc)
        raise ReportIOError(_describe(exc)) from exc
    try:
        with path.open("wb") as handle:
            handle.write(data)
    except OSError as exc:
        logger.warning("Unable to save report to %s: %s", path, exc)
        raise ReportIOError(_describe(exc)) from exc
    resolved = path.resolve()
    logger.info("Saved report (%d chars) to %s", len(report), resolved)
    return resolved


class NewsFetchPipeline:
    """Validate, fetch, parse and render news for one app id per call."""

    def __init__(
        self,
        session: requests.Session,
        *,
        timeout: Optional[float] = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session
        self._timeout = timeout

    def fetch(self, url: str) -> str:
        """Perform a single GET and return the body of a 2xx response."""

        logger.debug("GET %s (timeout=%s)", url, self._timeout)
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.warning("Connection to %s failed: %s", url, exc)
            raise NewsConnectionError() from exc
        except Exception as exc:
            logger.exception("Unexpected failure requesting %s", url)
            raise UnexpectedError(_describe(exc)) from exc

        status = response.status_code
        if not 200 <= status < 300:
            logger.warning("News request for %s returned HTTP %s", url, status)
            raise HttpError(status)
        return response.text

    def fetch_news(self, raw_app_id: str) -> NewsReport:
        """Run validate -> URL -> fetch -> parse -> render for ``raw_app_id``."""

        app_id = validate_app_id(raw_app_id)
        url = build_request_url(app_id)
        try:
            body = self.fetch(url)
            response = parse_news(body)
            text = render_report(response)
        except SteamNewsError:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure handling news for app %s", app_id)
            raise UnexpectedError(_describe(exc)) from exc

        logger.info("Fetched %d news items for app %s", len(response), app_id)
        return NewsReport(app_id=app_id, request_url=url, response=response, text=text)


__all__ = [
    "INVALID_APP_ID_MESSAGE",
    "NOTHING_TO_SAVE_MESSAGE",
    "NewsFetchPipeline",
    "build_request_url",
    "build_store_url",
    "ensure_report_savable",
    "parse_news",
    "render_report",
    "save_report",
    "validate_app_id",
]
