"""HTTP session management for Steam News Fetcher network requests.

A single session is built at application start and injected into the
pipeline. Sessions created here are tracked so they can be closed at exit.

Updates: v0.1 - 2026-10-17 - Session factory with retries disabled and shutdown cleanup.
"""

from __future__ import annotations

import atexit
import logging
import threading
from typing import Sequence, Set

import requests
from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

logger = logging.getLogger(__name__)

_HTTP_SESSION_LOCK = threading.Lock()
_HTTP_SESSIONS: Set[Session] = set()


def _build_retry() -> Retry:
    # One attempt per fetch; read errors surface unchanged.
    return Retry(total=0, read=False, raise_on_status=False)


def build_http_session() -> Session:
    """Return a new requests session that never retries."""

    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=1, pool_maxsize=4, max_retries=_build_retry())
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    with _HTTP_SESSION_LOCK:
        _HTTP_SESSIONS.add(session)
    logger.debug("Created HTTP session %s", hex(id(session)))
    return session


def close_all_sessions() -> None:
    """Close tracked HTTP sessions at shutdown."""

    with _HTTP_SESSION_LOCK:
        sessions: Sequence[Session] = tuple(_HTTP_SESSIONS)
        _HTTP_SESSIONS.clear()
    for session in sessions:
        try:
            session.close()
        except Exception:  # pragma: no cover - close during interpreter exit
            continue


atexit.register(close_all_sessions)


__all__ = ["build_http_session", "close_all_sessions"]
