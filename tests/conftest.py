"""Pytest configuration and shared fakes.

- Prepend project root to sys.path so 'steam_news' is importable with testpaths.
- Provide fake HTTP session/response objects and a fake app surface so
  controllers run without a network or a Tk display.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional


def _ensure_project_root_on_syspath() -> None:
    """Prepend repository root to sys.path for package imports."""
    tests_dir = Path(__file__).resolve().parent
    project_root = tests_dir.parent
    root_str = str(project_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_syspath()

import pytest  # noqa: E402

from steam_news.models import Notification  # noqa: E402


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stand-in for requests.Session that records calls."""

    def __init__(
        self,
        response: Optional[FakeResponse] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.response = response or FakeResponse()
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


class FakeApp:
    """Controller-facing surface of SteamNewsApp without any widgets.

    ``after`` runs callbacks immediately, standing in for the Tk event loop.
    """

    def __init__(self, app_id: str = "", report_text: str = "") -> None:
        self.app_id = app_id
        self.report_text = report_text
        self.save_path: Optional[str] = None
        self.settings: Dict[str, Any] = {}
        self.notifications: List[Notification] = []
        self.statuses: List[str] = []
        self.reports_shown: List[str] = []

    def after(self, _delay_ms: int, callback: Callable[[], None]) -> None:
        callback()

    def get_app_id_input(self) -> str:
        return self.app_id

    def get_report_text(self) -> str:
        return self.report_text

    def show_report(self, text: str) -> None:
        self.reports_shown.append(text)
        self.report_text = text

    def set_status(self, message: str) -> None:
        self.statuses.append(message)

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def ask_save_path(self) -> Optional[str]:
        return self.save_path


@pytest.fixture
def fake_app() -> FakeApp:
    return FakeApp()
