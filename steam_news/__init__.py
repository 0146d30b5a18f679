"""Steam News Fetcher application package.

Fetches news for a Steam app id from the public ``ISteamNews`` API, renders
it as a plain-text report in a Tkinter window, and saves or links out from
there. The fetch pipeline lives in :mod:`steam_news.pipeline`; all Tkinter
orchestration lives in :mod:`steam_news.application` and :mod:`steam_news.app`.

Updates: v0.1 - 2026-10-17 - Created package scaffold.
"""

from .main import main

__all__ = ["main"]
