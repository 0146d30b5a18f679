"""Input bar builder: app id entry and the Get News trigger.

Updates: v0.1 - 2026-10-17 - Moved input row construction out of SteamNewsApp.
"""

from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # Avoid circular import at runtime
    from ...application import SteamNewsApp


def build_input_bar(app: "SteamNewsApp") -> tk.Frame:
    """Create the ``Enter App ID`` row and attach its widgets to the app."""
    input_bar = tk.Frame(app)
    input_bar.pack(fill="x", padx=10, pady=(10, 5))

    tk.Label(input_bar, text="Enter App ID:").pack(side="left")

    app.app_id_var = tk.StringVar(value=str(app.settings.get("last_app_id", "")))
    app.app_id_entry = tk.Entry(input_bar, textvariable=app.app_id_var, width=18)
    app.app_id_entry.pack(side="left", padx=(10, 0))
    app.app_id_entry.bind("<Return>", lambda _event: app.fetch_controller.fetch())

    app.get_news_btn = tk.Button(
        input_bar,
        text="Get News",
        command=app.fetch_controller.fetch,
    )
    app.get_news_btn.pack(side="left", padx=(10, 0))

    return input_bar


__all__ = ["build_input_bar"]
