"""Action bar builder for the SteamNewsApp main window.

Updates: v0.1 - 2026-10-17 - Introduced save, link and log toggles; commands
delegate to controllers.
"""

from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # Avoid circular import at runtime
    from ...application import SteamNewsApp


def build_action_bar(app: "SteamNewsApp") -> tk.Frame:
    """Create and wire the second row of buttons.

    Widgets are attached back on the app instance so the window can update
    the status line and the log toggle label.
    """
    action_bar = tk.Frame(app)
    action_bar.pack(fill="x", padx=10, pady=(0, 5))
    app.action_bar = action_bar

    app.save_btn = tk.Button(
        action_bar,
        text="Save JSON",
        command=app.save_controller.save,
    )
    app.save_btn.pack(side="left")

    app.open_api_btn = tk.Button(
        action_bar,
        text="Open API Link",
        command=app.link_controller.open_api_link,
    )
    app.open_api_btn.pack(side="left", padx=(10, 0))

    app.open_store_btn = tk.Button(
        action_bar,
        text="Open Steam Link",
        command=app.link_controller.open_store_link,
    )
    app.open_store_btn.pack(side="left", padx=(10, 0))

    # Right-side cluster: logs and debug toggles
    right_cluster = tk.Frame(action_bar)
    right_cluster.pack(side="right")

    app.toggle_logs_btn = tk.Button(
        right_cluster,
        text="Show Logs",
        command=app.toggle_logs,
    )
    app.toggle_logs_btn.pack(side="right", padx=(10, 0))

    app.debug_var = tk.BooleanVar(value=bool(app.settings.get("debug_mode", False)))
    app.debug_check = tk.Checkbutton(
        right_cluster,
        text="Debug",
        variable=app.debug_var,
        command=app.toggle_debug_mode,
    )
    app.debug_check.pack(side="right")

    app.status_var = tk.StringVar(value="Enter an app id and press Get News.")
    app.status_label = tk.Label(
        app,
        textvariable=app.status_var,
        anchor="w",
        fg="#555555",
        font=("Segoe UI", 9, "italic"),
    )
    app.status_label.pack(fill="x", padx=10)

    return action_bar


__all__ = ["build_action_bar"]
