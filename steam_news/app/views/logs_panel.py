"""Log panel builder: a collapsible pane under the report.

Updates: v0.1.1 - 2026-10-17 - Mirror logging output inside the window.
"""

from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:  # Avoid circular import at runtime
    from ...application import SteamNewsApp


def build_logs_panel(app: "SteamNewsApp") -> Tuple[tk.Frame, tk.Text]:
    """Create the hidden pane that ``SteamNewsApp.toggle_logs`` packs on demand.

    Lines are appended by the window's TkQueueHandler callback; the pane
    only provides a read-only text area and its scrollbar.
    """
    pane = tk.Frame(app)
    text = tk.Text(pane, height=8, wrap="word", state="disabled", font=("Consolas", 10))
    scroll = tk.Scrollbar(pane, command=text.yview)
    text.configure(yscrollcommand=scroll.set)
    scroll.pack(side="right", fill="y")
    text.pack(side="left", fill="both", expand=True)

    app.log_visible = False
    app.log_frame = pane
    app.log_text = text
    return pane, text


__all__ = ["build_logs_panel"]
