from __future__ import annotations

import tkinter as tk
from typing import Tuple


def build_report_view(app: tk.Tk) -> Tuple[tk.Frame, tk.Text]:
    """Build the read-only, scrollable report area and attach it to app.

    Returns:
        Tuple[tk.Frame, tk.Text]: (report_frame, report_text) created widgets.
    """
    report_frame = tk.Frame(app, name="report")
    report_frame.pack(fill="both", expand=True, padx=10, pady=(5, 10))

    scrollbar = tk.Scrollbar(report_frame)
    scrollbar.pack(side="right", fill="y")

    report_text = tk.Text(
        report_frame,
        wrap="word",
        state="disabled",
        yscrollcommand=scrollbar.set,
        relief="flat",
    )
    report_text.pack(fill="both", expand=True)
    scrollbar.config(command=report_text.yview)

    setattr(app, "report_frame", report_frame)
    setattr(app, "report_text", report_text)

    return report_frame, report_text
