"""Tkinter application window for the Steam News Fetcher.

The window owns the explicit application state: persisted settings, the
single HTTP session, the fetch pipeline built on it, and the controllers.
Controllers call back into the small public surface below
(``get_app_id_input``, ``show_report``, ``notify`` …) so they never touch
widgets directly.

Updates: v0.1 - 2026-10-17 - Introduced SteamNewsApp with view builders and controllers.
Updates: v0.1.1 - 2026-10-17 - Added log panel, debug toggle and settings persistence.
"""

from __future__ import annotations

import logging
import tkinter as tk
from collections import deque
from pathlib import Path
from tkinter import filedialog, messagebox
from typing import Optional

from .app.controller import FetchController, LinkController, SaveController
from .app.helpers.env_helpers import collect_env_overrides
from .app.views.action_bar import build_action_bar
from .app.views.input_bar import build_input_bar
from .app.views.logs_panel import build_logs_panel
from .app.views.report_view import build_report_view
from .config import (
    DEFAULT_SETTINGS,
    ENV_OVERRIDE_NAMES,
    SAVE_DEFAULT_EXTENSION,
    SAVE_DIALOG_TITLE,
    SAVE_FILE_TYPES,
    SETTINGS_PATH,
)
from .http_client import build_http_session
from .models import Notification, TkQueueHandler
from .pipeline import NewsFetchPipeline
from .settings_store import load_settings, save_settings

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
_MAX_LOG_LINES = 500


class SteamNewsApp(tk.Tk):
    """Single-screen window: enter an app id, read, save or open its news."""

    def __init__(self, settings_path: Optional[Path] = None) -> None:
        super().__init__()
        self.title("Steam News Fetcher")
        self.geometry(DEFAULT_SETTINGS["window_geometry"])

        self.log_buffer: deque[tuple[int, str]] = deque()
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self._install_log_handlers()

        self.settings_path = settings_path or SETTINGS_PATH
        self.settings = load_settings(self.settings_path)
        stored_geometry = self.settings.get("window_geometry")
        if isinstance(stored_geometry, str) and stored_geometry.strip():
            try:
                self.geometry(stored_geometry)
            except tk.TclError:
                logger.debug("Ignoring invalid stored geometry value: %s", stored_geometry)

        self.http_session = build_http_session()
        self.pipeline = NewsFetchPipeline(self.http_session)
        self.fetch_controller = FetchController(self, self.pipeline)
        self.save_controller = SaveController(self)
        self.link_controller = LinkController(self)

        build_input_bar(self)
        build_action_bar(self)
        build_report_view(self)
        build_logs_panel(self)

        self._update_handler_level(announce=False)
        if bool(self.settings.get("log_visible", False)):
            self._set_logs_visible(True)

        self._log_startup_report()
        self.app_id_entry.focus_set()

    # Logging

    def _install_log_handlers(self) -> None:
        formatter = logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S")
        self.log_handler = TkQueueHandler(self._handle_log_record)
        self.log_handler.setFormatter(formatter)
        self.log_handler.setLevel(logging.INFO)
        self.root_logger = logging.getLogger()
        self.root_logger.setLevel(logging.DEBUG)
        for handler in list(self.root_logger.handlers):
            if isinstance(handler, TkQueueHandler):
                self.root_logger.removeHandler(handler)
        self.root_logger.addHandler(self.log_handler)
        self.console_handler = logging.StreamHandler()
        self.console_handler.setFormatter(formatter)
        self.console_handler.setLevel(logging.INFO)
        self.root_logger.addHandler(self.console_handler)

    def _update_handler_level(self, *, announce: bool = True) -> None:
        level = logging.DEBUG if bool(self.debug_var.get()) else logging.INFO
        self.log_handler.setLevel(level)
        self.console_handler.setLevel(level)
        if announce:
            if level == logging.DEBUG:
                logger.info("Debug logging enabled.")
            else:
                logger.info("Debug logging disabled; showing INFO and above.")

    def _handle_log_record(self, level: int, message: str) -> None:
        self.log_buffer.append((level, message))
        self.after(0, self._flush_log_buffer)

    def _flush_log_buffer(self) -> None:
        if not hasattr(self, "log_text"):
            return
        while self.log_buffer:
            _level, msg = self.log_buffer.popleft()
            self._append_log_line(msg)

    def _append_log_line(self, message: str) -> None:
        self.log_text.config(state="normal")
        self.log_text.insert(tk.END, message + "\n")
        line_count = int(self.log_text.index("end-1c").split(".")[0])
        if line_count > _MAX_LOG_LINES:
            self.log_text.delete("1.0", f"{line_count - _MAX_LOG_LINES}.0")
        self.log_text.see(tk.END)
        self.log_text.config(state="disabled")

    def _log_startup_report(self) -> None:
        overrides = collect_env_overrides(ENV_OVERRIDE_NAMES)
        if overrides:
            logger.info("Startup environment overrides: %s", overrides)
        logger.debug("Settings loaded: %s", self.settings)

    def toggle_logs(self) -> None:
        self._set_logs_visible(not self.log_visible)
        self.settings["log_visible"] = self.log_visible

    def _set_logs_visible(self, visible: bool) -> None:
        if visible:
            self.log_frame.pack(fill="x", padx=10, pady=(0, 10))
            self.toggle_logs_btn.config(text="Hide Logs")
            self._flush_log_buffer()
        else:
            self.log_frame.pack_forget()
            self.toggle_logs_btn.config(text="Show Logs")
        self.log_visible = visible

    def toggle_debug_mode(self) -> None:
        self.settings["debug_mode"] = bool(self.debug_var.get())
        self._update_handler_level()

    # Controller surface

    def get_app_id_input(self) -> str:
        return self.app_id_var.get()

    def show_report(self, text: str) -> None:
        """Replace the displayed report; never merges with the previous one."""
        self.report_text.config(state="normal")
        self.report_text.delete("1.0", tk.END)
        self.report_text.insert("1.0", text)
        self.report_text.see("1.0")
        self.report_text.config(state="disabled")

    def get_report_text(self) -> str:
        return self.report_text.get("1.0", "end-1c")

    def set_status(self, message: str) -> None:
        self.status_var.set(message)

    def notify(self, notification: Notification) -> None:
        if notification.is_error:
            messagebox.showerror(notification.title, notification.message, parent=self)
        else:
            messagebox.showinfo(notification.title, notification.message, parent=self)

    def ask_save_path(self) -> Optional[str]:
        path = filedialog.asksaveasfilename(
            parent=self,
            title=SAVE_DIALOG_TITLE,
            defaultextension=SAVE_DEFAULT_EXTENSION,
            filetypes=SAVE_FILE_TYPES,
        )
        return path or None

    # Lifecycle

    def _on_close(self) -> None:
        if str(self.state()) == "normal":
            self.settings["window_geometry"] = self.geometry()
        entered = self.get_app_id_input().strip()
        if entered:
            self.settings["last_app_id"] = entered
        save_settings(self.settings, self.settings_path)
        self.http_session.close()
        self.root_logger.removeHandler(self.log_handler)
        self.destroy()


__all__ = ["SteamNewsApp"]
