"""Settings dialog for configuring the application."""

import customtkinter as ctk
from typing import Optional, Callable
import logging

from ..discovery.mdns import DiscoveredServer, MDNSDiscovery
from ..i18n import _, get_available_languages, get_language
from ..storage.settings import AppSettings, SettingsManager, is_valid_timeout

logger = logging.getLogger(__name__)


class SettingsDialog(ctk.CTkToplevel):
    """Settings dialog window."""

    def __init__(
        self,
        parent,
        settings_manager: SettingsManager,
        on_save: Optional[Callable[[AppSettings], None]] = None,
        **kwargs,
    ):
        super().__init__(parent, **kwargs)

        self.settings_manager = settings_manager
        self._on_save = on_save
        self._discovery = MDNSDiscovery()
        self._servers: dict[str, DiscoveredServer] = {}
        self._finish_job: Optional[str] = None

        self.title(_("settings_title"))
        self.geometry("560x560")
        self.resizable(True, True)

        # Make modal
        self.transient(parent)
        self.grab_set()

        self._settings = settings_manager.load()

        self._setup_ui()
        self.protocol("WM_DELETE_WINDOW", self._close)

        # Center on parent
        self.update_idletasks()
        x = parent.winfo_x() + (parent.winfo_width() - self.winfo_width()) // 2
        y = parent.winfo_y() + (parent.winfo_height() - self.winfo_height()) // 2
        self.geometry(f"+{x}+{y}")

    def _setup_ui(self) -> None:
        content = ctk.CTkScrollableFrame(self)
        content.pack(fill="both", expand=True, padx=10, pady=10)

        self._setup_service_section(content)
        self._setup_discovery_section(content)
        self._setup_appearance_section(content)

        button_frame = ctk.CTkFrame(self, fg_color="transparent")
        button_frame.pack(fill="x", padx=10, pady=10)

        self.error_label = ctk.CTkLabel(button_frame, text="", text_color="red")
        self.error_label.pack(side="left", padx=5)

        ctk.CTkButton(
            button_frame,
            text=_("cancel"),
            width=100,
            fg_color=("gray70", "gray30"),
            command=self._close,
        ).pack(side="right", padx=5)

        ctk.CTkButton(
            button_frame,
            text=_("save"),
            width=100,
            command=self._save_settings,
        ).pack(side="right", padx=5)

    def _section(self, parent, title_key: str) -> ctk.CTkFrame:
        frame = ctk.CTkFrame(parent)
        frame.pack(fill="x", padx=5, pady=5)
        ctk.CTkLabel(
            frame,
            text=_(title_key),
            font=ctk.CTkFont(size=14, weight="bold"),
        ).pack(anchor="w", padx=10, pady=(10, 5))
        return frame

    def _labeled_entry(self, parent, label_key: str, value: str) -> ctk.CTkEntry:
        row = ctk.CTkFrame(parent, fg_color="transparent")
        row.pack(fill="x", padx=10, pady=3)
        ctk.CTkLabel(row, text=_(label_key), width=150, anchor="w").pack(side="left")
        entry = ctk.CTkEntry(row)
        entry.pack(side="left", fill="x", expand=True)
        entry.insert(0, value)
        return entry

    def _setup_service_section(self, parent) -> None:
        frame = self._section(parent, "service")

        self.url_entry = self._labeled_entry(frame, "service_url", self._settings.service_url)
        self.learn_path_entry = self._labeled_entry(frame, "learn_path", self._settings.learn_path)
        self.timeout_entry = self._labeled_entry(
            frame, "request_timeout", f"{self._settings.request_timeout:g}"
        )

        self.refresh_on_start_var = ctk.BooleanVar(value=self._settings.refresh_on_start)
        ctk.CTkCheckBox(
            frame,
            text=_("refresh_on_start"),
            variable=self.refresh_on_start_var,
        ).pack(anchor="w", padx=10, pady=(5, 10))

    def _setup_discovery_section(self, parent) -> None:
        frame = self._section(parent, "discovery")

        header = ctk.CTkFrame(frame, fg_color="transparent")
        header.pack(fill="x", padx=10, pady=5)

        self.scan_button = ctk.CTkButton(
            header,
            text=_("search_servers"),
            width=140,
            command=self._start_discovery,
        )
        self.scan_button.pack(side="left")

        self.scan_status = ctk.CTkLabel(header, text="", text_color="gray")
        self.scan_status.pack(side="left", padx=10)

        self.server_list = ctk.CTkScrollableFrame(frame, height=100)
        self.server_list.pack(fill="x", padx=10, pady=(5, 10))

    def _setup_appearance_section(self, parent) -> None:
        frame = self._section(parent, "language")

        available_langs = get_available_languages()
        current_lang = self._settings.language or get_language()
        current_name = next(
            (name for code, name in available_langs if code == current_lang), "English"
        )
        self._lang_map = {name: code for code, name in available_langs}

        lang_options = ctk.CTkFrame(frame, fg_color="transparent")
        lang_options.pack(fill="x", padx=10, pady=(5, 10))

        self.language_var = ctk.StringVar(value=current_name)
        ctk.CTkOptionMenu(
            lang_options,
            variable=self.language_var,
            values=list(self._lang_map),
            width=200,
        ).pack(side="left", padx=(0, 10))

        ctk.CTkLabel(
            lang_options,
            text=_("language_restart_note"),
            font=ctk.CTkFont(size=11),
            text_color="gray",
        ).pack(side="left")

        theme_frame = self._section(parent, "theme")
        self.theme_var = ctk.StringVar(value=self._settings.theme)
        theme_options = ctk.CTkFrame(theme_frame, fg_color="transparent")
        theme_options.pack(fill="x", padx=10, pady=(5, 10))

        for value, label_key in [("dark", "theme_dark"), ("light", "theme_light"), ("system", "theme_system")]:
            ctk.CTkRadioButton(
                theme_options,
                text=_(label_key),
                variable=self.theme_var,
                value=value,
            ).pack(side="left", padx=10)

    def _start_discovery(self) -> None:
        """Browse the network for openHAB servers."""
        self._servers.clear()
        self._update_server_list()
        self.scan_status.configure(text=_("searching"))

        if not self._discovery.start(
            on_discovered=lambda server: self.after(0, lambda: self._add_server(server)),
            on_removed=lambda name: self.after(0, lambda: self._remove_server(name)),
        ):
            self.scan_status.configure(text=_("no_servers_found"))
            return

        self.scan_button.configure(state="disabled")
        self._finish_job = self.after(5000, self._finish_discovery)

    def _finish_discovery(self) -> None:
        self._finish_job = None
        self._discovery.stop()
        self.scan_button.configure(state="normal")
        if self._servers:
            self.scan_status.configure(text=_("found_servers", count=len(self._servers)))
        else:
            self.scan_status.configure(text=_("no_servers_found"))

    def _add_server(self, server: DiscoveredServer) -> None:
        self._servers[server.name] = server
        self._update_server_list()

    def _remove_server(self, name: str) -> None:
        if self._servers.pop(name, None) is not None:
            self._update_server_list()

    def _update_server_list(self) -> None:
        for widget in self.server_list.winfo_children():
            widget.destroy()

        for server in self._servers.values():
            server_frame = ctk.CTkFrame(self.server_list)
            server_frame.pack(fill="x", pady=2)

            ctk.CTkLabel(
                server_frame,
                text=server.service_url,
                font=ctk.CTkFont(size=11),
            ).pack(side="left", padx=10, pady=5)

            ctk.CTkButton(
                server_frame,
                text=_("use"),
                width=70,
                height=28,
                command=lambda s=server: self._use_server(s),
            ).pack(side="right", padx=5, pady=5)

    def _use_server(self, server: DiscoveredServer) -> None:
        self.url_entry.delete(0, "end")
        self.url_entry.insert(0, server.service_url)

    def _save_settings(self) -> None:
        """Validate, save all settings and close the dialog."""
        try:
            timeout = float(self.timeout_entry.get())
        except ValueError:
            timeout = 0.0
        if not is_valid_timeout(timeout):
            self.error_label.configure(text=_("invalid_timeout"))
            return

        self._settings.service_url = self.url_entry.get().strip()
        self._settings.learn_path = self.learn_path_entry.get().strip() or "learn"
        self._settings.request_timeout = timeout
        self._settings.refresh_on_start = self.refresh_on_start_var.get()
        self._settings.language = self._lang_map.get(self.language_var.get(), "en")
        self._settings.theme = self.theme_var.get()

        self.settings_manager.save(self._settings)

        ctk.set_appearance_mode(self._settings.theme)

        if self._on_save:
            self._on_save(self._settings)

        self._close()

    def _close(self) -> None:
        if self._finish_job is not None:
            self.after_cancel(self._finish_job)
        self._discovery.stop()
        self.destroy()
