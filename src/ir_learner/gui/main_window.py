"""Main application window."""

import customtkinter as ctk
from tkinter import messagebox
from typing import TYPE_CHECKING, Callable, Optional
import logging

from PIL import ImageTk

from .components.thing_list import ThingList
from .components.thing_row import LearnCallback
from .icon import create_icon
from .settings_dialog import SettingsDialog
from ..api.models import Thing
from ..i18n import _
from ..storage.settings import AppSettings

if TYPE_CHECKING:
    from ..app import IRLearnerApp

logger = logging.getLogger(__name__)


class MainWindow(ctk.CTk):
    """Main window: service header, thing list and status bar."""

    def __init__(
        self,
        app: "IRLearnerApp",
        on_learn: Optional[LearnCallback] = None,
        on_refresh: Optional[Callable[[], None]] = None,
        on_settings_saved: Optional[Callable[[AppSettings], None]] = None,
        on_close: Optional[Callable[[], None]] = None,
        **kwargs,
    ):
        """Initialize the main window.

        Args:
            app: The main application instance
            on_learn: Callback when a row's "Learn IR" button is clicked
            on_refresh: Callback when the refresh button is clicked
            on_settings_saved: Callback after the settings dialog saved
            on_close: Callback when window is closed
            **kwargs: Additional arguments for CTk
        """
        super().__init__(**kwargs)

        self.app = app
        self._on_learn = on_learn
        self._on_refresh = on_refresh
        self._on_settings_saved = on_settings_saved
        self._on_close = on_close

        self._setup_window()
        self._setup_ui()
        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    def _setup_window(self) -> None:
        """Configure the window."""
        self.title(_("app_title"))

        settings = self.app.settings.load()
        width = settings.window_width
        height = settings.window_height

        # Center window on screen
        x = (self.winfo_screenwidth() - width) // 2
        y = (self.winfo_screenheight() - height) // 2

        self.geometry(f"{width}x{height}+{x}+{y}")
        self.minsize(520, 320)

        self._icon = ImageTk.PhotoImage(create_icon(64))
        self.iconphoto(True, self._icon)

    def _setup_ui(self) -> None:
        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._setup_header()

        self.thing_list = ThingList(self, on_learn=self._on_learn)
        self.thing_list.grid(row=1, column=0, sticky="nsew", padx=10, pady=10)

        self._setup_footer()

    def _setup_header(self) -> None:
        header = ctk.CTkFrame(self, height=50, corner_radius=0)
        header.grid(row=0, column=0, sticky="ew")
        header.grid_columnconfigure(1, weight=1)

        title = ctk.CTkLabel(
            header,
            text=_("app_title"),
            font=ctk.CTkFont(size=18, weight="bold"),
        )
        title.grid(row=0, column=0, padx=15, pady=10)

        self.url_label = ctk.CTkLabel(
            header,
            text=self.app.service_url,
            font=ctk.CTkFont(size=11),
            text_color="gray",
            anchor="w",
        )
        self.url_label.grid(row=0, column=1, sticky="w", padx=10)

        refresh_btn = ctk.CTkButton(
            header,
            text="\U0001F504 " + _("refresh"),  # Refresh icon
            width=110,
            command=self.refresh,
        )
        refresh_btn.grid(row=0, column=2, padx=5, pady=10)

        settings_btn = ctk.CTkButton(
            header,
            text="\U00002699",  # Gear icon
            width=40,
            command=self._show_settings,
        )
        settings_btn.grid(row=0, column=3, padx=5, pady=10)

        self.theme_btn = ctk.CTkButton(
            header,
            text="\U0001F319",  # Moon icon
            width=40,
            command=self._toggle_theme,
        )
        self.theme_btn.grid(row=0, column=4, padx=(0, 15), pady=10)

    def _setup_footer(self) -> None:
        footer = ctk.CTkFrame(self, height=30, corner_radius=0)
        footer.grid(row=2, column=0, sticky="ew")
        footer.grid_columnconfigure(0, weight=1)

        self.status_label = ctk.CTkLabel(
            footer,
            text="",
            font=ctk.CTkFont(size=11),
            text_color="gray",
        )
        self.status_label.grid(row=0, column=0, padx=10, pady=5, sticky="w")

        self.count_label = ctk.CTkLabel(
            footer,
            text=_("thing_count_many", count=0),
            font=ctk.CTkFont(size=11),
            text_color="gray",
        )
        self.count_label.grid(row=0, column=1, padx=10, pady=5, sticky="e")

    def _handle_close(self) -> None:
        """Save the window size, then hand over to the app."""
        self.app.settings.update(
            window_width=self.winfo_width(),
            window_height=self.winfo_height(),
        )

        if self._on_close:
            self._on_close()
        else:
            self.destroy()

    def refresh(self) -> None:
        """Show the loading status and ask the app to reload the list."""
        self.set_status(_("loading_things"))
        if self._on_refresh:
            self._on_refresh()

    def _show_settings(self) -> None:
        logger.info("Opening settings")
        SettingsDialog(
            self,
            settings_manager=self.app.settings,
            on_save=self._handle_settings_saved,
        )

    def _handle_settings_saved(self, settings: AppSettings) -> None:
        self.url_label.configure(text=settings.service_url)
        self.set_status(_("settings_saved"))
        if self._on_settings_saved:
            self._on_settings_saved(settings)

    def _toggle_theme(self) -> None:
        """Toggle between light and dark theme."""
        new_theme = "Light" if ctk.get_appearance_mode() == "Dark" else "Dark"

        ctk.set_appearance_mode(new_theme)
        self.app.settings.update(theme=new_theme.lower())

        self.theme_btn.configure(text="\U0001F319" if new_theme == "Dark" else "\U00002600")

    # ThingListView

    def show_things(self, things: list[Thing]) -> None:
        self.thing_list.show_things(things)
        self._update_thing_count()

    def clear(self) -> None:
        self.thing_list.clear()
        self._update_thing_count()

    # Notifier

    def show_info(self, title: str, message: str) -> None:
        messagebox.showinfo(title, message, parent=self)

    def show_error(self, title: str, message: str) -> None:
        messagebox.showerror(title, message, parent=self)

    def set_status(self, message: str) -> None:
        """Set the status bar message."""
        self.status_label.configure(text=message)

    def _update_thing_count(self) -> None:
        count = len(self.thing_list)
        if count == 1:
            text = _("thing_count_one")
        else:
            text = _("thing_count_many", count=count)
        self.count_label.configure(text=text)

    def schedule(self, callback: Callable[[], None], delay_ms: int = 0) -> str:
        """Schedule a callback to run on the GUI thread.

        Args:
            callback: Function to call
            delay_ms: Delay in milliseconds

        Returns:
            The after ID
        """
        return self.after(delay_ms, callback)
