"""Row component for a single thing."""

import customtkinter as ctk
from typing import Callable, Optional
import logging

from ...api.models import LearnType, Thing, clear_id, command_id, learn_id
from ...i18n import _

logger = logging.getLogger(__name__)

LearnCallback = Callable[[Thing, str, LearnType], None]


class ThingRow(ctk.CTkFrame):
    """Label, command entry, "Learn IR" and "Clear" controls for one thing.

    The buttons are bound to the row's ``Thing`` directly; the control
    identifiers are kept for lookup only.
    """

    def __init__(
        self,
        parent,
        thing: Thing,
        on_learn: Optional[LearnCallback] = None,
        **kwargs,
    ):
        """Initialize the row.

        Args:
            parent: Parent widget
            thing: The thing shown in this row
            on_learn: Callback with (thing, command, learn type) when
                "Learn IR" is clicked
            **kwargs: Additional arguments for CTkFrame
        """
        super().__init__(parent, **kwargs)

        self.thing = thing
        self._on_learn = on_learn

        self.command_id = command_id(thing.uid)
        self.learn_id = learn_id(thing.uid, LearnType.IR)
        self.clear_id = clear_id(thing.uid)

        self._setup_ui()

    def _setup_ui(self) -> None:
        self.configure(fg_color="transparent")
        self.grid_columnconfigure(0, weight=1, uniform="cells")
        self.grid_columnconfigure(1, weight=1, uniform="cells")

        self.label = ctk.CTkLabel(
            self,
            text=self.thing.display_label,
            font=ctk.CTkFont(size=13, weight="bold"),
            anchor="w",
        )
        self.label.grid(row=0, column=0, sticky="ew", padx=(10, 5), pady=5)

        self.command_entry = ctk.CTkEntry(
            self,
            placeholder_text=_("command_placeholder"),
        )
        self.command_entry.grid(row=0, column=1, sticky="ew", padx=5, pady=5)

        self.learn_button = ctk.CTkButton(
            self,
            text=_("learn_ir"),
            width=90,
            command=self._handle_learn,
        )
        self.learn_button.grid(row=0, column=2, padx=5, pady=5)

        # Clear is shown but not bound to any request
        self.clear_button = ctk.CTkButton(
            self,
            text=_("clear"),
            width=70,
            state="disabled",
            fg_color=("gray70", "gray30"),
        )
        self.clear_button.grid(row=0, column=3, padx=(5, 10), pady=5)

    @property
    def command_value(self) -> str:
        """Current text of the command entry."""
        return self.command_entry.get()

    def _handle_learn(self) -> None:
        if self._on_learn:
            self._on_learn(self.thing, self.command_value, LearnType.IR)
