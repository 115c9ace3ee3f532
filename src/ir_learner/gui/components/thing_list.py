"""Scrollable list of things (the ``things-table``)."""

import customtkinter as ctk
from typing import Optional
import logging

from .thing_row import LearnCallback, ThingRow
from ...api.models import Thing
from ...i18n import _

logger = logging.getLogger(__name__)

TABLE_ID = "things-table"


class ThingList(ctk.CTkScrollableFrame):
    """A scrollable list with one row per thing, rows separated by spacers."""

    def __init__(
        self,
        parent,
        on_learn: Optional[LearnCallback] = None,
        **kwargs,
    ):
        """Initialize the thing list.

        Args:
            parent: Parent widget
            on_learn: Callback when a row's "Learn IR" button is clicked
            **kwargs: Additional arguments for CTkScrollableFrame
        """
        super().__init__(parent, **kwargs)

        self.table_id = TABLE_ID
        self._on_learn = on_learn
        self._rows: dict[str, ThingRow] = {}
        self._spacers: list[ctk.CTkFrame] = []

        self.grid_columnconfigure(0, weight=1)

        self._empty_label = ctk.CTkLabel(
            self,
            text=_("no_things"),
            font=ctk.CTkFont(size=14),
            text_color="gray",
        )
        self._show_empty_state()

    def _show_empty_state(self) -> None:
        self._empty_label.grid(row=0, column=0, pady=50)

    def _hide_empty_state(self) -> None:
        self._empty_label.grid_forget()

    def show_things(self, things: list[Thing]) -> None:
        """Replace the current rows with one row per thing, in order.

        Args:
            things: Things to show
        """
        self.clear()

        if things:
            self._hide_empty_state()

        for thing in things:
            if thing.uid in self._rows:
                logger.warning(f"Duplicate thing uid {thing.uid}, keeping first")
                continue
            self._add_row(thing)

        logger.debug(f"Rendered {len(self._rows)} things")

    def _add_row(self, thing: Thing) -> ThingRow:
        grid_row = 2 * len(self._rows)

        row = ThingRow(self, thing=thing, on_learn=self._on_learn)
        row.grid(row=grid_row, column=0, sticky="ew", padx=5)

        spacer = ctk.CTkFrame(self, height=2, fg_color=("gray80", "gray25"))
        spacer.grid(row=grid_row + 1, column=0, sticky="ew", padx=10, pady=4)

        self._rows[thing.uid] = row
        self._spacers.append(spacer)
        return row

    def clear(self) -> None:
        """Remove all rows."""
        for widget in [*self._rows.values(), *self._spacers]:
            widget.destroy()

        self._rows.clear()
        self._spacers.clear()
        self._show_empty_state()

    def get_row(self, uid: str) -> Optional[ThingRow]:
        """Get the row of a thing.

        Args:
            uid: The thing uid

        Returns:
            The ThingRow, or None if not shown
        """
        return self._rows.get(uid)

    def find_entry(self, control_id: str) -> Optional[ctk.CTkEntry]:
        """Find a command entry by its identifier (``command-<uid>``)."""
        for row in self._rows.values():
            if row.command_id == control_id:
                return row.command_entry
        return None

    @property
    def things(self) -> list[Thing]:
        """Things currently shown, in display order."""
        return [row.thing for row in self._rows.values()]

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, uid: str) -> bool:
        return uid in self._rows
