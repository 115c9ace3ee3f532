"""Reusable GUI components."""

from .thing_row import ThingRow
from .thing_list import ThingList

__all__ = ["ThingRow", "ThingList"]
