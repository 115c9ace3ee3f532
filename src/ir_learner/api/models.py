"""Data model for things and learn requests."""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Optional


class LearnType(Enum):
    """Kinds of code a remote can learn.

    The value is the two-character code sent as the ``type`` parameter.
    """

    IR = "ir"


class ControlPrefix:
    """Prefixes used to build per-row control identifiers."""

    COMMAND = "command-"
    LEARN = "learn"
    CLEAR = "clear-"


@dataclass(frozen=True)
class Thing:
    """A device managed by the binding."""

    uid: str
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        """Label to show, falling back to the uid."""
        return self.uid if self.label is None else self.label


@dataclass(frozen=True)
class LearnRequest:
    """Parameters for a single learn call."""

    thing: str
    command: str
    type: LearnType = LearnType.IR

    def query_params(self) -> dict[str, str]:
        """Return the query parameters in wire order."""
        return {
            "thing": self.thing,
            "command": self.command,
            "type": self.type.value,
        }


def command_id(uid: str) -> str:
    """Identifier of the command entry for a thing."""
    return ControlPrefix.COMMAND + uid


def learn_id(uid: str, learn_type: LearnType = LearnType.IR) -> str:
    """Identifier of the learn button for a thing, e.g. ``learnir-<uid>``."""
    return f"{ControlPrefix.LEARN}{learn_type.value}-{uid}"


def clear_id(uid: str) -> str:
    """Identifier of the clear button for a thing."""
    return ControlPrefix.CLEAR + uid


def parse_things(payload: Any) -> list[Thing]:
    """Convert a decoded ``/things`` response into things.

    Args:
        payload: The decoded JSON document

    Returns:
        Things in the order the server listed them

    Raises:
        ValueError: If the payload is not a mapping of uid to label
    """
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

    things = []
    for uid, label in payload.items():
        if not uid:
            raise ValueError("thing uid must not be empty")
        if label is not None and not isinstance(label, str):
            raise ValueError(f"label of {uid} must be a string or null")
        things.append(Thing(uid=uid, label=label))

    return things
