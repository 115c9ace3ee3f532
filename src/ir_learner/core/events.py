"""Event bus used to report background results to the window."""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of events that can be emitted."""

    # List events
    THINGS_LOADED = "things_loaded"
    THINGS_LOAD_FAILED = "things_load_failed"

    # Learn events
    LEARN_REQUESTED = "learn_requested"
    LEARN_FAILED = "learn_failed"


@dataclass
class Event:
    """An event with type and associated data."""

    type: EventType
    data: Any = None


class EventBus:
    """Synchronous publish/subscribe hub.

    Subscribers run on the publishing thread; handlers that touch widgets
    must hop to the GUI thread themselves.
    """

    def __init__(self):
        self._subscribers: dict[EventType, list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: EventType, callback: Callable[[Event], None]) -> None:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to
            callback: Function to call when event is published
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def unsubscribe(self, event_type: EventType, callback: Callable[[Event], None]) -> None:
        if callback in self._subscribers.get(event_type, []):
            self._subscribers[event_type].remove(callback)

    def publish(self, event_type: EventType, data: Any = None) -> None:
        """Publish an event to all subscribers.

        Args:
            event_type: The type of event
            data: Payload handed to subscribers
        """
        event = Event(event_type, data)
        for callback in list(self._subscribers.get(event_type, [])):
            try:
                callback(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event_type}: {e}")
