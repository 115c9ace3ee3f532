"""Core modules for IR Learner."""

from .events import EventBus, Event, EventType

__all__ = ["EventBus", "Event", "EventType"]
