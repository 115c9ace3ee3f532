"""Helper utilities."""

from .async_helpers import AsyncBridge

__all__ = ["AsyncBridge"]
