"""Utilities for running aiohttp calls alongside tkinter's main loop."""

import asyncio
import threading
from typing import Coroutine, Any, Optional
from concurrent.futures import Future
import logging

logger = logging.getLogger(__name__)


class AsyncBridge:
    """Runs an asyncio event loop in a background thread.

    Coroutines submitted from the GUI thread execute on that loop; they hand
    results back to the GUI themselves, e.g. through ``widget.after``.
    """

    def __init__(self):
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if the async bridge is running."""
        return self._running and self._loop is not None

    def start(self) -> None:
        """Start the async event loop in a background thread."""
        if self._running:
            return

        self._loop = asyncio.new_event_loop()
        self._running = True
        self._thread = threading.Thread(target=self._run_loop, daemon=True, name="AsyncBridge")
        self._thread.start()
        logger.info("AsyncBridge started")

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_forever()
        finally:
            self._loop.close()
            logger.info("AsyncBridge event loop closed")

    def submit(self, coro: Coroutine[Any, Any, Any]) -> Optional[Future]:
        """Schedule a coroutine on the background loop.

        Exceptions raised by the coroutine are logged.

        Args:
            coro: The coroutine to run

        Returns:
            A Future for the result, or None if the bridge is not running
        """
        if not self.is_running:
            logger.warning("AsyncBridge not running, cannot schedule coroutine")
            coro.close()
            return None

        future = asyncio.run_coroutine_threadsafe(coro, self._loop)
        future.add_done_callback(self._log_failure)
        return future

    @staticmethod
    def _log_failure(future: Future) -> None:
        if not future.cancelled() and future.exception() is not None:
            logger.error(f"Error in async operation: {future.exception()}")

    def run_blocking(self, coro: Coroutine[Any, Any, Any], timeout: float = 5.0) -> Any:
        """Run a coroutine on the loop and wait for it (used during shutdown)."""
        future = self.submit(coro)
        if future is None:
            return None
        return future.result(timeout=timeout)

    def stop(self) -> None:
        """Stop the async event loop."""
        if not self._running:
            return

        self._running = False

        if self._loop:
            self._loop.call_soon_threadsafe(self._loop.stop)

        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5)

        logger.info("AsyncBridge stopped")

    def __enter__(self) -> "AsyncBridge":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
