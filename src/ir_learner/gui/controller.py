"""Behaviour of the thing list: refreshing it and starting learn requests.

The controller is toolkit independent. It talks to a view (the rendered
list) and a notifier (blocking message boxes) through small protocols, and
routes every call to them through ``dispatch`` so widget code always runs on
the GUI thread while network calls run on the AsyncBridge loop.
"""

import asyncio
import itertools
from typing import Any, Callable, Coroutine, Optional, Protocol
import logging

from ..api.client import LearnRequestError, ThingsClient, ThingsFetchError
from ..api.models import LearnRequest, LearnType, Thing
from ..core.events import EventBus, EventType
from ..i18n import _

logger = logging.getLogger(__name__)


class ThingListView(Protocol):
    """Rendering surface for the list of things."""

    def show_things(self, things: list[Thing]) -> None: ...

    def clear(self) -> None: ...


class Notifier(Protocol):
    """Blocking notifications shown to the user."""

    def show_info(self, title: str, message: str) -> None: ...

    def show_error(self, title: str, message: str) -> None: ...


Dispatch = Callable[[Callable[[], None]], Any]
Submit = Callable[[Coroutine[Any, Any, Any]], Any]


def _call_now(fn: Callable[[], None]) -> None:
    fn()


def _create_task(coro: Coroutine[Any, Any, Any]) -> "asyncio.Task[Any]":
    return asyncio.get_running_loop().create_task(coro)


class ThingListController:
    """Refreshes the thing list and triggers learn requests."""

    def __init__(
        self,
        client: ThingsClient,
        view: ThingListView,
        notifier: Notifier,
        *,
        dispatch: Dispatch = _call_now,
        submit: Submit = _create_task,
        event_bus: Optional[EventBus] = None,
    ):
        """Initialize the controller.

        Args:
            client: Client for the companion service
            view: The owned list view
            notifier: Where blocking notifications go
            dispatch: Runs a callable on the GUI thread
            submit: Schedules a coroutine on the network loop
            event_bus: Optional bus for status events
        """
        self._client = client
        self._view = view
        self._notifier = notifier
        self._dispatch = dispatch
        self._submit = submit
        self._event_bus = event_bus
        self._sequence = itertools.count(1)
        self._latest = 0

    @property
    def client(self) -> ThingsClient:
        return self._client

    def set_client(self, client: ThingsClient) -> None:
        """Switch to another service; the next refresh uses it."""
        self._client = client

    def request_refresh(self) -> None:
        """Schedule a refresh from the GUI thread.

        The sequence number is taken here, when the refresh is requested.
        """
        self._submit(self.refresh(self._next_sequence()))

    def _next_sequence(self) -> int:
        self._latest = next(self._sequence)
        return self._latest

    async def refresh(self, sequence: Optional[int] = None) -> Optional[list[Thing]]:
        """Reload the things and rebuild the view.

        Args:
            sequence: Number assigned when the refresh was requested; a new
                one is taken if omitted

        Returns:
            The things shown, or None if the fetch failed or a newer
            refresh superseded this one
        """
        if sequence is None:
            sequence = self._next_sequence()
        client = self._client

        try:
            things = await client.fetch_things()
        except ThingsFetchError as e:
            if sequence != self._latest:
                logger.debug(f"Dropping failure of superseded refresh #{sequence}: {e}")
                return None
            logger.error(f"Failed to get things from {client.base_url}: {e}")
            message = _("load_failed", error=e)
            self._dispatch(self._view.clear)
            self._dispatch(lambda: self._notifier.show_error(_("load_failed_title"), message))
            self._publish(EventType.THINGS_LOAD_FAILED, str(e))
            return None

        if sequence != self._latest:
            logger.debug(f"Dropping stale response of refresh #{sequence}")
            return None

        logger.info(f"Showing {len(things)} things from {client.base_url}")
        self._dispatch(lambda: self._view.show_things(things))
        self._publish(EventType.THINGS_LOADED, things)
        return things

    def trigger_learn(
        self, thing: Thing, command: str, learn_type: LearnType = LearnType.IR
    ) -> LearnRequest:
        """Start learning a code for a thing.

        Called on the GUI thread when a learn button is clicked. The request
        runs in the background; the user is told to press the remote button.

        Args:
            thing: The row's thing
            command: Command identifier typed by the user
            learn_type: Kind of code to learn

        Returns:
            The request that was sent
        """
        request = LearnRequest(thing=thing.uid, command=command.strip(), type=learn_type)
        logger.info(f"Learn {learn_type.value} requested for {thing.uid}: {request.command!r}")

        self._submit(self._send_learn(request))
        self._notifier.show_info(_("learn_title"), _("learn_prompt"))
        return request

    async def _send_learn(self, request: LearnRequest) -> None:
        try:
            await self._client.learn(request)
        except LearnRequestError as e:
            logger.warning(f"Learn request for {request.thing} failed: {e}")
            self._publish(EventType.LEARN_FAILED, (request, str(e)))
            return

        self._publish(EventType.LEARN_REQUESTED, request)

    def _publish(self, event_type: EventType, data: Any) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event_type, data)
