"""HTTP client for the Broadlink companion service."""

import asyncio
from typing import Optional
import logging

import aiohttp

from .models import LearnRequest, Thing, parse_things

logger = logging.getLogger(__name__)


class ThingsFetchError(Exception):
    """The list of things could not be retrieved."""


class LearnRequestError(Exception):
    """A learn request was not accepted by the service."""


class ThingsClient:
    """Async client for the ``/things`` and ``/learn`` endpoints.

    The session is created lazily on the loop that first uses the client,
    so an instance may be built on the GUI thread and used from the
    AsyncBridge loop.
    """

    def __init__(
        self,
        base_url: str,
        *,
        learn_path: str = "learn",
        timeout: float = 10.0,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Initialize the client.

        Args:
            base_url: URL of the companion service, e.g. http://host:8080/broadlink
            learn_path: Path of the learn endpoint below base_url
            timeout: Request timeout in seconds
            session: Optional shared session (not closed by this client)
        """
        self._base_url = base_url.rstrip("/")
        self._learn_path = learn_path.strip("/")
        self._timeout = timeout
        self._session = session
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        """The service URL requests are made against."""
        return self._base_url

    @property
    def things_url(self) -> str:
        return f"{self._base_url}/things"

    @property
    def learn_url(self) -> str:
        return f"{self._base_url}/{self._learn_path}"

    async def fetch_things(self) -> list[Thing]:
        """Fetch the managed things.

        Returns:
            Things in server order

        Raises:
            ThingsFetchError: On network errors, timeouts, error statuses
                or a malformed body
        """
        session = self._ensure_session()
        url = self.things_url

        try:
            async with asyncio.timeout(self._timeout):
                async with session.get(url) as response:
                    response.raise_for_status()
                    payload = await response.json(content_type=None)
        except asyncio.TimeoutError as e:
            logger.warning(f"Fetching things timed out after {self._timeout:.1f}s ({url})")
            raise ThingsFetchError(f"request to {url} timed out") from e
        except aiohttp.ClientResponseError as e:
            raise ThingsFetchError(f"{e.status} {e.message}") from e
        except aiohttp.ClientError as e:
            raise ThingsFetchError(str(e) or type(e).__name__) from e
        except ValueError as e:
            raise ThingsFetchError(f"invalid JSON: {e}") from e

        try:
            things = parse_things(payload)
        except ValueError as e:
            raise ThingsFetchError(f"unexpected response: {e}") from e

        logger.debug(f"Fetched {len(things)} things from {url}")
        return things

    async def learn(self, request: LearnRequest) -> None:
        """Ask the service to learn a code for a thing.

        Args:
            request: The learn parameters

        Raises:
            LearnRequestError: If the call fails or is rejected
        """
        session = self._ensure_session()

        try:
            async with asyncio.timeout(self._timeout):
                async with session.get(
                    self.learn_url, params=request.query_params()
                ) as response:
                    response.raise_for_status()
        except asyncio.TimeoutError as e:
            raise LearnRequestError(f"learn request for {request.thing} timed out") from e
        except aiohttp.ClientResponseError as e:
            raise LearnRequestError(f"{e.status} {e.message}") from e
        except aiohttp.ClientError as e:
            raise LearnRequestError(str(e) or type(e).__name__) from e

        logger.info(f"Learn started for {request.thing} (command={request.command!r})")

    async def close(self) -> None:
        """Close the owned session."""
        if self._owns_session and self._session is not None:
            await self._session.close()
        self._session = None

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def __aenter__(self) -> "ThingsClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
