import json
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web

from ir_learner.i18n import init_translator


@pytest.fixture(autouse=True)
def english():
    init_translator("en")


class FakeService:
    """In-process stand-in for the Broadlink servlet."""

    def __init__(self) -> None:
        self.things_body: str = "{}"
        self.things_status = 200
        self.learn_status = 200
        self.learn_queries: list[dict[str, str]] = []
        self.learn_raw_queries: list[str] = []
        self.port = 0

    def set_things(self, things: Any) -> None:
        self.things_body = json.dumps(things)

    def url(self, path: str = "/broadlink") -> str:
        return f"http://127.0.0.1:{self.port}{path}"

    async def handle_things(self, request: web.Request) -> web.Response:
        return web.Response(
            text=self.things_body,
            status=self.things_status,
            content_type="application/json",
        )

    async def handle_learn(self, request: web.Request) -> web.Response:
        self.learn_queries.append(dict(request.query))
        self.learn_raw_queries.append(request.query_string)
        return web.Response(status=self.learn_status)


@pytest_asyncio.fixture
async def service(unused_tcp_port_factory):
    fake = FakeService()

    app = web.Application()
    app.router.add_get("/broadlink/things", fake.handle_things)
    app.router.add_get("/broadlink/learn", fake.handle_learn)

    runner = web.AppRunner(app)
    await runner.setup()

    fake.port = unused_tcp_port_factory()
    site = web.TCPSite(runner, "127.0.0.1", fake.port)
    await site.start()

    try:
        yield fake
    finally:
        await runner.cleanup()


class RecordingView:
    """ThingListView that remembers what it was asked to show."""

    def __init__(self) -> None:
        self.rows: list[tuple[str, str]] = []
        self.clears = 0
        self.renders = 0

    def show_things(self, things) -> None:
        self.rows = [(thing.uid, thing.display_label) for thing in things]
        self.renders += 1

    def clear(self) -> None:
        self.rows = []
        self.clears += 1


class RecordingNotifier:
    def __init__(self) -> None:
        self.infos: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []

    def show_info(self, title: str, message: str) -> None:
        self.infos.append((title, message))

    def show_error(self, title: str, message: str) -> None:
        self.errors.append((title, message))


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
